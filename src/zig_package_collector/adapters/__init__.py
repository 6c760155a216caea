"""パッケージカタログ用のデータソースアダプタ群."""

from .aquila_adapter import AquilaAdapter
from .astrolabe_adapter import AstrolabeAdapter
from .base_adapter import BaseAdapter, HttpJsonAdapter
from .curated_adapter import CuratedRepositoryAdapter
from .github_adapter import GitHubTopicAdapter

__all__ = [
    "BaseAdapter",
    "HttpJsonAdapter",
    "CuratedRepositoryAdapter",
    "GitHubTopicAdapter",
    "AstrolabeAdapter",
    "AquilaAdapter",
]
