"""Zig package collector.

Aggregates package metadata from the curated ziglibs repository, GitHub topic
search, astrolabe.pm and aquila.red, merges duplicates by repository, and
writes packages.json / tags.json.
"""

from .collector import CollectionResult, FetchConfig, collect, run
from .models import Links, MergedPackage, RawPackageRecord, Source, Tag

__version__ = "0.1.0"

__all__ = [
    "FetchConfig",
    "CollectionResult",
    "collect",
    "run",
    "Source",
    "Links",
    "RawPackageRecord",
    "MergedPackage",
    "Tag",
]
