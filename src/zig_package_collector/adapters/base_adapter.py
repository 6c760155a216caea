"""パッケージソース用アダプタ（基底クラス）.

各カタログ（curated リポジトリ / GitHub topic 検索 / astrolabe / aquila）を
共通インターフェースで扱うための抽象基底クラスを定義します。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager

import httpx

from ..core.exceptions import SourceFetchError
from ..models import RawPackageRecord, Source


class BaseAdapter(ABC):
    """Base class for package source adapters.

    Subclasses set `name` and `provenance` and implement read(). Adapters do
    not share state; the collector concatenates their results in a fixed order.
    """

    name: str
    provenance: Source

    @abstractmethod
    def read(self) -> list[RawPackageRecord]:
        """Fetch the source and convert it to raw package records.

        Returns:
            Records in the order the source produced them

        Raises:
            SourceFetchError: The source could not be fetched or parsed
        """
        ...

    def validate(self, records: list[RawPackageRecord]) -> bool:
        """Check every record carries exactly this adapter's provenance bit."""
        return all(r.provenance == self.provenance for r in records)


class HttpJsonAdapter(BaseAdapter):
    """Adapter for sources reached over HTTP returning JSON.

    Args:
        base_url: Service root URL
        client: Optional httpx client (injected in tests)
    """

    def __init__(self, base_url: str, client: httpx.Client | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.client = client

    @contextmanager
    def _session(self) -> Iterator[httpx.Client]:
        """Yield the injected client, or one client for the whole read()."""
        if self.client is not None:
            yield self.client
            return
        with httpx.Client(follow_redirects=True, timeout=None) as client:
            yield client

    def _get_json(
        self,
        client: httpx.Client,
        url: str,
        params: dict[str, str | int] | None = None,
        headers: dict[str, str] | None = None,
    ) -> object:
        try:
            response = client.get(url, params=params, headers=headers)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as e:
            raise SourceFetchError(self.name, f"GET {url} failed: {e}") from e
        except ValueError as e:
            raise SourceFetchError(self.name, f"malformed JSON from {url}: {e}") from e
