"""GitHub topic search adapter.

Runs one repository search per topic label (e.g. `topic:zig-package`) and
pages through the results until the reported total is reached.
"""

from __future__ import annotations

import httpx
from loguru import logger

from ..core.exceptions import SourceFetchError
from ..core.normalize import DEFAULT_TAG_DENYLIST, normalize_tags
from ..models import Links, RawPackageRecord, Source
from .base_adapter import HttpJsonAdapter

# Search results past this many are refused with HTTP 422
SEARCH_RESULT_LIMIT = 1000


class GitHubTopicAdapter(HttpJsonAdapter):
    """Collects repositories labeled with any of the given topics.

    Args:
        topics: Topic labels; each one is an independent search
        token: Bearer token for the search API (empty -> unauthenticated)
        api_url: API root
        per_page: Page size requested from the API
        denylist: Tags dropped during normalization
        client: Optional httpx client
    """

    name = "github"
    provenance = Source.GITHUB

    def __init__(
        self,
        topics: tuple[str, ...] | list[str],
        token: str = "",
        *,
        api_url: str = "https://api.github.com",
        per_page: int = 100,
        denylist: frozenset[str] = DEFAULT_TAG_DENYLIST,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(api_url, client)
        self.topics = list(topics)
        self.token = token
        self.per_page = per_page
        self.denylist = denylist

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/vnd.github+json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _to_record(self, item: dict) -> RawPackageRecord:
        try:
            clone_url = item["clone_url"]
            if not isinstance(clone_url, str):
                msg = f"clone_url must be a string, got {type(clone_url).__name__}"
                raise TypeError(msg)
            return RawPackageRecord(
                repository_url=clone_url,
                display_name=item["name"],
                tags=normalize_tags(item.get("topics"), self.denylist),
                author=item["owner"]["login"],
                description=item.get("description") or "",
                provenance=self.provenance,
                links=Links(github=item.get("html_url")),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise SourceFetchError(self.name, f"unexpected repository payload: {e}") from e

    def read_topic(self, client: httpx.Client, topic: str) -> list[RawPackageRecord]:
        """Fetch every page of the search for one topic label."""
        url = f"{self.base_url}/search/repositories"
        records: list[RawPackageRecord] = []
        page = 1
        count = 0

        while True:
            payload = self._get_json(
                client,
                url,
                params={
                    "q": f"topic:{topic}",
                    "sort": "stars",
                    "order": "desc",
                    "page": page,
                    "per_page": self.per_page,
                },
                headers=self._headers(),
            )
            if not isinstance(payload, dict):
                raise SourceFetchError(self.name, f"unexpected search payload for topic:{topic}")

            items = payload.get("items") or []
            records.extend(self._to_record(item) for item in items)

            try:
                total = int(payload.get("total_count") or 0)
            except (TypeError, ValueError) as e:
                raise SourceFetchError(self.name, f"invalid total_count for topic:{topic}: {e}") from e
            if total > SEARCH_RESULT_LIMIT and page == 1:
                logger.warning(
                    f"topic:{topic} reports {total} repositories; "
                    f"the search API only serves the first {SEARCH_RESULT_LIMIT}"
                )

            count += len(items)
            if not items or count >= min(total, SEARCH_RESULT_LIMIT):
                break
            page += 1

        logger.info(f"topic:{topic} -> {len(records)} repositories ({page} pages)")
        return records

    def read(self) -> list[RawPackageRecord]:
        if not self.token:
            logger.warning("No GitHub API token set; searching unauthenticated (low rate limit)")

        records: list[RawPackageRecord] = []
        with self._session() as client:
            for topic in self.topics:
                records.extend(self.read_topic(client, topic))
        return records
