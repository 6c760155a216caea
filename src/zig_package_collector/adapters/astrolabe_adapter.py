"""astrolabe.pm index adapter."""

from __future__ import annotations

import httpx

from ..core.exceptions import SourceFetchError
from ..core.normalize import DEFAULT_TAG_DENYLIST, normalize_tags
from ..models import Links, RawPackageRecord, Source
from .base_adapter import HttpJsonAdapter


class AstrolabeAdapter(HttpJsonAdapter):
    """Reads the full package list from `{base_url}/pkgs`.

    Authorship here is the uploading user, which may differ from the
    repository owner, so this adapter runs after the curated and GitHub ones.
    """

    name = "astrolabe"
    provenance = Source.ASTROLABE

    def __init__(
        self,
        base_url: str = "https://astrolabe.pm",
        *,
        denylist: frozenset[str] = DEFAULT_TAG_DENYLIST,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(base_url, client)
        self.denylist = denylist

    def read(self) -> list[RawPackageRecord]:
        with self._session() as client:
            payload = self._get_json(client, f"{self.base_url}/pkgs")
        if not isinstance(payload, list):
            raise SourceFetchError(self.name, "expected a JSON list of packages")

        records: list[RawPackageRecord] = []
        for pkg in payload:
            try:
                user, name, version = pkg["user"], pkg["name"], pkg["version"]
                source_url = pkg.get("source_url") or ""
                if not isinstance(source_url, str):
                    msg = f"source_url must be a string, got {type(source_url).__name__}"
                    raise TypeError(msg)
                records.append(
                    RawPackageRecord(
                        repository_url=source_url,
                        display_name=name,
                        tags=normalize_tags(pkg.get("tags"), self.denylist),
                        author=user,
                        description=pkg.get("description") or "",
                        provenance=self.provenance,
                        links=Links(astrolabe=f"{self.base_url}/#/package/{user}/{name}/{version}"),
                    )
                )
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                raise SourceFetchError(self.name, f"unexpected package payload: {e}") from e
        return records
