"""aquila.red index adapter."""

from __future__ import annotations

import httpx

from ..core.exceptions import SourceFetchError
from ..models import Links, RawPackageRecord, Source
from .base_adapter import HttpJsonAdapter


class AquilaAdapter(HttpJsonAdapter):
    """Reads `{base_url}/all/packages`.

    aquila only mirrors GitHub repositories, so the repository URL is rebuilt
    from `remote_name` ("owner/repo"). The index has no tags.
    """

    name = "aquila"
    provenance = Source.AQUILA

    def __init__(self, base_url: str = "https://aquila.red", *, client: httpx.Client | None = None) -> None:
        super().__init__(base_url, client)

    def read(self) -> list[RawPackageRecord]:
        with self._session() as client:
            payload = self._get_json(
                client,
                f"{self.base_url}/all/packages",
                headers={"Accept": "application/json"},
            )
        if not isinstance(payload, dict) or not isinstance(payload.get("list"), list):
            raise SourceFetchError(self.name, "expected an object with a 'list' of packages")

        records: list[RawPackageRecord] = []
        for pkg in payload["list"]:
            try:
                remote_name = pkg["remote_name"]
                author = remote_name.split("/")[0]
                records.append(
                    RawPackageRecord(
                        repository_url=f"https://github.com/{remote_name}",
                        display_name=pkg["name"],
                        author=author,
                        description=pkg.get("description") or "",
                        provenance=self.provenance,
                        links=Links(aquila=f"{self.base_url}/{pkg['remote']}/{author}/{pkg['name']}"),
                    )
                )
            except (KeyError, TypeError, AttributeError) as e:
                raise SourceFetchError(self.name, f"unexpected package payload: {e}") from e
        return records
