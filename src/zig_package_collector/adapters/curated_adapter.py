"""ziglibs/repository（curated リポジトリ）用アダプタ.

チェックアウト内の `packages/*.json` と `tags/*.json` を読み取る。
1ファイル = 1パッケージ（または1タグ）で、名前はファイル名（拡張子なし）。
"""

from __future__ import annotations

import json
from pathlib import Path

from loguru import logger

from ..core.exceptions import SourceFetchError
from ..core.normalize import DEFAULT_TAG_DENYLIST, normalize_tags
from ..models import Links, RawPackageRecord, Source, Tag
from .base_adapter import BaseAdapter


def _load_definition(path: Path) -> dict:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise SourceFetchError("curated", f"cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise SourceFetchError("curated", f"expected a JSON object in {path}")
    return data


class CuratedRepositoryAdapter(BaseAdapter):
    """Reads package and tag definitions from a curated repository checkout.

    Args:
        repository_dir: Checkout root
        packages_dir: Package definitions directory, relative to the root
        tags_dir: Tag definitions directory, relative to the root
        denylist: Tags dropped during normalization
    """

    name = "curated"
    provenance = Source.CURATED

    def __init__(
        self,
        repository_dir: Path | str,
        *,
        packages_dir: str = "packages",
        tags_dir: str = "tags",
        denylist: frozenset[str] = DEFAULT_TAG_DENYLIST,
    ) -> None:
        self.repository_dir = Path(repository_dir)
        self.packages_path = self.repository_dir / packages_dir
        self.tags_path = self.repository_dir / tags_dir
        self.denylist = denylist

    def _definition_files(self, root: Path) -> list[Path]:
        if not root.is_dir():
            raise SourceFetchError(self.name, f"directory not found: {root}")
        return sorted(p for p in root.rglob("*.json") if p.is_file())

    def _to_record(self, path: Path, pkg: dict) -> RawPackageRecord:
        try:
            git = pkg.get("git") or ""
            if not isinstance(git, str):
                msg = f"git must be a string, got {type(git).__name__}"
                raise TypeError(msg)
            return RawPackageRecord(
                repository_url=git,
                display_name=path.stem,
                tags=normalize_tags(pkg.get("tags"), self.denylist),
                author=pkg.get("author") or "",
                description=pkg.get("description") or "",
                provenance=self.provenance,
                links=Links(github=git or None),
                root_file=pkg.get("root_file") or None,
            )
        except (TypeError, ValueError, AttributeError) as e:
            raise SourceFetchError(self.name, f"malformed package definition {path}: {e}") from e

    def read(self) -> list[RawPackageRecord]:
        records = [
            self._to_record(path, _load_definition(path))
            for path in self._definition_files(self.packages_path)
        ]

        logger.info(f"Read {len(records)} package definitions from {self.packages_path}")
        return records

    def read_tags(self) -> list[Tag]:
        """Read curated tag definitions (name from file name, plus description)."""
        tags = [
            Tag(name=path.stem, description=_load_definition(path).get("description") or "")
            for path in self._definition_files(self.tags_path)
        ]
        logger.info(f"Read {len(tags)} tag definitions from {self.tags_path}")
        return tags
