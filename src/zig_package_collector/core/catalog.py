"""Tag catalog construction.

The catalog is the union of curated tag definitions and every tag that only
shows up as a package label. It must run after merging, since it reads the
merged package tags.
"""

from __future__ import annotations

from collections.abc import Iterable

import polars as pl

from ..models import MergedPackage, Tag
from .normalize import DEFAULT_TAG_DENYLIST

_TAG_SCHEMA = {"name": pl.String, "description": pl.String}


def _tags_frame(rows: list[dict[str, str]]) -> pl.DataFrame:
    return pl.DataFrame(rows, schema=_TAG_SCHEMA)


def build_tag_catalog(
    curated_tags: Iterable[Tag],
    packages: Iterable[MergedPackage],
    denylist: Iterable[str] = DEFAULT_TAG_DENYLIST,
) -> list[Tag]:
    """Build the sorted tag list written to tags.json.

    Args:
        curated_tags: Tag definitions from the curated repository
        packages: Merged packages (tags already normalized)
        denylist: Tag names that never appear in the catalog

    Returns:
        Tags sorted case-insensitively by name. Curated descriptions are kept;
        tags known only from packages get an empty description.

        Curated names are lower-cased like package tags, so `GameDev.json`
        describes the `gamedev` package tag.

    Examples:
        >>> pkgs = [MergedPackage("https://github.com/a/b", "b", tags=("gamedev",))]
        >>> build_tag_catalog([Tag("Parser", "Parsers")], pkgs)
        [Tag(name='gamedev', description=''), Tag(name='parser', description='Parsers')]
    """
    denied = sorted({d.lower() for d in denylist})

    curated = (
        _tags_frame([t.to_dict() for t in curated_tags])
        .with_columns(pl.col("name").str.strip_chars().str.to_lowercase())
        .filter(pl.col("name") != "")
        .unique(subset=["name"], keep="first", maintain_order=True)
    )

    discovered = _tags_frame(
        [{"name": tag.lower(), "description": ""} for pkg in packages for tag in pkg.tags]
    ).unique(subset=["name"], maintain_order=True)

    # Curated definitions win; only undefined package tags are added
    undefined = discovered.join(curated, on="name", how="anti")

    catalog = pl.concat([curated, undefined])
    if denied:
        catalog = catalog.filter(~pl.col("name").is_in(denied))

    return [Tag.from_dict(row) for row in catalog.sort("name").to_dicts()]
