"""Package deduplication and merge.

- Records are keyed by a canonical repository identifier
- Duplicates are folded in processing order: tags are unioned, provenance bits
  are OR-ed, and singular fields keep the first non-empty value seen
- Records without a repository URL are never merged
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from loguru import logger

from ..models import Links, MergedPackage, RawPackageRecord
from .normalize import sort_case_insensitive

CODE_HOST_PREFIX = "https://github.com"


def canonical_key(repository_url: str) -> str:
    """Derive the deduplication key for a repository URL.

    A trailing ".git" is stripped only for URLs on the code host, then the
    whole key is lower-cased.

    Examples:
        >>> canonical_key("https://github.com/acme/Foo.git")
        'https://github.com/acme/foo'
        >>> canonical_key("https://git.sr.ht/~acme/foo.git")
        'https://git.sr.ht/~acme/foo.git'
    """
    key = repository_url.strip().lower()
    if key.startswith(CODE_HOST_PREFIX) and key.endswith(".git"):
        key = key[: -len(".git")]
    return key


def _first_set(existing: str | None, incoming: str | None) -> str | None:
    return existing if existing else (incoming or existing)


def merge_links(existing: Links, incoming: Links) -> Links:
    """Fill unset link fields from `incoming`; set fields are never overwritten."""
    return Links(
        github=_first_set(existing.github, incoming.github),
        astrolabe=_first_set(existing.astrolabe, incoming.astrolabe),
        aquila=_first_set(existing.aquila, incoming.aquila),
    )


def fold_record(existing: MergedPackage, incoming: RawPackageRecord) -> MergedPackage:
    """Fold one raw record into an already merged package.

    Args:
        existing: Package accumulated so far for the canonical key
        incoming: Next record for the same key, in processing order

    Returns:
        New merged package; `existing` is left untouched
    """
    return replace(
        existing,
        tags=tuple(sort_case_insensitive(set(existing.tags) | set(incoming.tags))),
        provenance=existing.provenance | incoming.provenance,
        author=existing.author or incoming.author,
        description=existing.description or incoming.description,
        root_file=_first_set(existing.root_file, incoming.root_file),
        links=merge_links(existing.links, incoming.links),
    )


def merge_records(records: Iterable[RawPackageRecord]) -> list[MergedPackage]:
    """Collapse raw records into one package per canonical key.

    Processing order decides which source wins singular fields, so callers
    must pass records curated source first, code host second, index
    services last.

    Args:
        records: Raw records in processing order

    Returns:
        Merged packages in first-seen order
    """
    merged: dict[str, MergedPackage] = {}
    order: list[str | int] = []
    unkeyed: dict[int, MergedPackage] = {}

    total = 0
    folded = 0
    for record in records:
        total += 1
        key = canonical_key(record.repository_url)

        if not key:
            # Cannot prove two URL-less records are the same package
            logger.warning(
                f"Package '{record.display_name}' has no repository URL "
                f"(source={record.provenance.name}); keeping it unmerged"
            )
            slot = len(unkeyed)
            unkeyed[slot] = MergedPackage.from_record(record)
            order.append(slot)
            continue

        stored = merged.get(key)
        if stored is None:
            merged[key] = MergedPackage.from_record(record)
            order.append(key)
        else:
            merged[key] = fold_record(stored, record)
            folded += 1

    logger.info(f"Loaded {len(order)} packages, with {folded} packages merged (from {total} records).")

    return [merged[k] if isinstance(k, str) else unkeyed[k] for k in order]


def sort_packages(packages: Iterable[MergedPackage]) -> list[MergedPackage]:
    """Order packages case-insensitively by display name for the artifact."""
    return sorted(
        packages,
        key=lambda p: (p.display_name.lower(), canonical_key(p.repository_url)),
    )
