"""Tag normalization for package labels.

Every adapter runs its tags through `normalize_tags` before emitting a record,
so the merge engine only ever sees lower-cased, denylist-free tags.
"""

from __future__ import annotations

from collections.abc import Iterable

# Labels that only say "this is a Zig package" and carry no information
DEFAULT_TAG_DENYLIST: frozenset[str] = frozenset(
    {
        "zig",
        "zig-package",
        "ziglang",
        "zig-programming-language",
        "zig-library",
        "zig-lang",
    }
)


def sort_case_insensitive(values: Iterable[str]) -> list[str]:
    """Sort strings case-insensitively, breaking ties on the original text."""
    return sorted(values, key=lambda v: (v.lower(), v))


def normalize_tags(
    tags: Iterable[str] | None,
    denylist: Iterable[str] = DEFAULT_TAG_DENYLIST,
) -> tuple[str, ...]:
    """Lower-case, filter and sort a raw tag collection.

    Args:
        tags: Raw tags as reported by a source (None is treated as empty)
        denylist: Tags to drop (compared after lower-casing)

    Returns:
        Deduplicated tags, sorted case-insensitively

    Raises:
        TypeError: `tags` is a bare string or contains a non-string item

    Examples:
        >>> normalize_tags(["Zig", "http", "zig-package"])
        ('http',)
        >>> normalize_tags(["Parser", "gamedev", "parser"])
        ('gamedev', 'parser')
    """
    if not tags:
        return ()
    if isinstance(tags, str):
        msg = f"expected a list of tags, got a string: {tags!r}"
        raise TypeError(msg)

    denied = {d.lower() for d in denylist}
    kept: set[str] = set()
    for tag in tags:
        if not isinstance(tag, str):
            msg = f"tag must be a string, got {type(tag).__name__}: {tag!r}"
            raise TypeError(msg)
        t = tag.strip().lower()
        if not t or t in denied:
            continue
        kept.add(t)

    return tuple(sort_case_insensitive(kept))
