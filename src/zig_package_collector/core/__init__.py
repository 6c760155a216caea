"""Pure collector logic.

- Tag normalization (raw labels -> lower-cased, denylist-free tags)
- Merge (dedup by canonical repository key, first-seen wins)
- Tag catalog (curated definitions + package-only tags)
"""

from .catalog import build_tag_catalog
from .merge import canonical_key, fold_record, merge_records, sort_packages
from .normalize import DEFAULT_TAG_DENYLIST, normalize_tags

__all__ = [
    "DEFAULT_TAG_DENYLIST",
    "normalize_tags",
    "canonical_key",
    "fold_record",
    "merge_records",
    "sort_packages",
    "build_tag_catalog",
]
