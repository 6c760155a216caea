"""Package and tag records shared by adapters, core and writer.

Adapters emit `RawPackageRecord`, the merge engine folds them into
`MergedPackage`, and the tag catalog builder produces `Tag`. All records are
frozen; the merge engine builds new instances instead of mutating.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag
from typing import Any


class Source(IntFlag):
    """Provenance bits. The values are part of the published packages.json."""

    GITHUB = 1  # https://github.com/topics/zig-package
    AQUILA = 2  # https://aquila.red/
    ASTROLABE = 4  # https://astrolabe.pm/
    CURATED = 8  # https://github.com/ziglibs/repository


@dataclass(frozen=True)
class Links:
    github: str | None = None
    astrolabe: str | None = None
    aquila: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return {"github": self.github, "astrolabe": self.astrolabe, "aquila": self.aquila}

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Links:
        data = data or {}
        return cls(
            github=data.get("github"),
            astrolabe=data.get("astrolabe"),
            aquila=data.get("aquila"),
        )


@dataclass(frozen=True)
class RawPackageRecord:
    """One package entry as produced by a single adapter.

    Attributes:
        repository_url: Git URL used for deduplication
        display_name: Human-readable package name
        tags: Normalized tags (see core.normalize.normalize_tags)
        author: Author as reported by the source
        description: Free-form description
        provenance: Exactly one Source bit
        links: Per-source landing pages
        root_file: Package root source file (curated source only)
    """

    repository_url: str
    display_name: str
    tags: tuple[str, ...] = ()
    author: str = ""
    description: str = ""
    provenance: Source = Source(0)
    links: Links = field(default_factory=Links)
    root_file: str | None = None


@dataclass(frozen=True)
class MergedPackage:
    """One logical package per canonical repository key."""

    repository_url: str
    display_name: str
    tags: tuple[str, ...] = ()
    author: str = ""
    description: str = ""
    provenance: Source = Source(0)
    links: Links = field(default_factory=Links)
    root_file: str | None = None

    @classmethod
    def from_record(cls, record: RawPackageRecord) -> MergedPackage:
        return cls(
            repository_url=record.repository_url,
            display_name=record.display_name,
            tags=record.tags,
            author=record.author,
            description=record.description,
            provenance=record.provenance,
            links=record.links,
            root_file=record.root_file,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "author": self.author,
            "name": self.display_name,
            "tags": list(self.tags),
            "git": self.repository_url,
            "root_file": self.root_file,
            "description": self.description,
            "source": int(self.provenance),
            "links": self.links.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MergedPackage:
        return cls(
            repository_url=data.get("git") or "",
            display_name=data.get("name") or "",
            tags=tuple(data.get("tags") or ()),
            author=data.get("author") or "",
            description=data.get("description") or "",
            provenance=Source(int(data.get("source") or 0)),
            links=Links.from_dict(data.get("links")),
            root_file=data.get("root_file"),
        )


@dataclass(frozen=True)
class Tag:
    name: str
    description: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "description": self.description}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Tag:
        return cls(name=data["name"], description=data.get("description") or "")
