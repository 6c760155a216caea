"""Serialization of packages.json and tags.json."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from .core.exceptions import OutputWriteError
from .models import MergedPackage, Tag


def serialize(items: Iterable[MergedPackage | Tag], path: Path | str = "<memory>") -> str:
    """Render records as an indented JSON list.

    Raises:
        OutputWriteError: A record could not be serialized
    """
    try:
        return json.dumps([item.to_dict() for item in items], indent=2, ensure_ascii=False) + "\n"
    except (TypeError, ValueError) as e:
        raise OutputWriteError(path, f"serialization failed: {e}") from e


def write_text(path: Path | str, text: str) -> None:
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(path, str(e)) from e


def write_artifacts(
    packages: list[MergedPackage],
    tags: list[Tag],
    packages_path: Path | str,
    tags_path: Path | str,
) -> None:
    """Write both artifacts.

    Both documents are rendered before either file is touched, so a
    serialization error leaves the previous outputs in place.
    """
    packages_text = serialize(packages, packages_path)
    tags_text = serialize(tags, tags_path)

    write_text(packages_path, packages_text)
    logger.info(f"Wrote {len(packages)} packages to {packages_path}")

    write_text(tags_path, tags_text)
    logger.info(f"Wrote {len(tags)} tags to {tags_path}")


def load_packages(path: Path | str) -> list[MergedPackage]:
    """Read a packages.json written by this tool."""
    with open(path, encoding="utf-8") as f:
        return [MergedPackage.from_dict(row) for row in json.load(f)]


def load_tags(path: Path | str) -> list[Tag]:
    """Read a tags.json written by this tool."""
    with open(path, encoding="utf-8") as f:
        return [Tag.from_dict(row) for row in json.load(f)]
