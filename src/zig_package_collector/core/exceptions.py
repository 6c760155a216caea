"""Collector exceptions.

Every error is fatal for the run: the CLI logs it and exits without writing
partial output.
"""

from __future__ import annotations

from pathlib import Path


class CollectorError(Exception):
    """Base class for all collector failures."""


class SourceFetchError(CollectorError):
    """A source could not be read (git, HTTP or malformed payload).

    Attributes:
        source: Name of the failing source (e.g. "github", "astrolabe")
        detail: Human-readable description of the failure
    """

    def __init__(self, source: str, detail: str) -> None:
        self.source = source
        self.detail = detail
        super().__init__(f"Failed to fetch from {source}: {detail}")


class OutputWriteError(CollectorError):
    """An output artifact could not be serialized or written.

    Attributes:
        path: Output file that failed
    """

    def __init__(self, path: Path | str, detail: str) -> None:
        self.path = Path(path)
        super().__init__(f"Failed to write {self.path}: {detail}")
