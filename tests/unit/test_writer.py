"""Unit tests for artifact serialization."""

import json
from pathlib import Path

import pytest

from zig_package_collector.core.exceptions import OutputWriteError
from zig_package_collector.models import Links, MergedPackage, Source, Tag
from zig_package_collector.writer import load_packages, load_tags, write_artifacts


def _packages() -> list[MergedPackage]:
    return [
        MergedPackage(
            repository_url="https://github.com/MasterQ32/zig-args",
            display_name="zig-args",
            tags=("cli",),
            author="MasterQ32",
            description="Argument parser",
            provenance=Source.CURATED | Source.GITHUB,
            links=Links(github="https://github.com/MasterQ32/zig-args"),
            root_file="/args.zig",
        ),
        MergedPackage(
            repository_url="https://github.com/nektro/pcre-8.45",
            display_name="pcre-8.45",
            author="nektro",
            provenance=Source.AQUILA,
            links=Links(aquila="https://aquila.red/1/nektro/pcre-8.45"),
        ),
    ]


class TestWriteArtifacts:
    def test_package_shape(self, tmp_path: Path) -> None:
        packages_path = tmp_path / "packages.json"
        write_artifacts(_packages(), [Tag("cli", "")], packages_path, tmp_path / "tags.json")

        data = json.loads(packages_path.read_text(encoding="utf-8"))

        assert data[0] == {
            "author": "MasterQ32",
            "name": "zig-args",
            "tags": ["cli"],
            "git": "https://github.com/MasterQ32/zig-args",
            "root_file": "/args.zig",
            "description": "Argument parser",
            "source": 9,
            "links": {
                "github": "https://github.com/MasterQ32/zig-args",
                "astrolabe": None,
                "aquila": None,
            },
        }
        assert packages_path.read_text(encoding="utf-8").startswith("[\n  {")

    def test_round_trip(self, tmp_path: Path) -> None:
        packages_path = tmp_path / "out" / "packages.json"
        tags_path = tmp_path / "out" / "tags.json"
        tags = [Tag("cli", "Command line"), Tag("regex", "")]

        write_artifacts(_packages(), tags, packages_path, tags_path)

        assert load_packages(packages_path) == _packages()
        assert load_tags(tags_path) == tags

    def test_unwritable_path_is_fatal(self, tmp_path: Path) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")

        with pytest.raises(OutputWriteError):
            write_artifacts(_packages(), [], blocker / "packages.json", tmp_path / "tags.json")
