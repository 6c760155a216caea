"""Unit tests for the tag catalog builder."""

import warnings

from zig_package_collector.core.catalog import build_tag_catalog
from zig_package_collector.models import MergedPackage, Tag


def _pkg(name: str, *tags: str) -> MergedPackage:
    return MergedPackage(f"https://github.com/acme/{name}", name, tags=tags)


class TestBuildTagCatalog:
    def test_package_only_tag_has_empty_description(self) -> None:
        catalog = build_tag_catalog([Tag("parser", "Parsing libraries")], [_pkg("foo", "audio")])

        assert Tag("audio", "") in catalog
        assert Tag("parser", "Parsing libraries") in catalog

    def test_curated_description_not_overwritten(self) -> None:
        catalog = build_tag_catalog([Tag("http", "HTTP clients and servers")], [_pkg("foo", "http")])
        assert catalog == [Tag("http", "HTTP clients and servers")]

    def test_sorted_case_insensitively(self) -> None:
        curated = [Tag("Zlib", "compression"), Tag("audio", "")]
        catalog = build_tag_catalog(curated, [_pkg("foo", "bindings"), _pkg("bar", "math")])
        assert [t.name for t in catalog] == ["audio", "bindings", "math", "zlib"]

    def test_deduplicates_package_tags(self) -> None:
        catalog = build_tag_catalog([], [_pkg("foo", "cli", "http"), _pkg("bar", "http")])
        assert catalog == [Tag("cli"), Tag("http")]

    def test_denylisted_curated_tag_dropped(self) -> None:
        catalog = build_tag_catalog([Tag("zig", "the language"), Tag("gamedev", "Games")], [])
        assert catalog == [Tag("gamedev", "Games")]

    def test_empty_inputs(self) -> None:
        assert build_tag_catalog([], []) == []

    def test_curated_name_matches_package_tag_case_insensitively(self) -> None:
        catalog = build_tag_catalog([Tag("GameDev", "Games")], [_pkg("foo", "gamedev")])
        assert catalog == [Tag("gamedev", "Games")]

    def test_curated_duplicates_differing_in_case(self) -> None:
        catalog = build_tag_catalog([Tag("HTTP", "first"), Tag("http", "second")], [])
        assert catalog == [Tag("http", "first")]

    def test_no_deprecation_warnings(self) -> None:
        with warnings.catch_warnings():
            warnings.simplefilter("error", DeprecationWarning)
            catalog = build_tag_catalog([Tag("zig", ""), Tag("audio", "Sound")], [_pkg("foo", "cli")])
        assert [t.name for t in catalog] == ["audio", "cli"]

    def test_empty_denylist(self) -> None:
        catalog = build_tag_catalog([Tag("zig", "the language")], [], denylist=[])
        assert catalog == [Tag("zig", "the language")]
