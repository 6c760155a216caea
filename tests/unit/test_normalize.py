"""Unit tests for tag normalization."""

import pytest

from zig_package_collector.core.normalize import (
    DEFAULT_TAG_DENYLIST,
    normalize_tags,
    sort_case_insensitive,
)


class TestNormalizeTags:
    def test_case_folded_and_denylisted(self) -> None:
        assert normalize_tags(["Zig", "http", "zig-package"]) == ("http",)

    def test_denylist_ignores_case(self) -> None:
        raw = ["ZIG", "Zig-Package", "ZigLang", "Zig-Programming-Language", "ZIG-LIBRARY", "zig-Lang"]
        assert normalize_tags(raw) == ()

    def test_deduplicates_and_sorts(self) -> None:
        assert normalize_tags(["Parser", "gamedev", "parser", "audio"]) == ("audio", "gamedev", "parser")

    def test_idempotent(self) -> None:
        once = normalize_tags(["Networking", "zig", "HTTP", "http", "  cli "])
        assert normalize_tags(once) == once

    def test_order_independent(self) -> None:
        assert normalize_tags(["b", "A", "c"]) == normalize_tags(["c", "b", "a"])

    def test_empty_and_none(self) -> None:
        assert normalize_tags(None) == ()
        assert normalize_tags([]) == ()
        assert normalize_tags(["", "   "]) == ()

    def test_custom_denylist(self) -> None:
        assert normalize_tags(["rust", "Crate", "zig"], denylist={"rust", "crate"}) == ("zig",)

    def test_non_string_tag_rejected(self) -> None:
        with pytest.raises(TypeError, match="tag must be a string"):
            normalize_tags(["http", None])

    def test_bare_string_rejected(self) -> None:
        with pytest.raises(TypeError, match="got a string"):
            normalize_tags("http")

    def test_default_denylist_contents(self) -> None:
        assert "zig-package" in DEFAULT_TAG_DENYLIST
        assert "http" not in DEFAULT_TAG_DENYLIST


class TestSortCaseInsensitive:
    def test_sorting(self) -> None:
        assert sort_case_insensitive(["beta", "Alpha", "alpha", "Gamma"]) == ["Alpha", "alpha", "beta", "Gamma"]
