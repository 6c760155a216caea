"""Unit tests for sources.yml loading."""

from pathlib import Path

from zig_package_collector.config import CollectorConfig, load_sources_config


class TestLoadSourcesConfig:
    def test_packaged_defaults(self) -> None:
        config = load_sources_config()

        assert config.github_topics == ("zig-package", "zig-library")
        assert config.github_token_env == "GITHUB_API_TOKEN"
        assert config.astrolabe_url == "https://astrolabe.pm"
        assert config.aquila_url == "https://aquila.red"
        assert "zig-lang" in config.tag_denylist

    def test_partial_file_falls_back_to_defaults(self, tmp_path: Path) -> None:
        sources_yml = tmp_path / "sources.yml"
        sources_yml.write_text(
            "github:\n  topics: [zig-package]\n  api_url: http://localhost:8080/\n"
            "tag_denylist: [Zig]\n",
            encoding="utf-8",
        )

        config = load_sources_config(sources_yml)

        assert config.github_topics == ("zig-package",)
        assert config.github_api_url == "http://localhost:8080"
        assert config.tag_denylist == frozenset({"zig"})
        assert config.curated_packages_dir == CollectorConfig().curated_packages_dir
