"""Source access configuration (sources.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml
from loguru import logger

from .core.normalize import DEFAULT_TAG_DENYLIST

DEFAULT_SOURCES_YML = Path(__file__).parent / "sources.yml"


@dataclass(frozen=True)
class CollectorConfig:
    curated_packages_dir: str = "packages"
    curated_tags_dir: str = "tags"
    github_api_url: str = "https://api.github.com"
    github_token_env: str = "GITHUB_API_TOKEN"
    github_per_page: int = 100
    github_topics: tuple[str, ...] = ("zig-package", "zig-library")
    astrolabe_url: str = "https://astrolabe.pm"
    aquila_url: str = "https://aquila.red"
    tag_denylist: frozenset[str] = field(default_factory=lambda: DEFAULT_TAG_DENYLIST)


def load_sources_config(sources_yml: Path | None = None) -> CollectorConfig:
    """sources.yml を読み込んで CollectorConfig を返す.

    Args:
        sources_yml: sources.yml のパス（None なら同梱のデフォルト）

    Returns:
        読み込んだ設定。記載の無い項目は CollectorConfig の既定値
    """
    path = sources_yml or DEFAULT_SOURCES_YML
    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    defaults = CollectorConfig()
    curated = raw.get("curated", {})
    github = raw.get("github", {})

    config = CollectorConfig(
        curated_packages_dir=curated.get("packages_dir", defaults.curated_packages_dir),
        curated_tags_dir=curated.get("tags_dir", defaults.curated_tags_dir),
        github_api_url=str(github.get("api_url", defaults.github_api_url)).rstrip("/"),
        github_token_env=github.get("token_env", defaults.github_token_env),
        github_per_page=int(github.get("per_page", defaults.github_per_page)),
        github_topics=tuple(github.get("topics", defaults.github_topics)),
        astrolabe_url=str(raw.get("astrolabe", {}).get("base_url", defaults.astrolabe_url)).rstrip("/"),
        aquila_url=str(raw.get("aquila", {}).get("base_url", defaults.aquila_url)).rstrip("/"),
        tag_denylist=frozenset(t.lower() for t in raw.get("tag_denylist", defaults.tag_denylist)),
    )

    logger.info(f"Loaded source config from {path} (topics: {', '.join(config.github_topics)})")
    return config
