"""パッケージコレクター（オーケストレーター）.

4つのカタログ（ziglibs/repository, GitHub topics, astrolabe.pm, aquila.red）から
パッケージ情報を集め、同一リポジトリを統合して packages.json / tags.json を出力する。
正規化・統合ロジックは core 側に寄せ、ここでは「取得順（統合結果を左右する）」と
「一連の実行」を担う。
"""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import httpx
from loguru import logger

from .adapters import (
    AquilaAdapter,
    AstrolabeAdapter,
    BaseAdapter,
    CuratedRepositoryAdapter,
    GitHubTopicAdapter,
)
from .checkout import update_checkout
from .config import CollectorConfig, load_sources_config
from .core.catalog import build_tag_catalog
from .core.exceptions import CollectorError, SourceFetchError
from .core.merge import merge_records, sort_packages
from .models import MergedPackage, RawPackageRecord, Tag
from .writer import write_artifacts


@dataclass(frozen=True)
class FetchConfig:
    """Which sources to query in this run."""

    curated: bool = True
    github: bool = True
    astrolabe: bool = True
    aquila: bool = True


@dataclass(frozen=True)
class CollectionResult:
    packages: list[MergedPackage]
    tags: list[Tag]
    raw_count: int


def build_adapters(
    fetch: FetchConfig,
    repository_dir: Path,
    config: CollectorConfig,
    *,
    client: httpx.Client | None = None,
    environ: Mapping[str, str] | None = None,
) -> list[BaseAdapter]:
    """Create the enabled adapters in merge priority order.

    The curated repository comes first and GitHub second; astrolabe and aquila
    come last because they may report a different author than the repository
    owner, and first-seen values win during merge.
    """
    environ = os.environ if environ is None else environ
    adapters: list[BaseAdapter] = []

    if fetch.curated:
        adapters.append(
            CuratedRepositoryAdapter(
                repository_dir,
                packages_dir=config.curated_packages_dir,
                tags_dir=config.curated_tags_dir,
                denylist=config.tag_denylist,
            )
        )
    if fetch.github:
        adapters.append(
            GitHubTopicAdapter(
                config.github_topics,
                environ.get(config.github_token_env, ""),
                api_url=config.github_api_url,
                per_page=config.github_per_page,
                denylist=config.tag_denylist,
                client=client,
            )
        )
    if fetch.astrolabe:
        adapters.append(AstrolabeAdapter(config.astrolabe_url, denylist=config.tag_denylist, client=client))
    if fetch.aquila:
        adapters.append(AquilaAdapter(config.aquila_url, client=client))

    return adapters


def collect_records(adapters: list[BaseAdapter]) -> list[RawPackageRecord]:
    """Run adapters one after another and concatenate their output."""
    records: list[RawPackageRecord] = []
    for adapter in adapters:
        logger.info(f"Fetching packages from {adapter.name}...")
        batch = adapter.read()
        if not adapter.validate(batch):
            raise SourceFetchError(adapter.name, "adapter emitted records with foreign provenance")
        logger.info(f"{adapter.name}: {len(batch)} records")
        records.extend(batch)

    logger.info(f"Collected {len(records)} source packages, merging...")
    return records


def collect(
    fetch: FetchConfig,
    repository_dir: Path | str,
    config: CollectorConfig | None = None,
    *,
    client: httpx.Client | None = None,
    environ: Mapping[str, str] | None = None,
    update_repository: bool = True,
) -> CollectionResult:
    """Fetch every enabled source, merge packages and build the tag catalog.

    Args:
        fetch: Enabled sources
        repository_dir: Curated repository checkout
        config: Source access configuration (default: packaged sources.yml)
        client: Optional shared httpx client for the HTTP sources
        environ: Environment used to look up the GitHub token
        update_repository: Update the curated checkout with git before reading

    Returns:
        Sorted packages, sorted tags and the number of raw records

    Raises:
        SourceFetchError: Any source failed; nothing is returned
    """
    repository_dir = Path(repository_dir)
    config = config or load_sources_config()

    if fetch.curated and update_repository:
        update_checkout(repository_dir)

    adapters = build_adapters(fetch, repository_dir, config, client=client, environ=environ)
    records = collect_records(adapters)
    packages = sort_packages(merge_records(records))

    curated_tags: list[Tag] = []
    for adapter in adapters:
        if isinstance(adapter, CuratedRepositoryAdapter):
            logger.info("Fetching tags from the curated repository...")
            curated_tags = adapter.read_tags()

    tags = build_tag_catalog(curated_tags, packages, config.tag_denylist)
    logger.info(f"Built tag catalog with {len(tags)} tags ({len(curated_tags)} curated)")

    return CollectionResult(packages=packages, tags=tags, raw_count=len(records))


def run(
    fetch: FetchConfig,
    repository_dir: Path | str,
    packages_path: Path | str,
    tags_path: Path | str,
    config: CollectorConfig | None = None,
    **kwargs,
) -> CollectionResult:
    """collect() してから2つの成果物を書き出す."""
    result = collect(fetch, repository_dir, config, **kwargs)
    write_artifacts(result.packages, result.tags, packages_path, tags_path)
    return result


def main(argv: list[str] | None = None) -> None:
    """CLI エントリポイント."""
    parser = argparse.ArgumentParser(description="Collect Zig packages from several catalogs")
    parser.add_argument(
        "--github",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Fetch from GitHub topic search",
    )
    parser.add_argument(
        "--astrolabe",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Fetch from astrolabe.pm",
    )
    parser.add_argument(
        "--ziglibs",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Fetch from the ziglibs/repository checkout",
    )
    parser.add_argument(
        "--aquila",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Fetch from aquila.red",
    )
    parser.add_argument(
        "--tags",
        type=Path,
        default=Path("tags.json"),
        help="Output file for tags",
    )
    parser.add_argument(
        "--packages",
        type=Path,
        default=Path("packages.json"),
        help="Output file for packages",
    )
    parser.add_argument(
        "--repository",
        type=Path,
        default=Path("repository"),
        help="Location of the ziglibs/repository checkout",
    )

    args = parser.parse_args(argv)

    fetch = FetchConfig(
        curated=args.ziglibs,
        github=args.github,
        astrolabe=args.astrolabe,
        aquila=args.aquila,
    )

    try:
        run(fetch, args.repository, args.packages, args.tags)
    except CollectorError as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
