"""curated リポジトリのチェックアウト更新."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

from loguru import logger

from .core.exceptions import SourceFetchError


def _git(git: str, args: list[str], cwd: Path) -> str:
    try:
        result = subprocess.run(
            [git, *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or "").strip() or f"exit status {e.returncode}"
        raise SourceFetchError("curated", f"git {' '.join(args)} failed in {cwd}: {detail}") from e
    except OSError as e:
        raise SourceFetchError("curated", f"git {' '.join(args)} could not run in {cwd}: {e}") from e
    return result.stdout.strip()


def update_checkout(repository_dir: Path | str, superproject_dir: Path | str = ".") -> str:
    """curated リポジトリを最新化して commit hash を返す.

    superproject が submodule を宣言していれば `git submodule update --init --recursive`
    を実行し、その後チェックアウト内で `git pull` する。

    Args:
        repository_dir: curated リポジトリのチェックアウト
        superproject_dir: submodule を持つ親リポジトリ（通常はカレントディレクトリ）

    Returns:
        更新後の HEAD の commit hash

    Raises:
        SourceFetchError: git が見つからない、またはいずれかの git コマンドが失敗した場合
    """
    repository_dir = Path(repository_dir)
    superproject_dir = Path(superproject_dir)

    git = shutil.which("git")
    if git is None:
        raise SourceFetchError("curated", "git executable not found on PATH")

    logger.info(f"Updating the curated repository at {repository_dir}...")

    if (superproject_dir / ".gitmodules").exists():
        _git(git, ["submodule", "update", "--init", "--recursive"], superproject_dir)

    _git(git, ["pull"], repository_dir)
    commit_hash = _git(git, ["rev-parse", "HEAD"], repository_dir)

    logger.info(f"Curated repository at commit {commit_hash[:8]}")
    return commit_hash
