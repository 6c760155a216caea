"""Unit tests for the curated checkout update."""

import subprocess
from pathlib import Path

import pytest

from zig_package_collector import checkout
from zig_package_collector.core.exceptions import SourceFetchError


class TestUpdateCheckout:
    def test_runs_submodule_update_pull_and_rev_parse(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / ".gitmodules").write_text("", encoding="utf-8")
        repo = tmp_path / "repository"
        repo.mkdir()
        calls: list[tuple[list[str], Path]] = []

        def fake_run(cmd, cwd, **kwargs):
            calls.append((cmd[1:], Path(cwd)))
            return subprocess.CompletedProcess(cmd, 0, stdout="abc123def456\n", stderr="")

        monkeypatch.setattr(checkout.shutil, "which", lambda name: "/usr/bin/git")
        monkeypatch.setattr(checkout.subprocess, "run", fake_run)

        commit = checkout.update_checkout(repo, tmp_path)

        assert commit == "abc123def456"
        assert calls == [
            (["submodule", "update", "--init", "--recursive"], tmp_path),
            (["pull"], repo),
            (["rev-parse", "HEAD"], repo),
        ]

    def test_skips_submodules_without_gitmodules(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[list[str]] = []

        def fake_run(cmd, cwd, **kwargs):
            calls.append(cmd[1:])
            return subprocess.CompletedProcess(cmd, 0, stdout="abc\n", stderr="")

        monkeypatch.setattr(checkout.shutil, "which", lambda name: "/usr/bin/git")
        monkeypatch.setattr(checkout.subprocess, "run", fake_run)

        checkout.update_checkout(tmp_path, tmp_path)

        assert calls == [["pull"], ["rev-parse", "HEAD"]]

    def test_git_failure_is_fatal(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        def fake_run(cmd, cwd, **kwargs):
            raise subprocess.CalledProcessError(1, cmd, stderr="fatal: not a git repository")

        monkeypatch.setattr(checkout.shutil, "which", lambda name: "/usr/bin/git")
        monkeypatch.setattr(checkout.subprocess, "run", fake_run)

        with pytest.raises(SourceFetchError, match="not a git repository"):
            checkout.update_checkout(tmp_path, tmp_path)

    def test_missing_git_is_fatal(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(checkout.shutil, "which", lambda name: None)
        with pytest.raises(SourceFetchError, match="git executable not found"):
            checkout.update_checkout(tmp_path)
