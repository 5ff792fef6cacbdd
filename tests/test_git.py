"""Tests for the git clone adapter."""

import subprocess
from pathlib import Path

import pytest

from leaquor.git import adapter
from leaquor.git.adapter import RepositoryFetchError, clone_repository, cloned_repository


class TestCloneRepository:
    def test_clones_local_repo(self, tmp_git_repo: Path, tmp_path: Path):
        dest = clone_repository(str(tmp_git_repo), tmp_path / "clone")
        assert dest == tmp_path / "clone"
        assert (dest / "settings.py").is_file()
        assert (dest / ".git").is_dir()

    def test_failure_removes_destination(self, tmp_path: Path):
        dest = tmp_path / "clone"
        dest.mkdir()
        with pytest.raises(RepositoryFetchError, match="git error"):
            clone_repository(str(tmp_path / "no-such-repo"), dest)
        assert not dest.exists()

    def test_missing_git_binary(self, monkeypatch, tmp_path: Path):
        def _raise(*args, **kwargs):
            raise FileNotFoundError("git")

        monkeypatch.setattr(adapter.subprocess, "run", _raise)
        with pytest.raises(RepositoryFetchError, match="not installed"):
            clone_repository("https://example.invalid/repo.git", tmp_path / "clone")

    def test_timeout(self, monkeypatch, tmp_path: Path):
        def _raise(*args, **kwargs):
            raise subprocess.TimeoutExpired(cmd="git", timeout=1)

        monkeypatch.setattr(adapter.subprocess, "run", _raise)
        with pytest.raises(RepositoryFetchError, match="timed out"):
            clone_repository("https://example.invalid/repo.git", tmp_path / "clone", timeout=1)


class TestClonedRepository:
    def test_removed_after_block(self, tmp_git_repo: Path):
        with cloned_repository(str(tmp_git_repo)) as path:
            assert path.name.startswith("leaquor_")
            assert (path / "README.md").is_file()
        assert not path.exists()

    def test_removed_when_block_raises(self, tmp_git_repo: Path):
        with pytest.raises(RuntimeError):
            with cloned_repository(str(tmp_git_repo)) as path:
                raise RuntimeError("boom")
        assert not path.exists()
