"""Git subprocess wrapper — shallow clone into a temporary directory."""

from __future__ import annotations

import shutil
import subprocess
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

CLONE_TIMEOUT = 300


class RepositoryFetchError(Exception):
    """Raised when a repository cannot be cloned. Fatal for the run."""


def _run_git(args: list[str], cwd: Optional[Path] = None, timeout: int = CLONE_TIMEOUT) -> str:
    """Run a git command and return stdout. Raises RepositoryFetchError on failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise RepositoryFetchError("git is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise RepositoryFetchError(f"git command timed out after {timeout}s: git {' '.join(args)}")

    if result.returncode != 0:
        stderr = result.stderr.strip() or f"exit status {result.returncode}"
        raise RepositoryFetchError(f"git error: {stderr}")
    return result.stdout


def clone_repository(url: str, dest: Optional[Path] = None, *, timeout: int = CLONE_TIMEOUT) -> Path:
    """Shallow-clone *url* into *dest* (a fresh temp dir by default).

    On failure the destination is removed before the error propagates.
    """
    target = dest or Path(tempfile.mkdtemp(prefix="leaquor_"))
    try:
        _run_git(["clone", "--depth", "1", "--quiet", "--", url, str(target)], timeout=timeout)
    except RepositoryFetchError:
        shutil.rmtree(target, ignore_errors=True)
        raise
    return target


@contextmanager
def cloned_repository(url: str, *, timeout: int = CLONE_TIMEOUT) -> Iterator[Path]:
    """Clone *url* for the duration of the ``with`` block, then delete it."""
    path = clone_repository(url, timeout=timeout)
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)
