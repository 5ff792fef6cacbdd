"""Directory traversal with in-place pruning of excluded subtrees."""

from __future__ import annotations

import os
from typing import Callable, Iterator, Optional

from leaquor.config.schema import ScanConfig
from leaquor.scanner.classifier import FileAccessError, PathLike, is_skipped

PruneCallback = Callable[[str, str], None]  # (directory, reason)
ErrorCallback = Callable[[FileAccessError], None]


class DirectoryWalker:
    """Yield regular files under a root, pre-order.

    Subdirectories that hit the skip predicate are removed from the
    ``os.walk`` listing before it descends, so an ignored tree such as
    ``node_modules`` is never entered. Symlinked directories are not
    followed, which keeps traversal finite on cyclic trees.
    """

    def __init__(
        self,
        config: ScanConfig,
        on_prune: Optional[PruneCallback] = None,
        on_error: Optional[ErrorCallback] = None,
    ) -> None:
        self._config = config
        self._on_prune = on_prune
        self._on_error = on_error

    def _prune(self, path: str, reason: str) -> None:
        if self._on_prune is not None:
            self._on_prune(path, reason)

    def _walk_error(self, exc: OSError) -> None:
        if self._on_error is not None:
            self._on_error(FileAccessError.from_os_error(exc.filename or "", exc))

    def walk(self, root: PathLike) -> Iterator[str]:
        root = os.fspath(root)
        for dirpath, dirnames, filenames in os.walk(
            root, topdown=True, onerror=self._walk_error, followlinks=False
        ):
            kept = []
            for name in dirnames:
                full = os.path.join(dirpath, name)
                if os.path.islink(full):
                    self._prune(full, "symlink")
                elif is_skipped(full, self._config, root):
                    self._prune(full, "skip-list")
                else:
                    kept.append(name)
            dirnames[:] = kept

            for name in filenames:
                full = os.path.join(dirpath, name)
                if os.path.isfile(full):
                    yield full
