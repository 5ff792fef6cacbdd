"""Core scan engine — walk, classify, match, aggregate.

The engine itself does not log. Every decision worth reporting is handed
to a ``ScanObserver``; ``leaquor.log.ScanLogger`` is the implementation
the CLI wires in.
"""

from __future__ import annotations

import os
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Iterator, List, Optional

from leaquor.config.schema import ScanConfig
from leaquor.findings.aggregator import ResultAggregator
from leaquor.findings.models import ScanResult
from leaquor.scanner.classifier import FileAccessError, PathLike, has_scan_extension, is_skipped
from leaquor.scanner.matcher import FileScan, SecretMatcher
from leaquor.scanner.walker import DirectoryWalker


class ScanError(Exception):
    """Raised when a scan cannot start (missing or non-directory root)."""


class ScanObserver:
    """Receives engine events. The base class ignores everything."""

    def directory_pruned(self, path: str, reason: str) -> None:
        pass

    def file_filtered(self, path: str, reason: str) -> None:
        pass

    def file_scanned(self, file_scan: FileScan) -> None:
        pass

    def access_error(self, error: FileAccessError) -> None:
        pass


def _candidates(
    root: str,
    config: ScanConfig,
    walker: DirectoryWalker,
    observer: ScanObserver,
) -> Iterator[str]:
    """Walker output narrowed to files the classifier accepts."""
    for path in walker.walk(root):
        if is_skipped(path, config, root):
            observer.file_filtered(path, "skip-list")
        elif not has_scan_extension(path, config):
            observer.file_filtered(path, "extension")
        else:
            yield path


def _observed(file_scans: Iterable[FileScan], observer: ScanObserver) -> Iterator[FileScan]:
    for fs in file_scans:
        observer.file_scanned(fs)
        yield fs


def scan(
    root: PathLike,
    config: ScanConfig,
    *,
    workers: int = 1,
    observer: Optional[ScanObserver] = None,
) -> ScanResult:
    """Scan every candidate file under *root* and return the aggregated result.

    With ``workers > 1`` files are matched on a thread pool; ``Executor.map``
    keeps results in walk order, so the outcome equals a sequential run.
    """
    start = time.perf_counter()
    root = os.fspath(root)
    if not os.path.exists(root):
        raise ScanError(f"Scan root does not exist: {root}")
    if not os.path.isdir(root):
        raise ScanError(f"Scan root is not a directory: {root}")

    observer = observer or ScanObserver()
    walker = DirectoryWalker(
        config,
        on_prune=observer.directory_pruned,
        on_error=observer.access_error,
    )
    matcher = SecretMatcher(config)
    aggregator = ResultAggregator()

    candidates = _candidates(root, config, walker, observer)
    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            file_scans: List[FileScan] = list(pool.map(matcher.scan_file, candidates))
        aggregator.add_all(_observed(file_scans, observer))
    else:
        aggregator.add_all(_observed(map(matcher.scan_file, candidates), observer))

    return aggregator.result((time.perf_counter() - start) * 1000)
