"""Accumulate per-file scan outcomes into one ordered ScanResult."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from leaquor.findings.models import ScanResult

if TYPE_CHECKING:
    from leaquor.scanner.matcher import FileScan


class ResultAggregator:
    """Concatenate FileScans in the order they are added.

    No sorting and no deduplication: the order of ``findings`` is the walk
    order, then pattern order within each file.
    """

    def __init__(self) -> None:
        self._result = ScanResult()

    def add(self, file_scan: "FileScan") -> None:
        if file_scan.error is not None:
            self._result.errors.append(str(file_scan.error))
            return
        if file_scan.skipped_reason is not None:
            self._result.skipped_files.append(f"{file_scan.path} ({file_scan.skipped_reason})")
            return
        self._result.scanned_files += 1
        self._result.findings.extend(file_scan.findings)

    def add_all(self, file_scans: Iterable["FileScan"]) -> None:
        for fs in file_scans:
            self.add(fs)

    def result(self, duration_ms: float = 0.0) -> ScanResult:
        self._result.scan_duration_ms = round(duration_ms, 2)
        return self._result
