"""Logging setup and the observer that turns scan events into log records."""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from leaquor.patterns.registry import PatternBuild
from leaquor.scanner.classifier import FileAccessError
from leaquor.scanner.engine import ScanObserver
from leaquor.scanner.matcher import FileScan

LOGGER_NAME = "leaquor"

logger = logging.getLogger(__name__)


def configure_logging(log_file: Optional[str] = None, *, verbose: bool = False) -> logging.Logger:
    """Attach a single handler to the ``leaquor`` logger.

    Records go to *log_file* when given, otherwise to stderr through Rich.
    Calling this again replaces the previous handler. An unopenable
    *log_file* raises OSError and leaves the current setup untouched.
    """
    handler: logging.Handler
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    else:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            markup=False,
            rich_tracebacks=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()
    root.addHandler(handler)
    return root


def log_pattern_build(build: PatternBuild, source: Optional[str]) -> None:
    if build.error is not None:
        logger.warning("Ignoring custom patterns, using defaults only: %s", build.error)
    elif source is not None:
        logger.info("Loaded %d custom pattern(s) from %s", build.custom_count, source)
    logger.debug("Active patterns: %s", ", ".join(build.patterns))


class ScanLogger(ScanObserver):
    """Observer that reports engine events through ``logging``."""

    def __init__(self, log: Optional[logging.Logger] = None) -> None:
        self._log = log or logger

    def directory_pruned(self, path: str, reason: str) -> None:
        self._log.info("Skipping directory %s (%s)", path, reason)

    def file_filtered(self, path: str, reason: str) -> None:
        self._log.debug("Not scanning %s (%s)", path, reason)

    def file_scanned(self, file_scan: FileScan) -> None:
        if file_scan.error is not None:
            self._log.warning("Could not read file %s", file_scan.error)
        elif file_scan.skipped_reason is not None:
            self._log.info("Skipping %s file %s", file_scan.skipped_reason, file_scan.path)
        elif file_scan.findings:
            self._log.debug("%s: %d finding(s)", file_scan.path, len(file_scan.findings))

    def access_error(self, error: FileAccessError) -> None:
        self._log.warning("Could not read directory %s", error)
