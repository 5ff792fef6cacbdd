"""Configuration schema — settings sections and the per-run ScanConfig."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, FrozenSet, List, Optional

from leaquor.config.defaults import DEFAULT_ENTROPY_THRESHOLD, SCAN_EXTENSIONS, SKIP_DIRS

if TYPE_CHECKING:
    from leaquor.patterns.registry import PatternSet


@dataclass
class ScanSettings:
    entropy_threshold: float = DEFAULT_ENTROPY_THRESHOLD
    ignore_files: List[str] = field(default_factory=list)
    extra_extensions: List[str] = field(default_factory=list)
    extra_skip_dirs: List[str] = field(default_factory=list)
    patterns_file: Optional[str] = None
    workers: int = 1


@dataclass
class OutputSettings:
    json: bool = False
    output_file: Optional[str] = None


@dataclass
class LeaquorSettings:
    scan: ScanSettings = field(default_factory=ScanSettings)
    output: OutputSettings = field(default_factory=OutputSettings)


@dataclass(frozen=True)
class ScanConfig:
    """Everything the detection engine reads during one run.

    Built once per invocation and passed read-only to the walker,
    classifier and matcher. ``ignore_globs`` holds user fragments matched
    against a file's name (substring, or shell glob); ``skip_path_fragments``
    are matched as substrings of the path below the scan root.
    """

    patterns: "PatternSet"
    ignore_globs: FrozenSet[str] = frozenset()
    entropy_threshold: float = DEFAULT_ENTROPY_THRESHOLD
    scan_extensions: FrozenSet[str] = frozenset(SCAN_EXTENSIONS)
    skip_path_fragments: FrozenSet[str] = frozenset(SKIP_DIRS)
