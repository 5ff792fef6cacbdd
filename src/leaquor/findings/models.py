"""Finding data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Union


@dataclass(frozen=True)
class Finding:
    """One potential secret, located in a file."""

    file_path: str
    line: int  # 1-based
    pattern_name: str
    matched_text: str
    context_line: str  # control characters stripped

    def to_dict(self) -> Dict[str, Union[str, int]]:
        """Serialisable form; key names are fixed for report compatibility."""
        return {
            "file": self.file_path,
            "line": self.line,
            "type": self.pattern_name,
            "match": self.matched_text,
            "context": self.context_line,
        }


@dataclass
class ScanResult:
    """Complete result of a scan run, findings in traversal order."""

    findings: List[Finding] = field(default_factory=list)
    scanned_files: int = 0
    skipped_files: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    scan_duration_ms: float = 0.0

    def __iter__(self) -> Iterator[Finding]:
        return iter(self.findings)

    def __len__(self) -> int:
        return len(self.findings)

    @property
    def total_findings(self) -> int:
        return len(self.findings)

    @property
    def files_with_findings(self) -> List[str]:
        seen: Dict[str, None] = {}
        for f in self.findings:
            seen.setdefault(f.file_path, None)
        return list(seen)
