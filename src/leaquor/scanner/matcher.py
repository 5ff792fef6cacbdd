"""Per-file secret matching — patterns in, Findings out.

The matcher never logs and never raises for I/O problems: a binary or
unreadable file comes back as an empty ``FileScan`` carrying the reason,
and the caller decides what to report.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from leaquor.config.schema import ScanConfig
from leaquor.findings.models import Finding
from leaquor.patterns.builtin import PRIVATE_KEY_NAME
from leaquor.patterns.models import Pattern
from leaquor.scanner.classifier import ContentKind, FileAccessError, PathLike, classify_content
from leaquor.scanner.entropy import shannon_entropy

PRIVATE_KEY_MARKER = "PRIVATE KEY BLOCK"
PRIVATE_KEY_CONTEXT = "Contains private key material"

_CONTROL_CHARS_RE = re.compile(r"[\x00-\x1f]")


@dataclass(frozen=True)
class FileScan:
    """Outcome of scanning one file."""

    path: str
    findings: Tuple[Finding, ...] = ()
    skipped_reason: Optional[str] = None
    error: Optional[FileAccessError] = None

    @property
    def scanned(self) -> bool:
        return self.skipped_reason is None and self.error is None


def extract_secret(m: re.Match[str]) -> Optional[str]:
    """Return the highest-numbered capture group, or the whole match if there are none."""
    groups = m.re.groups
    return m.group(groups) if groups else m.group(0)


def line_number(content: str, offset: int) -> int:
    """1-based number of the line containing *offset*."""
    return content.count("\n", 0, offset) + 1


def line_at(content: str, offset: int) -> str:
    """The full line containing *offset*, without its terminator."""
    start = content.rfind("\n", 0, offset) + 1
    end = content.find("\n", offset)
    if end == -1:
        end = len(content)
    return content[start:end]


def strip_control(text: str) -> str:
    return _CONTROL_CHARS_RE.sub("", text)


def read_text(path: PathLike) -> str:
    """Read a file verbatim: UTF-8, bad bytes replaced, newlines untouched."""
    with open(path, encoding="utf-8", errors="replace", newline="") as f:
        return f.read()


class SecretMatcher:
    """Apply a ScanConfig's patterns to file content."""

    def __init__(self, config: ScanConfig) -> None:
        self._config = config

    def match_pattern(self, pattern: Pattern, content: str, path: str) -> List[Finding]:
        findings: List[Finding] = []
        for m in pattern.compiled.finditer(content):
            secret = extract_secret(m)
            if not secret:
                continue
            if pattern.is_generic_entropy and (
                shannon_entropy(secret) < self._config.entropy_threshold
            ):
                continue
            offset = m.start()
            findings.append(
                Finding(
                    file_path=path,
                    line=line_number(content, offset),
                    pattern_name=pattern.name,
                    matched_text=secret,
                    context_line=strip_control(line_at(content, offset)),
                )
            )
        return findings

    def private_key_marker(self, content: str, path: str) -> Optional[Finding]:
        """One file-level finding if any private-key header occurs anywhere."""
        pattern = self._config.patterns.get(PRIVATE_KEY_NAME)
        if pattern is None or pattern.compiled.search(content) is None:
            return None
        return Finding(
            file_path=path,
            line=1,
            pattern_name=PRIVATE_KEY_NAME,
            matched_text=PRIVATE_KEY_MARKER,
            context_line=PRIVATE_KEY_CONTEXT,
        )

    def scan_content(self, content: str, path: str) -> List[Finding]:
        findings: List[Finding] = []
        for pattern in self._config.patterns.values():
            findings.extend(self.match_pattern(pattern, content, path))
        marker = self.private_key_marker(content, path)
        if marker is not None:
            findings.append(marker)
        return findings

    def scan_file(self, path: PathLike) -> FileScan:
        path = os.fspath(path)

        kind = classify_content(path)
        if kind is ContentKind.BINARY:
            return FileScan(path=path, skipped_reason="binary")
        if kind is ContentKind.UNREADABLE:
            return FileScan(path=path, error=FileAccessError(path=path, reason="unreadable"))

        try:
            content = read_text(path)
        except OSError as exc:
            return FileScan(path=path, error=FileAccessError.from_os_error(path, exc))

        return FileScan(path=path, findings=tuple(self.scan_content(content, path)))


def scan_file(path: PathLike, config: ScanConfig) -> Tuple[Finding, ...]:
    """Findings for a single file; empty for binary or unreadable files."""
    return SecretMatcher(config).scan_file(path).findings
