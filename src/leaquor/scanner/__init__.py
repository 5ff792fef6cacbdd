"""Scanner — walker, classifier, entropy, matcher, engine."""

from leaquor.scanner.classifier import FileAccessError, is_text, should_scan
from leaquor.scanner.engine import ScanError, ScanObserver, scan
from leaquor.scanner.entropy import shannon_entropy
from leaquor.scanner.matcher import FileScan, SecretMatcher, scan_file
from leaquor.scanner.walker import DirectoryWalker

__all__ = [
    "DirectoryWalker",
    "FileAccessError",
    "FileScan",
    "ScanError",
    "ScanObserver",
    "SecretMatcher",
    "is_text",
    "scan",
    "scan_file",
    "shannon_entropy",
    "should_scan",
]
