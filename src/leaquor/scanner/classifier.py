"""File classification — skip fragments, extension allow-list, binary sniffing."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from enum import Enum
from fnmatch import fnmatch
from typing import Optional, Union

from leaquor.config.schema import ScanConfig

PathLike = Union[str, "os.PathLike[str]"]

# Any byte below 0x20 except tab, LF and CR marks a file as binary.
_BINARY_BYTE_RE = re.compile(rb"[\x00-\x08\x0b\x0c\x0e-\x1f]")
_CHUNK_SIZE = 8192


class ContentKind(str, Enum):
    TEXT = "text"
    BINARY = "binary"
    UNREADABLE = "unreadable"


@dataclass(frozen=True)
class FileAccessError:
    """A file or directory that could not be read. Never fatal to the scan."""

    path: str
    reason: str

    @classmethod
    def from_os_error(cls, path: PathLike, exc: OSError) -> "FileAccessError":
        return cls(path=os.fspath(path), reason=exc.strerror or exc.__class__.__name__)

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


def _relative(path: str, root: Optional[PathLike]) -> str:
    if root is None:
        return path
    rel = os.path.relpath(path, os.fspath(root))
    return "" if rel == os.curdir else rel


def matches_ignore(name: str, config: ScanConfig) -> bool:
    """True if a user ignore fragment occurs in (or globs) the file name."""
    return any(frag in name or fnmatch(name, frag) for frag in config.ignore_globs)


def is_skipped(path: PathLike, config: ScanConfig, root: Optional[PathLike] = None) -> bool:
    """Return True if *path* (file or directory) is excluded from scanning.

    Skip fragments are tested against the path below *root* when a root is
    given, so the location of the checkout itself never excludes it.
    """
    path = os.fspath(path)
    if matches_ignore(os.path.basename(path), config):
        return True
    rel = _relative(path, root)
    return any(frag in rel for frag in config.skip_path_fragments)


def has_scan_extension(path: PathLike, config: ScanConfig) -> bool:
    name = os.path.basename(os.fspath(path))
    return any(name.endswith(ext) for ext in config.scan_extensions)


def should_scan(path: PathLike, config: ScanConfig, root: Optional[PathLike] = None) -> bool:
    """Return True if *path* passes the skip list and the extension allow-list."""
    return not is_skipped(path, config, root) and has_scan_extension(path, config)


def classify_content(path: PathLike) -> ContentKind:
    """Sniff *path* and stop at the first binary byte."""
    try:
        with open(path, "rb") as f:
            while chunk := f.read(_CHUNK_SIZE):
                if _BINARY_BYTE_RE.search(chunk):
                    return ContentKind.BINARY
    except OSError:
        return ContentKind.UNREADABLE
    return ContentKind.TEXT


def is_text(path: PathLike) -> bool:
    """True only if the whole file was readable and contained no binary bytes."""
    return classify_content(path) is ContentKind.TEXT
