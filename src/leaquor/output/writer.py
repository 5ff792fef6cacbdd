"""Write a rendered report to disk."""

from __future__ import annotations

from pathlib import Path
from typing import Union


class OutputWriteError(Exception):
    """Raised when the report file cannot be written."""


def write_report(text: str, path: Union[str, Path]) -> Path:
    """Write *text* to *path*, creating nothing but the file itself."""
    target = Path(path)
    try:
        target.write_text(text + "\n", encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(f"Cannot write results to {target}: {exc}") from exc
    return target
