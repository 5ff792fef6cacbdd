"""JSON reporter — an array of {file, line, type, match, context} objects."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from leaquor.findings.models import ScanResult


def to_list(result: ScanResult) -> List[Dict[str, Any]]:
    """Convert ScanResult to a JSON-serialisable list, in result order."""
    return [f.to_dict() for f in result.findings]


def render(result: ScanResult) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_list(result), indent=4)
