"""Shannon entropy calculator used to gate generic high-entropy matches."""

from __future__ import annotations

import math
from collections import Counter

# Below this length a string never counts as high entropy.
MIN_ENTROPY_LENGTH = 16


def shannon_entropy(s: str) -> float:
    """Compute Shannon entropy (bits per character) of *s*, case-insensitively.

    H = -Σ p(c) · log₂(p(c))  over the unique characters of ``s.lower()``.
    Strings shorter than ``MIN_ENTROPY_LENGTH`` score 0.0.
    """
    if len(s) < MIN_ENTROPY_LENGTH:
        return 0.0
    folded = s.lower()
    counts = Counter(folded)
    total = len(folded)
    return -sum((c / total) * math.log2(c / total) for c in counts.values())
