"""Pattern data model — regex stored as string, compiled at construction."""

from __future__ import annotations

import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Pattern:
    """A named detection rule.

    The regex is compiled in ``__post_init__`` so an invalid expression
    raises ``re.error`` while the pattern set is being built, never during
    a scan.
    """

    name: str
    regex: str
    is_generic_entropy: bool = False

    compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "compiled", re.compile(self.regex))
