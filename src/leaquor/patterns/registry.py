"""Pattern registry — built-in defaults overlaid with a custom YAML file."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

import yaml

from leaquor.config.loader import ConfigError
from leaquor.patterns.builtin import DEFAULT_PATTERNS
from leaquor.patterns.models import Pattern


class PatternSet(Mapping):
    """Read-only, ordered mapping of pattern name to Pattern."""

    def __init__(self, patterns: Iterable[Pattern] = ()) -> None:
        self._patterns: Dict[str, Pattern] = {}
        for p in patterns:
            self._patterns[p.name] = p

    def __getitem__(self, name: str) -> Pattern:
        return self._patterns[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def __repr__(self) -> str:
        return f"PatternSet({list(self._patterns)!r})"

    def overlay(self, patterns: Iterable[Pattern]) -> "PatternSet":
        """Return a new set where *patterns* replace same-named entries."""
        merged = PatternSet(self.values())
        for p in patterns:
            merged._patterns[p.name] = p
        return merged


@dataclass(frozen=True)
class PatternBuild:
    """Outcome of building a PatternSet.

    ``error`` is set when a custom source was given but rejected; in that
    case ``patterns`` holds the defaults only.
    """

    patterns: PatternSet
    error: Optional[ConfigError] = None
    custom_count: int = 0


def parse_custom_patterns(data: Any, source: str = "<patterns>") -> List[Pattern]:
    """Turn a parsed ``{patterns: [{pattern: {name, regex}}]}`` document into Patterns.

    Any structural problem or regex compile failure raises ConfigError for
    the whole document.
    """
    if not isinstance(data, dict) or not isinstance(data.get("patterns"), list):
        raise ConfigError(f"{source}: expected a mapping with a 'patterns' list")

    patterns: List[Pattern] = []
    for idx, entry in enumerate(data["patterns"], 1):
        body = entry.get("pattern") if isinstance(entry, dict) else None
        if not isinstance(body, dict):
            raise ConfigError(f"{source}: entry {idx} has no 'pattern' mapping")
        name = body.get("name")
        regex = body.get("regex")
        if not isinstance(name, str) or not name:
            raise ConfigError(f"{source}: entry {idx} is missing 'name'")
        if not isinstance(regex, str) or not regex:
            raise ConfigError(f"{source}: pattern '{name}' is missing 'regex'")
        try:
            patterns.append(Pattern(name=name, regex=regex))
        except re.error as exc:
            raise ConfigError(f"{source}: pattern '{name}' does not compile: {exc}") from exc
    return patterns


def load_custom_patterns(path: Union[str, Path]) -> List[Pattern]:
    """Read and validate a custom pattern YAML file."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read pattern file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse pattern file {path}: {exc}") from exc
    return parse_custom_patterns(data, source=str(path))


class PatternRegistry:
    """Builds the PatternSet for a run."""

    def __init__(self, defaults: Iterable[Pattern] = DEFAULT_PATTERNS) -> None:
        self._defaults = PatternSet(defaults)

    @property
    def defaults(self) -> PatternSet:
        return self._defaults

    def build(self, custom_source: Union[str, Path, None] = None) -> PatternBuild:
        """Overlay *custom_source* on the defaults, all-or-nothing."""
        if custom_source is None:
            return PatternBuild(patterns=self._defaults)
        try:
            custom = load_custom_patterns(custom_source)
        except ConfigError as exc:
            return PatternBuild(patterns=self._defaults, error=exc)
        return PatternBuild(
            patterns=self._defaults.overlay(custom),
            custom_count=len(custom),
        )
