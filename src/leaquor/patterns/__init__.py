"""Detection patterns — models, built-in defaults, registry."""

from leaquor.patterns.models import Pattern
from leaquor.patterns.registry import PatternBuild, PatternRegistry, PatternSet

__all__ = ["Pattern", "PatternBuild", "PatternRegistry", "PatternSet"]
