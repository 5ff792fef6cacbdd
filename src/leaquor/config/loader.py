"""Load and merge settings from .leaquor.toml, env vars, and CLI flags."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Iterable, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from leaquor.config.defaults import CONFIG_FILENAME, SCAN_EXTENSIONS, SKIP_DIRS
from leaquor.config.schema import LeaquorSettings, OutputSettings, ScanConfig, ScanSettings

if TYPE_CHECKING:
    from leaquor.patterns.registry import PatternSet


class ConfigError(Exception):
    """Raised (or returned) when configuration or a pattern file is unusable."""


def find_config_file(root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the settings file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _split_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _merge_env_overrides(settings: LeaquorSettings) -> None:
    """Apply LEAQUOR_* environment variable overrides."""
    if val := os.environ.get("LEAQUOR_ENTROPY_THRESHOLD"):
        try:
            settings.scan.entropy_threshold = float(val)
        except ValueError:
            pass
    if val := os.environ.get("LEAQUOR_IGNORE_FILES"):
        settings.scan.ignore_files.extend(_split_list(val))
    if val := os.environ.get("LEAQUOR_PATTERNS_FILE"):
        settings.scan.patterns_file = val
    if val := os.environ.get("LEAQUOR_WORKERS"):
        try:
            workers = int(val)
        except ValueError:
            workers = 0
        if workers >= 1:
            settings.scan.workers = workers


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    import dataclasses

    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _validate_scan(scan: ScanSettings, source: Path) -> None:
    """Reject [scan] values of the wrong type before anything uses them."""
    if isinstance(scan.entropy_threshold, bool) or not isinstance(
        scan.entropy_threshold, (int, float)
    ):
        raise ConfigError(f"{source}: scan.entropy_threshold must be a number")
    for key in ("ignore_files", "extra_extensions", "extra_skip_dirs"):
        value = getattr(scan, key)
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigError(f"{source}: scan.{key} must be a list of strings")
    if scan.patterns_file is not None and not isinstance(scan.patterns_file, str):
        raise ConfigError(f"{source}: scan.patterns_file must be a string")
    if isinstance(scan.workers, bool) or not isinstance(scan.workers, int) or scan.workers < 1:
        raise ConfigError(f"{source}: scan.workers must be a positive integer")


def _validate_output(output: OutputSettings, source: Path) -> None:
    if not isinstance(output.json, bool):
        raise ConfigError(f"{source}: output.json must be true or false")
    if output.output_file is not None and not isinstance(output.output_file, str):
        raise ConfigError(f"{source}: output.output_file must be a string")


def load_settings(root: Path, config_override: Optional[str] = None) -> LeaquorSettings:
    """Load settings for a scan rooted at *root*."""
    config_path = find_config_file(root, config_override)

    if config_path is None:
        settings = LeaquorSettings()
    else:
        raw = _parse_toml(config_path)
        settings = LeaquorSettings(
            scan=_build_section(raw, ScanSettings, "scan"),
            output=_build_section(raw, OutputSettings, "output"),
        )
        _validate_scan(settings.scan, config_path)
        _validate_output(settings.output, config_path)

    _merge_env_overrides(settings)
    return settings


def build_scan_config(
    patterns: "PatternSet",
    *,
    ignore_files: Iterable[str] = (),
    entropy_threshold: Optional[float] = None,
    extra_extensions: Iterable[str] = (),
    extra_skip_dirs: Iterable[str] = (),
) -> ScanConfig:
    """Freeze the tables and user choices for one run into a ScanConfig."""
    kwargs: Dict[str, Any] = {}
    if entropy_threshold is not None:
        kwargs["entropy_threshold"] = float(entropy_threshold)
    return ScanConfig(
        patterns=patterns,
        ignore_globs=frozenset(f for f in ignore_files if f),
        scan_extensions=frozenset(SCAN_EXTENSIONS) | frozenset(extra_extensions),
        skip_path_fragments=frozenset(SKIP_DIRS) | frozenset(extra_skip_dirs),
        **kwargs,
    )
