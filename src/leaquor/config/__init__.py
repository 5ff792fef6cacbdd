"""Settings loading, scan configuration, and defaults."""

from leaquor.config.loader import ConfigError, build_scan_config, load_settings
from leaquor.config.schema import LeaquorSettings, ScanConfig

__all__ = [
    "ConfigError",
    "LeaquorSettings",
    "ScanConfig",
    "build_scan_config",
    "load_settings",
]
