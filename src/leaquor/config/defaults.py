"""Default scan tables — extensions, skip fragments, entropy threshold."""

DEFAULT_ENTROPY_THRESHOLD = 3.5

SCAN_EXTENSIONS: tuple[str, ...] = (
    ".yml", ".yaml", ".json", ".js", ".py", ".rb",
    ".php", ".java", ".go", ".sh", ".env", ".config",
    ".pem", ".ppk", ".key", ".sql", ".xml", ".conf",
)

# Substrings of a path below the scan root; any hit prunes the path.
SKIP_DIRS: tuple[str, ...] = (
    "node_modules", ".git", "vendor", "dist", "build",
    "__pycache__", ".idea", ".vscode", "tmp", "log",
)

CONFIG_FILENAME = ".leaquor.toml"
