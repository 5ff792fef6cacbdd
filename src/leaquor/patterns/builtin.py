"""Built-in detection patterns."""

from leaquor.patterns.models import Pattern

API_KEY = Pattern(
    name="api_key",
    regex=r"(?i)(api|access|secret)[_-]?key[\"']?\s*[:=]\s*[\"']([a-z0-9]{32,})",
)

PASSWORD = Pattern(
    name="password",
    regex=r"(?i)(password|passwd|pwd)[\"']?\s*[:=]\s*[\"']([^\"'\s]+)",
)

PRIVATE_KEY = Pattern(
    name="private_key",
    regex=r"-----BEGIN (?:(?:RSA|OPENSSH|DSA|EC|PGP) )?PRIVATE KEY-----",
)

OAUTH_TOKEN = Pattern(
    name="oauth_token",
    regex=r"(?i)oauth[_-]?token[\"']?\s*[:=]\s*[\"']([a-z0-9]{32,})",
)

SLACK_TOKEN = Pattern(
    name="slack_token",
    regex=r"(xox[pboa]-[0-9]{12}-[0-9]{12}-[0-9]{12}-[a-z0-9]{32})",
)

AWS_KEY = Pattern(
    name="aws_key",
    regex=r"(?i)(aws|amazon)[_-]?(access|secret)[_-]?key[\"']?\s*[:=]\s*[\"']([a-z0-9]{40})",
)

HIGH_ENTROPY = Pattern(
    name="high_entropy",
    regex=r"([a-z0-9+/=]{32,})",
    is_generic_entropy=True,
)

DATABASE_URL = Pattern(
    name="database_url",
    regex=r"(?i)(?:postgres|mysql|mongodb)://[a-z0-9_]+:[^@\s]+@[a-z0-9.-]+/[a-z0-9_]+",
)

AUTHORIZATION = Pattern(
    name="authorization",
    regex=r"(?i)authorization:\s*(bearer|basic)\s+([a-z0-9._-]+)",
)

# Declaration order is the scan order.
DEFAULT_PATTERNS: tuple[Pattern, ...] = (
    API_KEY,
    PASSWORD,
    PRIVATE_KEY,
    OAUTH_TOKEN,
    SLACK_TOKEN,
    AWS_KEY,
    HIGH_ENTROPY,
    DATABASE_URL,
    AUTHORIZATION,
)

PRIVATE_KEY_NAME = PRIVATE_KEY.name
