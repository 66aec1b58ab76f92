"""Redaction of configuration values for CLI output.

Configuration often carries credentials (connection strings, API tokens).
`redact` masks the value of any key whose last segment looks sensitive so
``generic-host config show`` can be pasted into an issue safely.

Examples:
    ```bash
    >>> redact("Database:Password", "s3cr3t")
    '***'
    >>> redact("Database:Host", "localhost")
    'localhost'
    ```

Caveats:
    - Only key names are inspected. A secret stored under an innocuous key
      (e.g. ``Database:Url`` with an embedded password) is shown as-is.
"""

import re

from generic_host.utils.keys import section_key

MASK = "***"  # pragma: no mutate

SENSITIVE_KEY_RE = re.compile(
    r"(password|passwd|pwd|secret|token|api[_-]?key|credential|connectionstring)",
    re.IGNORECASE,
)


def is_sensitive_key(key: str) -> bool:
    """Return True if the last segment of *key* names a credential."""
    return bool(SENSITIVE_KEY_RE.search(section_key(key)))


def redact(key: str, value: str) -> str:
    """Return *value*, or a mask when *key* is sensitive and *value* non-empty."""
    if value and is_sensitive_key(key):
        return MASK
    return value
