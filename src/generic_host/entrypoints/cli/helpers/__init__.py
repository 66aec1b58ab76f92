"""CLI helpers for generic-host.

Utilities used by the command-line interface: value redaction for safe
display, OSC-8 terminal hyperlinks when supported, and message emitters that
write to stderr with emoji→ASCII fallbacks.
"""

from .hyperlinks import hyperlink
from .messages import error, success, warn
from .redact import is_sensitive_key, redact

__all__ = ["error", "hyperlink", "is_sensitive_key", "redact", "success", "warn"]
