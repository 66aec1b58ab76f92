"""OSC-8 hyperlink utilities for the generic-host CLI.

Renders a URL as a clickable terminal link when the stream looks capable of
it, and as plain text otherwise. Pure formatting only.
"""

import os
import sys
from typing import TextIO

# terminals known to render OSC-8 links
OSC8_TERMINAL_PROGRAMS = frozenset(
    {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}
)


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Heuristically detect whether the target stream supports OSC-8 hyperlinks.

    Args:
        stream: File-like text stream to check; defaults to ``sys.stdout``.

    Returns:
        bool: ``True`` if hyperlinks should be emitted; ``False`` otherwise.

    Notes:
        - Returns ``False`` when the stream is not a TTY (e.g., piped or redirected).
        - ``NO_HYPERLINKS`` set to any value disables links.
    """
    stream = stream or sys.stdout
    if os.getenv("NO_HYPERLINKS"):
        return False
    if not getattr(stream, "isatty", lambda: False)():
        return False
    return bool(
        (os.getenv("TERM_PROGRAM") or "").lower() in OSC8_TERMINAL_PROGRAMS
        or os.getenv("WT_SESSION")  # Windows Terminal
        or os.getenv("VTE_VERSION")  # GNOME Terminal, Tilix, etc.
        or os.getenv("TERM", "").startswith(("alacritty", "konsole"))
    )


def hyperlink(url: str, label: str | None = None) -> str:
    """Return *url* as an OSC-8 hyperlink, or plain text when unsupported.

    Args:
        url: Target URL.
        label: Text shown for the link; defaults to the URL. Ignored when
            links are not supported, so the URL is never hidden.
    """
    if not supports_osc8():
        return url
    return f"\x1b]8;;{url}\x07{label or url}\x1b]8;;\x07"  # OSC 8 ; ; URL BEL
