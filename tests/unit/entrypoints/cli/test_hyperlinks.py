"""Unit tests for the OSC-8 hyperlink helper."""

from __future__ import annotations

import pytest

from generic_host.entrypoints.cli.helpers import hyperlink, hyperlinks


class FakeTTY:
    """Minimal TTY-like stream."""

    def isatty(self) -> bool:
        """Pretend to be an interactive terminal."""
        return True


class FakePipe:
    """Minimal non-interactive stream."""

    def isatty(self) -> bool:
        """Pretend to be a pipe."""
        return False


@pytest.fixture(autouse=True)
def _clean_osc8_env(monkeypatch):
    """Clear terminal-identifying env vars before each test."""
    for k in ("TERM_PROGRAM", "WT_SESSION", "VTE_VERSION", "TERM", "NO_HYPERLINKS"):
        monkeypatch.delenv(k, raising=False)


@pytest.mark.parametrize(
    ("env", "expected"),
    [
        ({}, False),
        ({"TERM_PROGRAM": "vscode"}, True),
        ({"TERM_PROGRAM": "iTerm.app"}, True),
        ({"WT_SESSION": "1"}, True),
        ({"VTE_VERSION": "7600"}, True),
        ({"TERM": "alacritty"}, True),
        ({"TERM": "xterm-256color"}, False),
        ({"TERM_PROGRAM": "vscode", "NO_HYPERLINKS": "1"}, False),
    ],
)
def test_supports_osc8_matrix(monkeypatch, env, expected):
    """Known terminals enable links; NO_HYPERLINKS disables them."""
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    assert hyperlinks.supports_osc8(FakeTTY()) is expected


def test_pipes_never_get_links(monkeypatch):
    """Redirected output gets plain text."""
    monkeypatch.setenv("TERM_PROGRAM", "vscode")
    assert hyperlinks.supports_osc8(FakePipe()) is False


def test_hyperlink_plain_when_unsupported(monkeypatch):
    """Without OSC-8 support the URL itself is returned."""
    monkeypatch.setattr(hyperlinks, "supports_osc8", lambda stream=None: False)
    assert hyperlink("file:///tmp/secrets.json", "secrets.json") == "file:///tmp/secrets.json"


def test_hyperlink_osc8_when_supported(monkeypatch):
    """With OSC-8 support the label is wrapped in BEL-terminated escapes."""
    monkeypatch.setattr(hyperlinks, "supports_osc8", lambda stream=None: True)
    assert (
        hyperlink("file:///tmp/secrets.json", "secrets.json")
        == "\x1b]8;;file:///tmp/secrets.json\x07secrets.json\x1b]8;;\x07"
    )
