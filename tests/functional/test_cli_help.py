"""Functional tests for the generic-host CLI help and version output.

This suite verifies:
- The long-form `HELP` prose from `generic_host.entrypoints.cli.main` is
  rendered on `--help` (compared after stripping ANSI and normalizing
  whitespace).
- Both command groups are listed.
- `--version` prints the package version.
"""

from __future__ import annotations

import re
from textwrap import dedent

import pytest
from click.testing import CliRunner

import generic_host
from generic_host.entrypoints.cli import main

ANSI_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")  # strip SGR styling only


def _normalize(s: str) -> str:
    """Return `s` with whitespace collapsed and hyphenated line breaks rejoined."""
    return re.sub(r"-\s+", "-", re.sub(r"\s+", " ", s.strip()))


class TestNewUser:
    """A new user, unfamiliar with the tool, tries to get help."""

    @staticmethod
    @pytest.mark.parametrize("args", (["-h"], ["--help"]))
    def test_help_output(args: list[str]):
        """Help shows the HELP prose and the available groups.

        Given generic-host is installed
        When `generic-host` is invoked with `-h` or `--help`
        Then the long HELP prose, usage and both command groups appear
        """
        # pylint: disable=magic-value-comparison
        result = CliRunner().invoke(main.cli, args)

        assert result.exit_code == 0
        text = ANSI_RE.sub("", result.output)
        assert _normalize(dedent(main.HELP)) in _normalize(text)
        assert "Usage:" in text
        assert "config" in text
        assert "secrets" in text

    @staticmethod
    def test_version_output():
        """User runs --version and sees the version string."""
        result = CliRunner().invoke(main.cli, ["--version"])

        assert result.exit_code == 0
        assert generic_host.__version__ in result.output
