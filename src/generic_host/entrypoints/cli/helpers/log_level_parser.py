"""Helpers for parsing logger-level CLI options.

Parses options of the form NAME=LEVEL (repeatable or comma/space-separated)
into a name->level mapping. LEVEL accepts the same names as the ``Logging``
configuration section (``Information``, ``Warning``...) and Python's names.
"""

import re

import click

from generic_host.errors import LoggingConfigurationError
from generic_host.logging import parse_level


def _normalize_items(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    """Normalize an option value into a flat list of non-empty items.

    Accepts a single string (e.g. from an environment variable) or a sequence
    of strings (as provided by repeatable Click options); each string is split
    on commas and whitespace.
    """
    if not value:
        return []
    values = [value] if isinstance(value, str) else list(value)
    return [item for v in values for item in re.split(r"[,\s]+", v) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...] | None,
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Later pairs override earlier ones for the same logger name.

    Raises:
        click.BadParameter: If an item is malformed (not NAME=LEVEL) or LEVEL is invalid.
    """
    levels: dict[str, int] = {}
    for item in _normalize_items(value):
        name, separator, level_str = item.partition("=")
        if not separator or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        try:
            levels[name.strip()] = parse_level(level_str, name.strip())
        except LoggingConfigurationError as e:
            raise click.BadParameter(f"Invalid log level: {level_str}") from e
    return levels
