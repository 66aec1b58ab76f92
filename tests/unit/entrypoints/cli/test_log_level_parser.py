"""Unit tests for the CLI log level parser.

These tests exercise generic_host.entrypoints.cli.helpers.log_level_parser.parse_log_level,
covering override semantics, input normalization (commas/spaces), level names
from settings files, and error handling for malformed input.
"""

import logging
import types

import click
import pytest

from generic_host.entrypoints.cli.helpers.log_level_parser import parse_log_level
from generic_host.logging import TRACE


def make_ctx():
    """Create a minimal Click context stub.

    The parser callback expects a Click context argument but does not use it;
    a lightweight SimpleNamespace is sufficient for testing.
    """
    return types.SimpleNamespace()


def test_empty_is_empty():
    """When no levels are provided, no logger is adjusted."""
    assert parse_log_level(make_ctx(), None, ()) == {}


def test_repeated_flags_override_order():
    """Later repeated CLI flags override earlier ones for the same logger."""
    value = ("generic_host=INFO", "urllib3=ERROR", "generic_host=WARNING")
    out = parse_log_level(make_ctx(), None, value)
    assert out["generic_host"] == logging.WARNING
    assert out["urllib3"] == logging.ERROR


def test_envvar_string_with_commas_and_spaces():
    """Accept a plain string (e.g. from an env var) with commas and spaces."""
    out = parse_log_level(make_ctx(), None, "generic_host=INFO,  urllib3=WARNING rich=ERROR")
    assert out == {
        "generic_host": logging.INFO,
        "urllib3": logging.WARNING,
        "rich": logging.ERROR,
    }


def test_settings_level_names():
    """Names used in settings files are accepted, case-insensitively."""
    out = parse_log_level(make_ctx(), None, ("a=Information", "b=trace", "c=WaRnInG"))
    assert out == {"a": logging.INFO, "b": TRACE, "c": logging.WARNING}


@pytest.mark.parametrize("value", [("not-a-pair",), ("=INFO",)])
def test_invalid_pair_raises(value):
    """Malformed NAME=LEVEL pairs should raise click.BadParameter."""
    with pytest.raises(click.BadParameter):
        parse_log_level(make_ctx(), None, value)


def test_invalid_level_raises():
    """Unknown level names should raise click.BadParameter."""
    with pytest.raises(click.BadParameter, match="LOUD"):
        parse_log_level(make_ctx(), None, ("generic_host=LOUD",))
