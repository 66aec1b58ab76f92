"""Unit tests for reading the environment name."""

import pytest

from generic_host.bootstrap.defaults import resolve_environment_name

# pylint: disable=magic-value-comparison


def test_absent_variable_is_production():
    """Without the variable the default name is used."""
    assert resolve_environment_name(environ={}) == "production"


@pytest.mark.parametrize("value", ["", "  ", "\t\n"])
def test_empty_or_whitespace_value_counts_as_unset(value):
    """A value holding only whitespace is not an environment name."""
    assert resolve_environment_name(environ={"NETCORE_ENVIRONMENT": value}) == "production"


def test_value_is_returned_as_set():
    """A real value is used without trimming or case changes."""
    environ = {"NETCORE_ENVIRONMENT": " Staging "}
    assert resolve_environment_name(environ=environ) == " Staging "


def test_blank_variable_name_reads_the_default_variable():
    """A blank variable name falls back to NETCORE_ENVIRONMENT."""
    environ = {"NETCORE_ENVIRONMENT": "Development", "ORDERS_ENV": "Staging"}
    assert resolve_environment_name("  ", environ=environ) == "Development"
    assert resolve_environment_name("ORDERS_ENV", environ=environ) == "Staging"
