"""Unit tests for the command-line configuration provider."""

import pytest

from generic_host.adapters.configuration.command_line import (
    CommandLineConfigurationSource,
    parse_arguments,
)
from generic_host.errors import CommandLineFormatError

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    "args",
    [
        ["--Key=value"],
        ["--Key", "value"],
        ["/Key=value"],
        ["/Key", "value"],
        ["Key=value"],
    ],
)
def test_supported_forms(args):
    """Every supported form yields the same key/value."""
    assert dict(parse_arguments(args).items()) == {"Key": "value"}


def test_nested_keys_and_empty_values():
    """Keys may address nested values; values may be empty."""
    data = parse_arguments(["--Logging:LogLevel:Default=Debug", "--Empty="])
    assert data["Logging:LogLevel:Default"] == "Debug"
    assert data["Empty"] == ""


def test_value_may_contain_equals_sign():
    """Only the first ``=`` separates key and value."""
    assert parse_arguments(["--Conn=a=b"])["Conn"] == "a=b"


def test_later_arguments_override_earlier_ones():
    """The last occurrence of a key wins, case-insensitively."""
    assert parse_arguments(["--Key=1", "--key=2"])["KEY"] == "2"


def test_bare_tokens_are_ignored():
    """Tokens without prefix or ``=`` are not configuration."""
    assert dict(parse_arguments(["run", "--Key=1"]).items()) == {"Key": "1"}


def test_switch_mappings():
    """Mapped switches translate into configuration keys."""
    data = parse_arguments(
        ["-e", "Staging", "--port=8080"],
        switch_mappings={"-e": "Environment", "--port": "Server:Port"},
    )
    assert data["Environment"] == "Staging"
    assert data["Server:Port"] == "8080"


def test_unmapped_short_switch_with_separate_value_is_ignored():
    """``-x value`` without a mapping contributes nothing."""
    assert not parse_arguments(["-x", "value"])


def test_unmapped_short_switch_with_inline_value_raises():
    """``-x=value`` without a mapping is malformed."""
    with pytest.raises(CommandLineFormatError) as excinfo:
        parse_arguments(["-x=value"])
    assert excinfo.value.argument == "-x=value"


def test_switch_without_value_raises():
    """A trailing switch without its value is malformed."""
    with pytest.raises(CommandLineFormatError, match="no value"):
        parse_arguments(["--Key=1", "--Dangling"])


def test_empty_key_raises():
    """``=value`` has no key."""
    with pytest.raises(CommandLineFormatError, match="empty"):
        parse_arguments(["=value"])


@pytest.mark.parametrize(
    "mappings",
    [
        {"e": "Environment"},
        {"-e": "Environment", "-E": "Other"},
    ],
)
def test_invalid_switch_mappings_are_rejected_early(mappings):
    """Bad mappings fail when the source is created, not when loading."""
    with pytest.raises(ValueError):
        CommandLineConfigurationSource([], mappings)
