"""Command-line arguments configuration provider.

Accepted forms (``key`` may contain ``:`` to address nested values)::

    key=value
    --key=value    --key value
    /key=value     /key value
    -k=value       -k value        (only through switch mappings)

Switch mappings translate a switch (``-e`` or ``--env``) into a configuration
key (``Environment``). Tokens without a prefix and without ``=`` are ignored,
as are single-dash switches with a separate value that have no mapping.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import TYPE_CHECKING

from generic_host.errors import CommandLineFormatError
from generic_host.interfaces.configuration import (
    ConfigurationProvider,
    ConfigurationSource,
)
from generic_host.utils.keys import CaseInsensitiveData, normalize

if TYPE_CHECKING:
    from generic_host.configuration.builder import ConfigurationBuilder


def validate_switch_mappings(switch_mappings: Mapping[str, str]) -> dict[str, str]:
    """Return the mappings keyed by their comparison form.

    Raises:
        ValueError: If a switch does not start with ``-`` or ``--``, or two
            switches only differ by case.
    """
    validated: dict[str, str] = {}
    for switch, key in switch_mappings.items():
        if not switch.startswith("-"):
            raise ValueError(
                f"The switch mapping '{switch}' is invalid; switches must start with '--' or '-'."
            )
        if normalize(switch) in validated:
            raise ValueError(f"Duplicate switch mapping '{switch}' (keys are case-insensitive).")
        validated[normalize(switch)] = key
    return validated


def parse_arguments(
    args: Sequence[str], switch_mappings: Mapping[str, str] | None = None
) -> CaseInsensitiveData:
    """Turn an argument sequence into configuration key/values.

    Later occurrences of a key override earlier ones.

    Raises:
        CommandLineFormatError: If a short switch is used with ``=`` but has no
            mapping, or a switch has no value after it.
        ValueError: If *switch_mappings* is invalid.
    """
    mappings = validate_switch_mappings(switch_mappings or {})
    data = CaseInsensitiveData()
    tokens: Iterator[str] = iter(args)
    for token in tokens:
        arg = token
        if arg.startswith("--"):
            key_start = 2
        elif arg.startswith("-"):
            key_start = 1
        elif arg.startswith("/"):
            # "/key" is an alias for "--key"
            arg = "--" + arg[1:]
            key_start = 2
        else:
            key_start = 0

        switch, separator, inline_value = arg.partition("=")
        if separator:
            if normalize(switch) in mappings:
                key = mappings[normalize(switch)]
            elif key_start == 1:
                raise CommandLineFormatError(
                    token, "short switches must be declared in the switch mappings"
                )
            else:
                key = switch[key_start:]
            value = inline_value
        else:
            if key_start == 0:
                continue
            if normalize(arg) in mappings:
                key = mappings[normalize(arg)]
            elif key_start == 1:
                continue
            else:
                key = arg[key_start:]
            try:
                value = next(tokens)
            except StopIteration:
                raise CommandLineFormatError(token, "no value follows the switch") from None

        if not key:
            raise CommandLineFormatError(token, "the key is empty")
        data[key] = value
    return data


class CommandLineConfigurationProvider(ConfigurationProvider):
    """Provider over a fixed argument sequence."""

    def __init__(
        self, args: Sequence[str], switch_mappings: Mapping[str, str] | None = None
    ) -> None:
        super().__init__()
        self.args = tuple(args)
        self.switch_mappings = dict(switch_mappings or {})

    def load(self) -> None:
        self.data = parse_arguments(self.args, self.switch_mappings)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(args={len(self.args)})"


class CommandLineConfigurationSource(ConfigurationSource):
    """Source for `CommandLineConfigurationProvider`."""

    def __init__(
        self, args: Sequence[str], switch_mappings: Mapping[str, str] | None = None
    ) -> None:
        self.args = tuple(args)
        self.switch_mappings = dict(switch_mappings or {})
        validate_switch_mappings(self.switch_mappings)

    def build(self, builder: ConfigurationBuilder) -> CommandLineConfigurationProvider:
        return CommandLineConfigurationProvider(self.args, self.switch_mappings)
