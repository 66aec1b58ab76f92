"""Configuration source and provider interface definitions."""

from __future__ import annotations

import abc
from collections.abc import Iterator
from typing import TYPE_CHECKING

from generic_host.utils.keys import CaseInsensitiveData, child_keys

if TYPE_CHECKING:
    from generic_host.configuration.builder import ConfigurationBuilder


class ConfigurationProvider(abc.ABC):
    """Abstract base class for a single configuration layer.

    A provider owns a flat mapping of ``:``-delimited keys to string values.
    Subclasses fill it in `load()`; lookups are case-insensitive.
    """

    def __init__(self) -> None:
        self.data = CaseInsensitiveData()

    # --- Core Operations ---

    @abc.abstractmethod
    def load(self) -> None:
        """(Re)load the provider's key/values from its backing store.

        Implementations replace `data` entirely so removed keys disappear on
        reload.
        """

    def try_get(self, key: str) -> tuple[bool, str | None]:
        """Look up *key*.

        Returns:
            tuple[bool, str | None]: ``(True, value)`` when the key exists,
            ``(False, None)`` otherwise.
        """
        if key in self.data:
            return True, self.data[key]
        return False, None

    def set(self, key: str, value: str) -> None:
        """Set *key* to *value* in memory (not written back to the store)."""
        self.data[key] = value

    # --- Convenience Methods ---

    def get_child_keys(self, parent: str | None) -> list[str]:
        """Return the immediate child segments below *parent*."""
        return child_keys(self.data, parent)

    def has_changed(self) -> bool:
        """Return True if the backing store changed since the last load."""
        return False

    def __iter__(self) -> Iterator[str]:
        return iter(self.data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ConfigurationSource(abc.ABC):
    """Abstract base class describing where a provider gets its data."""

    @abc.abstractmethod
    def build(self, builder: ConfigurationBuilder) -> ConfigurationProvider:
        """Create the provider for this source.

        Args:
            builder: The builder the source was added to; file sources resolve
                relative paths against its base path.

        Returns:
            ConfigurationProvider: A provider that has not been loaded yet.
        """
