"""In-memory configuration provider.

Used for host configuration (content root, environment defaults) and in tests.
Values are kept as given; nested mappings are flattened into ``:`` paths.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from generic_host.interfaces.configuration import (
    ConfigurationProvider,
    ConfigurationSource,
)
from generic_host.utils.keys import combine

if TYPE_CHECKING:
    from generic_host.configuration.builder import ConfigurationBuilder


def flatten(data: Mapping[str, object], prefix: str = "") -> dict[str, str]:
    """Flatten nested mappings into ``:``-delimited keys with string values.

    ``None`` becomes an empty string, booleans become ``"true"``/``"false"``.
    """
    flat: dict[str, str] = {}
    for key, value in data.items():
        path = combine(prefix, str(key))
        if isinstance(value, Mapping):
            flat.update(flatten(value, path))
        elif isinstance(value, (list, tuple)):
            flat.update(flatten(dict(enumerate(value)), path))  # type: ignore[arg-type]
        elif value is None:
            flat[path] = ""
        elif isinstance(value, bool):
            flat[path] = "true" if value else "false"
        else:
            flat[path] = str(value)
    return flat


class MemoryConfigurationProvider(ConfigurationProvider):
    """Provider over a caller-supplied mapping."""

    def __init__(self, initial: Mapping[str, object] | None = None) -> None:
        super().__init__()
        self.data.update(flatten(initial or {}))

    def load(self) -> None:
        """Nothing to load; values set in memory survive a reload."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(keys={len(self.data)})"


class MemoryConfigurationSource(ConfigurationSource):
    """Source for `MemoryConfigurationProvider`."""

    def __init__(self, initial: Mapping[str, object] | None = None) -> None:
        self.initial = dict(initial or {})

    def build(self, builder: ConfigurationBuilder) -> MemoryConfigurationProvider:
        return MemoryConfigurationProvider(self.initial)
