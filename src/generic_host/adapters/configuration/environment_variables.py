"""Environment variables configuration provider."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import TYPE_CHECKING

from generic_host.config import KEY_DELIMITER
from generic_host.interfaces.configuration import (
    ConfigurationProvider,
    ConfigurationSource,
)
from generic_host.utils.keys import CaseInsensitiveData, normalize

if TYPE_CHECKING:
    from generic_host.configuration.builder import ConfigurationBuilder

# ``Logging__LogLevel__Default`` -> ``Logging:LogLevel:Default``
NESTING_SEPARATOR = "__"  # pragma: no mutate


class EnvironmentVariablesConfigurationProvider(ConfigurationProvider):
    """Provider over the process environment.

    Every variable is loaded unless a *prefix* is given, in which case only
    variables starting with it (case-insensitive) are loaded and the prefix is
    removed from the key. A double underscore in a name stands for the key
    delimiter so nested keys can be expressed on shells that reject ``:``.

    Args:
        prefix: Optional name prefix filter.
        environ: Mapping to read; defaults to `os.environ` at load time.
    """

    def __init__(self, prefix: str = "", environ: Mapping[str, str] | None = None) -> None:
        super().__init__()
        self.prefix = prefix.replace(NESTING_SEPARATOR, KEY_DELIMITER)
        self._environ = environ

    def load(self) -> None:
        environ = os.environ if self._environ is None else self._environ
        prefix = normalize(self.prefix)
        data = CaseInsensitiveData()
        for name, value in environ.items():
            key = name.replace(NESTING_SEPARATOR, KEY_DELIMITER)
            if not normalize(key).startswith(prefix):
                continue
            if stripped := key[len(self.prefix) :]:
                data[stripped] = value
        self.data = data

    def __repr__(self) -> str:
        return f"{type(self).__name__}(prefix={self.prefix!r})"


class EnvironmentVariablesConfigurationSource(ConfigurationSource):
    """Source for `EnvironmentVariablesConfigurationProvider`."""

    def __init__(self, prefix: str = "", environ: Mapping[str, str] | None = None) -> None:
        self.prefix = prefix
        self.environ = environ

    def build(
        self, builder: ConfigurationBuilder
    ) -> EnvironmentVariablesConfigurationProvider:
        return EnvironmentVariablesConfigurationProvider(self.prefix, self.environ)
