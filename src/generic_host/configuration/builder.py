"""Builder that collects configuration sources in precedence order."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from generic_host.adapters.configuration import (
    CommandLineConfigurationSource,
    EnvironmentVariablesConfigurationSource,
    JsonFileConfigurationSource,
    MemoryConfigurationSource,
    UserSecretsConfigurationSource,
)
from generic_host.interfaces.configuration import ConfigurationSource

from .root import ConfigurationRoot

logger = logging.getLogger(__name__)


class ConfigurationBuilder:
    """Collects configuration sources; later sources take precedence.

    Every ``add_*`` method returns the builder so calls can be chained::

        config = (
            ConfigurationBuilder()
            .set_base_path(root)
            .add_json_file("appsettings.json", optional=True)
            .add_environment_variables()
            .build()
        )
    """

    def __init__(self) -> None:
        self.sources: list[ConfigurationSource] = []
        self.base_path: Path | None = None
        self.properties: dict[str, object] = {}

    def set_base_path(self, path: str | Path) -> ConfigurationBuilder:
        """Resolve relative file sources against *path*."""
        self.base_path = Path(path)
        return self

    def add(self, source: ConfigurationSource) -> ConfigurationBuilder:
        """Append *source* as the highest-precedence layer so far."""
        self.sources.append(source)
        logger.debug("Registered configuration source %s", type(source).__name__)
        return self

    def add_in_memory(self, data: Mapping[str, object]) -> ConfigurationBuilder:
        """Add key/values held in memory."""
        return self.add(MemoryConfigurationSource(data))

    def add_json_file(
        self,
        path: str | Path,
        optional: bool = False,
        reload_on_change: bool = False,
    ) -> ConfigurationBuilder:
        """Add a JSON settings file.

        Args:
            path: File path, relative to the base path unless absolute.
            optional: When True a missing file contributes nothing instead of
                failing the build.
            reload_on_change: When True edits to the file are picked up by the
                configuration root on its next read.
        """
        return self.add(
            JsonFileConfigurationSource(
                path, optional=optional, reload_on_change=reload_on_change
            )
        )

    def add_environment_variables(
        self, prefix: str = "", environ: Mapping[str, str] | None = None
    ) -> ConfigurationBuilder:
        """Add environment variables, optionally only those starting with *prefix*."""
        return self.add(EnvironmentVariablesConfigurationSource(prefix, environ))

    def add_command_line(
        self,
        args: Sequence[str],
        switch_mappings: Mapping[str, str] | None = None,
    ) -> ConfigurationBuilder:
        """Add command-line arguments.

        Raises:
            ValueError: If *switch_mappings* is invalid.
        """
        return self.add(CommandLineConfigurationSource(args, switch_mappings))

    def add_user_secrets(
        self,
        secrets_id: str,
        optional: bool = True,
        reload_on_change: bool = False,
        root: Path | None = None,
    ) -> ConfigurationBuilder:
        """Add the user-secrets store of *secrets_id*."""
        return self.add(
            UserSecretsConfigurationSource(
                secrets_id,
                optional=optional,
                reload_on_change=reload_on_change,
                root=root,
            )
        )

    def build(self) -> ConfigurationRoot:
        """Build and load a provider for every source.

        Raises:
            ConfigurationError: If a source cannot be loaded (e.g. malformed
                JSON, a required file is missing, bad command-line syntax).
        """
        return ConfigurationRoot([source.build(self) for source in self.sources])
