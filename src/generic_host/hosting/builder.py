"""Host builder: collects setup callbacks and runs them once in `build()`.

Build order:

1. host configuration callbacks (content root, environment overrides),
2. creation of the `HostEnvironment` from the host configuration,
3. app configuration callbacks, in registration order, against one
   `ConfigurationBuilder` whose base path is the content root,
4. logging callbacks, which can read the finished app configuration,
5. installation of the logging sinks and creation of the `Host`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from generic_host.configuration import ConfigurationBuilder, ConfigurationRoot
from generic_host.errors import HostAlreadyBuiltError
from generic_host.logging import LoggerFactory, LoggingBuilder, log_startup
from generic_host.utils.entry import entry_application_name

from .environment import HostEnvironment
from .host import Host

logger = logging.getLogger(__name__)

APPLICATION_KEY = "applicationName"  # pragma: no mutate
ENVIRONMENT_KEY = "environment"  # pragma: no mutate
CONTENT_ROOT_KEY = "contentRoot"  # pragma: no mutate

# used until something in the host configuration says otherwise
HOST_DEFAULT_ENVIRONMENT = "Production"  # pragma: no mutate


@dataclass
class HostBuilderContext:
    """State shared with the builder callbacks.

    Attributes:
        hosting_environment: The environment being built; app configuration
            callbacks may change it, later callbacks see the change.
        configuration: The host configuration while app configuration
            callbacks run, then the app configuration.
        properties: Values shared between callbacks.
    """

    hosting_environment: HostEnvironment
    configuration: ConfigurationRoot
    properties: dict[str, Any] = field(default_factory=dict)


HostConfigurationCallback = Callable[[ConfigurationBuilder], None]
AppConfigurationCallback = Callable[[HostBuilderContext, ConfigurationBuilder], None]
LoggingCallback = Callable[[HostBuilderContext, LoggingBuilder], None]


class HostBuilder:
    """Builder for a `Host`.

    The builder is owned by whoever created it and is not thread-safe. Each
    ``configure_*`` method appends a callback and returns the builder; nothing
    runs until `build()`, which may only be called once.
    """

    def __init__(self) -> None:
        self.properties: dict[str, Any] = {}
        self._host_configuration_callbacks: list[HostConfigurationCallback] = []
        self._app_configuration_callbacks: list[AppConfigurationCallback] = []
        self._logging_callbacks: list[LoggingCallback] = []
        self._built = False

    # --- Registration ---

    def configure_host_configuration(
        self, callback: HostConfigurationCallback
    ) -> HostBuilder:
        """Add a callback that contributes to the host configuration."""
        self._host_configuration_callbacks.append(callback)
        return self

    def configure_app_configuration(self, callback: AppConfigurationCallback) -> HostBuilder:
        """Add a callback that contributes to the app configuration."""
        self._app_configuration_callbacks.append(callback)
        return self

    def configure_logging(self, callback: LoggingCallback) -> HostBuilder:
        """Add a callback that registers logging sinks and rules."""
        self._logging_callbacks.append(callback)
        return self

    def use_content_root(self, path: str | Path) -> HostBuilder:
        """Set the directory relative configuration files are resolved against."""
        return self.configure_host_configuration(
            lambda config: config.add_in_memory({CONTENT_ROOT_KEY: str(path)})
        )

    def use_environment(self, environment_name: str) -> HostBuilder:
        """Set the environment name in the host configuration."""
        return self.configure_host_configuration(
            lambda config: config.add_in_memory({ENVIRONMENT_KEY: environment_name})
        )

    # --- Build ---

    def build(self) -> Host:
        """Run every callback and return the host.

        Raises:
            HostAlreadyBuiltError: If the builder was already built.
            ConfigurationError: If a configuration source fails to load.
            LoggingConfigurationError: If the logging rules are invalid.
        """
        if self._built:
            raise HostAlreadyBuiltError()
        self._built = True

        host_configuration = self._build_host_configuration()
        environment = self._create_environment(host_configuration)
        context = HostBuilderContext(environment, host_configuration, self.properties)
        context.configuration = self._build_app_configuration(context, host_configuration)
        factory = self._build_logging(context)
        factory.install()

        log_startup(logger, environment=environment, factory=factory)
        return Host(
            configuration=context.configuration,
            environment=environment,
            logger_factory=factory,
            properties=self.properties,
        )

    # --- Internal Helpers ---

    def _build_host_configuration(self) -> ConfigurationRoot:
        builder = ConfigurationBuilder()
        for callback in self._host_configuration_callbacks:
            callback(builder)
        return builder.build()

    @staticmethod
    def _create_environment(host_configuration: ConfigurationRoot) -> HostEnvironment:
        content_root = Path(host_configuration.get(CONTENT_ROOT_KEY) or Path.cwd())
        return HostEnvironment(
            application_name=host_configuration.get(APPLICATION_KEY)
            or entry_application_name(),
            environment_name=host_configuration.get(ENVIRONMENT_KEY)
            or HOST_DEFAULT_ENVIRONMENT,
            content_root_path=str(content_root.resolve()),
        )

    def _build_app_configuration(
        self, context: HostBuilderContext, host_configuration: ConfigurationRoot
    ) -> ConfigurationRoot:
        builder = ConfigurationBuilder().set_base_path(
            context.hosting_environment.content_root_path
        )
        builder.properties.update(self.properties)
        # host settings stay visible as the lowest layer
        builder.add_in_memory(host_configuration.as_dict())
        for callback in self._app_configuration_callbacks:
            callback(context, builder)
        return builder.build()

    def _build_logging(self, context: HostBuilderContext) -> LoggerFactory:
        builder = LoggingBuilder(context.hosting_environment.application_name)
        for callback in self._logging_callbacks:
            callback(context, builder)
        return builder.build()
