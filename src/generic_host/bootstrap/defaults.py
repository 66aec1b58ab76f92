"""Preconfigure a `HostBuilder` with conventional defaults."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence

from generic_host.adapters.configuration.user_secrets import resolve_user_secrets_id
from generic_host.config import DEFAULTS, HostDefaults
from generic_host.configuration import ConfigurationBuilder
from generic_host.hosting import HostBuilder, HostBuilderContext
from generic_host.logging import LoggingBuilder
from generic_host.utils.entry import (
    entry_application_name,
    entry_directory,
    find_application_module,
)

logger = logging.getLogger(__name__)


def resolve_environment_name(
    environment_variable: str | None = None,
    defaults: HostDefaults = DEFAULTS,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Return the environment name read from the environment.

    Args:
        environment_variable: Variable to read; a blank name falls back to
            ``defaults.environment_variable``.
        defaults: Defaults to fall back to.
        environ: Mapping to read instead of `os.environ`.

    Returns:
        str: The variable's value as set, or ``defaults.environment_name``.

    The default applies when the variable is absent, and also when it is set
    to an empty or whitespace-only value; such a value is treated as unset
    rather than used as an environment name.
    """
    if not environment_variable or not environment_variable.strip():
        environment_variable = defaults.environment_variable
    environ = os.environ if environ is None else environ
    value = environ.get(environment_variable)
    if value is None or not value.strip():
        return defaults.environment_name
    return value


def resolve_environment(
    builder: HostBuilder,
    environment_variable: str | None = None,
    defaults: HostDefaults = DEFAULTS,
) -> None:
    """Set the application and environment names while the host builds.

    The application name comes from the entry application's module; the
    environment name from *environment_variable* (``NETCORE_ENVIRONMENT`` when
    blank), or ``"production"`` when the variable is unset or blank.

    Registered as an app configuration callback, so it runs before any
    callback registered after it.
    """

    def apply(context: HostBuilderContext, _config: ConfigurationBuilder) -> None:
        env = context.hosting_environment
        env.application_name = entry_application_name()
        env.environment_name = resolve_environment_name(environment_variable, defaults)
        logger.debug(
            "Resolved application %r in environment %r",
            env.application_name,
            env.environment_name,
        )

    builder.configure_app_configuration(apply)


def configure_configuration(
    builder: HostBuilder,
    args: Sequence[str] | None = None,
    defaults: HostDefaults = DEFAULTS,
) -> None:
    """Register the default configuration layers, lowest precedence first.

    1. ``appsettings.json`` (optional, reloads on change)
    2. ``appsettings.<environment>.json`` (optional, reloads on change)
    3. user secrets, in the development environment only, when the entry
       application's module can be resolved
    4. environment variables
    5. *args*, unless it is None
    """

    def apply(context: HostBuilderContext, config: ConfigurationBuilder) -> None:
        env = context.hosting_environment

        config.add_json_file(defaults.settings_file, optional=True, reload_on_change=True)
        config.add_json_file(
            defaults.environment_settings_file(env.environment_name),
            optional=True,
            reload_on_change=True,
        )

        if env.is_development(defaults.development_environment):
            module = find_application_module(env.application_name)
            if module is not None:
                config.add_user_secrets(
                    resolve_user_secrets_id(module, default=env.application_name),
                    optional=True,
                )
            else:
                logger.debug(
                    "Skipping user secrets: application %r could not be resolved",
                    env.application_name,
                )

        config.add_environment_variables()

        if args is not None:
            config.add_command_line(args)

    builder.configure_app_configuration(apply)


def configure_logging(builder: HostBuilder, defaults: HostDefaults = DEFAULTS) -> None:
    """Register the console sink always and the debug sink in development.

    Levels and filters come from the ``Logging`` configuration section.
    """

    def apply(context: HostBuilderContext, logging_builder: LoggingBuilder) -> None:
        logging_builder.add_configuration(
            context.configuration.get_section(defaults.logging_section)
        )
        logging_builder.add_console()
        if context.hosting_environment.is_development(defaults.development_environment):
            logging_builder.add_debug()

    builder.configure_logging(apply)


def create_default_builder(
    args: Sequence[str] | None = None,
    environment_variable: str | None = None,
    defaults: HostDefaults = DEFAULTS,
) -> HostBuilder:
    """Return a new `HostBuilder` with the default setup applied.

    The content root is the directory containing the entry script; then
    `resolve_environment`, `configure_configuration` and `configure_logging`
    are applied in that order. The builder is returned unbuilt so callers can
    extend it before calling `build()`.

    Args:
        args: Command-line arguments for the highest-precedence layer; None
            skips that layer.
        environment_variable: Variable holding the environment name; blank
            means ``NETCORE_ENVIRONMENT``.
        defaults: Defaults to fall back to.
    """
    builder = HostBuilder()
    builder.use_content_root(entry_directory())
    resolve_environment(builder, environment_variable, defaults)
    configure_configuration(builder, args, defaults)
    configure_logging(builder, defaults)
    return builder
