"""generic-host config CLI — inspect the effective configuration.

Builds the same configuration layers an application bootstrapped with
``create_default_builder()`` would see, without installing any logging sinks,
and prints the merged result.

Behavior
- Key/value output goes to **stdout** (a Rich table, or JSON with ``--json``);
  notices go to **stderr**.
- Values under credential-looking keys are masked unless ``--reveal`` is given.

Failure modes
- Malformed JSON settings or command-line syntax → ``ClickException`` naming
  the offending file or argument.
"""

from __future__ import annotations

import json
from pathlib import Path

import click
import click_extra as clickx
from rich.console import Console
from rich.table import Table

from generic_host.bootstrap import configure_configuration, resolve_environment
from generic_host.errors import GenericHostError
from generic_host.hosting import Host, HostBuilder, HostBuilderContext

from .helpers import redact, warn


def build_host(
    content_root: Path,
    environment_variable: str,
    application: str | None,
    args: tuple[str, ...],
) -> Host:
    """Build a host with the default configuration layers and no logging sinks."""
    builder = HostBuilder().use_content_root(content_root)
    resolve_environment(builder, environment_variable)
    if application:

        def override_application(context: HostBuilderContext, _config) -> None:
            context.hosting_environment.application_name = application

        builder.configure_app_configuration(override_application)
    configure_configuration(builder, list(args))
    try:
        return builder.build()
    except GenericHostError as e:
        raise click.ClickException(str(e)) from e


@click.group(cls=clickx.ExtraGroup)
def config() -> None:
    """Configuration inspection commands."""


@config.command(context_settings={"ignore_unknown_options": True})
@click.option(
    "--content-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory holding appsettings.json.",
)
@click.option(
    "--environment-variable",
    "-e",
    "environment_variable",
    default="",
    help="Variable holding the environment name (default NETCORE_ENVIRONMENT).",
)
@click.option(
    "--application",
    "-a",
    default=None,
    help="Application (module) name used to locate user secrets in Development.",
)
@click.option(
    "--section",
    "-s",
    default=None,
    help="Only show keys below this section (e.g. Logging).",
)
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table.")
@click.option("--reveal", is_flag=True, help="Do not mask credential-looking values.")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def show(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    content_root: Path,
    environment_variable: str,
    application: str | None,
    section: str | None,
    as_json: bool,
    reveal: bool,
    args: tuple[str, ...],
) -> None:
    """Show the effective configuration.

    ARGS are passed through as the command-line configuration layer
    (e.g. ``--Logging:LogLevel:Default=Debug``).
    """
    with build_host(content_root, environment_variable, application, args) as host:
        env = host.environment
        if section:
            values = {
                f"{section}:{key}": value
                for key, value in host.configuration.get_section(section).as_dict().items()
            }
        else:
            values = host.configuration.as_dict()
    if not reveal:
        values = {key: redact(key, value) for key, value in values.items()}

    if as_json:
        click.echo(
            json.dumps(
                {
                    "application": env.application_name,
                    "environment": env.environment_name,
                    "contentRoot": env.content_root_path,
                    "configuration": values,
                },
                indent=2,
            )
        )
        return

    click.echo(
        f"Application: {env.application_name}\n"
        f"Environment: {env.environment_name}\n"
        f"Content root: {env.content_root_path}",
        err=True,
    )
    if not values:
        warn("No configuration values found.")
        return

    table = Table("Key", "Value", title="Effective configuration")
    for key, value in values.items():
        table.add_row(key, value)
    Console().print(table)
