"""generic-host CLI entry point.

Defines the top-level ``generic-host`` command (via Click-Extra) and registers
its subcommands.

Currently available groups
- ``generic-host config`` — show the effective layered configuration.
- ``generic-host secrets`` — manage the per-user secrets store.

Notes
- The CLI version is sourced from `generic_host.__version__` and displayed
  automatically by Click-Extra (``--version``).

Examples
    $ generic-host config show --content-root ./myapp -- --Database:Host=db
    $ generic-host secrets --id myapp set Database:Password s3cr3t
"""

import logging

import click
import click_extra as clickx

from generic_host import __version__
from generic_host.logging import config_console_handler

from .config_cmds import config as config_group
from .helpers.log_level_parser import parse_log_level
from .secrets import secrets as secrets_group

logger = logging.getLogger(__name__)


HELP = """generic-host command-line interface.

    Developer tooling for applications bootstrapped with generic-host: inspect
    the configuration an application would see (settings files, user secrets,
    environment variables and command-line arguments, merged in precedence
    order) and manage the per-user secrets store that keeps credentials out
    of source control.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names and source locations).",
    default=False,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,  # repeatable option
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L generic_host.configuration=Debug) or via GENERIC_HOST_LOGGER_LEVELS "
        "(comma/space list)."
    ),
    envvar="GENERIC_HOST_LOGGER_LEVELS",
    show_envvar=True,
)
@clickx.pass_context
def cli(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
) -> None:
    """generic-host command-line interface."""

    # 0) compute effective verbosity
    base_level = logging.WARNING
    level = base_level - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) configure console handler
    use_color = ctx.color is not False  # None or True => allow color
    handler = config_console_handler(
        level=level, debug_mode=debug, color=use_color, project_prefix="generic_host"
    )

    # 2) configure root logger
    logging.basicConfig(
        level=logging.DEBUG,  # capture all levels; handler filters
        handlers=[handler],
        force=True,  # override any existing logging config
    )

    # 3) per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    logger.debug("generic-host %s, console=%s", __version__, logging.getLevelName(level))

    # 4) ensure logging is cleanly shut down on program exit
    ctx.call_on_close(logging.shutdown)


cli.add_command(config_group)
cli.add_command(secrets_group)
