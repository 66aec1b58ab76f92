"""generic-host secrets CLI — manage the per-user secrets store.

Each application identity owns one ``secrets.json`` outside the source tree.
Applications bootstrapped with ``create_default_builder()`` load it in the
Development environment, between the settings files and the environment
variables.

Behavior
- Values go to **stdout**; confirmations and notices go to **stderr**.
- ``clear`` prompts for confirmation unless ``--yes`` is given.

Requirements
- ``--id`` (or ``GENERIC_HOST_USER_SECRETS_ID``) names the application
  identity; it is the application's top-level module name unless the module
  declares ``__user_secrets_id__``.
"""

from __future__ import annotations

import json

import click
import click_extra as clickx

from generic_host.adapters.configuration import UserSecretsStore
from generic_host.errors import ConfigurationFileError

from .helpers import error, hyperlink, success, warn


def _store(ctx: click.Context) -> UserSecretsStore:
    return ctx.find_object(UserSecretsStore)


def _load(store: UserSecretsStore) -> dict[str, str]:
    try:
        return store.load()
    except ConfigurationFileError as e:
        error(f"The secrets file of '{store.secrets_id}' cannot be read.")
        raise click.ClickException(str(e)) from e


@click.group(cls=clickx.ExtraGroup)
@click.option(
    "--id",
    "secrets_id",
    required=True,
    envvar="GENERIC_HOST_USER_SECRETS_ID",
    show_envvar=True,
    help="User secrets id of the application.",
)
@click.pass_context
def secrets(ctx: click.Context, secrets_id: str) -> None:
    """User secrets management commands."""
    try:
        ctx.obj = UserSecretsStore(secrets_id)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--id") from e


@secrets.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_context
def set_secret(ctx: click.Context, key: str, value: str) -> None:
    """Store VALUE under KEY (e.g. Database:Password)."""
    store = _store(ctx)
    _load(store)
    store.set(key, value)
    success(f"Stored '{key}' for '{store.secrets_id}'.")


@secrets.command("get")
@click.argument("key")
@click.pass_context
def get_secret(ctx: click.Context, key: str) -> None:
    """Print the value stored under KEY."""
    store = _store(ctx)
    _load(store)
    if (value := store.get(key)) is None:
        raise click.ClickException(f"No secret '{key}' for '{store.secrets_id}'.")
    click.echo(value)


@secrets.command("list")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of KEY = VALUE lines.")
@click.pass_context
def list_secrets(ctx: click.Context, as_json: bool) -> None:
    """List every stored secret."""
    store = _store(ctx)
    values = _load(store)
    if as_json:
        click.echo(json.dumps(values, indent=2, sort_keys=True))
        return
    if not values:
        warn(f"No secrets stored for '{store.secrets_id}'.")
        return
    for key in sorted(values, key=str.casefold):
        click.echo(f"{key} = {values[key]}")
    click.echo(f"File: {hyperlink(store.path.as_uri(), str(store.path))}", err=True)


@secrets.command("remove")
@click.argument("key")
@click.pass_context
def remove_secret(ctx: click.Context, key: str) -> None:
    """Remove the secret stored under KEY."""
    store = _store(ctx)
    _load(store)
    if not store.remove(key):
        warn(f"No secret '{key}' for '{store.secrets_id}'.")
        return
    success(f"Removed '{key}' from '{store.secrets_id}'.")


@secrets.command("clear")
@click.option("--yes", is_flag=True, help="Do not prompt for confirmation.")
@click.pass_context
def clear_secrets(ctx: click.Context, yes: bool) -> None:
    """Remove every secret of the application."""
    store = _store(ctx)
    if not yes:
        click.confirm(f"Remove all secrets of '{store.secrets_id}'?", abort=True, err=True)
    store.clear()
    success(f"Cleared all secrets of '{store.secrets_id}'.")
