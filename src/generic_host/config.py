"""Configuration defaults for generic-host.

This module centralizes the constants the bootstrap helpers fall back to.
Every default lives on the frozen `HostDefaults` dataclass so callers can pass
an alternative set explicitly instead of patching module state.
"""

from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir, user_log_dir

PACKAGE_NAME = "generic-host"  # pragma: no mutate

KEY_DELIMITER = ":"  # pragma: no mutate


@dataclass(frozen=True)
class HostDefaults:
    """Defaults applied by the bootstrap helpers.

    Attributes:
        environment_variable: Environment variable consulted for the
            environment name when the caller supplies a blank name.
        environment_name: Environment name used when the variable is unset.
        development_environment: Environment name that enables user secrets
            and the debug logging sink.
        settings_file: Base name of the JSON settings file; the per-environment
            file is derived from it (``appsettings.<env>.json``).
        logging_section: Configuration section holding the logging rules.
    """

    environment_variable: str = "NETCORE_ENVIRONMENT"
    environment_name: str = "production"
    development_environment: str = "Development"
    settings_file: str = "appsettings.json"
    logging_section: str = "Logging"

    def environment_settings_file(self, environment_name: str) -> str:
        """Return the per-environment settings file name.

        Example:
            ``appsettings.json`` + ``Development`` -> ``appsettings.Development.json``
        """
        stem, dot, suffix = self.settings_file.rpartition(".")
        if not dot:
            return f"{self.settings_file}.{environment_name}"
        return f"{stem}.{environment_name}.{suffix}"


DEFAULTS = HostDefaults()


def user_secrets_root() -> Path:
    """Return the directory that holds one sub-directory per user-secrets id."""
    return Path(user_config_dir(PACKAGE_NAME, appauthor=False)) / "usersecrets"


def user_secrets_path(secrets_id: str, root: Path | None = None) -> Path:
    """Return the ``secrets.json`` path for *secrets_id*.

    Args:
        secrets_id: Identity of the application owning the secrets.
        root: Base directory; defaults to `user_secrets_root()`.

    Raises:
        ValueError: If *secrets_id* is blank or contains path separators.
    """
    if not secrets_id or not secrets_id.strip():
        raise ValueError("User secrets id must not be blank")
    if any(sep in secrets_id for sep in ("/", "\\")) or secrets_id in {".", ".."}:
        raise ValueError(f"Invalid user secrets id: {secrets_id!r}")
    return (root or user_secrets_root()) / secrets_id / "secrets.json"


def debug_log_path(application_name: str) -> Path:
    """Return the default file the debug logging sink writes to."""
    return Path(user_log_dir(application_name, appauthor=False)) / "debug.log"
