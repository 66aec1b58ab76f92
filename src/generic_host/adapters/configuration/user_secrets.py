"""Per-user secrets store and its configuration provider.

Secrets live outside the source tree, in one ``secrets.json`` per application
identity under the user's configuration directory::

    <user_config_dir>/generic-host/usersecrets/<secrets id>/secrets.json

The file uses the same format as the JSON settings files. Keys written by
`UserSecretsStore` are flat ``a:b`` paths, which flatten to the same keys as
nested objects.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from types import ModuleType
from typing import TYPE_CHECKING

from generic_host.config import user_secrets_path
from generic_host.errors import ConfigurationFileError
from generic_host.interfaces.configuration import ConfigurationSource
from generic_host.utils.entry import entry_application_name

from .json_file import JsonFileConfigurationProvider, parse_json_settings

if TYPE_CHECKING:
    from generic_host.configuration.builder import ConfigurationBuilder

logger = logging.getLogger(__name__)

USER_SECRETS_ID_ATTRIBUTE = "__user_secrets_id__"  # pragma: no mutate


def resolve_user_secrets_id(module: ModuleType, default: str | None = None) -> str:
    """Return the secrets id declared by *module*.

    A module may declare ``__user_secrets_id__ = "..."``; otherwise the id is
    the top-level name of the module. A script running as ``__main__`` has no
    usable name, so *default* is used, or the name derived from the script
    (``app.py`` -> ``app``) when no default is given.
    """
    declared = getattr(module, USER_SECRETS_ID_ATTRIBUTE, None)
    if isinstance(declared, str) and declared.strip():
        return declared.strip()
    name = module.__name__.split(".", 1)[0]
    if name == "__main__":
        return default or entry_application_name(module)
    return name


class UserSecretsStore:
    """Read and edit the secrets file of one application identity.

    Args:
        secrets_id: Identity of the application owning the secrets.
        root: Base directory holding all secrets ids; defaults to the
            platform user configuration directory.
    """

    def __init__(self, secrets_id: str, root: Path | None = None) -> None:
        self.secrets_id = secrets_id
        self.path = user_secrets_path(secrets_id, root)

    # --- Core Operations ---

    def load(self) -> dict[str, str]:
        """Return all secrets as flat key/values (empty when the file is missing)."""
        try:
            text = self.path.read_text(encoding="utf-8-sig")
        except FileNotFoundError:
            return {}
        return dict(parse_json_settings(text, str(self.path)).items())

    def get(self, key: str) -> str | None:
        """Return the secret stored under *key* (case-insensitive), or None."""
        folded = key.casefold()
        for name, value in self.load().items():
            if name.casefold() == folded:
                return value
        return None

    def set(self, key: str, value: str) -> None:
        """Add or replace *key* (case-insensitive)."""
        secrets = self._without(self.load(), key)
        secrets[key] = value
        self._save(secrets)

    def remove(self, key: str) -> bool:
        """Remove *key*; return False when it was not present."""
        secrets = self.load()
        remaining = self._without(secrets, key)
        if len(remaining) == len(secrets):
            return False
        self._save(remaining)
        return True

    def clear(self) -> None:
        """Remove every secret (the file is kept, holding an empty object)."""
        self._save({})

    # --- Internal Helpers ---

    @staticmethod
    def _without(secrets: dict[str, str], key: str) -> dict[str, str]:
        folded = key.casefold()
        return {k: v for k, v in secrets.items() if k.casefold() != folded}

    def _save(self, secrets: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=self.path.parent, delete=False
        ) as tmp:
            json.dump(secrets, tmp, indent=2, sort_keys=True)
            tmp.write("\n")
        os.replace(tmp.name, self.path)
        logger.debug("Wrote %d secrets to %s", len(secrets), self.path)


class UserSecretsConfigurationSource(ConfigurationSource):
    """Source that loads the secrets file of *secrets_id*.

    Missing secrets are not an error when *optional* is True.
    """

    def __init__(
        self,
        secrets_id: str,
        optional: bool = True,
        reload_on_change: bool = False,
        root: Path | None = None,
    ) -> None:
        self.secrets_id = secrets_id
        self.optional = optional
        self.reload_on_change = reload_on_change
        self.root = root

    def build(self, builder: ConfigurationBuilder) -> JsonFileConfigurationProvider:
        try:
            path = user_secrets_path(self.secrets_id, self.root)
        except ValueError as e:
            raise ConfigurationFileError(str(self.secrets_id), str(e)) from e
        return JsonFileConfigurationProvider(
            path, optional=self.optional, reload_on_change=self.reload_on_change
        )
