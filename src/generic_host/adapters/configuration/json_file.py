"""JSON file configuration provider.

The document must hold an object at the top level. Nested objects flatten to
``parent:child`` keys, arrays to ``parent:0``, ``parent:1``... Scalars are
stored as text: numbers keep the spelling used in the file, booleans become
``"true"``/``"false"`` and ``null`` becomes an empty string.

Live reload is pull-based: a provider created with ``reload_on_change=True``
remembers a fingerprint of the file (existence, size, modification time) and
reports `has_changed()` when it differs. The configuration root polls its
providers on every read and reloads the ones that changed.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from generic_host.errors import ConfigurationFileError
from generic_host.interfaces.configuration import (
    ConfigurationProvider,
    ConfigurationSource,
)
from generic_host.utils.keys import CaseInsensitiveData, combine

if TYPE_CHECKING:
    from generic_host.configuration.builder import ConfigurationBuilder

logger = logging.getLogger(__name__)

Fingerprint = tuple[bool, int, int]

MISSING: Fingerprint = (False, 0, 0)


def _fingerprint(path: Path) -> Fingerprint:
    try:
        stat = path.stat()
    except FileNotFoundError:
        return MISSING
    return True, stat.st_size, stat.st_mtime_ns


def _keep_text(text: str) -> str:
    return text


class _JsonObject(list):
    """Key/value pairs of a JSON object in document order, duplicates included."""


def parse_json_settings(text: str, path: str = "<string>") -> CaseInsensitiveData:
    """Parse a JSON settings document into flat key/values.

    Args:
        text: The document.
        path: Name used in error messages.

    Returns:
        CaseInsensitiveData: Flattened key/values.

    Raises:
        ConfigurationFileError: If the document is not valid JSON, its top
            level is not an object, or a key appears twice (case-insensitive).
    """
    if not text.strip():
        return CaseInsensitiveData()
    try:
        document = json.loads(
            text,
            parse_float=_keep_text,
            parse_int=_keep_text,
            parse_constant=_keep_text,
            object_pairs_hook=_JsonObject,
        )
    except json.JSONDecodeError as e:
        raise ConfigurationFileError(
            path, f"invalid JSON at line {e.lineno} column {e.colno}: {e.msg}"
        ) from e
    if not isinstance(document, _JsonObject):
        raise ConfigurationFileError(path, "top-level JSON element must be an object")

    data = CaseInsensitiveData()
    _visit(document, "", data, path)
    return data


def _visit(value: Any, key: str, data: CaseInsensitiveData, path: str) -> None:
    if isinstance(value, _JsonObject):
        if not value and key:
            # empty objects still produce a key so the section exists
            _add(data, key, "", path)
        for child, child_value in value:
            _visit(child_value, combine(key, child), data, path)
    elif isinstance(value, list):
        if not value:
            _add(data, key, "", path)
        for index, item in enumerate(value):
            _visit(item, combine(key, str(index)), data, path)
    elif value is None:
        _add(data, key, "", path)
    elif isinstance(value, bool):
        _add(data, key, "true" if value else "false", path)
    else:
        _add(data, key, str(value), path)


def _add(data: CaseInsensitiveData, key: str, value: str, path: str) -> None:
    if key in data:
        raise ConfigurationFileError(path, f"duplicate key '{key}'")
    data[key] = value


class JsonFileConfigurationProvider(ConfigurationProvider):
    """Provider that loads key/values from a JSON file."""

    def __init__(self, path: Path, optional: bool, reload_on_change: bool) -> None:
        super().__init__()
        self.path = path
        self.optional = optional
        self.reload_on_change = reload_on_change
        self._fingerprint: Fingerprint = MISSING
        self._rejected: Fingerprint | None = None

    def load(self) -> None:
        """Load the file, keeping the current data when it cannot be read.

        The fingerprint is recorded only once the file parsed, so a later fix
        of a broken file is picked up. A version that failed is remembered and
        not reported as changed again.
        """
        fingerprint = _fingerprint(self.path)
        try:
            self.data = self._read()
        except ConfigurationFileError:
            self._rejected = fingerprint
            raise
        self._fingerprint = fingerprint
        self._rejected = None

    def _read(self) -> CaseInsensitiveData:
        try:
            text = self.path.read_text(encoding="utf-8-sig")
        except FileNotFoundError:
            if not self.optional:
                raise ConfigurationFileError(
                    str(self.path), "the file was not found and is not optional"
                ) from None
            logger.debug("Optional configuration file %s not found", self.path)
            return CaseInsensitiveData()
        data = parse_json_settings(text, str(self.path))
        logger.debug("Loaded %d keys from %s", len(data), self.path)
        return data

    def has_changed(self) -> bool:
        if not self.reload_on_change:
            return False
        current = _fingerprint(self.path)
        return current != self._fingerprint and current != self._rejected

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(path={str(self.path)!r}, optional={self.optional}, "
            f"reload_on_change={self.reload_on_change})"
        )


class JsonFileConfigurationSource(ConfigurationSource):
    """Source for `JsonFileConfigurationProvider`.

    Relative paths are resolved against the builder's base path when the
    provider is built.
    """

    def __init__(
        self,
        path: str | Path,
        optional: bool = False,
        reload_on_change: bool = False,
    ) -> None:
        self.path = Path(path)
        self.optional = optional
        self.reload_on_change = reload_on_change

    def build(self, builder: ConfigurationBuilder) -> JsonFileConfigurationProvider:
        path = self.path
        if not path.is_absolute() and builder.base_path is not None:
            path = builder.base_path / path
        return JsonFileConfigurationProvider(
            path, optional=self.optional, reload_on_change=self.reload_on_change
        )
