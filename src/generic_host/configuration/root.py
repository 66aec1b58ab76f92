"""Layered configuration: the merged view over a list of providers.

Providers are consulted from last to first, so a provider added later
overrides keys of the ones added before it. Missing layers simply do not
contribute; they never change the relative order of the remaining ones.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from typing import overload

from generic_host.errors import GenericHostError
from generic_host.interfaces.configuration import ConfigurationProvider
from generic_host.utils.keys import combine, normalize, section_key

logger = logging.getLogger(__name__)

ChangeCallback = Callable[["ConfigurationRoot"], None]

_MISSING = object()


class ConfigurationRoot:
    """The merged configuration of an ordered list of providers.

    Reads go through `poll()`, so providers created with ``reload_on_change``
    pick up edits to their file on the next read.
    """

    def __init__(self, providers: Sequence[ConfigurationProvider]) -> None:
        self._providers = list(providers)
        self._callbacks: list[ChangeCallback] = []
        for provider in self._providers:
            provider.load()

    @property
    def providers(self) -> tuple[ConfigurationProvider, ...]:
        """The providers in precedence order (lowest first)."""
        return tuple(self._providers)

    # --- Core Operations ---

    @overload
    def get(self, key: str) -> str | None: ...

    @overload
    def get(self, key: str, default: str) -> str: ...

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the effective value of *key*, or *default*."""
        self.poll()
        return self._lookup(key, default)

    def __getitem__(self, key: str) -> str:
        value = self.get(key, _MISSING)  # type: ignore[arg-type]
        if value is _MISSING:
            raise KeyError(key)
        return value  # type: ignore[return-value]

    def __setitem__(self, key: str, value: str) -> None:
        """Set *key* in every provider, so it wins regardless of layer."""
        if not self._providers:
            raise LookupError("A configuration without providers cannot hold values.")
        for provider in self._providers:
            provider.set(key, value)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key, _MISSING) is not _MISSING  # type: ignore[arg-type]

    def get_section(self, key: str) -> ConfigurationSection:
        """Return the section at *key*; it exists even if nothing is configured below it."""
        return ConfigurationSection(self, key)

    def get_children(self) -> list[ConfigurationSection]:
        """Return the top-level sections."""
        return self._children(None)

    def as_dict(self) -> dict[str, str]:
        """Return every effective key/value, flattened and sorted by key."""
        self.poll()
        return self._flatten(None)

    # --- Reload ---

    def reload(self) -> None:
        """Reload every provider and notify change callbacks.

        A provider that fails to reload keeps its previous data; the failure is
        logged as a warning.
        """
        for provider in self._providers:
            self._reload_provider(provider)
        self._notify()

    def poll(self) -> bool:
        """Reload the providers whose backing store changed.

        Returns:
            bool: True if at least one provider was reloaded successfully.
        """
        changed = [provider for provider in self._providers if provider.has_changed()]
        reloaded = False
        for provider in changed:
            logger.debug("Reloading changed configuration provider %r", provider)
            reloaded = self._reload_provider(provider) or reloaded
        if reloaded:
            self._notify()
        return reloaded

    def on_change(self, callback: ChangeCallback) -> Callable[[], None]:
        """Register *callback* to run after a reload.

        Returns:
            A function that unregisters the callback.
        """
        self._callbacks.append(callback)

        def unregister() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return unregister

    # --- Internal Helpers ---

    def _lookup(self, key: str, default: object = None) -> object:
        for provider in reversed(self._providers):
            found, value = provider.try_get(key)
            if found:
                return value
        return default

    def _children(self, path: str | None) -> list[ConfigurationSection]:
        self.poll()
        seen: dict[str, str] = {}
        for provider in self._providers:
            for child in provider.get_child_keys(path):
                seen.setdefault(normalize(child), child)
        keys = sorted(seen.values(), key=_child_sort_key)
        return [ConfigurationSection(self, combine(path or "", child)) for child in keys]

    def _flatten(self, path: str | None) -> dict[str, str]:
        prefix = normalize(path) + ":" if path else ""
        effective: dict[str, tuple[str, str]] = {}
        for provider in self._providers:
            for key in provider:
                folded = normalize(key)
                if folded.startswith(prefix):
                    effective[folded] = (key, provider.data[key])
        return dict(sorted(effective.values(), key=lambda item: normalize(item[0])))

    def _reload_provider(self, provider: ConfigurationProvider) -> bool:
        try:
            provider.load()
        except GenericHostError as e:
            logger.warning("Keeping previous configuration of %r: %s", provider, e)
            return False
        return True

    def _notify(self) -> None:
        for callback in list(self._callbacks):
            try:
                callback(self)
            except GenericHostError as e:
                logger.warning("Configuration change callback %r failed: %s", callback, e)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(providers={self._providers!r})"


def _child_sort_key(child: str) -> tuple[int, int, str]:
    # numeric segments (array indices) sort numerically and before names
    if child.isdigit():
        return 0, int(child), ""
    return 1, 0, normalize(child)


class ConfigurationSection:
    """A view of the configuration below *path*.

    Attributes:
        root: The configuration the section belongs to.
        path: Full ``:``-delimited path of the section.
    """

    def __init__(self, root: ConfigurationRoot, path: str) -> None:
        self.root = root
        self.path = path

    @property
    def key(self) -> str:
        """Last segment of the path."""
        return section_key(self.path)

    @property
    def value(self) -> str | None:
        """Value stored at the section's own path, if any."""
        return self.root.get(self.path)

    def exists(self) -> bool:
        """True if the section has a value or any children."""
        return self.value is not None or bool(self.get_children())

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value of *key* relative to this section."""
        return self.root.get(combine(self.path, key), default)

    def __getitem__(self, key: str) -> str:
        return self.root[combine(self.path, key)]

    def __setitem__(self, key: str, value: str) -> None:
        self.root[combine(self.path, key)] = value

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and combine(self.path, key) in self.root

    def get_section(self, key: str) -> ConfigurationSection:
        """Return the sub-section at *key*."""
        return ConfigurationSection(self.root, combine(self.path, key))

    def get_children(self) -> list[ConfigurationSection]:
        """Return the immediate sub-sections."""
        return self.root._children(self.path)  # pylint: disable=protected-access

    def as_dict(self) -> dict[str, str]:
        """Return the effective key/values below the section, keys relative to it."""
        self.root.poll()
        flat = self.root._flatten(self.path)  # pylint: disable=protected-access
        offset = len(self.path) + 1
        return {key[offset:]: value for key, value in flat.items()}

    def __iter__(self) -> Iterator[ConfigurationSection]:
        return iter(self.get_children())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.path!r}, value={self.value!r})"
