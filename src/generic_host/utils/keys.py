"""Helpers for ``:``-delimited configuration key paths.

Keys such as ``Logging:LogLevel:Default`` address nested values. Comparison is
case-insensitive everywhere, but the casing a provider loaded is preserved for
display.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping

from generic_host.config import KEY_DELIMITER


def combine(*segments: str) -> str:
    """Join path segments with the key delimiter, skipping empty segments."""
    return KEY_DELIMITER.join(segment for segment in segments if segment)


def section_key(path: str) -> str:
    """Return the last segment of *path* (``a:b:c`` -> ``c``)."""
    return path.rpartition(KEY_DELIMITER)[2]


def parent_path(path: str) -> str:
    """Return *path* without its last segment (``a:b:c`` -> ``a:b``)."""
    return path.rpartition(KEY_DELIMITER)[0]


def normalize(key: str) -> str:
    """Return the comparison form of *key*."""
    return key.casefold()


def child_keys(keys: Iterable[str], parent: str | None) -> list[str]:
    """Return the immediate child segments of *parent* found in *keys*.

    Args:
        keys: Full key paths.
        parent: Path whose children are wanted, ``None`` for the top level.

    Returns:
        list[str]: One entry per distinct child (case-insensitive), in first
        seen order.
    """
    prefix = "" if not parent else parent + KEY_DELIMITER
    seen: dict[str, str] = {}
    for key in keys:
        if normalize(key[: len(prefix)]) != normalize(prefix):
            continue
        child = key[len(prefix) :].split(KEY_DELIMITER, 1)[0]
        seen.setdefault(normalize(child), child)
    return list(seen.values())


class CaseInsensitiveData(MutableMapping[str, str]):
    """String mapping with case-insensitive keys that remembers original casing."""

    def __init__(self, data: Mapping[str, str] | None = None) -> None:
        self._store: dict[str, tuple[str, str]] = {}
        if data:
            self.update(data)

    def __getitem__(self, key: str) -> str:
        return self._store[normalize(key)][1]

    def __setitem__(self, key: str, value: str) -> None:
        self._store[normalize(key)] = (key, value)

    def __delitem__(self, key: str) -> None:
        del self._store[normalize(key)]

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._store.values())

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and normalize(key) in self._store

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"
