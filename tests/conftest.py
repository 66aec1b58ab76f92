"""Global pytest fixtures for generic-host."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    """Undo changes a built host makes to the root logger."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture(autouse=True)
def secrets_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect the user-secrets store into the test's temporary directory."""
    root = tmp_path / "usersecrets"
    monkeypatch.setattr("generic_host.config.user_secrets_root", lambda: root)
    return root


@pytest.fixture(autouse=True)
def debug_log(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect the debug logging sink into the test's temporary directory."""
    path = tmp_path / "logs" / "debug.log"
    monkeypatch.setattr("generic_host.logging.debug_log_path", lambda _name: path)
    return path


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without an environment name in the environment."""
    monkeypatch.delenv("NETCORE_ENVIRONMENT", raising=False)
    monkeypatch.delenv("GENERIC_HOST_USER_SECRETS_ID", raising=False)
    monkeypatch.delenv("GENERIC_HOST_LOGGER_LEVELS", raising=False)
