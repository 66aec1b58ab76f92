"""Fixtures for configuration provider contract tests."""

from __future__ import annotations

import itertools
import json
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path

import pytest

from generic_host.adapters.configuration import (
    CommandLineConfigurationProvider,
    EnvironmentVariablesConfigurationProvider,
    JsonFileConfigurationProvider,
    MemoryConfigurationProvider,
    UserSecretsStore,
)
from generic_host.interfaces.configuration import ConfigurationProvider

ProviderFactory = Callable[[Mapping[str, str]], ConfigurationProvider]


@pytest.fixture(params=["memory", "json_file", "environment", "command_line", "user_secrets"])
def provider_factory(
    request: pytest.FixtureRequest, tmp_path: Path
) -> Iterable[ProviderFactory]:
    """Return a factory building a loaded provider over flat key/values.

    Supported params:
      - `"memory"` → MemoryConfigurationProvider
      - `"json_file"` → JsonFileConfigurationProvider over a written file
      - `"environment"` → EnvironmentVariablesConfigurationProvider over a
        mapping, keys spelled with ``__``
      - `"command_line"` → CommandLineConfigurationProvider over ``--key=value``
      - `"user_secrets"` → the provider of a UserSecretsStore

    Each call writes fresh backing data, so a factory may be called more than
    once per test.
    """
    counter = itertools.count()

    def memory(values: Mapping[str, str]) -> ConfigurationProvider:
        return MemoryConfigurationProvider(values)

    def json_file(values: Mapping[str, str]) -> ConfigurationProvider:
        path = tmp_path / f"appsettings.{next(counter)}.json"
        path.write_text(json.dumps(dict(values)), encoding="utf-8")
        return JsonFileConfigurationProvider(path, optional=False, reload_on_change=False)

    def environment(values: Mapping[str, str]) -> ConfigurationProvider:
        environ = {key.replace(":", "__"): value for key, value in values.items()}
        return EnvironmentVariablesConfigurationProvider(environ=environ)

    def command_line(values: Mapping[str, str]) -> ConfigurationProvider:
        return CommandLineConfigurationProvider([f"--{k}={v}" for k, v in values.items()])

    def user_secrets(values: Mapping[str, str]) -> ConfigurationProvider:
        store = UserSecretsStore(f"contract-{next(counter)}", root=tmp_path / "usersecrets")
        for key, value in values.items():
            store.set(key, value)
        return JsonFileConfigurationProvider(store.path, optional=True, reload_on_change=False)

    factories: dict[str, ProviderFactory] = {
        "memory": memory,
        "json_file": json_file,
        "environment": environment,
        "command_line": command_line,
        "user_secrets": user_secrets,
    }
    if request.param not in factories:
        raise ValueError(f"unknown provider type: {request.param}")

    def build(values: Mapping[str, str]) -> ConfigurationProvider:
        provider = factories[request.param](values)
        provider.load()
        return provider

    yield build
