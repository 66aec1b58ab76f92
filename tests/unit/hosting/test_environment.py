"""Unit tests for `HostEnvironment`."""

import pytest

from generic_host.hosting import HostEnvironment


def make(name: str) -> HostEnvironment:
    """Return an environment called *name*."""
    return HostEnvironment("app", name, "/srv/app")


@pytest.mark.parametrize("name", ["Development", "development", "DEVELOPMENT"])
def test_development_ignores_case(name):
    """The development check is case-insensitive."""
    assert make(name).is_development()


@pytest.mark.parametrize("name", ["production", "Staging", "Dev"])
def test_other_environments_are_not_development(name):
    """Only the exact development name counts."""
    assert not make(name).is_development()


def test_custom_development_name():
    """The development name can be overridden."""
    assert make("Local").is_development("local")


def test_is_environment():
    """`is_environment` compares names case-insensitively."""
    assert make("Staging").is_environment("staging")
    assert not make("Staging").is_environment("production")
