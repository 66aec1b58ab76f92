"""The environment a host runs in."""

from __future__ import annotations

from dataclasses import dataclass

from generic_host.config import DEFAULTS


@dataclass
class HostEnvironment:
    """Application name, environment name and content root of a host.

    The bootstrap helpers fill these in while the host is being built; after
    `HostBuilder.build()` returns they are treated as read-only.

    Attributes:
        application_name: Name of the entry application.
        environment_name: Name of the environment (e.g. ``Development``).
        content_root_path: Directory relative file paths are resolved against.
    """

    application_name: str
    environment_name: str
    content_root_path: str

    def is_environment(self, name: str) -> bool:
        """Compare the environment name with *name*, ignoring case."""
        return self.environment_name.casefold() == name.casefold()

    def is_development(self, development: str = DEFAULTS.development_environment) -> bool:
        """True when running in the development environment."""
        return self.is_environment(development)
