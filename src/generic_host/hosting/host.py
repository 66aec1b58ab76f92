"""The built host."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import TracebackType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from generic_host.configuration import ConfigurationRoot
    from generic_host.logging import LoggerFactory

    from .environment import HostEnvironment


@dataclass
class Host:
    """Result of `HostBuilder.build()`.

    Attributes:
        configuration: The merged application configuration.
        environment: The resolved host environment.
        logger_factory: The installed logging sinks and rules.
        properties: Values shared between builder callbacks.
    """

    configuration: ConfigurationRoot
    environment: HostEnvironment
    logger_factory: LoggerFactory
    properties: dict[str, Any] = field(default_factory=dict)

    def get_logger(self, name: str) -> logging.Logger:
        """Return the logger called *name*."""
        return self.logger_factory.get_logger(name)

    def close(self) -> None:
        """Detach the host's logging sinks from the root logger."""
        self.logger_factory.close()

    def __enter__(self) -> Host:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
