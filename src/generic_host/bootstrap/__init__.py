"""Bootstrap (composition root) for generic-host.

Preconfigures a `HostBuilder` with conventional defaults: content root,
environment name, layered configuration and logging sinks.

Import rules:
- Applications import *this* package (or `generic_host` itself).
- This package may import: `generic_host.hosting`, `generic_host.configuration`,
  `generic_host.adapters`, `generic_host.logging` and `generic_host.config`.
- Inner layers must not import `generic_host.bootstrap`.

Public surface:
- `create_default_builder()` plus the three steps it applies, each usable on
  its own builder.
"""

from .defaults import (
    configure_configuration,
    configure_logging,
    create_default_builder,
    resolve_environment,
    resolve_environment_name,
)

__all__ = [
    "configure_configuration",
    "configure_logging",
    "create_default_builder",
    "resolve_environment",
    "resolve_environment_name",
]
