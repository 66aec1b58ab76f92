"""generic-host

Bootstrap helpers that preconfigure an application host with conventional
defaults: content root, environment name, layered configuration (JSON
settings files, user secrets, environment variables, command line) and
logging sinks (console, debug).

Typical usage::

    import sys
    from generic_host import create_default_builder

    with create_default_builder(sys.argv[1:]).build() as host:
        log = host.get_logger(__name__)
        log.info("Connecting to %s", host.configuration["Database:Host"])
"""

from generic_host.bootstrap import (
    configure_configuration,
    configure_logging,
    create_default_builder,
    resolve_environment,
)
from generic_host.config import DEFAULTS, HostDefaults
from generic_host.hosting import Host, HostBuilder, HostBuilderContext, HostEnvironment

__all__ = [
    "DEFAULTS",
    "Host",
    "HostBuilder",
    "HostBuilderContext",
    "HostDefaults",
    "HostEnvironment",
    "__version__",
    "configure_configuration",
    "configure_logging",
    "create_default_builder",
    "resolve_environment",
]
__version__ = "0.1.0"
