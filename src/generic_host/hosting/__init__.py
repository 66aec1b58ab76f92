"""Minimal application host: builder, environment and the built host.

Lifecycle management (starting and stopping hosted services) and dependency
injection are out of scope; the host carries configuration, environment and
logging only.
"""

from .builder import HostBuilder, HostBuilderContext
from .environment import HostEnvironment
from .host import Host

__all__ = ["Host", "HostBuilder", "HostBuilderContext", "HostEnvironment"]
