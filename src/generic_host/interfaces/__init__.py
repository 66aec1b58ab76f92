"""Abstract interfaces implemented by the configuration adapters."""

from .configuration import ConfigurationProvider, ConfigurationSource

__all__ = ["ConfigurationProvider", "ConfigurationSource"]
