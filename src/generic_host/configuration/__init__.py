"""Layered key/value configuration.

`ConfigurationBuilder` collects sources, `ConfigurationRoot` is the merged
view and `ConfigurationSection` a view below a key path.
"""

from .builder import ConfigurationBuilder
from .root import ConfigurationRoot, ConfigurationSection

__all__ = ["ConfigurationBuilder", "ConfigurationRoot", "ConfigurationSection"]
