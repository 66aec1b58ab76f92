"""Logging helpers used by the host builder.

This module provides the logging sinks a host registers (a Rich console sink
and a plain-text debug file sink), the level-filter rules read from the
``Logging`` configuration section, and the `LoggingBuilder` /
`LoggerFactory` pair that installs the sinks on the root logger.

The ``Logging`` section looks like::

    {
      "Logging": {
        "LogLevel": {"Default": "Information", "urllib3": "Warning"},
        "Console": {"LogLevel": {"Default": "Warning"}},
        "Debug": {"LogLevel": {"Default": "Trace"}}
      }
    }

``LogLevel`` directly under ``Logging`` applies to every sink; a ``LogLevel``
below a sink name (``Console``, ``Debug``) applies to that sink only.
``Default`` stands for all categories. A category is a logger name and covers
its dotted descendants.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from generic_host.config import debug_log_path
from generic_host.errors import LoggingConfigurationError
from generic_host.utils.keys import normalize

if TYPE_CHECKING:
    from logging import Logger

    from generic_host.configuration import ConfigurationRoot, ConfigurationSection
    from generic_host.hosting.environment import HostEnvironment

# pylint: disable=too-few-public-methods

TRACE = 5
NONE = logging.CRITICAL + 10  # disables a category

DEFAULT_CATEGORY = "Default"  # pragma: no mutate
LOG_LEVEL_KEY = "LogLevel"  # pragma: no mutate

CONSOLE_PROVIDER = "Console"  # pragma: no mutate
DEBUG_PROVIDER = "Debug"  # pragma: no mutate

DEFAULT_MINIMUM_LEVEL = logging.INFO

logging.addLevelName(TRACE, "TRACE")

LEVEL_NAMES: dict[str, int] = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "information": logging.INFO,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
    "fatal": logging.CRITICAL,
    "none": NONE,
}


def parse_level(value: str, category: str = DEFAULT_CATEGORY) -> int:
    """Convert a level name into a numeric logging level.

    Accepts the names used in settings files (``Trace``, ``Information``,
    ``None``...) as well as Python's names (``INFO``, ``WARNING``...),
    case-insensitively.

    Args:
        value: The level name.
        category: Category the level is configured for; used in the error.

    Returns:
        int: The numeric level.

    Raises:
        LoggingConfigurationError: If *value* is not a known level name.
    """
    if (level := LEVEL_NAMES.get(value.strip().lower())) is None:
        raise LoggingConfigurationError(category, value)
    return level


# --- Filter rules ---


@dataclass(frozen=True)
class FilterRule:
    """Minimum level for a category, optionally restricted to one sink.

    Attributes:
        provider: Sink name the rule applies to, or None for every sink.
        category: Logger name prefix, or None for every category.
        level: Minimum level a record must have to pass.
    """

    provider: str | None
    category: str | None
    level: int


def load_rules(section: ConfigurationSection) -> list[FilterRule]:
    """Read the filter rules from a ``Logging`` section.

    Raises:
        LoggingConfigurationError: If a configured level is not recognised.
    """
    rules: list[FilterRule] = []
    for child in section.get_children():
        if normalize(child.key) == normalize(LOG_LEVEL_KEY):
            rules.extend(_load_level_section(child, provider=None))
        else:
            rules.extend(
                _load_level_section(child.get_section(LOG_LEVEL_KEY), provider=child.key)
            )
    return rules


def _load_level_section(
    section: ConfigurationSection, provider: str | None
) -> list[FilterRule]:
    rules = []
    for entry in section.get_children():
        if not entry.value:
            continue
        category = None if normalize(entry.key) == normalize(DEFAULT_CATEGORY) else entry.key
        rules.append(FilterRule(provider, category, parse_level(entry.value, entry.key)))
    return rules


def _category_matches(rule_category: str, category: str) -> bool:
    rule_category, category = normalize(rule_category), normalize(category)
    return category == rule_category or category.startswith(rule_category + ".")


def select_rule(
    rules: Iterable[FilterRule], provider: str, category: str
) -> FilterRule | None:
    """Pick the rule that governs *category* on the *provider* sink.

    Sink-specific rules beat generic ones, then the longest matching category
    wins; among equals the rule registered last wins.
    """
    best: FilterRule | None = None
    best_score: tuple[bool, int] = (False, -1)
    for rule in rules:
        if rule.provider is not None and normalize(rule.provider) != normalize(provider):
            continue
        if rule.category is not None and not _category_matches(rule.category, category):
            continue
        score = (rule.provider is not None, len(rule.category or ""))
        if score >= best_score:
            best, best_score = rule, score
    return best


class RuleFilter(logging.Filter):
    """Handler filter that applies the factory's rules for one sink."""

    def __init__(self, provider: str, factory: LoggerFactory) -> None:
        super().__init__()
        self.provider = provider
        self._factory = factory

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= self._factory.effective_level(self.provider, record.name)


# --- Sinks ---


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    For records whose logger name does not start with the project prefix,
    sets `record.prefix` to a short bracketed token like "[urllib3]". For
    project loggers the prefix is set to an empty string. The filter always
    returns True to allow the record to be processed.
    """

    def __init__(self, project_prefix: str) -> None:
        super().__init__()
        self.project_prefix = project_prefix

    def filter(self, record: logging.LogRecord) -> bool:
        if self.project_prefix and record.name.startswith(self.project_prefix):
            record.prefix = ""
        else:
            # e.g. "urllib3.connectionpool" -> "[urllib3]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.NOTSET,
    debug_mode: bool = False,
    color: bool = True,
    project_prefix: str = "",
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr and supports optional color and a debug
    mode. In debug mode records include timestamps, logger names and source
    file/line information; otherwise a short third-party prefix is applied.

    Args:
        level: Handler level; the sink's filter rules apply on top of it.
        debug_mode: When True, enable debug formatting (show_path, timestamps).
        color: Enable color output when True.
        project_prefix: Logger-name prefix of the application's own loggers.

    Returns:
        RichHandler: Configured handler suitable to attach to the root logger.
    """
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None

    console = Console(color_system=color_system, stderr=True)

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = (
        "%(prefix)s %(message)s"
        if not debug_mode
        else "%(asctime)s %(name)s: %(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter(project_prefix))

    return handler


class DebugFileHandler(logging.FileHandler):
    """File handler that creates its parent directory on first write.

    The file is opened lazily, so a host that never logs never creates it.
    """

    def __init__(self, path: Path) -> None:
        super().__init__(path, mode="a", encoding="utf-8", delay=True)

    def _open(self):  # type: ignore[no-untyped-def]
        Path(self.baseFilename).parent.mkdir(parents=True, exist_ok=True)
        return super()._open()


def config_debug_handler(path: Path) -> DebugFileHandler:
    """Configure and return the debug sink writing detailed records to *path*."""
    handler = DebugFileHandler(path)
    handler.setLevel(logging.NOTSET)
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )
    return handler


# --- Builder / factory ---

RuleSource = FilterRule | Callable[[], list[FilterRule]]


class LoggingBuilder:
    """Collects logging sinks and filter rules for a host.

    Args:
        application_name: Name of the application; used as the console
            project prefix and for the default debug log location.
    """

    def __init__(self, application_name: str = "") -> None:
        self.application_name = application_name
        self.providers: dict[str, logging.Handler] = {}
        self.minimum_level = DEFAULT_MINIMUM_LEVEL
        self._rule_sources: list[RuleSource] = []
        self._configuration_roots: list[ConfigurationRoot] = []

    def add_provider(self, name: str, handler: logging.Handler) -> LoggingBuilder:
        """Register *handler* as the sink called *name* (replacing a sink of that name)."""
        for existing in list(self.providers):
            if normalize(existing) == normalize(name):
                del self.providers[existing]
        self.providers[name] = handler
        return self

    def add_console(self, debug_mode: bool = False, color: bool = True) -> LoggingBuilder:
        """Register the Rich console sink."""
        return self.add_provider(
            CONSOLE_PROVIDER,
            config_console_handler(
                debug_mode=debug_mode, color=color, project_prefix=self.application_name
            ),
        )

    def add_debug(self, path: Path | None = None) -> LoggingBuilder:
        """Register the debug sink.

        Args:
            path: Log file; defaults to ``debug.log`` in the application's
                user log directory.
        """
        if path is None:
            path = debug_log_path(self.application_name or "generic-host")
        return self.add_provider(DEBUG_PROVIDER, config_debug_handler(path))

    def clear_providers(self) -> LoggingBuilder:
        """Remove every registered sink."""
        self.providers.clear()
        return self

    def set_minimum_level(self, level: int | str) -> LoggingBuilder:
        """Set the level used when no rule matches a category."""
        self.minimum_level = parse_level(level) if isinstance(level, str) else level
        return self

    def add_filter(
        self, category: str | None, level: int | str, provider: str | None = None
    ) -> LoggingBuilder:
        """Add a filter rule; rules added later win over equally specific ones."""
        if isinstance(level, str):
            level = parse_level(level, category or DEFAULT_CATEGORY)
        self._rule_sources.append(FilterRule(provider, category, level))
        return self

    def add_configuration(self, section: ConfigurationSection) -> LoggingBuilder:
        """Read filter rules from a ``Logging`` section.

        The rules are re-read whenever the section's configuration reloads.
        """
        self._rule_sources.append(lambda: load_rules(section))
        self._configuration_roots.append(section.root)
        return self

    def build(self) -> LoggerFactory:
        """Return a factory holding the sinks and rules.

        Raises:
            LoggingConfigurationError: If a configured level is not recognised.
        """
        factory = LoggerFactory(
            dict(self.providers), list(self._rule_sources), self.minimum_level
        )
        for root in self._configuration_roots:
            factory.watch(root)
        return factory


class LoggerFactory:
    """Owns the sinks of a host and decides which records each sink accepts."""

    def __init__(
        self,
        providers: dict[str, logging.Handler],
        rule_sources: list[RuleSource],
        minimum_level: int = DEFAULT_MINIMUM_LEVEL,
    ) -> None:
        self.providers = providers
        self.minimum_level = minimum_level
        self._rule_sources = rule_sources
        self._unsubscribe: list[Callable[[], None]] = []
        self._cache: dict[tuple[str, str], int] = {}
        self.rules: list[FilterRule] = []
        self._installed = False
        self._previous_level: int | None = None
        self.refresh()
        for name, handler in self.providers.items():
            handler.addFilter(RuleFilter(name, self))

    @property
    def handlers(self) -> list[logging.Handler]:
        """The sink handlers, in registration order."""
        return list(self.providers.values())

    def refresh(self) -> None:
        """Re-evaluate the rule sources (e.g. after a configuration reload)."""
        rules: list[FilterRule] = []
        for source in self._rule_sources:
            if isinstance(source, FilterRule):
                rules.append(source)
            else:
                rules.extend(source())
        self.rules = rules
        self._cache.clear()
        if self._installed:
            logging.getLogger().setLevel(self.lowest_level())

    def watch(self, root: ConfigurationRoot) -> None:
        """Refresh the rules whenever *root* reloads."""
        self._unsubscribe.append(root.on_change(lambda _root: self.refresh()))

    def effective_level(self, provider: str, category: str) -> int:
        """Return the minimum level for *category* records on the *provider* sink."""
        key = (provider, category)
        if (level := self._cache.get(key)) is None:
            rule = select_rule(self.rules, provider, category)
            level = rule.level if rule is not None else self.minimum_level
            self._cache[key] = level
        return level

    def lowest_level(self) -> int:
        """Lowest level any sink may accept; the root logger is set to it."""
        return min([self.minimum_level, *(rule.level for rule in self.rules)])

    def install(self) -> None:
        """Attach the sinks to the root logger, replacing its handlers.

        A factory without sinks leaves the logging configuration untouched.
        """
        if not self.providers:
            return
        if not self._installed:
            self._previous_level = logging.getLogger().level
        logging.basicConfig(
            level=self.lowest_level(),  # handlers filter per sink
            handlers=self.handlers,
            force=True,  # override any existing logging config
        )
        self._installed = True

    def get_logger(self, name: str) -> Logger:
        """Return the standard library logger called *name*."""
        return logging.getLogger(name)

    def close(self) -> None:
        """Detach and close the sinks, restoring the root level seen by `install()`."""
        for unsubscribe in self._unsubscribe:
            unsubscribe()
        self._unsubscribe.clear()
        self._installed = False
        root = logging.getLogger()
        if self._previous_level is not None:
            root.setLevel(self._previous_level)
            self._previous_level = None
        for handler in self.handlers:
            root.removeHandler(handler)
            handler.close()


def log_startup(
    logger: Logger,
    *,
    environment: HostEnvironment,
    factory: LoggerFactory,
) -> None:
    """Log human-friendly startup info and detailed diagnostics.

    Emits the application, environment and content root at INFO, and the
    Python and platform versions, process id, active sinks and filter rules
    at DEBUG for troubleshooting.

    Args:
        logger: Logger used to emit startup messages.
        environment: The host environment that was resolved.
        factory: The logger factory that was installed.
    """

    logger.info("Application: %s", environment.application_name)
    logger.info("Hosting environment: %s", environment.environment_name)
    logger.info("Content root path: %s", environment.content_root_path)

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug(
        "Sinks: %s",
        {name: type(h).__name__ for name, h in factory.providers.items()},
    )
    if factory.rules:
        logger.debug(
            "Filter rules: %s",
            [
                (
                    rule.provider or "*",
                    rule.category or DEFAULT_CATEGORY,
                    logging.getLevelName(rule.level),
                )
                for rule in factory.rules
            ],
        )
    else:
        logger.debug("Filter rules: <none>")
