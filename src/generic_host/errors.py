"""Exceptions raised by generic-host."""


class GenericHostError(Exception):
    """Base class for generic-host errors."""


class ConfigurationError(GenericHostError):
    """Base class for configuration loading errors."""


class ConfigurationFileError(ConfigurationError):
    """A configuration file is missing (and required) or cannot be parsed.

    Attributes:
        path (str): The offending file.
    """

    def __init__(self, path: str, reason: str):
        super().__init__(f"Configuration file '{path}': {reason}")
        self.path = path
        self.reason = reason


class CommandLineFormatError(ConfigurationError):
    """The command-line argument sequence cannot be turned into key/values.

    Attributes:
        argument (str): The argument that could not be parsed.
    """

    def __init__(self, argument: str, reason: str):
        super().__init__(f"Command-line argument '{argument}': {reason}")
        self.argument = argument
        self.reason = reason


class LoggingConfigurationError(GenericHostError):
    """A value in the logging configuration is not a known log level.

    Attributes:
        category (str): The category the level was configured for.
        value (str): The rejected level name.
    """

    def __init__(self, category: str, value: str):
        super().__init__(
            f"Configuration value '{value}' for category '{category}' is not a supported log level."
        )
        self.category = category
        self.value = value


class HostAlreadyBuiltError(GenericHostError):
    """`HostBuilder.build()` was called more than once."""

    def __init__(self) -> None:
        super().__init__("Build can only be called once.")
