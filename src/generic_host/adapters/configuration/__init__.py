"""Configuration providers: memory, JSON files, environment, command line, user secrets."""

from .command_line import CommandLineConfigurationProvider, CommandLineConfigurationSource
from .environment_variables import (
    EnvironmentVariablesConfigurationProvider,
    EnvironmentVariablesConfigurationSource,
)
from .json_file import JsonFileConfigurationProvider, JsonFileConfigurationSource
from .memory import MemoryConfigurationProvider, MemoryConfigurationSource
from .user_secrets import UserSecretsConfigurationSource, UserSecretsStore

__all__ = [
    "CommandLineConfigurationProvider",
    "CommandLineConfigurationSource",
    "EnvironmentVariablesConfigurationProvider",
    "EnvironmentVariablesConfigurationSource",
    "JsonFileConfigurationProvider",
    "JsonFileConfigurationSource",
    "MemoryConfigurationProvider",
    "MemoryConfigurationSource",
    "UserSecretsConfigurationSource",
    "UserSecretsStore",
]
