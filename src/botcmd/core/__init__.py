"""
Core module for the botcmd package.

Provides the Command base class, groups, argument specs, and the usage
formatter.
"""

from botcmd.core.argument import CommandArgument
from botcmd.core.command import Command, derive_aliases
from botcmd.core.datamodels import CommandInfo, CommandMessage, CommandScope, User
from botcmd.core.exceptions import (
    CommandError,
    CommandLoadError,
    ConfigurationError,
    RegistryError,
    UsageError,
)
from botcmd.core.group import CommandGroup
from botcmd.core.usage import build_help, build_usage

__all__ = [
    # Commands
    "Command",
    "CommandArgument",
    "CommandGroup",
    "derive_aliases",
    # Models
    "CommandInfo",
    "CommandMessage",
    "CommandScope",
    "User",
    # Exceptions
    "CommandError",
    "CommandLoadError",
    "ConfigurationError",
    "RegistryError",
    "UsageError",
    # Formatting
    "build_help",
    "build_usage",
]
