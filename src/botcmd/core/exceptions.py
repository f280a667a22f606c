"""
Exception classes for the command model.
"""


class CommandError(Exception):
    """Base exception for command-related errors."""


class ConfigurationError(CommandError):
    """Command descriptor failed validation."""


class UsageError(CommandError):
    """A command operation was called incorrectly."""


class RegistryError(CommandError):
    """Command or group registration failed."""


class CommandLoadError(CommandError):
    """Command module could not be located or loaded."""
