"""
botcmd - command model for chat bots

Commands are declared once, validated on construction, and carry their
own enable/disable state per guild and globally.

Example usage:
    from botcmd import Command, CommandClient

    class PingCommand(Command):
        def __init__(self, client):
            super().__init__(client, {
                "name": "ping",
                "group": "util",
                "member_name": "ping",
                "description": "Checks the bot's responsiveness.",
            })

        async def run(self, message, args, from_pattern=False):
            return "Pong!"

    client = CommandClient()
    client.registry.register_group("util")
    ping = client.registry.register_command(PingCommand)
    ping.usage()  # '`!ping`'
"""

__version__ = "0.1.0"

from botcmd.core import (
    Command,
    CommandArgument,
    CommandError,
    CommandGroup,
    CommandInfo,
    CommandLoadError,
    CommandMessage,
    CommandScope,
    ConfigurationError,
    RegistryError,
    UsageError,
    User,
    build_help,
    build_usage,
)
from botcmd.registry import CommandRegistry
from botcmd.guild import Guild
from botcmd.client import CommandClient

__all__ = [
    # Version
    "__version__",
    # Core
    "Command",
    "CommandArgument",
    "CommandGroup",
    "CommandInfo",
    "CommandMessage",
    "CommandScope",
    "User",
    "build_help",
    "build_usage",
    # Exceptions
    "CommandError",
    "CommandLoadError",
    "ConfigurationError",
    "RegistryError",
    "UsageError",
    # Runtime
    "CommandClient",
    "CommandRegistry",
    "Guild",
]
