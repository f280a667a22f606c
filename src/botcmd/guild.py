"""
In-memory guild that stores per-guild command and group enablement.

An unset bit falls back to the command's or group's global flag.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from botcmd.core.exceptions import UsageError

if TYPE_CHECKING:
    from botcmd.client import CommandClient
    from botcmd.core.command import Command
    from botcmd.core.group import CommandGroup

logger = logging.getLogger(__name__)


class Guild:
    """A collection with its own command/group enable overrides."""

    def __init__(self, client: "CommandClient", id: str, name: str | None = None):
        self.client = client
        self.id = id
        self.name = name or id
        self._commands_enabled: dict[str, bool] = {}
        self._groups_enabled: dict[str, bool] = {}

    def __repr__(self) -> str:
        return f"Guild(id={self.id!r})"

    def set_command_enabled(self, command: "Command | str", enabled: bool) -> None:
        command = self.client.registry.resolve_command(command)
        if command.guarded:
            raise UsageError(f"The command '{command.name}' is guarded.")
        if not isinstance(enabled, bool):
            raise UsageError("Enabled must be a boolean.")
        self._commands_enabled[command.name] = enabled
        logger.debug(
            f"Command '{command.name}' {'enabled' if enabled else 'disabled'} in guild {self.id}"
        )
        self.client.emit("command_status_change", self, command, enabled)

    def is_command_enabled(self, command: "Command | str") -> bool:
        command = self.client.registry.resolve_command(command)
        if command.guarded:
            return True
        if command.name not in self._commands_enabled:
            return command.global_enabled
        return self._commands_enabled[command.name]

    def clear_command_enabled(self, command: "Command | str") -> None:
        """Drop the guild's override so the global flag applies again."""
        command = self.client.registry.resolve_command(command)
        self._commands_enabled.pop(command.name, None)

    def set_group_enabled(self, group: "CommandGroup | str", enabled: bool) -> None:
        group = self.client.registry.resolve_group(group)
        if group.guarded:
            raise UsageError(f"The group '{group.id}' is guarded.")
        if not isinstance(enabled, bool):
            raise UsageError("Enabled must be a boolean.")
        self._groups_enabled[group.id] = enabled
        logger.debug(f"Group '{group.id}' {'enabled' if enabled else 'disabled'} in guild {self.id}")
        self.client.emit("group_status_change", self, group, enabled)

    def is_group_enabled(self, group: "CommandGroup | str") -> bool:
        group = self.client.registry.resolve_group(group)
        if group.guarded:
            return True
        if group.id not in self._groups_enabled:
            return group.global_enabled
        return self._groups_enabled[group.id]
