"""
Command groups.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from botcmd.core.exceptions import ConfigurationError, UsageError

if TYPE_CHECKING:
    from botcmd.client import CommandClient
    from botcmd.core.command import Command

logger = logging.getLogger(__name__)


class CommandGroup:
    """A named group of related commands."""

    def __init__(
        self,
        client: "CommandClient",
        id: str,
        name: str | None = None,
        guarded: bool = False,
    ):
        if not client:
            raise ConfigurationError("A client must be specified.")
        if not id:
            raise ConfigurationError("Group ID must be specified.")
        if id != id.lower():
            raise ConfigurationError("Group ID must be lowercase.")

        self.client = client
        self.id = id
        self.name = name or id
        self.guarded = guarded
        self.commands: dict[str, Command] = {}
        self._global_enabled = True

    def __repr__(self) -> str:
        return f"CommandGroup(id={self.id!r}, commands={len(self.commands)})"

    @property
    def global_enabled(self) -> bool:
        return self._global_enabled

    def set_enabled_in(self, guild: Any, enabled: bool) -> None:
        """Enable or disable the group in a guild, or globally when guild is None."""
        if not isinstance(enabled, bool):
            raise UsageError("Enabled must be a boolean.")
        if self.guarded:
            raise UsageError(f"The group '{self.id}' is guarded.")
        if guild is None:
            self._global_enabled = enabled
            logger.debug(f"Group '{self.id}' globally {'enabled' if enabled else 'disabled'}")
            self.client.emit("group_status_change", None, self, enabled)
            return
        guild = self.client.resolve_guild(guild)
        guild.set_group_enabled(self, enabled)

    def is_enabled_in(self, guild: Any) -> bool:
        if self.guarded:
            return True
        if guild is None:
            return self._global_enabled
        guild = self.client.resolve_guild(guild)
        return guild.is_group_enabled(self)

    def reload(self) -> dict[str, bool]:
        """Reload every command in the group.

        Returns:
            Mapping of command name to reload success.
        """
        return {name: command.reload() for name, command in list(self.commands.items())}
