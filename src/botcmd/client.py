"""
Command client: owns the registry, known guilds, and the event stream
commands report status changes on.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from pathlib import Path
from typing import Any, Callable, Optional

from botcmd.commands.loader import CommandModuleLoader
from botcmd.config import Config
from botcmd.core.datamodels import User
from botcmd.core.exceptions import UsageError
from botcmd.guild import Guild
from botcmd.registry import CommandRegistry

logger = logging.getLogger(__name__)


class CommandClient:
    """Client that commands are registered with.

    Events are dispatched synchronously to listeners in registration order:

        client.on("command_status_change", lambda guild, command, enabled: ...)
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        user: Optional[User] = None,
        commands_path: str | Path | None = None,
        loader: Optional[CommandModuleLoader] = None,
    ):
        self.config = config or Config()
        self.user = user
        self.guilds: dict[str, Guild] = {}
        self._listeners: dict[str, list[Callable[..., Any]]] = defaultdict(list)
        self.registry = CommandRegistry(
            self,
            commands_path=commands_path or self.config.get("commands_dir"),
            loader=loader,
        )

    @property
    def command_prefix(self) -> str | None:
        return self.config.get("command_prefix")

    @command_prefix.setter
    def command_prefix(self, prefix: str | None) -> None:
        self.config.command_prefix = prefix

    def is_owner(self, user: Any) -> bool:
        """Check whether a user is the configured owner."""
        owner = self.config.get("owner")
        if owner is None or user is None:
            return False
        return getattr(user, "id", None) == owner

    def on(self, event: str, handler: Callable[..., Any] | None = None) -> Callable:
        """Add an event listener. Usable as a decorator."""
        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self._listeners[event].append(func)
            return func

        if handler is not None:
            return decorator(handler)
        return decorator

    def off(self, event: str, handler: Callable[..., Any]) -> None:
        if handler in self._listeners.get(event, []):
            self._listeners[event].remove(handler)

    def emit(self, event: str, *args: Any) -> int:
        """Call the listeners for an event.

        Returns:
            Number of listeners called.
        """
        listeners = list(self._listeners.get(event, []))
        logger.debug(f"Event {event} -> {len(listeners)} listener(s)")
        for listener in listeners:
            listener(*args)
        return len(listeners)

    def add_guild(self, guild: Guild | str, name: str | None = None) -> Guild:
        if not isinstance(guild, Guild):
            guild = Guild(self, guild, name)
        self.guilds[guild.id] = guild
        return guild

    def resolve_guild(self, guild: Guild | str) -> Guild:
        """Resolve a guild instance or id to a known Guild."""
        if isinstance(guild, Guild):
            return guild
        if isinstance(guild, str) and guild in self.guilds:
            return self.guilds[guild]
        raise UsageError(f"Unable to resolve guild: {guild!r}")
