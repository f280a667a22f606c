"""
Command base class.

A command is built from a declarative descriptor and subclassed to provide
``run`` (and optionally ``has_permission``):

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
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from botcmd.core.argument import CommandArgument
from botcmd.core.datamodels import CommandInfo
from botcmd.core.exceptions import CommandError, ConfigurationError, UsageError
from botcmd.core.usage import build_usage

if TYPE_CHECKING:
    from botcmd.client import CommandClient
    from botcmd.core.group import CommandGroup

logger = logging.getLogger(__name__)

# Marks "use the client's value" for usage() defaults; None disables a form.
_CLIENT_DEFAULT: Any = object()


def derive_aliases(name: str, aliases: list[str], auto_aliases: bool = True) -> list[str]:
    """Build the alias list, adding hyphen-free variants when enabled.

    Only a single pass is made over the aliases present after the name's own
    variant is added, so an alias derived in that pass is not re-scanned.
    """
    result = list(dict.fromkeys(aliases))
    if not auto_aliases:
        return result

    def _add(alias: str) -> None:
        if alias not in result:
            result.append(alias)

    if "-" in name:
        _add(name.replace("-", ""))
    for alias in list(result):
        if "-" in alias:
            _add(alias.replace("-", ""))
    return result


class Command:
    """A command that can be run in a client."""

    build_usage = staticmethod(build_usage)

    def __init__(self, client: "CommandClient", info: CommandInfo | Mapping[str, Any] | None):
        if not client:
            raise ConfigurationError("A client must be specified.")
        info = CommandInfo.from_info(info)

        self.client = client
        self.name: str = info.name
        self.aliases: list[str] = derive_aliases(info.name, info.aliases, info.auto_aliases)
        self.group_id: str = info.group
        self._group: CommandGroup | None = None
        self.member_name: str = info.member_name
        self.description: str = info.description
        self.format: str = info.format or info.name
        self.details: str | None = info.details
        self.examples: list[str] | None = list(info.examples) if info.examples is not None else None
        self.guild_only: bool = info.guild_only
        self.default_handling: bool = info.default_handling
        self.args: list[CommandArgument] | None = None
        if info.args is not None:
            self.args = [CommandArgument(self, arg) for arg in info.args]
        self.args_type: str = info.args_type
        self.args_count: int = info.args_count
        self.args_single_quotes: bool = info.args_single_quotes
        self.patterns = list(info.patterns) if info.patterns is not None else None
        self.guarded: bool = info.guarded
        self._global_enabled = True

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, group={self.group_id!r})"

    @property
    def group(self) -> CommandGroup | None:
        """Group the command belongs to, assigned upon registration."""
        return self._group

    @group.setter
    def group(self, group: CommandGroup | None) -> None:
        if self._group is not None and group is not self._group:
            raise UsageError(f"Command '{self.name}' already belongs to group '{self._group.id}'.")
        self._group = group

    @property
    def global_enabled(self) -> bool:
        return self._global_enabled

    def has_permission(self, message: Any) -> bool:
        """Check whether the message author may use this command.

        Override in subclasses for role or owner checks. Must not have
        side effects.
        """
        return True

    async def run(self, message: Any, args: Any, from_pattern: bool = False) -> Any:
        """Run the command.

        Args:
            message: The message the command is being run for
            args: The argument string (``single``), list of strings
                (``multiple``), or the pattern match when ``from_pattern``
            from_pattern: Whether the command was triggered by a pattern

        Returns:
            Zero or more reply artifacts.
        """
        raise NotImplementedError(f"{type(self).__name__} doesn't have a run() method.")

    def set_enabled_in(self, guild: Any, enabled: bool) -> None:
        """Enable or disable the command in a guild, or globally when guild is None."""
        if not isinstance(enabled, bool):
            raise UsageError("Enabled must be a boolean.")
        if self.guarded:
            raise UsageError(f"The command '{self.name}' is guarded.")
        if guild is None:
            self._global_enabled = enabled
            logger.debug(f"Command '{self.name}' globally {'enabled' if enabled else 'disabled'}")
            self.client.emit("command_status_change", None, self, enabled)
            return
        guild = self.client.resolve_guild(guild)
        guild.set_command_enabled(self, enabled)

    def is_enabled_in(self, guild: Any) -> bool:
        """Check if the command is enabled in a guild, or globally when guild is None."""
        if self.guarded:
            return True
        if self._group is None:
            raise UsageError(f"Command '{self.name}' is not registered to a group.")
        if guild is None:
            return self._group.global_enabled and self._global_enabled
        guild = self.client.resolve_guild(guild)
        return guild.is_group_enabled(self._group) and guild.is_command_enabled(self)

    def is_usable(self, message: Any = None) -> bool:
        """Check if the command is usable for a message.

        Without a message this reports the command's global flag, which is
        what help listings use.
        """
        if message is None:
            return self.guarded or self._global_enabled
        guild = getattr(message, "guild", None)
        if self.guild_only and guild is None:
            return False
        return self.is_enabled_in(guild) and self.has_permission(message)

    def usage(
        self,
        arg_string: str | None = None,
        prefix: str | None = _CLIENT_DEFAULT,
        user: Any = _CLIENT_DEFAULT,
    ) -> str:
        """Create a usage string for this command.

        Prefix and user default to the client's; pass None to omit that form.
        """
        if prefix is _CLIENT_DEFAULT:
            prefix = self.client.command_prefix
        if user is _CLIENT_DEFAULT:
            user = self.client.user
        command = f"{self.name} {arg_string}" if arg_string else self.name
        return build_usage(command, prefix, user)

    def reload(self) -> bool:
        """Reload the command's module and re-register it.

        Tries the registry's commands directory first, then the builtins.
        Load, construction and re-registration failures roll back the
        module cache and yield False.

        Returns:
            Whether the reload was successful.
        """
        registry = self.client.registry
        loader = registry.loader
        relative = f"{self.group_id}/{self.member_name}.py"

        for base in (registry.commands_path, registry.builtins_path):
            if base is None:
                continue
            path = base / relative
            module_name = loader.module_name(path)
            cached = loader.evict(module_name)
            try:
                new_command = loader.load(module_name, path)(self.client)
                registry.reregister_command(new_command, self)
            except CommandError as e:
                loader.restore(module_name, cached)
                logger.debug(f"Reload of '{self.name}' from {path} failed: {e}")
                continue

            logger.info(f"Reloaded command '{self.name}' from {path}")
            return True

        logger.warning(f"Unable to reload command '{self.name}'")
        return False
