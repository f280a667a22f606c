"""
Registry of command groups and commands for a client.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Iterable, Iterator

from botcmd.commands.loader import PACKAGE_BUILTINS_DIR, CommandModuleLoader, load_all_commands
from botcmd.core.command import Command
from botcmd.core.exceptions import RegistryError, UsageError
from botcmd.core.group import CommandGroup

if TYPE_CHECKING:
    from botcmd.client import CommandClient

logger = logging.getLogger(__name__)

# Groups the package builtins belong to
DEFAULT_GROUPS = [
    ("util", "Utility", False),
    ("commands", "Commands", True),
]


class CommandRegistry:
    """Registry for command groups and commands."""

    def __init__(
        self,
        client: "CommandClient",
        commands_path: str | Path | None = None,
        loader: CommandModuleLoader | None = None,
        builtins_path: Path | None = PACKAGE_BUILTINS_DIR,
    ):
        self.client = client
        self.commands: dict[str, Command] = {}
        self.groups: dict[str, CommandGroup] = {}
        self.commands_path = Path(commands_path).expanduser() if commands_path else None
        self.builtins_path = builtins_path
        self.loader = loader or CommandModuleLoader()

    def register_group(
        self,
        group: CommandGroup | str,
        name: str | None = None,
        guarded: bool = False,
    ) -> CommandGroup:
        """Register a group by instance or by id."""
        if not isinstance(group, CommandGroup):
            group = CommandGroup(self.client, group, name, guarded)
        if group.id in self.groups:
            raise RegistryError(f"A group with the ID '{group.id}' is already registered.")
        self.groups[group.id] = group
        logger.debug(f"Registered group {group.id}")
        self.client.emit("group_register", group, self)
        return group

    def register_groups(self, groups: Iterable[Any]) -> None:
        """Register groups given as instances, ids, or (id, name[, guarded]) tuples."""
        for group in groups:
            if isinstance(group, (tuple, list)):
                self.register_group(*group)
            else:
                self.register_group(group)

    def register_command(self, command: Command | type[Command]) -> Command:
        """
        Register a command instance or class.

        Classes are instantiated with the client. The command's group must
        already be registered.

        Returns:
            The registered Command.
        """
        if isinstance(command, type):
            command = command(self.client)
        if not isinstance(command, Command):
            raise RegistryError(f"Invalid command object to register: {command!r}")

        self._check_names(command)
        group = self.groups.get(command.group_id)
        if group is None:
            raise RegistryError(f"Group '{command.group_id}' is not registered.")
        for other in group.commands.values():
            if other.member_name == command.member_name:
                raise RegistryError(
                    f"A command with the member name '{command.member_name}' is already "
                    f"registered in {group.id}."
                )

        command.group = group
        group.commands[command.name] = command
        self.commands[command.name] = command
        logger.debug(f"Registered command {group.id}:{command.member_name}")
        self.client.emit("command_register", command, self)
        return command

    def register_commands(self, commands: Iterable[Command | type[Command]]) -> None:
        for command in commands:
            self.register_command(command)

    def register_commands_in(self, path: str | Path) -> int:
        """Load and register every command module under a directory."""
        return load_all_commands(self, Path(path))

    def register_defaults(self) -> int:
        """Register the builtin groups and the builtin commands."""
        for group_id, name, guarded in DEFAULT_GROUPS:
            if group_id not in self.groups:
                self.register_group(group_id, name, guarded)
        if self.builtins_path is None:
            return 0
        return self.register_commands_in(self.builtins_path)

    def reregister_command(self, command: Command | type[Command], old_command: Command) -> Command:
        """
        Replace a registered command with a new instance.

        Name, group and member name must stay the same. Aliases may change;
        the global enabled flag carries over.
        """
        if isinstance(command, type):
            command = command(self.client)
        if not isinstance(command, Command):
            raise RegistryError(f"Invalid command object to reregister: {command!r}")
        if command.name != old_command.name:
            raise RegistryError("Command name cannot change.")
        if command.group_id != old_command.group_id:
            raise RegistryError("Command group cannot change.")
        if command.member_name != old_command.member_name:
            raise RegistryError("Command memberName cannot change.")
        if self.commands.get(old_command.name) is not old_command:
            raise RegistryError(f"Command '{old_command.name}' is not registered.")
        self._check_names(command, ignore=old_command)

        group = old_command.group
        command.group = group
        command._global_enabled = old_command.global_enabled
        group.commands[command.name] = command
        self.commands[command.name] = command
        logger.info(f"Reregistered command {group.id}:{command.member_name}")
        self.client.emit("command_reregister", command, old_command)
        return command

    def unregister_command(self, command: Command) -> None:
        if self.commands.get(command.name) is not command:
            raise RegistryError(f"Command '{command.name}' is not registered.")
        del self.commands[command.name]
        if command.group is not None:
            command.group.commands.pop(command.name, None)
        logger.debug(f"Unregistered command {command.group_id}:{command.member_name}")
        self.client.emit("command_unregister", command)

    def _check_names(self, command: Command, ignore: Command | None = None) -> None:
        """Raise if the command's name or aliases collide with another command."""
        names = {command.name, *command.aliases}
        for other in self.commands.values():
            if other is ignore:
                continue
            taken = {other.name, *other.aliases}
            clash = names & taken
            if clash:
                raise RegistryError(
                    f"Command name/alias '{sorted(clash)[0]}' is already used by '{other.name}'."
                )

    def find_groups(self, search: str | None = None, exact: bool = False) -> list[CommandGroup]:
        """Find groups whose id or name matches the search."""
        if not search:
            return list(self.groups.values())
        lc_search = search.lower()

        def matches(group: CommandGroup, exact: bool) -> bool:
            if exact:
                return group.id == lc_search or group.name.lower() == lc_search
            return lc_search in group.id or lc_search in group.name.lower()

        found = [g for g in self.groups.values() if matches(g, exact)]
        exact_found = [g for g in found if matches(g, True)]
        return exact_found or found

    def find_commands(
        self,
        search: str | None = None,
        exact: bool = False,
        message: Any = None,
    ) -> list[Command]:
        """
        Find commands by name or alias.

        Exact matches win over partial ones. With a message, only commands
        usable for it are returned.
        """
        if not search:
            found = list(self.commands.values())
        else:
            lc_search = search.lower()

            def matches(command: Command, exact: bool) -> bool:
                if exact:
                    return command.name == lc_search or lc_search in command.aliases
                return lc_search in command.name or any(lc_search in a for a in command.aliases)

            found = [c for c in self.commands.values() if matches(c, exact)]
            exact_found = [c for c in found if matches(c, True)]
            found = exact_found or found

        if message is not None:
            found = [c for c in found if c.is_usable(message)]
        return found

    def resolve_command(self, command: Command | str) -> Command:
        if isinstance(command, Command):
            return command
        if isinstance(command, str):
            found = self.find_commands(command, exact=True)
            if len(found) == 1:
                return found[0]
        raise UsageError(f"Unable to resolve command: {command!r}")

    def resolve_group(self, group: CommandGroup | str) -> CommandGroup:
        if isinstance(group, CommandGroup):
            return group
        if isinstance(group, str):
            found = self.find_groups(group, exact=True)
            if len(found) == 1:
                return found[0]
        raise UsageError(f"Unable to resolve group: {group!r}")

    def __contains__(self, name: str) -> bool:
        return bool(self.find_commands(name, exact=True))

    def __iter__(self) -> Iterator[Command]:
        return iter(self.commands.values())

    def __len__(self) -> int:
        return len(self.commands)
