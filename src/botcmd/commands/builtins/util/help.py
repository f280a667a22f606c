"""Help command - list commands or describe one."""
from __future__ import annotations

from botcmd.core import Command, build_help


class HelpCommand(Command):
    def __init__(self, client):
        super().__init__(client, {
            "name": "help",
            "aliases": ["commands"],
            "group": "util",
            "member_name": "help",
            "description": "Displays a list of available commands, or detailed information for a command.",
            "format": "[command]",
            "examples": ["help", "help prefix"],
            "guarded": True,
        })

    async def run(self, message, args, from_pattern=False):
        registry = self.client.registry
        prefix = self.client.command_prefix
        user = self.client.user

        if args:
            found = registry.find_commands(args, message=message)
            if len(found) == 1:
                return build_help(found[0], prefix, user)
            if len(found) > 1:
                names = ", ".join(c.name for c in found)
                return f"Multiple commands found, please be more specific: {names}"
            return f"Unable to identify command. Use {self.usage(None, prefix, user)} to view the list of commands."

        lines = ["__**Available commands**__"]
        for group in registry.groups.values():
            usable = [c for c in group.commands.values() if c.is_usable(message)]
            if not usable:
                continue
            lines.append("")
            lines.append(f"__{group.name}__")
            for command in usable:
                lines.append(f"**{command.name}:** {command.description}")
        return "\n".join(lines)
