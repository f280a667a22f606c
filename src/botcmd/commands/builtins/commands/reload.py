"""Reload command - reload a command's module from disk."""
from __future__ import annotations

from botcmd.core import Command


class ReloadCommand(Command):
    def __init__(self, client):
        super().__init__(client, {
            "name": "reload",
            "aliases": ["reload-command"],
            "group": "commands",
            "member_name": "reload",
            "description": "Reloads a command.",
            "format": "<command>",
            "details": "Only the bot owner may use this command.",
            "examples": ["reload help"],
            "guarded": True,
        })

    def has_permission(self, message):
        return self.client.is_owner(getattr(message, "author", None))

    async def run(self, message, args, from_pattern=False):
        found = self.client.registry.find_commands(args, exact=True) if args else []
        if len(found) != 1:
            return f"Unable to identify command: {args!r}"
        command = found[0]
        if not command.reload():
            return f"Failed to reload the `{command.name}` command."
        return f"Reloaded the `{command.name}` command."
