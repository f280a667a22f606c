"""Disable command - disable a command or group."""
from __future__ import annotations

from botcmd.core import Command, CommandGroup, UsageError


class DisableCommand(Command):
    def __init__(self, client):
        super().__init__(client, {
            "name": "disable",
            "aliases": ["disable-command", "cmd-off", "command-off"],
            "group": "commands",
            "member_name": "disable",
            "description": "Disables a command or command group.",
            "format": "<command|group>",
            "examples": ["disable util", "disable ping"],
            "guarded": True,
        })

    def has_permission(self, message):
        return self.client.is_owner(getattr(message, "author", None))

    async def run(self, message, args, from_pattern=False):
        registry = self.client.registry
        target = None
        for resolve in (registry.resolve_command, registry.resolve_group):
            try:
                target = resolve(args)
                break
            except UsageError:
                continue
        if target is None:
            return f"Unable to identify command or group: {args!r}"

        kind = "group" if isinstance(target, CommandGroup) else "command"
        if target.guarded:
            return f"You cannot disable the `{target.name}` {kind}."
        target.set_enabled_in(message.guild, False)
        return f"Disabled the `{target.name}` {kind}."
