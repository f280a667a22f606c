"""Enable command - enable a command or group."""
from __future__ import annotations

from botcmd.core import Command, CommandGroup, UsageError


class EnableCommand(Command):
    def __init__(self, client):
        super().__init__(client, {
            "name": "enable",
            "aliases": ["enable-command", "cmd-on", "command-on"],
            "group": "commands",
            "member_name": "enable",
            "description": "Enables a command or command group.",
            "format": "<command|group>",
            "examples": ["enable util", "enable ping"],
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
        if target.is_enabled_in(message.guild):
            return f"The `{target.name}` {kind} is already enabled."
        target.set_enabled_in(message.guild, True)
        return f"Enabled the `{target.name}` {kind}."
