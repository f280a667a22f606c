"""Ping command - check that the bot responds."""
from __future__ import annotations

from botcmd.core import Command


class PingCommand(Command):
    def __init__(self, client):
        super().__init__(client, {
            "name": "ping",
            "group": "util",
            "member_name": "ping",
            "description": "Checks the bot's responsiveness.",
            "guarded": True,
        })

    async def run(self, message, args, from_pattern=False):
        return "Pong!"
