"""
Argument specifications attached to a command.

Parsing argument strings into values is handled elsewhere; this module only
validates the declarative spec and binds it to the owning command.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from botcmd.core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from botcmd.core.command import Command


class CommandArgument:
    """A single argument of a command."""

    def __init__(self, command: "Command", info: Mapping[str, Any] | "CommandArgument"):
        if isinstance(info, CommandArgument):
            info = info.to_dict()
        if not isinstance(info, Mapping):
            raise ConfigurationError(
                f"Argument info must be a mapping, got {type(info).__name__}"
            )
        if not info.get("key"):
            raise ConfigurationError("Argument key must be specified.")
        if not info.get("prompt"):
            raise ConfigurationError(f"Argument '{info['key']}' must have a prompt.")
        wait = info.get("wait", 30)
        if not isinstance(wait, (int, float)) or isinstance(wait, bool) or wait <= 0:
            raise ConfigurationError(f"Argument '{info['key']}' wait must be a positive number.")

        self.command = command
        self.key: str = info["key"]
        self.label: str = info.get("label") or info["key"]
        self.prompt: str = info["prompt"]
        self.type: str | None = info.get("type")
        self.default: Any = info.get("default")
        self.infinite: bool = bool(info.get("infinite", False))
        self.wait = wait

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "label": self.label,
            "prompt": self.prompt,
            "type": self.type,
            "default": self.default,
            "infinite": self.infinite,
            "wait": self.wait,
        }

    def __repr__(self) -> str:
        return f"CommandArgument(key={self.key!r}, command={self.command.name!r})"
