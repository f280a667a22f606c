"""
Data models for the command framework.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from botcmd.core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from botcmd.core.command import Command
    from botcmd.core.group import CommandGroup


class CommandInfo(BaseModel):
    """Declarative descriptor a Command is built from.

    Keys given as None are treated as not supplied, so they fall back to
    the defaults below.
    """

    name: str = Field(min_length=1)
    aliases: list[str] = Field(default_factory=list)
    auto_aliases: bool = True
    group: str = Field(min_length=1)
    member_name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    format: Optional[str] = None
    details: Optional[str] = None
    examples: Optional[list[str]] = None
    guild_only: bool = False
    default_handling: bool = True
    args: Optional[list[Any]] = None
    args_type: Literal["single", "multiple"] = "single"
    args_count: int = Field(default=0, ge=0)
    args_single_quotes: bool = True
    patterns: Optional[list[re.Pattern]] = None
    guarded: bool = False

    @model_validator(mode="before")
    @classmethod
    def drop_unset(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return {k: v for k, v in data.items() if v is not None}
        return data

    @field_validator("aliases", "examples", "args", "patterns", mode="before")
    @classmethod
    def check_sequence(cls, value: Any, info) -> Any:
        # Sets and other iterables would lose their order
        if value is not None and not isinstance(value, (list, tuple)):
            raise ValueError(f"{info.field_name} must be a list or tuple")
        return value

    @field_validator("name", "group", "member_name")
    @classmethod
    def check_lowercase(cls, value: str, info) -> str:
        if value != value.lower():
            raise ValueError(f"{info.field_name} must be lowercase")
        return value

    @field_validator("aliases")
    @classmethod
    def check_aliases(cls, value: list[str]) -> list[str]:
        for alias in value:
            if alias != alias.lower():
                raise ValueError(f"alias '{alias}' must be lowercase")
        return value

    @model_validator(mode="after")
    def check_args_count(self) -> CommandInfo:
        if self.args_type == "multiple" and self.args_count and self.args_count < 2:
            raise ValueError("args_count must be at least 2 when args_type is 'multiple'")
        return self

    @classmethod
    def from_info(cls, info: CommandInfo | Mapping[str, Any] | None) -> CommandInfo:
        """Validate a descriptor, raising ConfigurationError on any problem."""
        if isinstance(info, CommandInfo):
            # Re-check instances, which may have been built with model_construct
            data = {
                name: getattr(info, name)
                for name in cls.model_fields
                if hasattr(info, name)
            }
        elif not info:
            raise ConfigurationError("Command info must be specified.")
        elif not isinstance(info, Mapping):
            raise ConfigurationError(
                f"Command info must be a mapping, got {type(info).__name__}"
            )
        else:
            data = dict(info)
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'info'}: {err['msg']}"
                for err in e.errors()
            )
            raise ConfigurationError(f"Invalid command info: {problems}") from e


class User(BaseModel):
    """Actor identity used for mention-style usage strings."""
    username: str
    discriminator: str = "0000"
    id: str | None = None


@dataclass
class CommandMessage:
    """Message context a command is checked and run against."""

    content: str = ""
    author: User | None = None
    guild: Any = None


@runtime_checkable
class CommandScope(Protocol):
    """Collection (guild) that owns per-scope enablement bits."""

    def is_command_enabled(self, command: "Command") -> bool:  # pragma: no cover - signature only
        ...

    def set_command_enabled(self, command: "Command", enabled: bool) -> None:  # pragma: no cover
        ...

    def is_group_enabled(self, group: "CommandGroup") -> bool:  # pragma: no cover - signature only
        ...
