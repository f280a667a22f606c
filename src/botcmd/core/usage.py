"""
Usage and help string rendering for commands.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from botcmd.core.command import Command

NBSP = "\xa0"


def build_usage(command: str, prefix: str | None = None, user: Any = None) -> str:
    """Render an invocation as an inline-code usage string.

    Spaces become non-breaking spaces so chat clients don't wrap the
    command mid-way.

    Args:
        command: Command name plus optional argument string (e.g. "add 5")
        prefix: Prefix for the prefixed form (e.g. "!")
        user: Identity with ``username`` and ``discriminator`` for the mention form

    Returns:
        Usage string, e.g. "`!add 5` or `@Bot#0001 add 5`" (with NBSPs)
    """
    nbcmd = command.replace(" ", NBSP)
    if not prefix and not user:
        return f"`{nbcmd}`"

    prefix_part = ""
    if prefix:
        if len(prefix) > 1 and not prefix.endswith(" "):
            prefix += " "
        prefix = prefix.replace(" ", NBSP)
        prefix_part = f"`{prefix}{nbcmd}`"

    mention_part = ""
    if user:
        username = user.username.replace(" ", NBSP)
        mention_part = f"`@{username}#{user.discriminator}{NBSP}{nbcmd}`"

    separator = " or " if prefix and user else ""
    return f"{prefix_part}{separator}{mention_part}"


def build_help(command: "Command", prefix: str | None = None, user: Any = None) -> str:
    """Render the full help text for a command."""
    invocation = command.name
    if command.format and command.format != command.name:
        invocation = f"{command.name} {command.format}"

    lines = [
        f"__Command **{command.name}**:__ {command.description}"
        + (" (Usable only in servers)" if command.guild_only else ""),
        "",
        f"**Format:** {build_usage(invocation, prefix, user)}",
    ]
    if command.aliases:
        lines.append(f"**Aliases:** {', '.join(command.aliases)}")
    group_name = command.group.name if command.group is not None else command.group_id
    lines.append(f"**Group:** {group_name} (`{command.group_id}:{command.member_name}`)")
    if command.details:
        lines.append(f"**Details:** {command.details}")
    if command.examples:
        lines.append("**Examples:**")
        lines.extend(command.examples)
    return "\n".join(lines)
