"""
Command module loading.

Commands are loaded from:
1. A configured commands directory (e.g. ~/.botcmd/commands/)
2. Package builtins (fallback)
"""

from __future__ import annotations

from botcmd.commands.loader import (
    PACKAGE_BUILTINS_DIR,
    USER_COMMANDS_DIR,
    CommandModuleLoader,
    discover_commands,
    load_all_commands,
    load_command,
)

__all__ = [
    "PACKAGE_BUILTINS_DIR",
    "USER_COMMANDS_DIR",
    "CommandModuleLoader",
    "discover_commands",
    "load_all_commands",
    "load_command",
]
