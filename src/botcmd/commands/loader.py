"""
Command loader - discovers and loads command modules from a directory.

Commands live one module per file, grouped by directory:

    <commands_dir>/<group>/<member_name>.py

Each module defines a Command subclass:

    # ~/.botcmd/commands/util/echo.py
    from botcmd.core import Command

    class EchoCommand(Command):
        def __init__(self, client):
            super().__init__(client, {
                "name": "echo",
                "group": "util",
                "member_name": "echo",
                "description": "Repeats the given text.",
            })

        async def run(self, message, args, from_pattern=False):
            return args

Package builtins under ./builtins use the same layout and serve as the
fallback when a command is reloaded.
"""

from __future__ import annotations

import logging
import sys
from importlib.util import module_from_spec, spec_from_file_location
from pathlib import Path
from types import ModuleType
from typing import TYPE_CHECKING

from botcmd.core.command import Command
from botcmd.core.exceptions import CommandError, CommandLoadError

if TYPE_CHECKING:
    from botcmd.registry import CommandRegistry

logger = logging.getLogger(__name__)

# Default user commands directory
USER_COMMANDS_DIR = Path.home() / ".botcmd" / "commands"

# Package builtins directory
PACKAGE_BUILTINS_DIR = Path(__file__).parent / "builtins"

# Namespace for loaded command modules in sys.modules
MODULE_PREFIX = "botcmd_cmd"


def discover_commands(commands_dir: Path) -> list[Path]:
    """
    Discover command modules in the given path.

    Args:
        commands_dir: Directory holding one subdirectory per group

    Returns:
        Sorted list of command module paths.
    """
    commands_dir = Path(commands_dir)
    if not commands_dir.exists():
        return []

    if not commands_dir.is_dir():
        logger.warning(f"Commands path is not a directory: {commands_dir}")
        return []

    cmd_paths = []
    for group_dir in sorted(commands_dir.iterdir()):
        if not group_dir.is_dir():
            continue
        # Skip hidden and private directories
        if group_dir.name.startswith((".", "_")):
            continue
        for module_path in sorted(group_dir.glob("*.py")):
            if module_path.name.startswith((".", "_")):
                continue
            cmd_paths.append(module_path)

    return cmd_paths


def find_command_class(module: ModuleType) -> type[Command]:
    """Return the first Command subclass defined in a module."""
    for value in vars(module).values():
        if (
            isinstance(value, type)
            and issubclass(value, Command)
            and value is not Command
            and value.__module__ == module.__name__
        ):
            return value
    raise CommandLoadError(f"No Command subclass defined in {module.__name__}")


class CommandModuleLoader:
    """Loads command modules and manages their sys.modules entries.

    Reload works through evict/load/restore so a failed load can put the
    previous module back.
    """

    def __init__(self, prefix: str = MODULE_PREFIX):
        self.prefix = prefix

    def module_name(self, path: Path) -> str:
        """Module name for a <group>/<member>.py path."""
        path = Path(path)
        return f"{self.prefix}.{path.parent.name}.{path.stem}"

    def evict(self, module_name: str) -> ModuleType | None:
        """Remove a cached module, returning it for a later restore."""
        return sys.modules.pop(module_name, None)

    def restore(self, module_name: str, module: ModuleType | None) -> None:
        """Put back a module removed by evict (or drop the entry if there was none)."""
        if module is None:
            sys.modules.pop(module_name, None)
        else:
            sys.modules[module_name] = module

    def load(self, module_name: str, path: Path) -> type[Command]:
        """
        Load a command module fresh from disk.

        Args:
            module_name: Name to register the module under in sys.modules
            path: Path to the module file

        Returns:
            The Command subclass the module defines.

        Raises:
            CommandLoadError: If the module is missing, broken, or defines no command.
        """
        path = Path(path)
        if not path.is_file():
            raise CommandLoadError(f"Command module not found: {path}")

        spec = spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise CommandLoadError(f"Could not create module spec for {path}")

        module = module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
            return find_command_class(module)
        except CommandLoadError:
            sys.modules.pop(module_name, None)
            raise
        except SyntaxError as e:
            sys.modules.pop(module_name, None)
            raise CommandLoadError(f"Syntax error: {e}") from e
        except ImportError as e:
            sys.modules.pop(module_name, None)
            raise CommandLoadError(f"Import error: {e}") from e
        except Exception as e:
            sys.modules.pop(module_name, None)
            raise CommandLoadError(f"Error: {e}") from e


def load_command(cmd_path: Path, loader: CommandModuleLoader | None = None) -> tuple[str, type[Command] | None, str]:
    """
    Load a single command module.

    Args:
        cmd_path: Path to the command module
        loader: Loader to use (default: a fresh CommandModuleLoader)

    Returns:
        Tuple of (member_name, command class or None, error_message)
    """
    loader = loader or CommandModuleLoader()
    cmd_path = Path(cmd_path)
    try:
        command_cls = loader.load(loader.module_name(cmd_path), cmd_path)
    except CommandLoadError as e:
        return (cmd_path.stem, None, str(e))
    return (cmd_path.stem, command_cls, "")


def load_all_commands(registry: "CommandRegistry", commands_dir: Path | None = None, verbose: bool = False) -> int:
    """
    Load and register all commands from a directory.

    Groups named by the subdirectories are registered when missing.

    Args:
        registry: Registry to register commands into
        commands_dir: Commands directory (default: ~/.botcmd/commands)
        verbose: Log info messages for successful loads

    Returns:
        Number of successfully registered commands.
    """
    commands_dir = Path(commands_dir or USER_COMMANDS_DIR)
    total_loaded = 0

    for cmd_path in discover_commands(commands_dir):
        member_name, command_cls, error = load_command(cmd_path, registry.loader)
        if command_cls is None:
            logger.warning(f"Failed to load command '{member_name}': {error}")
            continue

        try:
            group_id = cmd_path.parent.name
            if group_id not in registry.groups:
                registry.register_group(group_id)
            registry.register_command(command_cls)
        except CommandError as e:
            logger.warning(f"Failed to register command '{member_name}': {e}")
            continue

        total_loaded += 1
        if verbose:
            logger.info(f"Loaded command: {cmd_path.parent.name}:{member_name}")

    return total_loaded
