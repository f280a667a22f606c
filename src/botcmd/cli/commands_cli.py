#!/usr/bin/env python3
"""
CLI entry point for listing and inspecting commands (botcmd-commands).
"""

import argparse
import json
import sys
from pathlib import Path

from botcmd.client import CommandClient
from botcmd.config import get_config
from botcmd.core import CommandError, build_help
from botcmd.log import configure_logging


def build_client(commands_dir: str | None = None) -> CommandClient:
    """Create a client with the builtins and a commands directory registered."""
    config = get_config()
    client = CommandClient(config=config, commands_path=commands_dir)
    client.registry.register_defaults()
    if client.registry.commands_path is not None:
        client.registry.register_commands_in(client.registry.commands_path)
    return client


def cmd_list(args):
    """List all registered commands."""
    client = build_client(args.dir)

    if args.as_json:
        commands = [
            {
                "name": c.name,
                "group": c.group_id,
                "member_name": c.member_name,
                "aliases": c.aliases,
                "description": c.description,
                "guarded": c.guarded,
            }
            for c in client.registry
        ]
        print(json.dumps(commands, indent=2))
        return 0

    for group in client.registry.groups.values():
        print(f"\n{group.name}:")
        for command in group.commands.values():
            aliases = f" (aliases: {', '.join(command.aliases)})" if command.aliases else ""
            print(f"  - {command.name}{aliases}")
            print(f"    {command.description}")
    print()
    return 0


def cmd_info(args):
    """Show detailed help for a specific command."""
    client = build_client(args.dir)
    found = client.registry.find_commands(args.name)
    if len(found) != 1:
        if found:
            print(f"Ambiguous command '{args.name}': {', '.join(c.name for c in found)}", file=sys.stderr)
        else:
            print(f"Unknown command: {args.name}", file=sys.stderr)
        return 1
    print(build_help(found[0], client.command_prefix, client.user))
    return 0


def main(argv=None):
    """Main entry point for the botcmd-commands CLI."""
    parser = argparse.ArgumentParser(
        description="List and inspect bot commands",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    botcmd-commands list                 List builtin and configured commands
    botcmd-commands list --dir ./cmds    Include commands from ./cmds
    botcmd-commands info help            Show help for a command
        """,
    )
    parser.add_argument("--log-level", default=None, help="Logging level (e.g. DEBUG)")
    parser.add_argument("--log-file", type=Path, default=None, help="Write logs to this file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    list_parser = subparsers.add_parser("list", help="List all registered commands")
    list_parser.add_argument("--dir", default=None, help="Commands directory")
    list_parser.add_argument(
        "--json", action="store_true", dest="as_json", help="Output as JSON"
    )
    list_parser.set_defaults(func=cmd_list)

    info_parser = subparsers.add_parser("info", help="Show details for a command")
    info_parser.add_argument("name", help="Command name or alias")
    info_parser.add_argument("--dir", default=None, help="Commands directory")
    info_parser.set_defaults(func=cmd_info)

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1

    configure_logging(args.log_level or get_config().get("log_level"), args.log_file)
    try:
        return args.func(args)
    except CommandError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
