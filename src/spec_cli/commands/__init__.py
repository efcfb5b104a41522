"""CLI commands for spec-cli."""

from spec_cli.commands.create_cmd import create_command
from spec_cli.commands.init_cmd import init_command
from spec_cli.commands.list_cmd import list_command
from spec_cli.commands.merge_cmd import merge_command

__all__ = [
    "create_command",
    "init_command",
    "list_command",
    "merge_command",
]
