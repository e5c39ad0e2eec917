"""CLI commands for kss."""

from kss.cli.commands.parse import parse_command
from kss.cli.commands.show import show_command

__all__ = [
    "parse_command",
    "show_command",
]
