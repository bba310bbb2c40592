"""CLI commands package."""

from weddings_cli.commands.check import check_command
from weddings_cli.commands.countdown import countdown_command
from weddings_cli.commands.generate import generate_command
from weddings_cli.commands.serve import serve_command
from weddings_cli.commands.show import show_command

__all__ = [
    "check_command",
    "countdown_command",
    "generate_command",
    "serve_command",
    "show_command",
]
