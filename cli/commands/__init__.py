"""CLI commands package."""

from cli.commands.interval import interval_command
from cli.commands.phrases import phrases_command
from cli.commands.show import show_command

__all__ = [
    "interval_command",
    "phrases_command",
    "show_command",
]
