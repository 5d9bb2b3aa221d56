"""
CLI command modules for namefully.

Each command module defines a single Typer-compatible command function.
"""

from namefully.cli.commands.format import format_command
from namefully.cli.commands.stats import stats_command
from namefully.cli.commands.zip import zip_command

__all__ = [
    "format_command",
    "stats_command",
    "zip_command",
]
