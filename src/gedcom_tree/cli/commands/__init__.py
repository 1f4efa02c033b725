"""
CLI command modules for gedcom_tree.

Each command module defines Typer-compatible command functions.
"""

from gedcom_tree.cli.commands.export import export_command, print_command
from gedcom_tree.cli.commands.roots import roots_command
from gedcom_tree.cli.commands.stats import stats_command

__all__ = [
    "export_command",
    "print_command",
    "roots_command",
    "stats_command",
]
