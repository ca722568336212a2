"""
CLI command modules for selection_trail.

Each command module defines a single Typer-compatible command function.
"""

from selection_trail.cli.commands.trail import trail_command
from selection_trail.cli.commands.tree import tree_command

__all__ = [
    "trail_command",
    "tree_command",
]
