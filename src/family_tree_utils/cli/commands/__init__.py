"""
CLI command modules for family_tree_utils.

Each command module defines Typer-compatible command functions.
"""

from family_tree_utils.cli.commands.analyze import (
    child_name_mismatch_command,
    one_name_command,
    same_last_name_command,
    title_command,
)
from family_tree_utils.cli.commands.stats import stats_command
from family_tree_utils.cli.commands.title_codes import title_codes_command

__all__ = [
    "child_name_mismatch_command",
    "one_name_command",
    "same_last_name_command",
    "stats_command",
    "title_codes_command",
    "title_command",
]
