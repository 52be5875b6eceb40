"""
CLI command modules for gedcomx_converter.

Each command module defines a single Typer-compatible command function.
"""

from gedcomx_converter.cli.commands.convert import convert_command
from gedcomx_converter.cli.commands.names import names_command
from gedcomx_converter.cli.commands.stats import stats_command

__all__ = [
    "convert_command",
    "names_command",
    "stats_command",
]
