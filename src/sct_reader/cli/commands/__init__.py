"""
Subcommands of ``sct``, one function per module.
"""

from sct_reader.cli.commands.errors import errors_command
from sct_reader.cli.commands.find import find_command
from sct_reader.cli.commands.stats import stats_command

__all__ = ["errors_command", "find_command", "stats_command"]
