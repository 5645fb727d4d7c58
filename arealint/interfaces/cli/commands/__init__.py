"""
Commands package.
"""

from .check_cli import cmd_check
from .contracts_cli import cmd_contracts

__all__ = ["cmd_check", "cmd_contracts"]
