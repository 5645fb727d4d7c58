"""
Helpers package.
"""

from .exceptions import ArealintError, ConfigError, DuplicateModuleError, SourceParseError
from .names_helper import (
    ancestor_names,
    counterpart_test_names,
    is_root_name,
    is_test_module,
    matches_any,
    parent_name,
    root_name,
)

__all__ = [
    "ArealintError",
    "ConfigError",
    "DuplicateModuleError",
    "SourceParseError",
    "ancestor_names",
    "counterpart_test_names",
    "is_root_name",
    "is_test_module",
    "matches_any",
    "parent_name",
    "root_name",
]
