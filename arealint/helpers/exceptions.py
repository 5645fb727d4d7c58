"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
- Rule violations are results, not errors. Never raise for them.
"""

from __future__ import annotations


class ArealintError(Exception):
    """Base class for errors that abort an analysis run."""


class SourceParseError(ArealintError):
    """Raised when a source file cannot be read or parsed into a syntax tree."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to parse {path}: {reason}")
        self.path = path
        self.reason = reason


class DuplicateModuleError(ArealintError):
    """Raised when two source units define the same qualified module name."""

    def __init__(self, name: str, paths: list[str]) -> None:
        super().__init__(f"Module {name} is defined more than once: {', '.join(paths)}")
        self.name = name
        self.paths = paths


class ConfigError(ArealintError):
    """Raised when configuration cannot be loaded or fails validation."""
