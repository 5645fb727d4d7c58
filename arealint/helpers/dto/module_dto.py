"""
Module descriptor DTOs.

Rules for DTO modules:
- Import only stdlib and typing (no arealint.* imports)
- Contain ONLY dataclass/type definitions and simple type aliases
- No I/O, no business logic

Descriptors are frozen. Later pipeline stages attach fields with
dataclasses.replace() instead of mutating.
"""

from __future__ import annotations

import ast
from dataclasses import dataclass, field
from enum import Enum


class Visibility(str, Enum):
    """Declared role of a module inside its area."""

    PUBLIC = "public"
    PRIVATE = "private"
    UNDETERMINED = "undetermined"


@dataclass(frozen=True)
class SourceLocation:
    """File path and 1-based line number, for diagnostics."""

    path: str
    line: int

    def __str__(self) -> str:
        return f"{self.path}:{self.line}"


@dataclass(frozen=True)
class SourceUnit:
    """
    One parsed Python file.

    Attributes:
        path: Stable identifier used in diagnostics (usually the relative file path)
        module: Qualified module name defined by this file ("shop.billing")
        tree: Parsed syntax tree
        is_package: True for __init__.py files (relative imports resolve to the module itself)
    """

    path: str
    module: str
    tree: ast.Module = field(compare=False, repr=False)
    is_package: bool = False


@dataclass(frozen=True)
class ModuleDescriptor:
    """
    One module definition found during analysis.

    Attributes:
        name: Dotted qualified name, unique within a run
        location: Where the module is defined
        tree: Module body; only the extraction stages use it
        is_package: Whether the module is a package (__init__.py)
        declared_public: Raw visibility declaration (None when the module declares nothing)
        dependencies: Qualified names referenced from the module body
        reference_lines: First line on which each dependency appears
        visibility: Set by the visibility classifier
        public_ancestor: Set by the ancestor resolver
    """

    name: str
    location: SourceLocation
    tree: ast.Module | None = field(default=None, compare=False, repr=False)
    is_package: bool = False
    declared_public: bool | None = None
    dependencies: frozenset[str] = frozenset()
    reference_lines: dict[str, int] = field(default_factory=dict, compare=False, repr=False)
    visibility: Visibility | None = None
    public_ancestor: str | None = None

    @property
    def is_public(self) -> bool:
        return self.visibility is Visibility.PUBLIC

    @property
    def is_undetermined(self) -> bool:
        return self.visibility is None or self.visibility is Visibility.UNDETERMINED
