"""Module descriptor extraction from parsed source units."""

from __future__ import annotations

import ast
import logging

from arealint.helpers.dto.module_dto import ModuleDescriptor, SourceLocation, SourceUnit

logger = logging.getLogger(__name__)

DEFAULT_VISIBILITY_ATTRIBUTE = "__public__"


def _assigned_value(stmt: ast.stmt, attribute: str) -> ast.expr | None:
    """Return the value assigned to `attribute` by a module-level statement, if any."""
    if isinstance(stmt, ast.Assign):
        for target in stmt.targets:
            if isinstance(target, ast.Name) and target.id == attribute:
                return stmt.value
    elif isinstance(stmt, ast.AnnAssign) and stmt.value is not None:
        if isinstance(stmt.target, ast.Name) and stmt.target.id == attribute:
            return stmt.value
    return None


def read_declared_visibility(
    tree: ast.Module,
    attribute: str = DEFAULT_VISIBILITY_ATTRIBUTE,
    docstring_declares_public: bool = False,
) -> tuple[bool | None, int | None]:
    """
    Read a module's own visibility declaration.

    Only top-level assignments count; the last one wins, as it would at import time.
    `False` declares the module private, `None` counts as no declaration, and any
    other value (including non-literal expressions) declares it public.

    Returns:
        Tuple of (declared value, line of the declaration)
    """
    declared: bool | None = None
    line: int | None = None
    found = False

    for stmt in tree.body:
        value = _assigned_value(stmt, attribute)
        if value is None:
            continue
        found = True
        line = stmt.lineno
        try:
            literal = ast.literal_eval(value)
        except (ValueError, TypeError, SyntaxError, RecursionError):
            declared = True
            continue
        if literal is None:
            declared = None
        else:
            declared = literal is not False

    if not found and docstring_declares_public and ast.get_docstring(tree):
        return True, 1

    return declared, line


def build_descriptor(
    unit: SourceUnit,
    attribute: str = DEFAULT_VISIBILITY_ATTRIBUTE,
    docstring_declares_public: bool = False,
) -> ModuleDescriptor:
    """Create the descriptor for the module a source unit defines."""
    declared, line = read_declared_visibility(unit.tree, attribute, docstring_declares_public)
    return ModuleDescriptor(
        name=unit.module,
        location=SourceLocation(path=unit.path, line=line or 1),
        tree=unit.tree,
        is_package=unit.is_package,
        declared_public=declared,
    )


def extract_descriptors(
    units: list[SourceUnit],
    attribute: str = DEFAULT_VISIBILITY_ATTRIBUTE,
    docstring_declares_public: bool = False,
) -> list[ModuleDescriptor]:
    """
    Produce one descriptor per source unit, in input order.

    Each Python file defines exactly one module; packages at every depth are
    covered because discovery walks the whole tree.
    """
    descriptors = [build_descriptor(u, attribute, docstring_declares_public) for u in units]
    logger.debug(f"[Extract] Built {len(descriptors)} module descriptors")
    return descriptors
