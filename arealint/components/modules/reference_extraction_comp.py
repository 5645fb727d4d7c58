"""
Reference extraction: which qualified names does a module mention?

Two reference forms are recognised:
- Import statements, which bind a short name to a qualified one
  (`import a.b`, `import a.b as c`, `from a.b import c`).
- Attribute chains at use sites whose head is one of those bound names
  (`c.helper()` after `from a.b import c` mentions `a.b.c.helper`).

Relative imports are the "current module" placeholder of Python and are
rewritten against the module's own name. This is best-effort syntactic
extraction: shadowed names, star imports and dynamic access are not tracked.
"""

from __future__ import annotations

import ast
import logging
from dataclasses import replace

from arealint.helpers.dto.module_dto import ModuleDescriptor
from arealint.helpers.names_helper import parent_name

logger = logging.getLogger(__name__)


def resolve_relative_import(module: str | None, level: int, current: str, is_package: bool) -> str | None:
    """
    Rewrite a (possibly relative) import source to an absolute dotted name.

    Args:
        module: The `module` field of an ImportFrom node (None for `from . import x`)
        level: Number of leading dots
        current: Name of the importing module
        is_package: Whether the importing module is a package (__init__.py)

    Returns:
        Absolute name, or None if the import climbs above the top-level package
    """
    if level == 0:
        return module

    package = current if is_package else parent_name(current)
    if package is None:
        return None

    parts = package.split(".")
    climb = level - 1
    if climb >= len(parts):
        return None
    base = ".".join(parts[: len(parts) - climb])
    return f"{base}.{module}" if module else base


def dotted_name(node: ast.expr) -> str | None:
    """Return "a.b.c" for a Name/Attribute chain, or None if the chain has any other node."""
    parts: list[str] = []
    while isinstance(node, ast.Attribute):
        parts.append(node.attr)
        node = node.value
    if not isinstance(node, ast.Name):
        return None
    parts.append(node.id)
    return ".".join(reversed(parts))


def _record(found: dict[str, int], name: str, lineno: int) -> None:
    previous = found.get(name)
    if previous is None or lineno < previous:
        found[name] = lineno


def collect_imports(descriptor: ModuleDescriptor) -> tuple[dict[str, int], dict[str, str]]:
    """
    Collect import targets and the short names they bind.

    Returns:
        Tuple of (target name -> first line, bound short name -> qualified name)
    """
    found: dict[str, int] = {}
    aliases: dict[str, str] = {}
    if descriptor.tree is None:
        return found, aliases

    for node in ast.walk(descriptor.tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                _record(found, alias.name, node.lineno)
                if alias.asname:
                    aliases[alias.asname] = alias.name
                else:
                    # `import a.b.c` binds only `a`
                    head = alias.name.split(".", 1)[0]
                    aliases[head] = head

        elif isinstance(node, ast.ImportFrom):
            base = resolve_relative_import(node.module, node.level, descriptor.name, descriptor.is_package)
            if base is None:
                logger.debug(
                    f"[References] {descriptor.name}: relative import at line {node.lineno} "
                    f"goes beyond the top-level package"
                )
                continue
            for alias in node.names:
                if alias.name == "*":
                    _record(found, base, node.lineno)
                    continue
                target = f"{base}.{alias.name}"
                _record(found, target, node.lineno)
                aliases[alias.asname or alias.name] = target

    return found, aliases


class _UseSiteCollector(ast.NodeVisitor):
    """Collects outermost attribute chains rooted at an import-bound name."""

    def __init__(self, aliases: dict[str, str]) -> None:
        self.aliases = aliases
        self.captured = set(aliases.values())
        self.found: dict[str, int] = {}

    def visit_Import(self, node: ast.Import) -> None:
        return

    def visit_ImportFrom(self, node: ast.ImportFrom) -> None:
        return

    def visit_Attribute(self, node: ast.Attribute) -> None:
        chain = dotted_name(node)
        if chain is None:
            self.generic_visit(node)
            return

        head, _, rest = chain.partition(".")
        target = self.aliases.get(head)
        if target is None:
            return
        expanded = f"{target}.{rest}"
        if expanded in self.captured:
            return
        _record(self.found, expanded, node.lineno)


def extract_references(descriptor: ModuleDescriptor) -> dict[str, int]:
    """
    Return every qualified name the module references, with its first line.

    The module's own name is never included.
    """
    found, aliases = collect_imports(descriptor)

    if descriptor.tree is not None:
        collector = _UseSiteCollector(aliases)
        collector.visit(descriptor.tree)
        for name, lineno in collector.found.items():
            _record(found, name, lineno)

    found.pop(descriptor.name, None)
    return found


def attach_references(descriptor: ModuleDescriptor) -> ModuleDescriptor:
    """Return a copy carrying its dependencies; the syntax tree is released."""
    references = extract_references(descriptor)
    return replace(
        descriptor,
        dependencies=frozenset(references),
        reference_lines=references,
        tree=None,
    )
