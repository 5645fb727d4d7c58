"""
Source discovery and parsing.

Turns paths on disk into SourceUnit objects. This is the only place that
reads files; everything downstream works on parsed trees.
"""

from __future__ import annotations

import ast
import logging
from pathlib import Path

from arealint.helpers.dto.module_dto import SourceUnit
from arealint.helpers.exceptions import SourceParseError

logger = logging.getLogger(__name__)


def discover_python_files(roots: list[Path], exclude_dirs: list[str] | None = None) -> list[Path]:
    """
    Find all Python files under the given roots.

    Args:
        roots: Directories to walk (a file path is returned as-is)
        exclude_dirs: Directory names to skip anywhere in the tree

    Returns:
        Sorted, de-duplicated list of .py files
    """
    excluded = set(exclude_dirs or [])
    found: set[Path] = set()

    for root in roots:
        # Only the root is resolved; symlinked files keep their in-tree path
        root = root.resolve()
        if root.is_file():
            if root.suffix == ".py":
                found.add(root)
            continue
        for path in root.rglob("*.py"):
            # Only directory parts below the root count against the exclude list
            rel_parts = path.relative_to(root).parts[:-1]
            if any(part in excluded for part in rel_parts):
                continue
            found.add(path)

    logger.debug(f"[Discovery] Found {len(found)} Python files under {len(roots)} root(s)")
    return sorted(found)


def find_import_base(path: Path) -> Path:
    """
    Return the directory module names are computed from.

    Climbs out of regular packages (directories with __init__.py) so that
    passing "src/shop" still yields names starting with "shop".
    """
    base = path.parent if path.is_file() or path.suffix == ".py" else path
    while (base / "__init__.py").exists() and base.parent != base:
        base = base.parent
    return base


def module_name_for_path(path: Path, base: Path) -> tuple[str, bool]:
    """
    Compute the dotted module name for a file.

    Returns:
        Tuple of (module name, is_package)

    Raises:
        SourceParseError: If the file is not below base
    """
    if not path.is_relative_to(base):
        raise SourceParseError(str(path), f"file is outside the import base {base}")
    rel_path = path.relative_to(base)
    module_parts = [*rel_path.parts[:-1], rel_path.stem]
    is_package = module_parts[-1] == "__init__"
    if is_package:
        module_parts = module_parts[:-1]
    if not module_parts:
        raise SourceParseError(str(path), "cannot derive a module name from a top-level __init__.py")
    return ".".join(module_parts), is_package


def parse_source(path: str, text: str, module: str, is_package: bool = False) -> SourceUnit:
    """
    Parse source text into a SourceUnit.

    Raises:
        SourceParseError: If the text is not valid Python
    """
    try:
        tree = ast.parse(text, filename=path)
    except SyntaxError as e:
        raise SourceParseError(path, f"line {e.lineno}: {e.msg}") from e
    return SourceUnit(path=path, module=module, tree=tree, is_package=is_package)


def load_source_unit(path: Path, base: Path, display_root: Path | None = None) -> SourceUnit:
    """
    Read and parse one file.

    Args:
        path: File to load
        base: Directory module names are relative to
        display_root: Directory the reported path is relative to (defaults to base)

    Raises:
        SourceParseError: If the file cannot be read or parsed
    """
    module, is_package = module_name_for_path(path, base)
    shown = path
    with_root = display_root or base
    if path.is_relative_to(with_root):
        shown = path.relative_to(with_root)
    path_str = str(shown).replace("\\", "/")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceParseError(path_str, str(e)) from e

    return parse_source(path_str, text, module, is_package)


def load_source_units(roots: list[Path], exclude_dirs: list[str] | None = None) -> list[SourceUnit]:
    """
    Discover and parse every Python file under the roots.

    Any unparsable file aborts the whole load.
    """
    units: list[SourceUnit] = []
    seen: set[Path] = set()
    cwd = Path.cwd()
    for root in roots:
        root = root.resolve()
        base = find_import_base(root)
        for path in discover_python_files([root], exclude_dirs):
            if path in seen:
                continue
            seen.add(path)
            units.append(load_source_unit(path, base, display_root=cwd))
    logger.info(f"[Discovery] Loaded {len(units)} source units")
    return units
