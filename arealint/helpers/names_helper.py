"""
Helpers for dotted module names.

A qualified module name like "shop.invoicing.numbers" is a path in the
namespace tree. Everything here is a pure string operation: no AST, no I/O.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

REGEX_PREFIX = "re:"

# A pattern is either a plain substring, a "re:"-prefixed regex string, or a compiled regex
NamePattern = str | re.Pattern[str]


def is_root_name(name: str) -> bool:
    """True for single-segment names ("shop"), which always act as area roots."""
    return "." not in name


def parent_name(name: str) -> str | None:
    """Return the enclosing namespace ("a.b" for "a.b.c"), or None for a root name."""
    if is_root_name(name):
        return None
    return name.rsplit(".", 1)[0]


def root_name(name: str) -> str:
    """Return the top-level segment of a dotted name."""
    return name.split(".", 1)[0]


def ancestor_names(name: str) -> list[str]:
    """
    List a name and every strict namespace prefix of it, longest first.

    Example:
        >>> ancestor_names("a.b.c")
        ['a.b.c', 'a.b', 'a']
    """
    parts = name.split(".")
    return [".".join(parts[:i]) for i in range(len(parts), 0, -1)]


def matches_pattern(name: str, pattern: NamePattern) -> bool:
    """
    Match a module name against a single ignore pattern.

    Plain strings match by substring containment. Strings starting with "re:"
    and compiled patterns match with re.search.
    """
    if isinstance(pattern, re.Pattern):
        return pattern.search(name) is not None
    if pattern.startswith(REGEX_PREFIX):
        return re.search(pattern[len(REGEX_PREFIX) :], name) is not None
    return pattern in name


def matches_any(name: str, patterns: Iterable[NamePattern]) -> bool:
    """True if the name matches at least one pattern."""
    return any(matches_pattern(name, p) for p in patterns)


def counterpart_test_names(name: str, templates: Iterable[str]) -> list[str]:
    """
    Expand test module name templates for a module.

    Placeholders:
        {name}: full module name ("shop.billing")
        {leaf}: last segment ("billing")
        {prefix}: parent namespace with a trailing dot ("shop."), empty for roots

    Example:
        >>> counterpart_test_names("shop.billing", ["{name}Test", "{prefix}test_{leaf}"])
        ['shop.billingTest', 'shop.test_billing']
    """
    parent = parent_name(name)
    prefix = f"{parent}." if parent else ""
    leaf = name.rsplit(".", 1)[-1]
    return [t.format(name=name, leaf=leaf, prefix=prefix) for t in templates]


def is_test_module(name: str, pattern: str) -> bool:
    """True if the module's last segment looks like a test module."""
    leaf = name.rsplit(".", 1)[-1]
    return re.search(pattern, leaf) is not None
