"""Public ancestor resolution: which area does each module belong to?"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace

from arealint.helpers.dto.module_dto import ModuleDescriptor
from arealint.helpers.exceptions import DuplicateModuleError
from arealint.helpers.names_helper import ancestor_names, is_root_name, root_name

logger = logging.getLogger(__name__)


def build_module_index(descriptors: list[ModuleDescriptor]) -> dict[str, ModuleDescriptor]:
    """
    Index descriptors by name.

    Raises:
        DuplicateModuleError: If two descriptors share a name
    """
    index: dict[str, ModuleDescriptor] = {}
    for descriptor in descriptors:
        existing = index.get(descriptor.name)
        if existing is not None:
            raise DuplicateModuleError(descriptor.name, [existing.location.path, descriptor.location.path])
        index[descriptor.name] = descriptor
    return index


def resolve_public_ancestor(name: str, index: Mapping[str, ModuleDescriptor]) -> str:
    """
    Find the nearest enclosing public module, the module itself included.

    Walks from the full name up to the top-level segment. The top-level
    segment is always accepted, so this never fails even when no module on
    the path is known.
    """
    for candidate in ancestor_names(name):
        if is_root_name(candidate):
            break
        descriptor = index.get(candidate)
        if descriptor is not None and descriptor.is_public:
            return candidate
    return root_name(name)


def mark_public_ancestors(descriptors: list[ModuleDescriptor]) -> list[ModuleDescriptor]:
    """Attach public_ancestor to every descriptor. Needs the complete descriptor set."""
    index = build_module_index(descriptors)
    resolved = [replace(d, public_ancestor=resolve_public_ancestor(d.name, index)) for d in descriptors]
    logger.debug(f"[Ancestry] Resolved areas for {len(resolved)} modules")
    return resolved
