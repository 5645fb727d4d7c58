"""Visibility classification of module descriptors."""

from __future__ import annotations

from dataclasses import replace

from arealint.helpers.dto.module_dto import ModuleDescriptor, Visibility
from arealint.helpers.names_helper import is_root_name


def classify_visibility(name: str, declared_public: bool | None) -> Visibility:
    """
    Decide a module's visibility from its name and its own declaration.

    Top-level modules are always public: they are the outermost area
    boundaries. Modules that declare nothing stay undetermined and are
    left out of boundary checks in both directions.
    """
    if is_root_name(name):
        return Visibility.PUBLIC
    if declared_public is None:
        return Visibility.UNDETERMINED
    return Visibility.PUBLIC if declared_public else Visibility.PRIVATE


def mark_visibility(descriptor: ModuleDescriptor) -> ModuleDescriptor:
    return replace(descriptor, visibility=classify_visibility(descriptor.name, descriptor.declared_public))
