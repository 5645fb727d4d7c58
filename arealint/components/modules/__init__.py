"""Module descriptor stages: extract, reference, classify, resolve."""

from .ancestry_comp import build_module_index, mark_public_ancestors, resolve_public_ancestor
from .descriptor_extraction_comp import build_descriptor, extract_descriptors, read_declared_visibility
from .reference_extraction_comp import attach_references, extract_references, resolve_relative_import
from .visibility_comp import classify_visibility, mark_visibility

__all__ = [
    "attach_references",
    "build_descriptor",
    "build_module_index",
    "classify_visibility",
    "extract_descriptors",
    "extract_references",
    "mark_public_ancestors",
    "mark_visibility",
    "read_declared_visibility",
    "resolve_public_ancestor",
    "resolve_relative_import",
]
