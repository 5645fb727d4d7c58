"""Source discovery components."""

from .discovery_comp import (
    discover_python_files,
    find_import_base,
    load_source_unit,
    load_source_units,
    module_name_for_path,
    parse_source,
)

__all__ = [
    "discover_python_files",
    "find_import_base",
    "load_source_unit",
    "load_source_units",
    "module_name_for_path",
    "parse_source",
]
