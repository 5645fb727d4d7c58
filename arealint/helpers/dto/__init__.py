"""
DTOs (Data Transfer Objects) used across multiple layers.

Rules for DTO modules:
- No I/O, no business logic
- Pure data structures with optional simple properties
"""

from .config_dto import DEFAULT_TEST_MODULE_TEMPLATES, AreaConfig, ContractTestsConfig
from .issue_dto import AnalysisResult, MissingContractTest, Violation
from .module_dto import ModuleDescriptor, SourceLocation, SourceUnit, Visibility

__all__ = [
    "DEFAULT_TEST_MODULE_TEMPLATES",
    "AnalysisResult",
    "AreaConfig",
    "ContractTestsConfig",
    "MissingContractTest",
    "ModuleDescriptor",
    "SourceLocation",
    "SourceUnit",
    "Violation",
    "Visibility",
]
