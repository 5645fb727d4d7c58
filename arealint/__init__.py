"""
Arealint: enforce public/private area boundaries between Python modules.

Typical use from Python:

    from arealint import AreaConfig, analyze, load_source_units

    units = load_source_units([Path("src")])
    result = analyze(units, AreaConfig(ignore_callers=["re:^tests"]))
    for violation in result.violations:
        print(violation.location, violation.message)
"""

from .__version__ import __version__
from .components.discovery.discovery_comp import load_source_units, parse_source
from .helpers.dto import AnalysisResult, AreaConfig, ModuleDescriptor, SourceUnit, Violation, Visibility
from .helpers.exceptions import ArealintError, ConfigError, DuplicateModuleError, SourceParseError
from .workflows.analyze_areas_wf import analyze, check_contract_tests

__all__ = [
    "AnalysisResult",
    "AreaConfig",
    "ArealintError",
    "ConfigError",
    "DuplicateModuleError",
    "ModuleDescriptor",
    "SourceParseError",
    "SourceUnit",
    "Violation",
    "Visibility",
    "__version__",
    "analyze",
    "check_contract_tests",
    "load_source_units",
    "parse_source",
]
