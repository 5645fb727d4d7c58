"""
Analyze areas workflow.

Runs the full analysis over a fixed set of source units:

    extract -> references -> visibility   (per unit, may run in parallel)
    ---------------- barrier ----------------
    public ancestors -> area access check -> contract tests check

Everything after the barrier needs the complete descriptor set, so no
checking starts until every unit has been extracted. The whole run is pure:
the same units and config always give the same result.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from arealint.components.checks.area_access_comp import AreaAccessChecker
from arealint.components.checks.contract_tests_comp import find_missing_contract_tests
from arealint.components.modules.ancestry_comp import build_module_index, mark_public_ancestors
from arealint.components.modules.descriptor_extraction_comp import build_descriptor
from arealint.components.modules.reference_extraction_comp import attach_references
from arealint.components.modules.visibility_comp import mark_visibility
from arealint.helpers.dto.config_dto import AreaConfig
from arealint.helpers.dto.issue_dto import AnalysisResult
from arealint.helpers.dto.module_dto import ModuleDescriptor, SourceUnit

logger = logging.getLogger(__name__)


def _prepare_unit(unit: SourceUnit, config: AreaConfig) -> ModuleDescriptor:
    """Per-unit stages: build the descriptor, extract references, classify."""
    descriptor = build_descriptor(unit, config.visibility_attribute, config.docstring_declares_public)
    descriptor = attach_references(descriptor)
    return mark_visibility(descriptor)


def prepare_descriptors(units: list[SourceUnit], config: AreaConfig) -> list[ModuleDescriptor]:
    """
    Run the per-unit stages over all units and join.

    Output order always matches input order, whether or not a thread pool is used.

    Raises:
        DuplicateModuleError: If two units define the same module
    """
    if config.jobs > 1 and len(units) > 1:
        logger.debug(f"[Analyze] Extracting {len(units)} units on {config.jobs} threads")
        with ThreadPoolExecutor(max_workers=config.jobs) as pool:
            descriptors = list(pool.map(lambda u: _prepare_unit(u, config), units))
    else:
        descriptors = [_prepare_unit(u, config) for u in units]

    build_module_index(descriptors)
    return descriptors


def analyze(
    units: list[SourceUnit], config: AreaConfig | None = None, contract_tests: bool | None = None
) -> AnalysisResult:
    """
    Analyze source units for area boundary violations.

    Args:
        units: Parsed source units, one per module
        config: Analysis options (defaults apply when omitted)
        contract_tests: Also run the contract tests check (defaults to config.contract_tests.enabled)

    Returns:
        AnalysisResult with resolved modules, violations and missing contract tests

    Raises:
        DuplicateModuleError: If two units define the same module
    """
    config = config or AreaConfig()
    run_contracts = config.contract_tests.enabled if contract_tests is None else contract_tests

    descriptors = prepare_descriptors(units, config)
    descriptors = mark_public_ancestors(descriptors)

    result = AnalysisResult(modules=descriptors)
    result.violations = AreaAccessChecker(config).check(descriptors)
    if run_contracts:
        result.missing_tests = find_missing_contract_tests(descriptors, config)

    logger.info(
        f"[Analyze] {len(descriptors)} modules, {len(result.violations)} violations, "
        f"{len(result.missing_tests)} missing contract tests"
    )
    return result


def check_contract_tests(units: list[SourceUnit], config: AreaConfig | None = None) -> AnalysisResult:
    """Run only the contract tests check. Ancestors are not needed for it."""
    config = config or AreaConfig()
    descriptors = prepare_descriptors(units, config)
    return AnalysisResult(modules=descriptors, missing_tests=find_missing_contract_tests(descriptors, config))
