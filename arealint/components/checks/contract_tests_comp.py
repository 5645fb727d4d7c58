"""
Contract tests check.

Ensures that public contracts are always covered with tests. A developer
looking for a public module's test suite should find a test module named
after it (for example `shop/billing.py` -> `shop/test_billing.py` or
`tests/shop/test_billing.py`).

This does not measure coverage. It only makes sure a test module exists,
even for public modules without functions (exceptions, dataclasses), which
should get an empty test module. Undetermined modules are skipped.
"""

from __future__ import annotations

import logging

from arealint.helpers.dto.config_dto import AreaConfig
from arealint.helpers.dto.issue_dto import MissingContractTest
from arealint.helpers.dto.module_dto import ModuleDescriptor
from arealint.helpers.names_helper import counterpart_test_names, is_test_module, matches_any

logger = logging.getLogger(__name__)


def find_missing_contract_tests(
    descriptors: list[ModuleDescriptor], config: AreaConfig | None = None
) -> list[MissingContractTest]:
    """Return one issue per public module that has no test module."""
    config = config or AreaConfig()
    names = {d.name for d in descriptors}

    checkable = [
        d
        for d in descriptors
        if d.is_public
        and not is_test_module(d.name, config.test_module_pattern)
        and not matches_any(d.name, config.contract_tests.ignore_names)
    ]

    missing: list[MissingContractTest] = []
    for descriptor in sorted(checkable, key=lambda d: (d.location.path, d.name)):
        expected = counterpart_test_names(descriptor.name, config.test_module_templates)
        if any(name in names for name in expected):
            continue
        shown = expected[0] if expected else f"{descriptor.name}Test"
        missing.append(
            MissingContractTest(
                location=descriptor.location,
                module=descriptor.name,
                expected=tuple(expected),
                message=f"{descriptor.name} has no test module {shown}",
            )
        )

    logger.info(f"[ContractTests] {len(checkable)} public modules checked, {len(missing)} without tests")
    return missing
