"""Checks run over fully resolved module descriptors."""

from .area_access_comp import AreaAccessChecker, resolve_reference
from .contract_tests_comp import find_missing_contract_tests

__all__ = ["AreaAccessChecker", "find_missing_contract_tests", "resolve_reference"]
