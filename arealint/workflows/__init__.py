"""
Workflows package.
"""

from .analyze_areas_wf import analyze, check_contract_tests, prepare_descriptors

__all__ = ["analyze", "check_contract_tests", "prepare_descriptors"]
