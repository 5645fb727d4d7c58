"""
Contracts command: report public modules that have no test module.
"""

from __future__ import annotations

import argparse

from arealint.helpers.exceptions import ArealintError
from arealint.interfaces.cli.ui import print_error, print_warning
from arealint.interfaces.cli.utils import load_config, load_units, render_result
from arealint.workflows.analyze_areas_wf import check_contract_tests


def cmd_contracts(args: argparse.Namespace) -> int:
    """Run only the contract tests check."""
    try:
        config = load_config(args)
        units = load_units(args, config)
        if not units:
            print_warning("No Python files found", err=args.format == "json")
            return 0
        result = check_contract_tests(units, config)
    except ArealintError as e:
        print_error(str(e), err=args.format == "json")
        return 2

    render_result(result, args.format)
    return 1 if result.issue_count else 0
