"""
Check command: run the area access check (and optionally contract tests).
"""

from __future__ import annotations

import argparse
import logging

from arealint.helpers.exceptions import ArealintError
from arealint.interfaces.cli.ui import print_error, print_warning
from arealint.interfaces.cli.utils import load_config, load_units, render_result
from arealint.workflows.analyze_areas_wf import analyze

logger = logging.getLogger(__name__)


def cmd_check(args: argparse.Namespace) -> int:
    """
    Check area boundaries for the given paths.

    Returns 0 when clean, 1 when issues were found, 2 on errors.
    """
    try:
        config = load_config(args)
        units = load_units(args, config)
        if not units:
            print_warning("No Python files found", err=args.format == "json")
            return 0
        result = analyze(units, config, contract_tests=True if args.contracts else None)
    except ArealintError as e:
        logger.debug("[check] Analysis aborted", exc_info=True)
        print_error(str(e), err=args.format == "json")
        return 2

    render_result(result, args.format)
    return 1 if result.issue_count else 0
