#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse

from arealint.__version__ import __version__
from arealint.helpers.logging_helper import configure_logging
from arealint.interfaces.cli.commands.check_cli import cmd_check
from arealint.interfaces.cli.commands.contracts_cli import cmd_contracts


def _add_common_arguments(s: argparse.ArgumentParser) -> None:
    s.add_argument("paths", nargs="*", help="files or directories to analyze (default: current directory)")
    s.add_argument("--config", help="YAML config file (default: $AREALINT_CONFIG or ./arealint.yaml)")
    s.add_argument("--jobs", "-j", type=int, help="worker threads for per-file extraction")
    s.add_argument("--format", choices=["text", "json"], default="text", help="report format (default: text)")
    s.add_argument("-v", "--verbose", action="count", default=0, help="log progress to stderr (-vv for debug)")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    p = argparse.ArgumentParser(
        prog="arealint",
        description="Arealint - enforce public/private area boundaries between Python modules",
        epilog="Examples:\n"
        "  arealint check src/shop                        # Check area boundaries\n"
        "  arealint check src --ignore-caller 're:^tests' # Skip test modules as callers\n"
        "  arealint check src --contracts --format json   # Add contract tests, JSON report\n"
        "  arealint contracts src tests                   # Public modules without tests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Available commands (use 'arealint <command> --help' for command-specific help)",
    )

    # check: Area access check
    s = sub.add_parser("check", help="Report references into other areas' private modules")
    _add_common_arguments(s)
    s.add_argument(
        "--ignore-caller",
        action="append",
        metavar="PATTERN",
        help="skip callers matching PATTERN (substring, or 're:<regex>'); repeatable",
    )
    s.add_argument(
        "--ignore-dep",
        action="append",
        metavar="PATTERN",
        help="never flag targets matching PATTERN (substring, or 're:<regex>'); repeatable",
    )
    s.add_argument("--contracts", action="store_true", help="also run the contract tests check")
    s.set_defaults(func=cmd_check)

    # contracts: Contract tests check
    s = sub.add_parser("contracts", help="Report public modules without a test module")
    _add_common_arguments(s)
    s.set_defaults(func=cmd_contracts)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command provided, show help
    if args.cmd is None:
        parser.print_help()
        return 0

    configure_logging(args.verbose)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
