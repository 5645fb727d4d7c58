#!/usr/bin/env python3
"""
Rich UI components for CLI - consistent report output across all commands.
"""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from arealint.helpers.dto.issue_dto import MissingContractTest, Violation

console = Console()
# Diagnostics go here when stdout carries a machine-readable report
err_console = Console(stderr=True)

# Color scheme constants
COLOR_SUCCESS = "green"
COLOR_ERROR = "red"
COLOR_WARNING = "yellow"
COLOR_INFO = "cyan"


class InfoPanel:
    """
    Simple panel for displaying a summary.
    """

    @staticmethod
    def show(title: str, content: str, border_style: str = COLOR_INFO):
        """Show a single info panel."""
        panel = Panel(content, title=f"[bold]{title}[/bold]", border_style=border_style, box=box.ROUNDED)
        console.print(panel)


class TableDisplay:
    """
    Formatted tables for issue lists.
    """

    @staticmethod
    def show_violations(violations: list[Violation], title: str = "Area access violations"):
        """Display violations, one row per caller/target pair."""
        table = Table(title=title, box=box.SIMPLE_HEAVY, show_lines=False)
        table.add_column("Location", style="dim", no_wrap=True)
        table.add_column("Caller", style=COLOR_INFO)
        table.add_column("Target", style=COLOR_ERROR)
        table.add_column("Area", style=COLOR_WARNING)

        for v in violations:
            table.add_row(str(v.location), v.caller, v.target, v.area)

        console.print(table)

    @staticmethod
    def show_missing_tests(missing: list[MissingContractTest], title: str = "Public modules without tests"):
        """Display public modules that have no test module."""
        table = Table(title=title, box=box.SIMPLE_HEAVY)
        table.add_column("Location", style="dim", no_wrap=True)
        table.add_column("Module", style=COLOR_INFO)
        table.add_column("Expected test module", style=COLOR_WARNING)

        for m in missing:
            table.add_row(str(m.location), m.module, m.expected[0] if m.expected else "")

        console.print(table)


def print_success(message: str):
    """Print a success message."""
    console.print(f"[bold {COLOR_SUCCESS}]✓[/bold {COLOR_SUCCESS}] {message}")


def print_error(message: str, err: bool = False):
    """Print an error message (to stderr when err is set)."""
    (err_console if err else console).print(f"[bold {COLOR_ERROR}]✗[/bold {COLOR_ERROR}] {message}")


def print_warning(message: str, err: bool = False):
    """Print a warning message (to stderr when err is set)."""
    (err_console if err else console).print(f"[bold {COLOR_WARNING}]⚠[/bold {COLOR_WARNING}] {message}")
