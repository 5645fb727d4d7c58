"""
Shared utility functions for CLI commands.
Helper functions used across multiple command modules.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from arealint.components.discovery.discovery_comp import load_source_units
from arealint.helpers.dto.config_dto import AreaConfig
from arealint.helpers.dto.issue_dto import AnalysisResult
from arealint.helpers.dto.module_dto import SourceUnit
from arealint.interfaces.cli.ui import InfoPanel, TableDisplay, console, print_success
from arealint.services.config_svc import ConfigService

__all__ = [
    "build_overrides",
    "load_config",
    "load_units",
    "render_result",
]


def build_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Turn CLI flags into a config override mapping (lists extend the file's lists)."""
    overrides: dict[str, Any] = {}
    if getattr(args, "ignore_caller", None):
        overrides["ignore_callers"] = list(args.ignore_caller)
    if getattr(args, "ignore_dep", None):
        overrides["ignore_deps"] = list(args.ignore_dep)
    if getattr(args, "jobs", None) is not None:
        overrides["jobs"] = args.jobs
    return overrides


def load_config(args: argparse.Namespace) -> AreaConfig:
    """Compose configuration for a command run."""
    service = ConfigService(config_path=Path(args.config) if args.config else None)
    return service.get_config(build_overrides(args))


def load_units(args: argparse.Namespace, config: AreaConfig) -> list[SourceUnit]:
    """Discover and parse the files named on the command line."""
    roots = [Path(p) for p in args.paths] or [Path.cwd()]
    return load_source_units(roots, config.exclude_dirs)


def render_result(result: AnalysisResult, fmt: str = "text") -> None:
    """Print a result as rich tables (text) or a JSON document (json)."""
    if fmt == "json":
        document = {
            "modules": len(result.modules),
            "violations": [v.to_dict() for v in result.violations],
            "missing_tests": [m.to_dict() for m in result.missing_tests],
        }
        print(json.dumps(document, indent=2))
        return

    if result.violations:
        TableDisplay.show_violations(result.violations)
        for v in result.violations:
            console.print(f"[dim]{v.location}[/dim] {v.message}")
    if result.missing_tests:
        TableDisplay.show_missing_tests(result.missing_tests)

    if result.issue_count == 0:
        print_success(f"No issues in {len(result.modules)} modules")
        return

    content = f"""[bold]Modules:[/bold] {len(result.modules)}
[bold]Violations:[/bold] {len(result.violations)}
[bold]Missing tests:[/bold] {len(result.missing_tests)}"""
    InfoPanel.show("Arealint Summary", content, "red")
