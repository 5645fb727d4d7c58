"""
Pytest fixtures and configuration for the test suite.

Source units are built from inline source text so tests never depend on
files outside tmp_path.
"""

import sys
import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

# Add project root to path so tests can import arealint package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from arealint.components.discovery.discovery_comp import parse_source  # noqa: E402
from arealint.helpers.dto.module_dto import SourceUnit  # noqa: E402

UnitFactory = Callable[..., SourceUnit]


def make_unit(module: str, source: str = "", is_package: bool = False, path: str | None = None) -> SourceUnit:
    """Parse dedented source text as the given module."""
    if path is None:
        suffix = "/__init__.py" if is_package else ".py"
        path = module.replace(".", "/") + suffix
    return parse_source(path, textwrap.dedent(source), module, is_package)


@pytest.fixture
def unit_factory() -> UnitFactory:
    """Factory for SourceUnits built from inline source."""
    return make_unit


@pytest.fixture
def write_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Write a {relative path: source} mapping under tmp_path and return tmp_path."""

    def _write(files: dict[str, str]) -> Path:
        for rel, source in files.items():
            target = tmp_path / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(textwrap.dedent(source), encoding="utf-8")
        return tmp_path

    return _write


# === PYTEST MARKERS ===


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: fast, isolated test of a single module")
    config.addinivalue_line("markers", "integration: runs the full pipeline or the CLI end to end")
