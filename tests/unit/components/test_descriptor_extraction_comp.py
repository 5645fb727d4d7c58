"""Unit tests for module descriptor extraction and visibility declarations."""

from __future__ import annotations

import pytest

from arealint.components.modules.descriptor_extraction_comp import (
    build_descriptor,
    extract_descriptors,
    read_declared_visibility,
)


class TestReadDeclaredVisibility:
    """Tests for read_declared_visibility."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("__public__ = True\n", True),
            ("__public__ = False\n", False),
            ("__public__ = 'Issues and manages invoices.'\n", True),
            ("__public__: bool = False\n", False),
            ("__public__ = None\n", None),
            ("import os\n__public__ = os.environ.get('X')\n", True),
            ("x = 1\n", None),
        ],
    )
    def test_declarations(self, unit_factory, source: str, expected: bool | None) -> None:
        unit = unit_factory("shop.billing", source)
        declared, _ = read_declared_visibility(unit.tree)
        assert declared is expected

    @pytest.mark.unit
    def test_last_assignment_wins(self, unit_factory) -> None:
        unit = unit_factory("shop.billing", "__public__ = True\n\n__public__ = False\n")
        assert read_declared_visibility(unit.tree) == (False, 3)

    @pytest.mark.unit
    def test_nested_assignments_are_ignored(self, unit_factory) -> None:
        """Only module-level statements declare visibility."""
        unit = unit_factory(
            "shop.billing",
            """
            class Invoice:
                __public__ = False

            def f():
                __public__ = False
            """,
        )
        assert read_declared_visibility(unit.tree) == (None, None)

    @pytest.mark.unit
    def test_custom_attribute(self, unit_factory) -> None:
        unit = unit_factory("shop.billing", "__area_public__ = False\n__public__ = True\n")
        assert read_declared_visibility(unit.tree, attribute="__area_public__") == (False, 1)

    @pytest.mark.unit
    def test_docstring_counts_only_when_enabled(self, unit_factory) -> None:
        unit = unit_factory("shop.billing", '"""Billing contract."""\n')
        assert read_declared_visibility(unit.tree)[0] is None
        assert read_declared_visibility(unit.tree, docstring_declares_public=True)[0] is True

    @pytest.mark.unit
    def test_explicit_attribute_beats_docstring(self, unit_factory) -> None:
        unit = unit_factory("shop.billing", '"""Internal helpers."""\n__public__ = False\n')
        assert read_declared_visibility(unit.tree, docstring_declares_public=True)[0] is False


class TestExtractDescriptors:
    """Tests for building descriptors from units."""

    @pytest.mark.unit
    def test_one_descriptor_per_unit_in_order(self, unit_factory) -> None:
        units = [
            unit_factory("shop", "", is_package=True),
            unit_factory("shop.billing", "__public__ = False\n"),
            unit_factory("sales", ""),
        ]
        descriptors = extract_descriptors(units)
        assert [d.name for d in descriptors] == ["shop", "shop.billing", "sales"]
        assert descriptors[0].is_package
        assert descriptors[1].declared_public is False

    @pytest.mark.unit
    def test_location_points_at_declaration(self, unit_factory) -> None:
        unit = unit_factory("shop.billing", '"""Doc."""\n\n__public__ = False\n')
        descriptor = build_descriptor(unit)
        assert descriptor.location.path == "shop/billing.py"
        assert descriptor.location.line == 3
        assert descriptor.tree is unit.tree

    @pytest.mark.unit
    def test_location_defaults_to_first_line(self, unit_factory) -> None:
        descriptor = build_descriptor(unit_factory("shop.billing", "x = 1\n"))
        assert descriptor.location.line == 1
        assert descriptor.visibility is None
