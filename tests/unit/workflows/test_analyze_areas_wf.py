"""Unit tests for the analyze areas workflow, run end to end on inline sources."""

from __future__ import annotations

import pytest

from arealint.helpers.dto.config_dto import AreaConfig, ContractTestsConfig
from arealint.helpers.dto.module_dto import Visibility
from arealint.helpers.exceptions import DuplicateModuleError
from arealint.workflows.analyze_areas_wf import analyze, check_contract_tests, prepare_descriptors


@pytest.fixture
def invoicing_units(unit_factory):
    """An invoicing area with a private service and a nested public invoice area."""
    return [
        unit_factory("invoicing", '"""Invoicing area."""\n', is_package=True),
        unit_factory(
            "invoicing.create_invoice_service",
            """
            __public__ = False

            from invoicing.invoice import generate_number


            def create(order):
                return generate_number.next_number()
            """,
        ),
        unit_factory("invoicing.invoice", "__public__ = True\n", is_package=True),
        unit_factory("invoicing.invoice.generate_number", "__public__ = False\n\ndef next_number():\n    return 1\n"),
    ]


class TestAnalyzeScenarios:
    """End-to-end behavior of analyze on small projects."""

    @pytest.mark.unit
    def test_private_module_referenced_from_other_area(self, unit_factory, invoicing_units) -> None:
        source = """
            import invoicing.create_invoice_service


            def sell(order):
                return invoicing.create_invoice_service.create(order)
            """
        sales = unit_factory("sales", source)
        result = analyze([*invoicing_units[:2], sales])

        assert [(v.caller, v.target, v.area) for v in result.violations] == [
            ("sales", "invoicing.create_invoice_service", "invoicing")
        ]
        assert result.violations[0].location.line == 2

    @pytest.mark.unit
    def test_reference_through_public_root(self, unit_factory, invoicing_units) -> None:
        sales = unit_factory("sales", "from invoicing import create_invoice\n")
        assert analyze([*invoicing_units[:2], sales]).violations == []

    @pytest.mark.unit
    def test_nested_public_area(self, invoicing_units) -> None:
        """A sibling in the enclosing area may not reach into a nested area's private module."""
        result = analyze(invoicing_units)

        assert [(v.caller, v.target, v.area) for v in result.violations] == [
            ("invoicing.create_invoice_service", "invoicing.invoice.generate_number", "invoicing.invoice")
        ]
        ancestors = {m.name: m.public_ancestor for m in result.modules}
        assert ancestors["invoicing.create_invoice_service"] == "invoicing"
        assert ancestors["invoicing.invoice.generate_number"] == "invoicing.invoice"

    @pytest.mark.unit
    def test_unresolved_references_are_inert(self, unit_factory, invoicing_units) -> None:
        sales = unit_factory("sales", "import billing.create_invoice_service\nimport requests\n")
        assert analyze([*invoicing_units[:2], sales]).violations == []

    @pytest.mark.unit
    def test_counterpart_test_module_is_exempt(self, unit_factory, invoicing_units) -> None:
        source = "__public__ = False\nfrom invoicing import create_invoice_service\n"
        units = [
            *invoicing_units[:2],
            unit_factory("invoicing.create_invoice_serviceTest", source),
            unit_factory("tests.invoicing.test_create_invoice_service", source),
            unit_factory("tests.invoicing.test_other", source),
        ]
        result = analyze(units)
        assert [v.caller for v in result.violations] == ["tests.invoicing.test_other"]


class TestAnalyzeProperties:
    """Properties that hold for any input."""

    @pytest.fixture
    def units(self, unit_factory, invoicing_units):
        return [*invoicing_units, unit_factory("sales", "import invoicing.create_invoice_service\n")]

    @pytest.mark.unit
    def test_idempotent(self, units) -> None:
        assert analyze(units).violations == analyze(units).violations

    @pytest.mark.unit
    def test_thread_pool_gives_same_result(self, units) -> None:
        inline = analyze(units, AreaConfig(jobs=1))
        threaded = analyze(units, AreaConfig(jobs=4))
        assert threaded.violations == inline.violations
        assert [m.name for m in threaded.modules] == [u.module for u in units]

    @pytest.mark.unit
    def test_ignoring_callers_never_adds_violations(self, units) -> None:
        baseline = set(analyze(units).violations)
        narrowed = set(analyze(units, AreaConfig(ignore_callers=["sales"])).violations)
        assert narrowed == {v for v in baseline if v.caller != "sales"}
        assert narrowed != baseline

    @pytest.mark.unit
    def test_same_area_never_violates(self, units) -> None:
        result = analyze(units)
        ancestors = {m.name: m.public_ancestor for m in result.modules}
        for violation in result.violations:
            assert ancestors[violation.caller] != violation.area

    @pytest.mark.unit
    def test_roots_are_public(self, units) -> None:
        result = analyze(units)
        roots = [m for m in result.modules if "." not in m.name]
        assert roots
        assert all(m.visibility is Visibility.PUBLIC for m in roots)


class TestPrepareDescriptors:
    """Tests for the per-unit stages and the join."""

    @pytest.mark.unit
    def test_duplicate_module_aborts(self, unit_factory) -> None:
        units = [
            unit_factory("shop.billing", "", path="a/shop/billing.py"),
            unit_factory("shop.billing", "", path="b/shop/billing.py"),
        ]
        with pytest.raises(DuplicateModuleError):
            prepare_descriptors(units, AreaConfig())

    @pytest.mark.unit
    def test_descriptors_are_classified_and_released(self, invoicing_units) -> None:
        descriptors = prepare_descriptors(invoicing_units, AreaConfig())
        assert all(d.visibility is not None for d in descriptors)
        assert all(d.tree is None for d in descriptors)


class TestContractTests:
    """Tests for the contract tests stage of the workflow."""

    @pytest.mark.unit
    def test_disabled_by_default(self, invoicing_units) -> None:
        assert analyze(invoicing_units).missing_tests == []

    @pytest.mark.unit
    def test_enabled_from_config_or_argument(self, invoicing_units) -> None:
        enabled = AreaConfig(contract_tests=ContractTestsConfig(enabled=True))
        from_config = analyze(invoicing_units, enabled).missing_tests
        from_argument = analyze(invoicing_units, contract_tests=True).missing_tests

        assert [m.module for m in from_config] == ["invoicing", "invoicing.invoice"]
        assert from_argument == from_config
        assert analyze(invoicing_units, enabled, contract_tests=False).missing_tests == []

    @pytest.mark.unit
    def test_check_contract_tests_only(self, unit_factory, invoicing_units) -> None:
        units = [*invoicing_units, unit_factory("tests.test_invoicing", "import invoicing\n")]
        result = check_contract_tests(units)
        assert result.violations == []
        assert [m.module for m in result.missing_tests] == ["invoicing.invoice"]
