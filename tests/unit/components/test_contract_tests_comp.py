"""Unit tests for the contract tests check."""

from __future__ import annotations

import pytest

from arealint.components.checks.contract_tests_comp import find_missing_contract_tests
from arealint.components.modules.visibility_comp import classify_visibility
from arealint.helpers.dto.config_dto import AreaConfig, ContractTestsConfig
from arealint.helpers.dto.module_dto import ModuleDescriptor, SourceLocation


def _module(name: str, declared: bool | None = None) -> ModuleDescriptor:
    return ModuleDescriptor(
        name=name,
        location=SourceLocation(name.replace(".", "/") + ".py", 1),
        declared_public=declared,
        visibility=classify_visibility(name, declared),
    )


class TestFindMissingContractTests:
    """Tests for find_missing_contract_tests."""

    @pytest.mark.unit
    def test_public_module_without_tests(self) -> None:
        missing = find_missing_contract_tests([_module("shop"), _module("shop.billing", True)])

        assert [m.module for m in missing] == ["shop", "shop.billing"]
        billing = missing[1]
        assert billing.expected == (
            "shop.billingTest",
            "shop.billing_test",
            "shop.test_billing",
            "tests.shop.test_billing",
        )
        assert billing.message == "shop.billing has no test module shop.billingTest"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "test_name",
        ["shop.billingTest", "shop.billing_test", "shop.test_billing", "tests.shop.test_billing"],
    )
    def test_any_template_satisfies(self, test_name: str) -> None:
        modules = [_module("shop"), _module("test_shop"), _module("shop.billing", True), _module(test_name)]
        assert find_missing_contract_tests(modules) == []

    @pytest.mark.unit
    def test_private_and_undetermined_modules_are_skipped(self) -> None:
        modules = [_module("shop"), _module("test_shop"), _module("shop.billing", False), _module("shop.ledger")]
        assert find_missing_contract_tests(modules) == []

    @pytest.mark.unit
    def test_test_modules_need_no_tests(self) -> None:
        """A public test module is not itself a contract."""
        modules = [_module("shop"), _module("test_shop"), _module("shop.billingTest", True)]
        assert find_missing_contract_tests(modules) == []

    @pytest.mark.unit
    def test_ignore_names(self) -> None:
        config = AreaConfig(contract_tests=ContractTestsConfig(enabled=True, ignore_names=["re:^shop$"]))
        missing = find_missing_contract_tests([_module("shop"), _module("shop.billing", True)], config)
        assert [m.module for m in missing] == ["shop.billing"]

    @pytest.mark.unit
    def test_custom_templates(self) -> None:
        config = AreaConfig(test_module_templates=["specs.{name}_spec"], test_module_pattern=r"_spec$")
        modules = [_module("shop"), _module("specs.shop_spec"), _module("shop.billing", True)]
        missing = find_missing_contract_tests(modules, config)
        assert [(m.module, m.expected) for m in missing] == [("shop.billing", ("specs.shop.billing_spec",))]
