"""Analysis configuration models.

Validated with Pydantic so YAML files and CLI overrides go through the same
checks. Unknown keys are rejected to catch typos in config files.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from arealint.helpers.names_helper import REGEX_PREFIX

DEFAULT_TEST_MODULE_TEMPLATES = [
    "{name}Test",
    "{name}_test",
    "{prefix}test_{leaf}",
    "tests.{prefix}test_{leaf}",
]


def _validate_patterns(patterns: list[str | re.Pattern]) -> list[str | re.Pattern]:
    for pattern in patterns:
        if isinstance(pattern, str) and pattern.startswith(REGEX_PREFIX):
            try:
                re.compile(pattern[len(REGEX_PREFIX) :])
            except re.error as e:
                raise ValueError(f"invalid regex {pattern!r}: {e}") from e
    return patterns


class ContractTestsConfig(BaseModel):
    """Options for the contract tests check."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = False
    ignore_names: list[str | re.Pattern] = Field(default_factory=list)

    @field_validator("ignore_names")
    @classmethod
    def check_patterns(cls, patterns: list[str | re.Pattern]) -> list[str | re.Pattern]:
        return _validate_patterns(patterns)


class AreaConfig(BaseModel):
    """
    Options consumed by the area access check and the analysis workflow.

    Attributes:
        ignore_callers: Modules matching any pattern are never checked as callers
        ignore_deps: Modules matching any pattern are never flagged as targets
        visibility_attribute: Module-level name that declares visibility (`__public__ = False`)
        docstring_declares_public: Treat a module docstring as a public declaration
        test_module_templates: Names of the test module allowed to reach into a module
        test_module_pattern: Regex on the last name segment that marks test modules
        jobs: Worker threads for per-file extraction (1 runs inline)
        exclude_dirs: Directory names skipped during discovery
        contract_tests: Contract tests check options
    """

    model_config = ConfigDict(extra="forbid")

    ignore_callers: list[str | re.Pattern] = Field(default_factory=list)
    ignore_deps: list[str | re.Pattern] = Field(default_factory=list)
    visibility_attribute: str = "__public__"
    docstring_declares_public: bool = False
    test_module_templates: list[str] = Field(default_factory=lambda: list(DEFAULT_TEST_MODULE_TEMPLATES))
    test_module_pattern: str = r"^test_|_test$|Test$"
    jobs: int = Field(default=1, ge=1)
    exclude_dirs: list[str] = Field(
        default_factory=lambda: [".git", ".venv", "venv", "__pycache__", "build", "dist", ".mypy_cache", ".pytest_cache"]
    )
    contract_tests: ContractTestsConfig = Field(default_factory=ContractTestsConfig)

    @field_validator("ignore_callers", "ignore_deps")
    @classmethod
    def check_patterns(cls, patterns: list[str | re.Pattern]) -> list[str | re.Pattern]:
        return _validate_patterns(patterns)

    @field_validator("test_module_pattern")
    @classmethod
    def check_test_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid regex {value!r}: {e}") from e
        return value

    @field_validator("test_module_templates")
    @classmethod
    def check_templates(cls, templates: list[str]) -> list[str]:
        for template in templates:
            try:
                template.format(name="a.b", leaf="b", prefix="a.")
            except (KeyError, IndexError, ValueError) as e:
                raise ValueError(f"invalid test module template {template!r}: {e}") from e
        return templates
