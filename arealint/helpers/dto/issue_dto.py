"""Issue records produced by the checks."""

from __future__ import annotations

from dataclasses import dataclass, field

from .module_dto import ModuleDescriptor, SourceLocation


@dataclass(frozen=True)
class Violation:
    """A reference from a caller into another area's private module."""

    location: SourceLocation
    caller: str
    target: str
    area: str
    message: str

    def to_dict(self) -> dict[str, object]:
        return {
            "path": self.location.path,
            "line": self.location.line,
            "caller": self.caller,
            "target": self.target,
            "area": self.area,
            "message": self.message,
        }


@dataclass(frozen=True)
class MissingContractTest:
    """A public module with no test module named after it."""

    location: SourceLocation
    module: str
    expected: tuple[str, ...]
    message: str

    def to_dict(self) -> dict[str, object]:
        return {
            "path": self.location.path,
            "line": self.location.line,
            "module": self.module,
            "expected": list(self.expected),
            "message": self.message,
        }


@dataclass
class AnalysisResult:
    """Everything one analysis run produced."""

    modules: list[ModuleDescriptor] = field(default_factory=list)
    violations: list[Violation] = field(default_factory=list)
    missing_tests: list[MissingContractTest] = field(default_factory=list)

    @property
    def issue_count(self) -> int:
        return len(self.violations) + len(self.missing_tests)
