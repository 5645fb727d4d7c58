"""
Area access check.

Module references should be limited to other areas' public interfaces.

An area is formed by a public module (`__public__ = True`, or any top-level
module) and every private submodule (`__public__ = False`) below it that has
no nearer public owner. The rules:

1. Public modules are reachable from anywhere.
2. Private modules are reachable only from modules of the same area, i.e.
   modules that resolve to the same public ancestor.
3. Areas nest. A nested public module starts its own area, independent of
   its parent: each side may only use the other's public interface.
4. A module's own test module (see `test_module_templates`) may reach into it.

Modules that declare nothing are ignored as both callers and targets, so
enforce a declaration with a separate rule if you want full coverage.
Usage is tracked per module, not per call site: many references from one
module to the same private target produce a single issue.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from arealint.helpers.dto.config_dto import AreaConfig
from arealint.helpers.dto.issue_dto import Violation
from arealint.helpers.dto.module_dto import ModuleDescriptor, SourceLocation
from arealint.helpers.names_helper import ancestor_names, counterpart_test_names, matches_any


def resolve_reference(name: str, index: Mapping[str, ModuleDescriptor]) -> ModuleDescriptor | None:
    """
    Map a referenced dotted name to the module that defines it.

    `shop.billing.make_invoice` resolves to module `shop.billing` when no
    module with the full name exists. Names with no known prefix are inert.
    """
    for candidate in ancestor_names(name):
        descriptor = index.get(candidate)
        if descriptor is not None:
            return descriptor
    return None


class AreaAccessChecker:
    """Flags references into another area's private modules."""

    def __init__(self, config: AreaConfig | None = None) -> None:
        self.config = config or AreaConfig()
        self._logger = logging.getLogger(__name__)

    def is_allowed(self, caller: ModuleDescriptor, dep: ModuleDescriptor) -> bool:
        """The access-control predicate for one caller/target pair."""
        if dep.is_public:
            return True
        if dep.public_ancestor == caller.public_ancestor:
            return True
        return caller.name in counterpart_test_names(dep.name, self.config.test_module_templates)

    def checkable_callers(self, descriptors: list[ModuleDescriptor]) -> list[ModuleDescriptor]:
        callers = [
            d for d in descriptors if not d.is_undetermined and not matches_any(d.name, self.config.ignore_callers)
        ]
        return sorted(callers, key=lambda d: (d.location.path, d.name))

    def checkable_targets(self, descriptors: list[ModuleDescriptor]) -> set[str]:
        return {
            d.name for d in descriptors if not d.is_undetermined and not matches_any(d.name, self.config.ignore_deps)
        }

    def check(self, descriptors: list[ModuleDescriptor]) -> list[Violation]:
        """
        Check every reference of every checkable caller.

        Descriptors must already carry visibility and public_ancestor.

        Returns:
            One violation per (caller, target) pair, in deterministic order
        """
        index = {d.name: d for d in descriptors}
        targets = self.checkable_targets(descriptors)
        violations: list[Violation] = []

        for caller in self.checkable_callers(descriptors):
            seen: dict[str, int] = {}
            for dep_name in sorted(caller.dependencies):
                dep = resolve_reference(dep_name, index)
                if dep is None or dep.name == caller.name or dep.name not in targets:
                    continue
                if self.is_allowed(caller, dep):
                    continue
                line = caller.reference_lines.get(dep_name, caller.location.line)
                if dep.name not in seen or line < seen[dep.name]:
                    seen[dep.name] = line

            for dep_name in sorted(seen):
                dep = index[dep_name]
                violations.append(
                    Violation(
                        location=SourceLocation(path=caller.location.path, line=seen[dep_name]),
                        caller=caller.name,
                        target=dep.name,
                        area=dep.public_ancestor or "",
                        message=f"Forbidden reference to {dep.name} private to area {dep.public_ancestor}",
                    )
                )

        self._logger.info(f"[AreaAccess] Checked {len(descriptors)} modules, found {len(violations)} violations")
        return violations
