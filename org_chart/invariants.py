"""
Org Chart — Tree Invariant Checks

Hard-fail validation. Every check raises InvariantViolationError on failure.
Detached employees (created, not yet wired) are tolerated but must be
fully isolated.
"""

from __future__ import annotations

from typing import Dict, Set

from .domain_types import Employee
from .registry import EmployeeRegistry


class InvariantViolationError(Exception):
    """Raised when the org tree invariant is violated."""

    def __init__(self, rule: str, detail: str) -> None:
        self.rule = rule
        self.detail = detail
        super().__init__(f"[INVARIANT:{rule}] {detail}")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def validate_tree(root: Employee, registry: EmployeeRegistry) -> None:
    """
    Run every invariant check. Raises InvariantViolationError on the
    first failure.
    """
    _check_root(root, registry)
    owners = _check_subordinate_lists(registry)
    _check_supervisor_refs(root, registry, owners)
    _check_no_cycles(root, registry)


# ---------------------------------------------------------------------------
# Individual checks (private)
# ---------------------------------------------------------------------------

def _check_root(root: Employee, registry: EmployeeRegistry) -> None:
    """The root is registered and has no supervisor."""
    if registry.find_by_id(root.id) is not root:
        raise InvariantViolationError(
            "root_registered",
            f"Root {root.id} is not the registered record for its id"
        )
    if root.supervisor_id is not None:
        raise InvariantViolationError(
            "root_supervisor",
            f"Root {root.id} has supervisor {root.supervisor_id}"
        )


def _check_subordinate_lists(registry: EmployeeRegistry) -> Dict[int, int]:
    """
    Every listed subordinate is registered, listed once, and points back
    at the list owner. Returns ``employee_id -> owner_id``.
    """
    owners: Dict[int, int] = {}
    for owner in registry:
        for child in owner.subordinates:
            if registry.find_by_id(child.id) is not child:
                raise InvariantViolationError(
                    "subordinate_registered",
                    f"Employee {owner.id} lists unregistered subordinate {child.id}"
                )
            if child.id in owners:
                raise InvariantViolationError(
                    "single_supervisor",
                    f"Employee {child.id} is listed under both "
                    f"{owners[child.id]} and {owner.id}"
                )
            if child.supervisor_id != owner.id:
                raise InvariantViolationError(
                    "supervisor_backref",
                    f"Employee {child.id} is listed under {owner.id} "
                    f"but its supervisor_id is {child.supervisor_id}"
                )
            owners[child.id] = owner.id
    return owners


def _check_supervisor_refs(
    root: Employee, registry: EmployeeRegistry, owners: Dict[int, int],
) -> None:
    """Every attached non-root employee is listed by its supervisor."""
    for employee in registry:
        if employee is root:
            if employee.id in owners:
                raise InvariantViolationError(
                    "root_supervisor",
                    f"Root {root.id} is listed under {owners[root.id]}"
                )
            continue
        if employee.supervisor_id is None:
            if employee.subordinates:
                raise InvariantViolationError(
                    "detached_employee",
                    f"Detached employee {employee.id} has subordinates"
                )
            continue
        if registry.find_by_id(employee.supervisor_id) is None:
            raise InvariantViolationError(
                "supervisor_refs",
                f"Employee {employee.id} reports to unknown "
                f"supervisor {employee.supervisor_id}"
            )
        if owners.get(employee.id) != employee.supervisor_id:
            raise InvariantViolationError(
                "supervisor_backref",
                f"Employee {employee.id} reports to {employee.supervisor_id} "
                f"but is not in its subordinate list"
            )


def _check_no_cycles(root: Employee, registry: EmployeeRegistry) -> None:
    """Following supervisors from any attached employee reaches the root."""
    for employee in registry:
        if employee is root or employee.supervisor_id is None:
            continue
        seen: Set[int] = {employee.id}
        current = employee
        while current.supervisor_id is not None:
            current = registry.get(current.supervisor_id)
            if current.id in seen:
                raise InvariantViolationError(
                    "no_cycles",
                    f"Employee {employee.id} is its own ancestor"
                )
            seen.add(current.id)
        if current is not root:
            raise InvariantViolationError(
                "single_root",
                f"Employee {employee.id} is rooted at {current.id}, "
                f"not at {root.id}"
            )
