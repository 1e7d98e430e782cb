"""
Org Chart — Tree Mutation Primitives

ALL parent/child link mutation lives here. The engine decides whether a
move is allowed; these functions only rewire links.
"""

from __future__ import annotations

from typing import Tuple

from .domain_types import Employee, MoveRecord


def attach(supervisor: Employee, employee: Employee) -> None:
    """
    Wire a detached employee as the last subordinate of *supervisor*.

    Used for bootstrapping and hiring, never for reparenting.
    """
    if employee.supervisor_id is not None:
        raise ValueError(
            f"Employee {employee.id} already reports to {employee.supervisor_id}"
        )
    if employee is supervisor:
        raise ValueError(f"Employee {employee.id} cannot report to itself")
    supervisor.subordinates.append(employee)
    employee.supervisor_id = supervisor.id


def reparent(
    employee: Employee,
    supervisor: Employee,
    previous_supervisor: Employee,
) -> Tuple[MoveRecord, Tuple[int, ...]]:
    """
    Move *employee* under *supervisor*, promoting its subordinates to
    *previous_supervisor*. The moved employee always ends up a leaf.

    Returns ``(record, promoted_ids)``.
    """
    orphaned = employee.subordinates

    previous_supervisor.subordinates.remove(employee)
    supervisor.subordinates.append(employee)
    employee.supervisor_id = supervisor.id

    # New list object: ``orphaned`` must keep the old members.
    employee.subordinates = []

    for child in orphaned:
        previous_supervisor.subordinates.append(child)
        child.supervisor_id = previous_supervisor.id

    record = MoveRecord(
        previous_supervisor_id=previous_supervisor.id,
        employee_id=employee.id,
        new_supervisor_id=supervisor.id,
    )
    return record, tuple(child.id for child in orphaned)
