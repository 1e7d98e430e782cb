"""
Org Chart — Core Domain Types

Pure data. No tree mutation logic lives here.

────────────────────────────────────────────────
DOMAIN GLOSSARY
────────────────────────────────────────────────

CEO / root:
    The unique employee with no supervisor; head of the tree.

Subordinate / Supervisor:
    Direct child / direct parent in the organization tree.

Move:
    Reparenting operation changing an employee's supervisor.

Orphan promotion:
    Side effect of a move: the moved employee's former subordinates are
    reattached to its former supervisor.

────────────────────────────────────────────────
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


_IMMUTABLE_EMPLOYEE_FIELDS = frozenset({"id", "name"})


@dataclass(eq=False)
class Employee:
    """
    A single employee record.

    The tree is expressed purely through ``subordinates`` and
    ``supervisor_id``. ``supervisor_id`` is None for the root and for
    records that have not been wired into the tree yet.
    """

    id: int
    name: str
    subordinates: List["Employee"] = field(default_factory=list, repr=False)
    supervisor_id: Optional[int] = None

    def __setattr__(self, key: str, value) -> None:
        if key in _IMMUTABLE_EMPLOYEE_FIELDS and key in self.__dict__:
            raise AttributeError(f"Employee.{key} is immutable")
        super().__setattr__(key, value)

    @property
    def subordinate_ids(self) -> List[int]:
        return [s.id for s in self.subordinates]


@dataclass(frozen=True)
class MoveRecord:
    """Enough information to reverse (or replay) one move."""

    previous_supervisor_id: int
    employee_id: int
    new_supervisor_id: int

    def to_dict(self) -> dict:
        return {
            "previous_supervisor_id": self.previous_supervisor_id,
            "employee_id": self.employee_id,
            "new_supervisor_id": self.new_supervisor_id,
        }


@dataclass(frozen=True)
class MoveResult:
    """
    Structured, immutable outcome of move / undo / redo.

    ``reason`` is empty when the operation was applied, otherwise one of
    the codes in ``REJECTION_REASONS``.
    """

    operation: str = "move"
    applied: bool = False
    reason: str = ""
    record: Optional[MoveRecord] = None
    promoted: Tuple[int, ...] = ()

    def to_dict(self) -> dict:
        return {
            "operation": self.operation,
            "applied": self.applied,
            "reason": self.reason,
            "record": self.record.to_dict() if self.record else None,
            "promoted": list(self.promoted),
        }


REJECTION_REASONS = (
    "self_move",
    "root_move",
    "employee_not_found",
    "supervisor_not_found",
    "employee_detached",
    "supervisor_detached",
    "nothing_to_undo",
    "nothing_to_redo",
)


@dataclass(frozen=True)
class EngineSettings:
    """
    Engine configuration.

    strict:              raise instead of silently ignoring invalid moves
    validate_invariants: re-check the whole tree after every mutation
    """

    strict: bool = False
    validate_invariants: bool = True
