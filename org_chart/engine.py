"""
Org Chart — Engine

Owns the CEO reference and the single-slot undo/redo history.
Delegates link mutation to transitions.py, validates via invariants.py.

Invalid moves are absorbed as no-ops unless strict mode is on, so the
tree is always left valid.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .domain_types import Employee, EngineSettings, MoveRecord, MoveResult
from .invariants import validate_tree
from .registry import EmployeeNotFoundError, EmployeeRegistry
from .transitions import attach, reparent

logger = logging.getLogger(__name__)


class InvalidMoveTargetError(ValueError):
    """Raised in strict mode for self-moves, root moves and detached records."""

    def __init__(
        self, reason: str, employee_id: Optional[int], supervisor_id: int,
    ) -> None:
        self.reason = reason
        self.employee_id = employee_id
        self.supervisor_id = supervisor_id
        subject = "new employee" if employee_id is None else employee_id
        super().__init__(
            f"Cannot place {subject} under {supervisor_id}: {reason}"
        )


_NOT_FOUND_REASONS = ("employee_not_found", "supervisor_not_found")


class OrgTreeEngine:
    """
    Tree-mutation engine: move, undo, redo.

    History:
      - every applied move pushes a MoveRecord and clears the redo slot
      - undo pops a record and moves the employee back, keeping the
        popped record as the only thing redo can replay
    """

    def __init__(
        self,
        registry: EmployeeRegistry,
        ceo: Employee,
        settings: EngineSettings | None = None,
    ) -> None:
        if registry.find_by_id(ceo.id) is not ceo:
            raise ValueError(f"CEO {ceo.id} is not registered")
        if ceo.supervisor_id is not None:
            raise ValueError(f"CEO {ceo.id} cannot have a supervisor")
        self._registry = registry
        self._ceo = ceo
        self._settings = settings or EngineSettings()
        self._undo_stack: List[MoveRecord] = []
        self._redo_slot: Optional[MoveRecord] = None

    @classmethod
    def with_ceo(
        cls, name: str, settings: EngineSettings | None = None,
    ) -> "OrgTreeEngine":
        """Engine over a fresh registry holding only the CEO."""
        registry = EmployeeRegistry()
        ceo = registry.create_employee(name)
        return cls(registry, ceo, settings)

    # -- State access -------------------------------------------------------

    @property
    def ceo(self) -> Employee:
        return self._ceo

    @property
    def registry(self) -> EmployeeRegistry:
        return self._registry

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    @property
    def undo_stack(self) -> Tuple[MoveRecord, ...]:
        return tuple(self._undo_stack)

    @property
    def redo_slot(self) -> Optional[MoveRecord]:
        return self._redo_slot

    @property
    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    @property
    def can_redo(self) -> bool:
        return self._redo_slot is not None

    # -- Growth -------------------------------------------------------------

    def create_employee(self, name: str) -> Employee:
        """Register a detached employee. ``hire`` creates one already in the tree."""
        return self._registry.create_employee(name)

    def hire(self, name: str, supervisor_id: int) -> Employee:
        """
        Create an employee directly under *supervisor_id*.
        Not part of the undo history.
        """
        supervisor = self._registry.get(supervisor_id)
        if self._is_detached(supervisor):
            raise InvalidMoveTargetError("supervisor_detached", None, supervisor_id)
        employee = self._registry.create_employee(name)
        attach(supervisor, employee)
        self._validate()
        logger.debug("Hired %d %r under %d", employee.id, name, supervisor_id)
        return employee

    # -- Public API ---------------------------------------------------------

    def move(
        self,
        employee_id: int,
        supervisor_id: int,
        strict: bool | None = None,
    ) -> MoveResult:
        """
        Move *employee_id* under *supervisor_id*.

        The employee's own subordinates are promoted to its previous
        supervisor; the employee becomes a leaf under the new one.
        """
        if strict is None:
            strict = self._settings.strict

        if employee_id == supervisor_id:
            return self._reject("self_move", employee_id, supervisor_id, strict)
        if employee_id == self._ceo.id:
            return self._reject("root_move", employee_id, supervisor_id, strict)

        employee = self._registry.find_by_id(employee_id)
        if employee is None:
            return self._reject(
                "employee_not_found", employee_id, supervisor_id, strict,
            )
        supervisor = self._registry.find_by_id(supervisor_id)
        if supervisor is None:
            return self._reject(
                "supervisor_not_found", employee_id, supervisor_id, strict,
            )

        previous = self._registry.find_by_id(employee.supervisor_id)
        if previous is None:
            return self._reject(
                "employee_detached", employee_id, supervisor_id, strict,
            )
        if self._is_detached(supervisor):
            return self._reject(
                "supervisor_detached", employee_id, supervisor_id, strict,
            )

        record, promoted = reparent(employee, supervisor, previous)
        self._undo_stack.append(record)
        self._redo_slot = None
        self._validate()

        logger.debug(
            "Moved %d from %d to %d, promoted %s",
            employee_id, previous.id, supervisor_id, list(promoted),
        )
        return MoveResult(
            operation="move", applied=True, record=record, promoted=promoted,
        )

    def undo(self) -> MoveResult:
        """Move the most recently moved employee back to its previous supervisor."""
        if not self._undo_stack:
            return MoveResult(operation="undo", reason="nothing_to_undo")

        record = self._undo_stack.pop()
        replay = self.move(
            record.employee_id, record.previous_supervisor_id, strict=False,
        )
        if replay.applied:
            self._redo_slot = record
        logger.debug("Undid %s (applied=%s)", record, replay.applied)
        return MoveResult(
            operation="undo",
            applied=replay.applied,
            reason=replay.reason,
            record=record,
            promoted=replay.promoted,
        )

    def redo(self) -> MoveResult:
        """Replay the move most recently reverted by ``undo``."""
        record = self._redo_slot
        if record is None:
            return MoveResult(operation="redo", reason="nothing_to_redo")

        replay = self.move(
            record.employee_id, record.new_supervisor_id, strict=False,
        )
        self._redo_slot = None
        logger.debug("Redid %s (applied=%s)", record, replay.applied)
        return MoveResult(
            operation="redo",
            applied=replay.applied,
            reason=replay.reason,
            record=record,
            promoted=replay.promoted,
        )

    # -- Internals ----------------------------------------------------------

    def _is_detached(self, employee: Employee) -> bool:
        return employee is not self._ceo and employee.supervisor_id is None

    def _reject(
        self, reason: str, employee_id: int, supervisor_id: int, strict: bool,
    ) -> MoveResult:
        logger.debug(
            "Ignored move of %r under %r: %s", employee_id, supervisor_id, reason,
        )
        if strict:
            if reason in _NOT_FOUND_REASONS:
                missing = employee_id if reason == "employee_not_found" else supervisor_id
                raise EmployeeNotFoundError(missing)
            raise InvalidMoveTargetError(reason, employee_id, supervisor_id)
        return MoveResult(operation="move", reason=reason)

    def _validate(self) -> None:
        if self._settings.validate_invariants:
            validate_tree(self._ceo, self._registry)
