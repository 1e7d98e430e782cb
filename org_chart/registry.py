"""
Org Chart — Employee Registry

Identity allocation and lookup. The registry exclusively owns the
canonical set of Employee records; it never removes one.
"""

from __future__ import annotations

from typing import Dict, Iterator, Optional

from .domain_types import Employee


class EmployeeNotFoundError(KeyError):
    """Raised when an identity does not resolve to a registered employee."""

    def __init__(self, employee_id: object) -> None:
        self.employee_id = employee_id
        super().__init__(employee_id)

    def __str__(self) -> str:
        return f"Employee {self.employee_id!r} not found"


class EmployeeRegistry:
    """
    Insertion-ordered ``id -> Employee`` store with its own id counter.

    Identities are strictly increasing and never reused. Every registry
    starts counting from zero, so two registries never share state.
    """

    def __init__(self) -> None:
        self._employees: Dict[int, Employee] = {}
        self._last_id: int = 0

    @property
    def last_id(self) -> int:
        return self._last_id

    def create_employee(self, name: str) -> Employee:
        """Allocate the next identity and register a detached record."""
        self._last_id += 1
        employee = Employee(id=self._last_id, name=name)
        self._employees[employee.id] = employee
        return employee

    def find_by_id(self, employee_id: Optional[int]) -> Optional[Employee]:
        if employee_id is None:
            return None
        return self._employees.get(employee_id)

    def find_by_name(self, name: str) -> Optional[Employee]:
        """First employee with this name in registration order, root included."""
        for employee in self._employees.values():
            if employee.name == name:
                return employee
        return None

    def get(self, employee_id: int) -> Employee:
        employee = self.find_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee

    def __len__(self) -> int:
        return len(self._employees)

    def __contains__(self, employee_id: object) -> bool:
        return employee_id in self._employees

    def __iter__(self) -> Iterator[Employee]:
        return iter(list(self._employees.values()))
