from __future__ import annotations

from typing import Optional

from .model import Employee


class InMemoryEmployeeRepository:
    """Employees keyed by id."""

    def __init__(self):
        self._by_id: dict[int, Employee] = {}

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._by_id.get(int(employee_id))

    def add(self, employee: Employee) -> None:
        self._by_id[employee.employee_id] = employee

    def exists(self, employee_id: int) -> bool:
        return int(employee_id) in self._by_id
