from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Employee:
    """Domain entity: an employee and the leave days still available.

    `leave_balance` is the only field that changes after creation.
    """

    employee_id: int
    leave_balance: int
