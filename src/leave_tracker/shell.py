"""Interactive text menu over the leave registry.

All console I/O lives here; the registry only ever sees well-typed values.
"""

from __future__ import annotations

from typing import Callable, Optional

from .common.datetime_utils import parse_date
from .core.constants import DEFAULT_SHELL_DATE_FORMAT
from .registry import LeaveRegistry

MENU = (
    "Leave Management System",
    "1. Add Employee",
    "2. Request Leave",
    "3. Display Leave History",
    "4. Approve Leave",
    "5. Exit",
)


class LeaveShell:
    def __init__(
        self,
        registry: LeaveRegistry,
        *,
        date_format: str = DEFAULT_SHELL_DATE_FORMAT,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self._registry = registry
        self._date_format = date_format
        self._input = input_fn
        self._output = output_fn

    def _read_int(self, prompt: str) -> Optional[int]:
        raw = self._input(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            self._output("Invalid input. Please enter a number.")
            return None

    def _read_date(self, prompt: str):
        raw = self._input(prompt)
        try:
            return parse_date(raw, self._date_format)
        except ValueError:
            self._output(f"Invalid date: {raw.strip()!r}.")
            return None

    def add_employee(self) -> None:
        employee_id = self._read_int("Enter Employee Id: ")
        if employee_id is None:
            return
        leave_balance = self._read_int("Enter Leave Balance: ")
        if leave_balance is None:
            return
        self._output(self._registry.add_employee(employee_id, leave_balance).message)

    def request_leave(self) -> None:
        employee_id = self._read_int("Enter Employee Id: ")
        if employee_id is None:
            return
        start_date = self._read_date(f"Enter Start Date ({self._date_format}): ")
        if start_date is None:
            return
        end_date = self._read_date(f"Enter End Date ({self._date_format}): ")
        if end_date is None:
            return
        self._output(self._registry.request_leave(employee_id, start_date, end_date).message)

    def display_leave_history(self) -> None:
        employee_id = self._read_int("Enter Employee Id: ")
        if employee_id is None:
            return
        self._output(self._registry.display_leave_history(employee_id).message)

    def approve_leave(self) -> None:
        self._output(self._registry.pending_requests().message)
        request_id = self._read_int("Enter Leave Request ID to Approve: ")
        if request_id is None:
            return
        self._output(self._registry.approve_leave(request_id).message)

    def run_once(self) -> bool:
        """Show the menu and handle one choice. Returns False on exit."""
        for line in MENU:
            self._output(line)
        raw = self._input("Enter your choice: ").strip()
        try:
            choice = int(raw)
        except ValueError:
            self._output("Invalid input. Please enter a number.")
            return True

        actions = {
            1: self.add_employee,
            2: self.request_leave,
            3: self.display_leave_history,
            4: self.approve_leave,
        }
        if choice == 5:
            return False
        action = actions.get(choice)
        if action is None:
            self._output("Invalid choice. Try again.")
            return True
        action()
        return True

    def run(self) -> None:
        try:
            while self.run_once():
                self._output("")
        except (EOFError, KeyboardInterrupt):
            self._output("")
