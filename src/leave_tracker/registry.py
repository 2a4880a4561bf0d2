from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Optional

from .core.exceptions import DomainError
from .leaves.service import LeaveService


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a registry call.

    `reason` is None on success, otherwise one of: not-found,
    insufficient-balance, already-approved, invalid-date-range,
    duplicate-employee, invalid-argument.
    """

    ok: bool
    message: str
    reason: Optional[str] = None
    value: Any = None

    @classmethod
    def success(cls, message: str, value: Any = None) -> "OperationResult":
        return cls(ok=True, message=message, value=value)

    @classmethod
    def failure(cls, error: DomainError) -> "OperationResult":
        return cls(ok=False, message=str(error), reason=error.reason)


class LeaveRegistry:
    """Entry points for callers that want results instead of exceptions."""

    def __init__(self, service: LeaveService):
        self._service = service

    def _run(self, op: Callable[[], OperationResult]) -> OperationResult:
        try:
            return op()
        except DomainError as e:
            return OperationResult.failure(e)

    def add_employee(self, employee_id: int, leave_balance: int) -> OperationResult:
        def op() -> OperationResult:
            employee = self._service.add_employee(employee_id=employee_id, leave_balance=leave_balance)
            return OperationResult.success("Employee added successfully.", employee)

        return self._run(op)

    def request_leave(self, employee_id: int, start_date: date, end_date: date) -> OperationResult:
        def op() -> OperationResult:
            req = self._service.request_leave(employee_id=employee_id, start_date=start_date, end_date=end_date)
            return OperationResult.success(
                f"Leave request submitted successfully. Request ID: {req.request_id}.",
                req,
            )

        return self._run(op)

    def approve_leave(self, request_id: int) -> OperationResult:
        def op() -> OperationResult:
            decisions = self._service.approve_leave(request_id=request_id)
            message = "\n".join(d.message for d in decisions)
            return OperationResult.success(message, decisions)

        return self._run(op)

    def display_leave_history(self, employee_id: int) -> OperationResult:
        def op() -> OperationResult:
            history = self._service.leave_history(employee_id=employee_id)
            lines = [
                f"Leave History for Employee {history.employee_id}:",
                f"Leave Balance: {history.leave_balance}",
                "Leave Requests:",
            ]
            for r in history.requests:
                lines.append(
                    f"Request {r.request_id} - Start Date: {r.start_date.isoformat()}, "
                    f"End Date: {r.end_date.isoformat()}, Status: {r.status.value}"
                )
            return OperationResult.success("\n".join(lines), history)

        return self._run(op)

    def pending_requests(self, employee_id: Optional[int] = None) -> OperationResult:
        def op() -> OperationResult:
            pending = self._service.pending_requests(employee_id=employee_id)
            lines = [
                f"Request {r.request_id} - Employee {r.employee_id}: "
                f"{r.start_date.isoformat()} to {r.end_date.isoformat()}"
                for r in pending
            ]
            return OperationResult.success("\n".join(lines) or "No pending leave requests.", pending)

        return self._run(op)
