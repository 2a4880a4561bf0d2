from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..common.datetime_utils import inclusive_days
from ..core.enums import LeaveStatus


@dataclass
class LeaveRequest:
    """Domain entity: a leave request for a date range.

    Everything except `status` is fixed once the request is recorded.
    """

    request_id: int
    employee_id: int
    start_date: date
    end_date: date
    status: LeaveStatus = LeaveStatus.PENDING

    @property
    def requested_days(self) -> int:
        return inclusive_days(self.start_date, self.end_date)

    def to_dict(self) -> dict:
        return {
            "request_id": self.request_id,
            "employee_id": self.employee_id,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "requested_days": self.requested_days,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class LeaveHistory:
    """Read-model for the history view: current balance plus requests in submission order."""

    employee_id: int
    leave_balance: int
    requests: tuple[LeaveRequest, ...]

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "leave_balance": self.leave_balance,
            "requests": [r.to_dict() for r in self.requests],
        }
