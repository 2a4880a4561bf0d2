from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.constants import FIRST_REQUEST_ID
from ..core.enums import LeaveStatus
from .model import LeaveRequest


class InMemoryLeaveRequestRepository:
    """Requests kept in insertion order, ids handed out by a monotonic counter."""

    def __init__(self):
        self._next_id = FIRST_REQUEST_ID
        self._requests: list[LeaveRequest] = []
        self._by_id: dict[int, LeaveRequest] = {}

    def create(self, *, employee_id: int, start_date: date, end_date: date) -> LeaveRequest:
        req = LeaveRequest(
            request_id=self._next_id,
            employee_id=int(employee_id),
            start_date=start_date,
            end_date=end_date,
            status=LeaveStatus.PENDING,
        )
        self._next_id += 1
        self._requests.append(req)
        self._by_id[req.request_id] = req
        return req

    def get_by_id(self, request_id: int) -> Optional[LeaveRequest]:
        return self._by_id.get(int(request_id))

    def list_for_employee(self, employee_id: int) -> Sequence[LeaveRequest]:
        return self.list_requests(employee_id=employee_id)

    def list_requests(
        self,
        *,
        status: Optional[LeaveStatus] = None,
        employee_id: Optional[int] = None,
    ) -> Sequence[LeaveRequest]:
        items = self._requests
        if status is not None:
            items = [r for r in items if r.status == status]
        if employee_id is not None:
            items = [r for r in items if r.employee_id == int(employee_id)]
        return list(items)
