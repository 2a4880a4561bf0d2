from __future__ import annotations

import logging
import threading
from datetime import date
from functools import wraps
from typing import Optional, Sequence

from ..common.datetime_utils import as_date, inclusive_days
from ..common.validators import require_int, require_non_negative
from ..core.enums import LeaveStatus
from ..core.exceptions import (
    AlreadyApprovedError,
    DomainError,
    DuplicateEmployeeError,
    EmployeeNotFoundError,
    InsufficientBalanceError,
    InvalidDateRangeError,
    LeaveRequestNotFoundError,
    ValidationError,
)
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .approvers.base import ApprovalDecision, LeaveApprover
from .approvers.manager import ManagerApprover
from .model import LeaveHistory, LeaveRequest
from .repository import LeaveRequestRepository

logger = logging.getLogger(__name__)


def _logs_rejections(method):
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except DomainError as e:
            logger.warning("%s rejected (%s): %s", method.__name__, e.reason, e)
            raise

    return wrapper


class LeaveService:
    """Use cases: register employees, request, approve and review leave.

    Every operation holds one lock for its whole duration, so balance checks
    and approval checks cannot interleave when served from several threads.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        requests: LeaveRequestRepository,
        *,
        approvers: Optional[Sequence[LeaveApprover]] = None,
    ):
        self._employees = employees
        self._requests = requests
        self._approvers = list(approvers) if approvers is not None else [ManagerApprover()]
        self._lock = threading.RLock()

    def _require_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise EmployeeNotFoundError(employee_id)
        return employee

    @_logs_rejections
    def add_employee(self, *, employee_id: int, leave_balance: int) -> Employee:
        employee_id = require_int(employee_id, "Employee ID")
        leave_balance = require_non_negative(require_int(leave_balance, "Leave balance"), "Leave balance")

        with self._lock:
            if self._employees.exists(employee_id):
                raise DuplicateEmployeeError(employee_id)

            employee = Employee(employee_id=employee_id, leave_balance=leave_balance)
            self._employees.add(employee)

        logger.info("Added employee %s with leave balance %s", employee_id, leave_balance)
        return employee

    @_logs_rejections
    def get_employee(self, *, employee_id: int) -> Employee:
        with self._lock:
            return self._require_employee(require_int(employee_id, "Employee ID"))

    @_logs_rejections
    def request_leave(self, *, employee_id: int, start_date: date, end_date: date) -> LeaveRequest:
        employee_id = require_int(employee_id, "Employee ID")
        if not isinstance(start_date, date) or not isinstance(end_date, date):
            raise ValidationError("Start and end dates are required")
        start_date = as_date(start_date)
        end_date = as_date(end_date)

        with self._lock:
            employee = self._require_employee(employee_id)

            if end_date < start_date:
                raise InvalidDateRangeError(start_date, end_date)

            requested_days = inclusive_days(start_date, end_date)
            if employee.leave_balance < requested_days:
                raise InsufficientBalanceError(
                    employee_id=employee_id,
                    requested_days=requested_days,
                    leave_balance=employee.leave_balance,
                )

            req = self._requests.create(employee_id=employee_id, start_date=start_date, end_date=end_date)
            employee.leave_balance -= requested_days

        logger.info(
            "Leave request %s submitted for employee %s (%s days, %s left)",
            req.request_id,
            employee_id,
            requested_days,
            employee.leave_balance,
        )
        return req

    @_logs_rejections
    def approve_leave(self, *, request_id: int) -> list[ApprovalDecision]:
        request_id = require_int(request_id, "Request ID")

        with self._lock:
            req = self._requests.get_by_id(request_id)
            if not req:
                raise LeaveRequestNotFoundError(request_id)
            if req.status != LeaveStatus.PENDING:
                raise AlreadyApprovedError(request_id)

            decisions = [approver.approve(req) for approver in self._approvers]

        for decision in decisions:
            logger.info("%s: %s", decision.approver, decision.message)
        return decisions

    @_logs_rejections
    def pending_requests(self, *, employee_id: Optional[int] = None) -> list[LeaveRequest]:
        if employee_id is not None:
            employee_id = require_int(employee_id, "Employee ID")
        with self._lock:
            return list(self._requests.list_requests(status=LeaveStatus.PENDING, employee_id=employee_id))

    @_logs_rejections
    def leave_history(self, *, employee_id: int) -> LeaveHistory:
        employee_id = require_int(employee_id, "Employee ID")
        with self._lock:
            employee = self._require_employee(employee_id)
            return LeaveHistory(
                employee_id=employee.employee_id,
                leave_balance=employee.leave_balance,
                requests=tuple(self._requests.list_for_employee(employee_id)),
            )
