from __future__ import annotations

from datetime import date, datetime

import pytest

from leave_tracker.container import build_container
from leave_tracker.core.enums import LeaveStatus


@pytest.fixture()
def registry():
    return build_container().registry


def test_add_employee_reports_success(registry):
    result = registry.add_employee(1, 10)

    assert result.ok
    assert result.reason is None
    assert result.message == "Employee added successfully."


def test_duplicate_employee_is_a_named_failure(registry):
    registry.add_employee(1, 10)
    result = registry.add_employee(1, 4)

    assert not result.ok
    assert result.reason == "duplicate-employee"


def test_request_failures_are_reported_not_raised(registry):
    missing = registry.request_leave(8, date(2025, 1, 1), date(2025, 1, 2))
    assert (missing.ok, missing.reason, missing.message) == (False, "not-found", "Employee not found.")

    registry.add_employee(1, 2)
    short = registry.request_leave(1, date(2025, 1, 1), date(2025, 1, 5))
    assert short.reason == "insufficient-balance"
    assert short.message == "Insufficient leave balance. Leave request not submitted."

    backwards = registry.request_leave(1, date(2025, 1, 5), date(2025, 1, 1))
    assert backwards.reason == "invalid-date-range"


def test_approve_twice_reports_already_approved(registry):
    registry.add_employee(1, 10)
    submitted = registry.request_leave(1, date(2025, 1, 1), date(2025, 1, 1))
    request_id = submitted.value.request_id

    first = registry.approve_leave(request_id)
    second = registry.approve_leave(request_id)

    assert first.ok
    assert first.message == f"Leave request with ID {request_id} approved by Manager."
    assert not second.ok
    assert second.reason == "already-approved"
    assert second.message == (
        f"Unable to approve leave request with ID {request_id}. Request not found or already approved."
    )


def test_approve_unknown_request_reports_not_found(registry):
    result = registry.approve_leave(5)

    assert not result.ok
    assert result.reason == "not-found"


def test_history_text_and_value(registry):
    registry.add_employee(1, 10)
    submitted = registry.request_leave(1, date(2025, 6, 2), date(2025, 6, 6))
    registry.approve_leave(submitted.value.request_id)

    result = registry.display_leave_history(1)

    assert result.ok
    assert result.value.leave_balance == 5
    assert result.value.requests[0].status == LeaveStatus.APPROVED
    assert result.message.splitlines() == [
        "Leave History for Employee 1:",
        "Leave Balance: 5",
        "Leave Requests:",
        "Request 1 - Start Date: 2025-06-02, End Date: 2025-06-06, Status: Approved",
    ]


def test_history_for_unknown_employee_lists_nothing(registry):
    result = registry.display_leave_history(2)

    assert not result.ok
    assert result.reason == "not-found"
    assert result.value is None


def test_pending_requests_message_when_empty(registry):
    assert registry.pending_requests().message == "No pending leave requests."


def test_datetime_arguments_are_compared_as_dates(registry):
    registry.add_employee(1, 10)

    result = registry.request_leave(1, date(2025, 1, 1), datetime(2025, 1, 3, 15, 30))

    assert result.ok
    assert result.value.end_date == date(2025, 1, 3)
    assert result.value.requested_days == 3


def test_mixed_backwards_range_is_reported_not_raised(registry):
    registry.add_employee(1, 10)

    result = registry.request_leave(1, datetime(2025, 1, 3, 9, 0), date(2025, 1, 1))

    assert not result.ok
    assert result.reason == "invalid-date-range"
