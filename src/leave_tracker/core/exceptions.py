class DomainError(Exception):
    """Base exception for business rule violations."""

    reason = "domain-error"


class NotFoundError(DomainError):
    """Raised when an employee or leave request does not exist."""

    reason = "not-found"


class EmployeeNotFoundError(NotFoundError):
    def __init__(self, employee_id: int):
        super().__init__("Employee not found.")
        self.employee_id = employee_id


class LeaveRequestNotApprovableError(DomainError):
    """Raised when a request is missing or already approved."""

    def __init__(self, request_id: int):
        super().__init__(
            f"Unable to approve leave request with ID {request_id}. Request not found or already approved."
        )
        self.request_id = request_id


class LeaveRequestNotFoundError(LeaveRequestNotApprovableError, NotFoundError):
    reason = "not-found"


class AlreadyApprovedError(LeaveRequestNotApprovableError):
    reason = "already-approved"


class InsufficientBalanceError(DomainError):
    reason = "insufficient-balance"

    def __init__(self, *, employee_id: int, requested_days: int, leave_balance: int):
        super().__init__("Insufficient leave balance. Leave request not submitted.")
        self.employee_id = employee_id
        self.requested_days = requested_days
        self.leave_balance = leave_balance


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    reason = "invalid-argument"


class InvalidDateRangeError(ValidationError):
    reason = "invalid-date-range"

    def __init__(self, start_date, end_date):
        super().__init__("End date must be on or after start date.")
        self.start_date = start_date
        self.end_date = end_date


class DuplicateEmployeeError(ValidationError):
    reason = "duplicate-employee"

    def __init__(self, employee_id: int):
        super().__init__(f"Employee with ID {employee_id} already exists.")
        self.employee_id = employee_id


class ConfigurationError(Exception):
    """Raised when settings reference something that cannot be wired."""
