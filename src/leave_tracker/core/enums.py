from __future__ import annotations

from enum import Enum


class LeaveStatus(str, Enum):
    """Approval state of a leave request.

    PENDING -> APPROVED is the only transition; APPROVED is terminal.
    """

    PENDING = "Pending"
    APPROVED = "Approved"
