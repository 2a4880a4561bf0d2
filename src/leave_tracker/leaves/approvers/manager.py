from __future__ import annotations

import logging
from typing import Optional

from ...core.enums import LeaveStatus
from ..model import LeaveRequest
from .base import ApprovalDecision, LeaveApprover

logger = logging.getLogger(__name__)


class ManagerApprover(LeaveApprover):
    """Approves any pending request unconditionally."""

    name = "Manager"

    def approve(self, request: Optional[LeaveRequest]) -> ApprovalDecision:
        if request is not None and request.status != LeaveStatus.APPROVED:
            request.status = LeaveStatus.APPROVED
            return ApprovalDecision(
                approver=self.name,
                approved=True,
                message=f"Leave request with ID {request.request_id} approved by {self.name}.",
            )

        request_id = request.request_id if request is not None else None
        logger.warning("%s could not approve leave request %s", self.name, request_id)
        return ApprovalDecision(
            approver=self.name,
            approved=False,
            message=f"Unable to approve leave request with ID {request_id}. Request not found or already approved.",
        )
