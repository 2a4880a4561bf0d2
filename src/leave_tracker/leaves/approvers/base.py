from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..model import LeaveRequest


@dataclass(frozen=True)
class ApprovalDecision:
    approver: str
    approved: bool
    message: str


class LeaveApprover(ABC):
    """Strategy Pattern: encapsulate who decides a leave request and how.

    New policies are added as further subclasses; the service only ever calls
    `approve` on each registered approver in turn.
    """

    name = "Approver"

    @abstractmethod
    def approve(self, request: Optional[LeaveRequest]) -> ApprovalDecision:
        raise NotImplementedError
