from .base import ApprovalDecision, LeaveApprover
from .factory import ApproverFactory
from .manager import ManagerApprover

__all__ = ["ApprovalDecision", "ApproverFactory", "LeaveApprover", "ManagerApprover"]
