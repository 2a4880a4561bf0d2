from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from ...core.constants import DEFAULT_APPROVERS
from ...core.exceptions import ConfigurationError
from .base import LeaveApprover
from .manager import ManagerApprover


def _default_registry() -> dict[str, type[LeaveApprover]]:
    return {"manager": ManagerApprover}


@dataclass
class ApproverFactory:
    """Factory Pattern: build the approver chain from configured names."""

    registry: dict[str, type[LeaveApprover]] = field(default_factory=_default_registry)

    def register(self, name: str, approver_cls: type[LeaveApprover]) -> None:
        self.registry[name.strip().lower()] = approver_cls

    def build(self, names: Iterable[str] = DEFAULT_APPROVERS) -> list[LeaveApprover]:
        approvers: list[LeaveApprover] = []
        for raw in names:
            key = (raw or "").strip().lower()
            if not key:
                continue
            approver_cls = self.registry.get(key)
            if approver_cls is None:
                raise ConfigurationError(f"Unknown approver: {raw!r}")
            approvers.append(approver_cls())
        if not approvers:
            raise ConfigurationError("At least one approver must be configured")
        return approvers
