from __future__ import annotations

import importlib
from dataclasses import dataclass
from types import ModuleType
from typing import Iterable, Optional

from .config import get_settings_module
from .core.constants import DEFAULT_APPROVERS
from .employees.memory_employee_repository import InMemoryEmployeeRepository
from .leaves.approvers.factory import ApproverFactory
from .leaves.memory_leave_repository import InMemoryLeaveRequestRepository
from .leaves.service import LeaveService
from .registry import LeaveRegistry


@dataclass(frozen=True)
class Container:
    employees_repo: InMemoryEmployeeRepository
    leave_requests_repo: InMemoryLeaveRequestRepository

    leave_service: LeaveService
    registry: LeaveRegistry


def load_settings(settings_module: Optional[str] = None) -> ModuleType:
    return importlib.import_module(settings_module or get_settings_module())


def build_container(
    *,
    approver_names: Iterable[str] = DEFAULT_APPROVERS,
    approver_factory: Optional[ApproverFactory] = None,
) -> Container:
    employees_repo = InMemoryEmployeeRepository()
    leave_requests_repo = InMemoryLeaveRequestRepository()

    factory = approver_factory or ApproverFactory()
    leave_service = LeaveService(
        employees_repo,
        leave_requests_repo,
        approvers=factory.build(approver_names),
    )
    registry = LeaveRegistry(leave_service)

    return Container(
        employees_repo=employees_repo,
        leave_requests_repo=leave_requests_repo,
        leave_service=leave_service,
        registry=registry,
    )
