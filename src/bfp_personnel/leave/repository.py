from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import LeaveRecord, LeaveRequest


class LeaveRepository(Protocol):
    def list_all(self, *, username: Optional[str] = None) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def get(self, request_id: int) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def create(self, leave: LeaveRequest) -> int:
        raise NotImplementedError

    def decide(
        self,
        request_id: int,
        *,
        status: LeaveStatus,
        approved_by: str,
        reason: Optional[str] = None,
    ) -> bool:
        """Set the decision only while the request is still Pending."""
        raise NotImplementedError


class LeaveRecordRepository(Protocol):
    def list_records(self) -> Sequence[LeaveRecord]:
        raise NotImplementedError
