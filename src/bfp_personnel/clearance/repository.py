from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import ClearanceStatus
from .model import ClearanceRequest


class ClearanceRepository(Protocol):
    def list_all(self) -> Sequence[ClearanceRequest]:
        """Requests joined to personnel by username; unmatched usernames are left out."""
        raise NotImplementedError

    def get(self, request_id: int) -> Optional[ClearanceRequest]:
        raise NotImplementedError

    def create(self, request: ClearanceRequest) -> int:
        raise NotImplementedError

    def set_status(self, request_id: int, status: ClearanceStatus) -> bool:
        raise NotImplementedError
