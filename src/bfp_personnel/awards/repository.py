from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import Award


class AwardRepository(Protocol):
    def list_all(self) -> Sequence[Award]:
        raise NotImplementedError

    def create(self, *, personnel_id: int, name: str, awarded_at: datetime) -> int:
        raise NotImplementedError

    def delete(self, award_id: int) -> bool:
        raise NotImplementedError
