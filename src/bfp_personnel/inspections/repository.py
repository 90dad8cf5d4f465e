from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Inspection


class InspectionRepository(Protocol):
    def list_all(self) -> Sequence[Inspection]:
        raise NotImplementedError

    def get(self, inspection_id: int) -> Optional[Inspection]:
        raise NotImplementedError

    def create(self, inspection: Inspection) -> int:
        raise NotImplementedError

    def update(self, inspection: Inspection) -> None:
        raise NotImplementedError

    def delete(self, inspection_id: int) -> bool:
        raise NotImplementedError
