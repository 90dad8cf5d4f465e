from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import InventoryItem


class InventoryRepository(Protocol):
    def list_all(self) -> Sequence[InventoryItem]:
        raise NotImplementedError

    def get(self, item_id: int) -> Optional[InventoryItem]:
        raise NotImplementedError

    def get_by_code(self, item_code: str) -> Optional[InventoryItem]:
        raise NotImplementedError

    def create(self, item: InventoryItem) -> int:
        raise NotImplementedError

    def update(self, item: InventoryItem) -> None:
        raise NotImplementedError

    def delete(self, item_id: int) -> bool:
        raise NotImplementedError
