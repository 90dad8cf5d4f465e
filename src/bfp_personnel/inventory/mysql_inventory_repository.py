from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import MySQLTable
from .model import InventoryItem
from .repository import InventoryRepository


class MySQLInventoryRepository(InventoryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._table = MySQLTable(conn_factory, "inventory")

    def list_all(self) -> Sequence[InventoryItem]:
        return [InventoryItem.from_row(r) for r in self._table.select(order_by="created_at", descending=True)]

    def get(self, item_id: int) -> Optional[InventoryItem]:
        r = self._table.get(item_id)
        return InventoryItem.from_row(r) if r else None

    def get_by_code(self, item_code: str) -> Optional[InventoryItem]:
        rows = self._table.select(where={"item_code": item_code}, limit=1)
        return InventoryItem.from_row(rows[0]) if rows else None

    def create(self, item: InventoryItem) -> int:
        return self._table.insert(item.to_row())

    def update(self, item: InventoryItem) -> None:
        self._table.update(item.id, item.to_row())

    def delete(self, item_id: int) -> bool:
        return self._table.delete(item_id)
