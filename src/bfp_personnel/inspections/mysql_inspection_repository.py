from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import MySQLTable, db_cursor, fetchall
from .model import Inspection
from .repository import InspectionRepository


class MySQLInspectionRepository(InspectionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory
        self._table = MySQLTable(conn_factory, "inspections")

    def list_all(self) -> Sequence[Inspection]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT * FROM inspections ORDER BY inspection_date DESC, id DESC")
            return [Inspection.from_row(r) for r in fetchall(cur)]

    def get(self, inspection_id: int) -> Optional[Inspection]:
        r = self._table.get(inspection_id)
        return Inspection.from_row(r) if r else None

    def create(self, inspection: Inspection) -> int:
        return self._table.insert(inspection.to_row())

    def update(self, inspection: Inspection) -> None:
        self._table.update(inspection.id, inspection.to_row())

    def delete(self, inspection_id: int) -> bool:
        return self._table.delete(inspection_id)
