from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import ClearanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import MySQLTable, db_cursor, fetchall, fetchone
from .model import ClearanceRequest
from .repository import ClearanceRepository

_SELECT = """
    SELECT c.*, p.id AS personnel_id, p.first_name, p.last_name, p.`rank`
    FROM clearance_requests c
    JOIN personnel p ON p.username = c.username
"""


class MySQLClearanceRepository(ClearanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory
        self._table = MySQLTable(conn_factory, "clearance_requests")

    def list_all(self) -> Sequence[ClearanceRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY c.created_at DESC, c.id DESC")
            return [ClearanceRequest.from_row(r) for r in fetchall(cur)]

    def get(self, request_id: int) -> Optional[ClearanceRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE c.id=%s", (int(request_id),))
            r = fetchone(cur)
            return ClearanceRequest.from_row(r) if r else None

    def create(self, request: ClearanceRequest) -> int:
        return self._table.insert(request.to_row())

    def set_status(self, request_id: int, status: ClearanceStatus) -> bool:
        return self._table.update(request_id, {"status": status.value}) > 0
