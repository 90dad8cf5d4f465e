from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import LeaveStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import MySQLTable, db_cursor, fetchall, fetchone
from .model import LeaveRequest
from .repository import LeaveRepository

_SELECT = """
    SELECT l.*, p.first_name, p.middle_name, p.last_name, p.`rank`, p.station
    FROM leave_requests l
    LEFT JOIN personnel p ON p.id = l.personnel_id
"""


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory
        self._table = MySQLTable(conn_factory, "leave_requests")

    def list_all(self, *, username: Optional[str] = None) -> Sequence[LeaveRequest]:
        clauses = ["1=1"]
        params: list[object] = []
        if username is not None:
            clauses.append("l.username=%s")
            params.append(username)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"{_SELECT} WHERE {' AND '.join(clauses)} ORDER BY l.created_at DESC, l.id DESC",
                tuple(params),
            )
            return [LeaveRequest.from_row(r) for r in fetchall(cur)]

    def get(self, request_id: int) -> Optional[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE l.id=%s", (int(request_id),))
            r = fetchone(cur)
            return LeaveRequest.from_row(r) if r else None

    def create(self, leave: LeaveRequest) -> int:
        return self._table.insert(leave.to_row())

    def decide(
        self,
        request_id: int,
        *,
        status: LeaveStatus,
        approved_by: str,
        reason: Optional[str] = None,
    ) -> bool:
        values = {"status": status.value, "updated_at": now_local(), "approved_by": approved_by}
        if reason is not None:
            values["reason"] = reason
        affected = self._table.update(request_id, values, where={"status": LeaveStatus.PENDING.value})
        return affected > 0
