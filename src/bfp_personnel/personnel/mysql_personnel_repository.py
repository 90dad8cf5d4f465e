from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import PersonnelStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import MySQLTable, db_cursor, fetchall, fetchone
from .model import Personnel
from .repository import PersonnelRepository

_BALANCE_COLUMNS = ("earned_vacation", "earned_sick", "earned_emergency")


class MySQLPersonnelRepository(PersonnelRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory
        self._table = MySQLTable(conn_factory, "personnel")

    def list_all(self) -> Sequence[Personnel]:
        rows = self._table.select(order_by="created_at", descending=True)
        return [Personnel.from_row(r) for r in rows]

    def list_separated(self) -> Sequence[Personnel]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT * FROM personnel
                WHERE status <> %s
                ORDER BY updated_at DESC, id DESC
                """,
                (PersonnelStatus.ACTIVE.value,),
            )
            return [Personnel.from_row(r) for r in fetchall(cur)]

    def get(self, personnel_id: int) -> Optional[Personnel]:
        r = self._table.get(personnel_id)
        return Personnel.from_row(r) if r else None

    def get_by_username(self, username: str) -> Optional[Personnel]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT * FROM personnel WHERE username=%s LIMIT 1", (username,))
            r = fetchone(cur)
            return Personnel.from_row(r) if r else None

    def create(self, person: Personnel) -> int:
        return self._table.insert(person.to_row())

    def update(self, person: Personnel) -> None:
        values = person.to_row()
        values["updated_at"] = now_local()
        self._table.update(person.id, values)

    def set_status(self, personnel_id: int, status: PersonnelStatus) -> bool:
        return self._table.update(personnel_id, {"status": status.value, "updated_at": now_local()}) > 0

    def update_balances(self, personnel_id: int, balances: dict) -> None:
        values = {k: v for k, v in balances.items() if k in _BALANCE_COLUMNS}
        if values:
            self._table.update(personnel_id, values)

    def delete(self, personnel_id: int) -> bool:
        return self._table.delete(personnel_id)
