from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..core.constants import AWARD_DOCUMENT_CATEGORY
from ..database.connection import DatabaseConnection
from ..database.mysql_base import MySQLTable, db_cursor, fetchall
from .model import Award
from .repository import AwardRepository


class MySQLAwardRepository(AwardRepository):
    """Awards are personnel documents filed under the award category."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory
        self._table = MySQLTable(conn_factory, "personnel_documents")

    def list_all(self) -> Sequence[Award]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT d.id, d.personnel_id, d.name, d.uploaded_at,
                       p.first_name, p.middle_name, p.last_name, p.`rank`, p.badge_number
                FROM personnel_documents d
                JOIN personnel p ON p.id = d.personnel_id
                WHERE d.category=%s
                ORDER BY p.id, d.uploaded_at DESC
                """,
                (AWARD_DOCUMENT_CATEGORY,),
            )
            return [Award.from_row(r) for r in fetchall(cur)]

    def create(self, *, personnel_id: int, name: str, awarded_at: datetime) -> int:
        return self._table.insert(
            {
                "personnel_id": int(personnel_id),
                "name": name,
                "category": AWARD_DOCUMENT_CATEGORY,
                "uploaded_at": awarded_at,
            }
        )

    def delete(self, award_id: int) -> bool:
        return self._table.delete(award_id)
