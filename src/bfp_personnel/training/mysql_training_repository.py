from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..database.connection import DatabaseConnection
from ..database.mysql_base import MySQLTable, db_cursor, fetchall, fetchone
from .model import Training
from .repository import TrainingRepository

_SELECT = """
    SELECT t.*, p.first_name, p.middle_name, p.last_name, p.`rank`, p.username
    FROM trainings t
    LEFT JOIN personnel p ON p.id = t.personnel_id
"""


class MySQLTrainingRepository(TrainingRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory
        self._table = MySQLTable(conn_factory, "trainings")

    def list_all(self) -> Sequence[Training]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY t.training_date DESC, t.id DESC")
            return [Training.from_row(r) for r in fetchall(cur)]

    def get(self, training_id: int) -> Optional[Training]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE t.id=%s", (int(training_id),))
            r = fetchone(cur)
            return Training.from_row(r) if r else None

    def create(self, training: Training) -> int:
        return self._table.insert(training.to_row())

    def update(self, training: Training) -> None:
        values = training.to_row()
        values["updated_at"] = now_local()
        self._table.update(training.id, values)

    def delete(self, training_id: int) -> bool:
        return self._table.delete(training_id)
