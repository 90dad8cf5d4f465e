from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import MySQLTable
from .model import Candidate
from .repository import RecruitmentRepository


class MySQLRecruitmentRepository(RecruitmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._table = MySQLTable(conn_factory, "recruitment_personnel")

    def list_all(self) -> Sequence[Candidate]:
        return [Candidate.from_row(r) for r in self._table.select(order_by="created_at", descending=True)]

    def get(self, candidate_id: int) -> Optional[Candidate]:
        r = self._table.get(candidate_id)
        return Candidate.from_row(r) if r else None

    def get_by_username(self, username: str) -> Optional[Candidate]:
        rows = self._table.select(where={"username": username}, limit=1)
        return Candidate.from_row(rows[0]) if rows else None

    def create(self, candidate: Candidate) -> int:
        return self._table.insert(candidate.to_row())

    def update(self, candidate: Candidate) -> None:
        self._table.update(candidate.id, candidate.to_row())

    def delete(self, candidate_id: int) -> bool:
        return self._table.delete(candidate_id)
