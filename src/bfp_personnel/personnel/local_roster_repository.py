from __future__ import annotations

from typing import Optional, Sequence

from ..database.local_store import STORE_PERSONNEL, LocalJsonStore
from .model import Personnel
from .repository import RosterRepository


class LocalRosterRepository(RosterRepository):
    def __init__(self, store: LocalJsonStore):
        self._store = store

    def list_all(self) -> Sequence[Personnel]:
        return [Personnel.from_row(r) for r in self._store.get_all(STORE_PERSONNEL)]

    def get(self, personnel_id: int) -> Optional[Personnel]:
        r = self._store.get_by_id(STORE_PERSONNEL, personnel_id)
        return Personnel.from_row(r) if r else None

    def save(self, person: Personnel) -> None:
        self._store.update(STORE_PERSONNEL, person.to_document())

    def add(self, person: Personnel) -> int:
        doc = person.to_document()
        doc.pop("id", None)
        return self._store.insert(STORE_PERSONNEL, doc)
