from __future__ import annotations

from typing import Sequence

from ..database.local_store import STORE_LEAVE, STORE_PERSONNEL, LocalJsonStore
from .model import LeaveRecord
from .repository import LeaveRecordRepository


class LocalLeaveRecordRepository(LeaveRecordRepository):
    """Leave requests from the local store, joined to local personnel by username.

    Requests whose username matches nobody are not listed.
    """

    def __init__(self, store: LocalJsonStore):
        self._store = store

    def list_records(self) -> Sequence[LeaveRecord]:
        personnel = self._store.get_all(STORE_PERSONNEL)
        requests = self._store.get_all(STORE_LEAVE)

        out: list[LeaveRecord] = []
        for person in personnel:
            for req in requests:
                if req.get("username") == person.get("username"):
                    out.append(LeaveRecord.from_documents(person, req))
        return out
