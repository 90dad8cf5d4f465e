from __future__ import annotations

import json

import pytest

from bfp_personnel.core.exceptions import BackendError, NotFoundError
from bfp_personnel.database.local_store import STORE_INVENTORY, STORE_LEAVE, STORE_PERSONNEL, LocalJsonStore
from bfp_personnel.leave.local_leave_repository import LocalLeaveRecordRepository


@pytest.fixture
def store(tmp_path):
    return LocalJsonStore(tmp_path / "nested" / "store.json")


def test_missing_file_reads_as_empty(store):
    assert store.get_all(STORE_INVENTORY) == []
    assert store.get_by_id(STORE_INVENTORY, 1) is None


def test_insert_assigns_increasing_ids_per_store(store):
    assert store.insert(STORE_INVENTORY, {"item_name": "Hose"}) == 1
    assert store.insert(STORE_INVENTORY, {"item_name": "Axe"}) == 2
    assert store.insert(STORE_PERSONNEL, {"username": "ana"}) == 1

    assert store.delete(STORE_INVENTORY, 2)
    assert store.insert(STORE_INVENTORY, {"item_name": "Nozzle"}) == 3
    assert [r["item_name"] for r in store.get_all(STORE_INVENTORY)] == ["Hose", "Nozzle"]


def test_update_replaces_record(store):
    rid = store.insert(STORE_PERSONNEL, {"username": "ana", "rank": "FO1"})
    store.update(STORE_PERSONNEL, {"id": rid, "username": "ana", "rank": "FO2"})

    assert store.get_by_id(STORE_PERSONNEL, rid)["rank"] == "FO2"
    with pytest.raises(NotFoundError):
        store.update(STORE_PERSONNEL, {"id": 99})
    assert store.delete(STORE_PERSONNEL, 99) is False


def test_file_is_plain_json(store):
    store.insert(STORE_LEAVE, {"username": "ana"})
    payload = json.loads(store.path.read_text(encoding="utf-8"))

    assert payload["stores"]["leaveRequests"]["records"] == [{"username": "ana", "id": 1}]
    assert payload["stores"]["leaveRequests"]["next_id"] == 2


def test_unknown_store_and_corrupt_file(store):
    with pytest.raises(ValueError):
        store.get_all("payroll")

    store.path.parent.mkdir(parents=True, exist_ok=True)
    store.path.write_text("{not json", encoding="utf-8")
    with pytest.raises(BackendError):
        store.get_all(STORE_LEAVE)


def test_leave_records_join_by_username(store):
    store.insert(STORE_PERSONNEL, {"username": "ana", "first_name": "Ana", "last_name": "Reyes", "rank": "FO1"})
    store.insert(STORE_LEAVE, {"username": "ana", "leave_type": "Sick", "num_days": 2, "status": "Approved"})
    store.insert(STORE_LEAVE, {"username": "ghost", "leave_type": "Sick", "num_days": 1})

    records = LocalLeaveRecordRepository(store).list_records()

    assert len(records) == 1
    assert records[0].full_name == "Ana Reyes"
    assert records[0].id == "1-1"
    assert records[0].num_days == 2.0
