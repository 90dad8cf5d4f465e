from __future__ import annotations

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from ..core.exceptions import BackendError, NotFoundError

STORE_PERSONNEL = "personnel"
STORE_CLEARANCE = "clearanceRequests"
STORE_INVENTORY = "inventory"
STORE_LEAVE = "leaveRequests"
STORE_RECRUITMENT = "recruitment"
STORE_MEDICAL_RECORDS = "medicalRecords"
STORE_TRAININGS = "trainings"
STORE_INSPECTIONS = "inspections"

STORE_NAMES = (
    STORE_PERSONNEL,
    STORE_CLEARANCE,
    STORE_INVENTORY,
    STORE_LEAVE,
    STORE_RECRUITMENT,
    STORE_MEDICAL_RECORDS,
    STORE_TRAININGS,
    STORE_INSPECTIONS,
)

_SCHEMA_VERSION = 1


class LocalJsonStore:
    """Key-object store persisted to one JSON file.

    Each named store holds records keyed by an auto-incremented ``id``.
    Writes go through a temp file and ``os.replace`` so a crash never leaves
    a half-written file behind.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _check_store(self, store: str) -> None:
        if store not in STORE_NAMES:
            raise ValueError(f"Unknown local store: {store!r}")

    def _empty_payload(self) -> Dict[str, Any]:
        return {
            "schema_version": _SCHEMA_VERSION,
            "stores": {name: {"next_id": 1, "records": []} for name in STORE_NAMES},
        }

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return self._empty_payload()
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise BackendError("unknown", f"Local store could not be read: {e}") from e
        stores = payload.setdefault("stores", {})
        for name in STORE_NAMES:
            stores.setdefault(name, {"next_id": 1, "records": []})
        return payload

    def _write(self, payload: Dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(
                prefix=f"{self.path.stem}.",
                suffix=".tmp",
                dir=str(self.path.parent),
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
                    json.dump(payload, handle, indent=2, ensure_ascii=False, default=str)
                    handle.write("\n")
                os.replace(temp_path, self.path)
            except BaseException:
                if os.path.exists(temp_path):
                    os.unlink(temp_path)
                raise
        except OSError as e:
            raise BackendError("unknown", f"Local store could not be written: {e}") from e

    def get_all(self, store: str) -> List[Dict[str, Any]]:
        self._check_store(store)
        with self._lock:
            return [dict(r) for r in self._read()["stores"][store]["records"]]

    def get_by_id(self, store: str, record_id: int) -> Optional[Dict[str, Any]]:
        self._check_store(store)
        with self._lock:
            for r in self._read()["stores"][store]["records"]:
                if int(r["id"]) == int(record_id):
                    return dict(r)
        return None

    def insert(self, store: str, record: Mapping[str, Any]) -> int:
        self._check_store(store)
        with self._lock:
            payload = self._read()
            bucket = payload["stores"][store]
            new_id = int(bucket["next_id"])
            bucket["next_id"] = new_id + 1
            bucket["records"].append({**dict(record), "id": new_id})
            self._write(payload)
            return new_id

    def update(self, store: str, record: Mapping[str, Any]) -> None:
        """Replace the stored record carrying the same ``id``."""
        self._check_store(store)
        record_id = int(record["id"])
        with self._lock:
            payload = self._read()
            records = payload["stores"][store]["records"]
            for i, r in enumerate(records):
                if int(r["id"]) == record_id:
                    records[i] = dict(record)
                    self._write(payload)
                    return
        raise NotFoundError(f"Record {record_id} not found in {store}")

    def delete(self, store: str, record_id: int) -> bool:
        self._check_store(store)
        with self._lock:
            payload = self._read()
            records = payload["stores"][store]["records"]
            kept = [r for r in records if int(r["id"]) != int(record_id)]
            if len(kept) == len(records):
                return False
            payload["stores"][store]["records"] = kept
            self._write(payload)
            return True
