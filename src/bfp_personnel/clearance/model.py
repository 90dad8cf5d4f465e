from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Mapping, Optional

from ..common.datetime_utils import coerce_date
from ..common.names import joined_name
from ..core.constants import NOT_AVAILABLE
from ..core.enums import ClearanceStatus, PersonnelStatus, coerce_enum

# Completing a clearance of this type separates the employee with that status
SEPARATION_STATUS = {
    "Retirement": PersonnelStatus.RETIRED,
    "Resignation": PersonnelStatus.RESIGNED,
    "Equipment Completion": PersonnelStatus.EQUIPMENT_COMPLETED,
}


@dataclass(frozen=True)
class ClearanceRequest:
    id: int
    username: str
    clearance_type: str
    date_requested: Optional[date]
    status: ClearanceStatus = ClearanceStatus.PENDING
    personnel_id: Optional[int] = None
    full_name: str = ""
    rank: str = NOT_AVAILABLE

    @property
    def dedup_key(self) -> tuple:
        return (self.username, self.clearance_type, self.date_requested, self.status)

    @classmethod
    def from_row(cls, r: Mapping[str, Any]) -> "ClearanceRequest":
        pid = r.get("personnel_id")
        return cls(
            id=int(r["id"]),
            username=r.get("username") or "",
            clearance_type=r.get("clearance_type") or "",
            date_requested=coerce_date(r.get("date_requested")),
            status=coerce_enum(ClearanceStatus, r.get("status"), ClearanceStatus.PENDING),
            personnel_id=int(pid) if pid is not None else None,
            full_name=joined_name({"first_name": r.get("first_name"), "last_name": r.get("last_name")}),
            rank=r.get("rank") or NOT_AVAILABLE,
        )

    def to_row(self) -> Dict[str, Any]:
        return {
            "username": self.username,
            "clearance_type": self.clearance_type,
            "date_requested": self.date_requested,
            "status": self.status.value,
        }
