from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Mapping, Optional

from ..common.datetime_utils import coerce_date
from ..common.names import joined_name
from ..core.constants import NOT_AVAILABLE, UNKNOWN
from ..core.enums import LeaveStatus, coerce_enum

# Leave type (lowercase) -> personnel balance column it draws from
BALANCE_COLUMNS = {
    "vacation": "earned_vacation",
    "sick": "earned_sick",
    "emergency": "earned_emergency",
}


@dataclass(frozen=True)
class LeaveRequest:
    id: int
    leave_type: str
    start_date: Optional[date]
    end_date: Optional[date]
    num_days: float
    status: LeaveStatus = LeaveStatus.PENDING
    personnel_id: Optional[int] = None
    username: Optional[str] = None
    employee_name: str = UNKNOWN
    rank: str = NOT_AVAILABLE
    location: str = NOT_AVAILABLE
    reason: Optional[str] = None
    date_of_filing: Optional[date] = None
    approved_by: Optional[str] = None
    updated_at: Optional[datetime] = None

    @property
    def balance_column(self) -> Optional[str]:
        return BALANCE_COLUMNS.get((self.leave_type or "").strip().lower())

    @classmethod
    def from_row(cls, r: Mapping[str, Any]) -> "LeaveRequest":
        personnel_id = r.get("personnel_id")
        return cls(
            id=int(r["id"]),
            leave_type=r.get("leave_type") or "",
            start_date=coerce_date(r.get("start_date")),
            end_date=coerce_date(r.get("end_date")),
            num_days=float(r.get("num_days") or 0),
            status=coerce_enum(LeaveStatus, r.get("status"), LeaveStatus.PENDING),
            personnel_id=int(personnel_id) if personnel_id is not None else None,
            username=r.get("username"),
            employee_name=joined_name(r, fallback=r.get("employee_name")),
            rank=r.get("rank") or NOT_AVAILABLE,
            location=r.get("location") or r.get("station") or NOT_AVAILABLE,
            reason=r.get("reason"),
            date_of_filing=coerce_date(r.get("date_of_filing")),
            approved_by=r.get("approved_by"),
            updated_at=r.get("updated_at") if isinstance(r.get("updated_at"), datetime) else None,
        )

    def to_row(self) -> Dict[str, Any]:
        return {
            "personnel_id": self.personnel_id,
            "username": self.username,
            "employee_name": self.employee_name,
            "leave_type": self.leave_type,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "num_days": self.num_days,
            "location": None if self.location == NOT_AVAILABLE else self.location,
            "status": self.status.value,
            "reason": self.reason,
            "date_of_filing": self.date_of_filing,
            "approved_by": self.approved_by,
        }


@dataclass(frozen=True)
class LeaveRecord:
    """Read-only row of the local leave records screen."""

    id: str
    full_name: str
    rank: str
    username: str
    leave_type: str
    date_of_filing: Optional[date]
    start_date: Optional[date]
    end_date: Optional[date]
    num_days: float
    status: LeaveStatus

    @classmethod
    def from_documents(cls, person: Mapping[str, Any], req: Mapping[str, Any]) -> "LeaveRecord":
        filed = coerce_date(req.get("date_of_filing"))
        return cls(
            id=f"{person.get('id')}-{req.get('id')}",
            full_name=joined_name({"first_name": person.get("first_name"), "last_name": person.get("last_name")}),
            rank=person.get("rank") or NOT_AVAILABLE,
            username=person.get("username") or "",
            leave_type=req.get("leave_type") or "",
            date_of_filing=filed,
            start_date=coerce_date(req.get("start_date")),
            end_date=coerce_date(req.get("end_date")),
            num_days=float(req.get("num_days") or 0),
            status=coerce_enum(LeaveStatus, req.get("status"), LeaveStatus.PENDING),
        )
