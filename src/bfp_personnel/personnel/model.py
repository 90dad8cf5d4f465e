from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Mapping, Optional

from ..common.datetime_utils import coerce_date, today_local, years_since
from ..core.constants import DAYS_PER_YEAR, ELIGIBILITY_YEARS
from ..core.enums import PersonnelStatus, coerce_enum


def _float_or_none(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)


@dataclass(frozen=True)
class Personnel:
    id: int
    first_name: str
    last_name: str
    username: str
    middle_name: Optional[str] = None
    badge_number: Optional[str] = None
    rank: Optional[str] = None
    last_rank: Optional[str] = None
    station: Optional[str] = None
    designation: Optional[str] = None
    email: Optional[str] = None
    birth_date: Optional[date] = None
    date_hired: Optional[date] = None
    retirement_date: Optional[date] = None
    last_promoted: Optional[date] = None
    status: PersonnelStatus = PersonnelStatus.ACTIVE
    earned_vacation: Optional[float] = None
    earned_sick: Optional[float] = None
    earned_emergency: Optional[float] = None
    updated_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        parts = [self.first_name, self.middle_name, self.last_name]
        return " ".join(p.strip() for p in parts if p and p.strip())

    @property
    def years_in_rank(self) -> int:
        return years_since(self.last_promoted or self.date_hired)

    @property
    def years_since_hire(self) -> int:
        return years_since(self.date_hired)

    @property
    def promotion_eligible(self) -> bool:
        return self.years_in_rank >= ELIGIBILITY_YEARS

    @property
    def placement_eligible(self) -> bool:
        return self.years_since_hire >= ELIGIBILITY_YEARS

    @property
    def years_of_service(self) -> float:
        """Service length to one decimal, ending at retirement or last update."""
        hired = coerce_date(self.date_hired)
        if hired is None:
            return 0.0
        end = coerce_date(self.retirement_date) or coerce_date(self.updated_at) or today_local()
        years = (end - hired).days / DAYS_PER_YEAR
        return int(years * 10) / 10

    @property
    def clearance_type(self) -> str:
        return {
            PersonnelStatus.RETIRED: "Retirement",
            PersonnelStatus.RESIGNED: "Resignation",
            PersonnelStatus.EQUIPMENT_COMPLETED: "Equipment Completion",
        }.get(self.status, self.status.value)

    @classmethod
    def from_row(cls, r: Mapping[str, Any]) -> "Personnel":
        return cls(
            id=int(r["id"]),
            first_name=r.get("first_name") or "",
            last_name=r.get("last_name") or "",
            username=r.get("username") or "",
            middle_name=r.get("middle_name"),
            badge_number=r.get("badge_number"),
            rank=r.get("rank"),
            last_rank=r.get("last_rank"),
            station=r.get("station"),
            designation=r.get("designation"),
            email=r.get("email"),
            birth_date=coerce_date(r.get("birth_date")),
            date_hired=coerce_date(r.get("date_hired")),
            retirement_date=coerce_date(r.get("retirement_date")),
            last_promoted=coerce_date(r.get("last_promoted")),
            status=coerce_enum(PersonnelStatus, r.get("status"), PersonnelStatus.ACTIVE),
            earned_vacation=_float_or_none(r.get("earned_vacation")),
            earned_sick=_float_or_none(r.get("earned_sick")),
            earned_emergency=_float_or_none(r.get("earned_emergency")),
            updated_at=r.get("updated_at") if isinstance(r.get("updated_at"), datetime) else None,
        )

    def to_row(self) -> Dict[str, Any]:
        """Every editable column of the ``personnel`` table."""
        return {
            "badge_number": self.badge_number,
            "first_name": self.first_name,
            "middle_name": self.middle_name,
            "last_name": self.last_name,
            "rank": self.rank,
            "station": self.station,
            "designation": self.designation,
            "username": self.username,
            "email": self.email,
            "birth_date": self.birth_date,
            "date_hired": self.date_hired,
            "retirement_date": self.retirement_date,
            "last_promoted": self.last_promoted,
            "status": self.status.value,
            "earned_vacation": self.earned_vacation,
            "earned_sick": self.earned_sick,
            "earned_emergency": self.earned_emergency,
        }

    def to_document(self) -> Dict[str, Any]:
        """Local store shape: JSON-safe, keeps ``last_rank``."""
        doc = self.to_row()
        for key in ("birth_date", "date_hired", "retirement_date", "last_promoted"):
            value = doc[key]
            doc[key] = value.isoformat() if value else None
        doc["last_rank"] = self.last_rank
        doc["id"] = self.id
        return doc
