from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Mapping, Optional

from ..common.datetime_utils import coerce_date
from ..core.enums import InspectionStatus, coerce_enum

UNKNOWN_EQUIPMENT = "Unknown Equipment"
UNKNOWN_INSPECTOR = "Unknown Inspector"


def _int_or_none(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    return int(value)


@dataclass(frozen=True)
class Inspection:
    id: int
    equipment_id: Optional[int]
    inspector_id: Optional[int]
    inspection_date: Optional[date]
    status: InspectionStatus = InspectionStatus.PASSED
    equipment_name: str = UNKNOWN_EQUIPMENT
    inspector_name: str = UNKNOWN_INSPECTOR
    findings: Optional[str] = None
    recommendations: Optional[str] = None
    notes: Optional[str] = None

    @classmethod
    def from_row(cls, r: Mapping[str, Any]) -> "Inspection":
        return cls(
            id=int(r["id"]),
            equipment_id=_int_or_none(r.get("equipment_id")),
            inspector_id=_int_or_none(r.get("inspector_id")),
            inspection_date=coerce_date(r.get("inspection_date")),
            status=coerce_enum(InspectionStatus, r.get("status"), InspectionStatus.PASSED),
            equipment_name=r.get("equipment_name") or UNKNOWN_EQUIPMENT,
            inspector_name=r.get("inspector_name") or UNKNOWN_INSPECTOR,
            findings=r.get("findings"),
            recommendations=r.get("recommendations"),
            notes=r.get("notes"),
        )

    def to_row(self) -> Dict[str, Any]:
        return {
            "equipment_id": self.equipment_id,
            "equipment_name": self.equipment_name,
            "inspector_id": self.inspector_id,
            "inspector_name": self.inspector_name,
            "inspection_date": self.inspection_date,
            "status": self.status.value,
            "findings": self.findings,
            "recommendations": self.recommendations,
            "notes": self.notes,
        }
