from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Mapping, Optional, Sequence

from ..common.datetime_utils import parse_optional_date
from ..common.validators import optional_text
from ..core.enums import InspectionStatus, coerce_enum
from ..core.exceptions import NotFoundError, ValidationError
from ..inventory.repository import InventoryRepository
from ..personnel.repository import PersonnelRepository
from .model import UNKNOWN_EQUIPMENT, UNKNOWN_INSPECTOR, Inspection
from .repository import InspectionRepository


def _optional_id(value: Optional[str], label: str) -> Optional[int]:
    value = (value or "").strip()
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"{label} must be a number")


@dataclass(frozen=True)
class InspectionForm:
    equipment_id: Optional[int]
    inspector_id: Optional[int]
    inspection_date: Optional[date]
    status: str
    findings: Optional[str] = None
    recommendations: Optional[str] = None
    notes: Optional[str] = None

    @classmethod
    def from_mapping(cls, form: Mapping[str, str]) -> "InspectionForm":
        try:
            inspected = parse_optional_date(form.get("inspection_date"))
        except ValueError:
            raise ValidationError("Inspection date must be in YYYY-MM-DD format")
        return cls(
            equipment_id=_optional_id(form.get("equipment_id"), "Equipment"),
            inspector_id=_optional_id(form.get("inspector_id"), "Inspector"),
            inspection_date=inspected,
            status=form.get("status") or "",
            findings=optional_text(form.get("findings")),
            recommendations=optional_text(form.get("recommendations")),
            notes=optional_text(form.get("notes")),
        )


class InspectionService:
    def __init__(
        self,
        inspections: InspectionRepository,
        inventory: InventoryRepository,
        personnel: PersonnelRepository,
    ):
        self._inspections = inspections
        self._inventory = inventory
        self._personnel = personnel

    def list_inspections(self) -> Sequence[Inspection]:
        return self._inspections.list_all()

    def _build(self, form: InspectionForm, *, inspection_id: int = 0) -> Inspection:
        if form.equipment_id is None:
            raise ValidationError("Please select the equipment to inspect.")
        if form.inspection_date is None:
            raise ValidationError("Please select a valid inspection date.")
        status = coerce_enum(InspectionStatus, form.status, None)
        if status is None:
            raise ValidationError(f"Unknown inspection status: {form.status}")

        # Names are stored with the row so history survives deleted equipment
        equipment = self._inventory.get(form.equipment_id)
        inspector = self._personnel.get(form.inspector_id) if form.inspector_id is not None else None

        return Inspection(
            id=inspection_id,
            equipment_id=form.equipment_id,
            inspector_id=form.inspector_id,
            inspection_date=form.inspection_date,
            status=status,
            equipment_name=equipment.item_name if equipment else UNKNOWN_EQUIPMENT,
            inspector_name=f"{inspector.first_name} {inspector.last_name}" if inspector else UNKNOWN_INSPECTOR,
            findings=form.findings,
            recommendations=form.recommendations,
            notes=form.notes,
        )

    def record(self, form: InspectionForm) -> int:
        return self._inspections.create(self._build(form))

    def update(self, inspection_id: int, form: InspectionForm) -> None:
        if self._inspections.get(int(inspection_id)) is None:
            raise NotFoundError("Inspection not found.")
        self._inspections.update(self._build(form, inspection_id=int(inspection_id)))

    def delete(self, inspection_id: int) -> None:
        if not self._inspections.delete(int(inspection_id)):
            raise NotFoundError("Inspection not found.")
