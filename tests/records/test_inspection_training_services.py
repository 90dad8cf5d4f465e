from __future__ import annotations

from datetime import date

import pytest

from bfp_personnel.core.enums import InspectionStatus, TrainingStatus
from bfp_personnel.core.exceptions import NotFoundError, ValidationError
from bfp_personnel.inspections.listing import INSPECTION_HISTORY
from bfp_personnel.inspections.model import UNKNOWN_INSPECTOR
from bfp_personnel.inspections.service import InspectionForm, InspectionService
from bfp_personnel.inventory.model import InventoryItem
from bfp_personnel.listing import FilterState, apply_filters
from bfp_personnel.training.service import TrainingService

from tests.fakes import InMemoryPersonnel, InMemoryTable, person


@pytest.fixture
def inspections():
    inventory = InMemoryTable([InventoryItem(id=5, item_name="SCBA Set", item_code="SC-5")])
    personnel = InMemoryPersonnel([person(1, "ana", last_name="Reyes")])
    return InspectionService(InMemoryTable(), inventory, personnel)


def test_inspection_stores_resolved_names(inspections):
    iid = inspections.record(
        InspectionForm.from_mapping(
            {"equipment_id": "5", "inspector_id": "1", "inspection_date": "2026-02-10", "status": "Needs Attention"}
        )
    )
    saved = inspections.list_inspections()[0]

    assert saved.id == iid
    assert saved.equipment_name == "SCBA Set"
    assert saved.inspector_name == "Ana Reyes"
    assert saved.status == InspectionStatus.NEEDS_ATTENTION


def test_inspection_without_inspector(inspections):
    inspections.record(InspectionForm.from_mapping({"equipment_id": "5", "inspection_date": "2026-02-10", "status": "Passed"}))
    assert inspections.list_inspections()[0].inspector_name == UNKNOWN_INSPECTOR


@pytest.mark.parametrize(
    "data, message",
    [
        ({"inspection_date": "2026-02-10", "status": "Passed"}, "equipment"),
        ({"equipment_id": "5", "status": "Passed"}, "inspection date"),
        ({"equipment_id": "5", "inspection_date": "2026-02-10", "status": "Okay"}, "Unknown inspection status"),
        ({"equipment_id": "five"}, "must be a number"),
    ],
)
def test_inspection_validation(inspections, data, message):
    with pytest.raises(ValidationError, match=message):
        inspections.record(InspectionForm.from_mapping(data))


def test_history_date_range(inspections):
    for day in (1, 15, 28):
        inspections.record(
            InspectionForm.from_mapping({"equipment_id": "5", "inspection_date": f"2026-02-{day:02d}", "status": "Passed"})
        )
    state = FilterState().with_date_range(date(2026, 2, 10), date(2026, 2, 28))

    kept = apply_filters(inspections.list_inspections(), state, INSPECTION_HISTORY)
    assert [i.inspection_date.day for i in kept] == [15, 28]


def test_training_duration_bounds():
    svc = TrainingService(InMemoryTable(), InMemoryPersonnel([person(1, "ana", rank="FO1")]))

    tid = svc.add(username="ana", training_date=date(2026, 4, 1), duration_days="5", status="ongoing")
    saved = svc.list_trainings()[0]
    assert saved.id == tid
    assert saved.status == TrainingStatus.ONGOING
    assert saved.rank == "FO1"

    for bad in ("0", "366", "two"):
        with pytest.raises(ValidationError):
            svc.update(tid, username="ana", training_date=date(2026, 4, 1), duration_days=bad, status="Pending")

    with pytest.raises(NotFoundError):
        svc.delete(99)


def test_equipment_dropdown_lists_names_seen():
    from bfp_personnel.inspections.listing import INSPECTIONS
    from bfp_personnel.inspections.model import Inspection
    from bfp_personnel.listing import RecordListView

    rows = [
        Inspection(id=1, equipment_id=1, inspector_id=None, inspection_date=None, equipment_name="SCBA Set"),
        Inspection(id=2, equipment_id=2, inspector_id=None, inspection_date=None, equipment_name="Fire Hose"),
        Inspection(id=3, equipment_id=1, inspector_id=None, inspection_date=None, equipment_name="SCBA Set"),
    ]
    view = RecordListView(INSPECTIONS, lambda: rows)
    view.load()

    assert view.dropdown_options(INSPECTIONS.dropdown("equipment")) == ["Fire Hose", "SCBA Set"]
    assert view.dropdown_options(INSPECTIONS.dropdown("status")) == ["Passed", "Failed", "Needs Attention"]
