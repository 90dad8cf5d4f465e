from __future__ import annotations

from datetime import date

from bfp_personnel.clearance.model import ClearanceRequest
from bfp_personnel.core.enums import LeaveStatus, PersonnelStatus
from bfp_personnel.inspections.model import Inspection
from bfp_personnel.leave.model import LeaveRequest
from bfp_personnel.personnel.model import Personnel
from bfp_personnel.training.model import Training


def test_leave_row_without_joined_personnel():
    req = LeaveRequest.from_row({"id": 7, "leave_type": "Sick", "num_days": "2", "status": "approved"})

    assert req.employee_name == "Unknown"
    assert req.rank == "N/A"
    assert req.location == "N/A"
    assert req.status == LeaveStatus.APPROVED
    assert req.to_row()["location"] is None


def test_leave_location_falls_back_to_station():
    req = LeaveRequest.from_row({"id": 1, "first_name": "Ana", "last_name": "Reyes", "station": "Central"})
    assert req.employee_name == "Ana Reyes"
    assert req.location == "Central"


def test_personnel_row_coerces_types():
    p = Personnel.from_row(
        {"id": "3", "first_name": "Ana", "last_name": "Reyes", "username": "ana", "date_hired": "2020-01-15",
         "earned_vacation": "12.5", "earned_sick": None, "status": "Something else"}
    )
    assert p.id == 3
    assert p.date_hired == date(2020, 1, 15)
    assert p.earned_vacation == 12.5
    assert p.earned_sick is None
    assert p.status == PersonnelStatus.ACTIVE


def test_other_defaults():
    assert ClearanceRequest.from_row({"id": 1}).full_name == "Unknown"
    assert Inspection.from_row({"id": 1}).equipment_name == "Unknown Equipment"
    assert Training.from_row({"id": 1}).name == "Unknown"
