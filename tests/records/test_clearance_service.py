from __future__ import annotations

from dataclasses import replace
from datetime import date

import pytest

from bfp_personnel.clearance.model import ClearanceRequest
from bfp_personnel.clearance.service import ClearanceService, remove_duplicates
from bfp_personnel.core.enums import ClearanceStatus, PersonnelStatus
from bfp_personnel.core.exceptions import NotFoundError, ValidationError

from tests.fakes import InMemoryPersonnel, InMemoryTable, person


class InMemoryClearances(InMemoryTable):
    def set_status(self, request_id, status):
        # mirrors a changed-rows UPDATE count: False when nothing changed
        req = self.get(request_id)
        if req is None or req.status == status:
            return False
        self.update(replace(req, status=status))
        return True


def request(rid, username="ana", kind="Retirement", status=ClearanceStatus.PENDING, personnel_id=1):
    return ClearanceRequest(
        id=rid,
        username=username,
        clearance_type=kind,
        date_requested=date(2026, 2, 1),
        status=status,
        personnel_id=personnel_id,
    )


def test_duplicates_are_dropped_first_wins():
    rows = [request(1), request(2), request(3, kind="Transfer"), request(4, status=ClearanceStatus.COMPLETED)]
    assert [r.id for r in remove_duplicates(rows)] == [1, 3, 4]


def test_initiate_validates_employee_and_type(fixed_today):
    svc = ClearanceService(InMemoryClearances(), InMemoryPersonnel([person(1, "ana")]), today=lambda: fixed_today)

    with pytest.raises(ValidationError, match="both Employee and Clearance Type"):
        svc.initiate(username="ana", clearance_type="Vacation")
    with pytest.raises(ValidationError, match="No personnel"):
        svc.initiate(username="zed", clearance_type="Retirement")

    rid = svc.initiate(username="ana", clearance_type="retirement")
    created = svc.list_requests()[0]
    assert created.id == rid
    assert created.clearance_type == "Retirement"
    assert created.date_requested == fixed_today


def test_completing_retirement_separates_personnel():
    personnel = InMemoryPersonnel([person(1, "ana")])
    svc = ClearanceService(InMemoryClearances([request(1)]), personnel)

    svc.set_status(1, "Completed")

    assert personnel.get(1).status == PersonnelStatus.RETIRED


def test_transfer_or_rejection_keeps_personnel_active():
    personnel = InMemoryPersonnel([person(1, "ana")])
    svc = ClearanceService(InMemoryClearances([request(1, kind="Transfer"), request(2)]), personnel)

    svc.set_status(1, "Completed")
    svc.set_status(2, "Rejected")

    assert personnel.get(1).status == PersonnelStatus.ACTIVE


def test_set_status_errors():
    svc = ClearanceService(InMemoryClearances([request(1)]), InMemoryPersonnel())
    with pytest.raises(ValidationError):
        svc.set_status(1, "Archived")
    with pytest.raises(NotFoundError):
        svc.set_status(9, "Completed")


def test_setting_the_same_status_twice_is_accepted():
    personnel = InMemoryPersonnel([person(1, "ana")])
    clearances = InMemoryClearances([request(1)])
    svc = ClearanceService(clearances, personnel)

    svc.set_status(1, "Completed")
    svc.set_status(1, "Completed")

    assert clearances.get(1).status == ClearanceStatus.COMPLETED
    assert personnel.get(1).status == PersonnelStatus.RETIRED


def test_list_for_user_returns_only_that_users_requests():
    svc = ClearanceService(
        InMemoryClearances([request(1), request(2, username="ben", personnel_id=2), request(3, kind="Transfer")]),
        InMemoryPersonnel(),
    )

    assert [r.id for r in svc.list_for_user("ana")] == [1, 3]
    assert [r.id for r in svc.list_for_user(" ben ")] == [2]
    assert svc.list_for_user("") == []
