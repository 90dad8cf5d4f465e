from __future__ import annotations

from dataclasses import replace
from datetime import date
from types import SimpleNamespace

import pytest

from bfp_personnel import create_app
from bfp_personnel.awards.service import AwardService
from bfp_personnel.clearance.model import ClearanceRequest
from bfp_personnel.clearance.service import ClearanceService
from bfp_personnel.core.enums import ClearanceStatus, LeaveStatus
from bfp_personnel.core.exceptions import BackendError
from bfp_personnel.database.local_store import LocalJsonStore
from bfp_personnel.inspections.service import InspectionService
from bfp_personnel.inventory.model import InventoryItem
from bfp_personnel.inventory.service import InventoryService
from bfp_personnel.leave.local_leave_repository import LocalLeaveRecordRepository
from bfp_personnel.leave.model import LeaveRequest
from bfp_personnel.leave.service import LeaveService
from bfp_personnel.personnel.local_roster_repository import LocalRosterRepository
from bfp_personnel.personnel.service import PersonnelService, RosterService
from bfp_personnel.recruitment.service import RecruitmentService
from bfp_personnel.training.service import TrainingService

from tests.fakes import InMemoryLeaves, InMemoryPersonnel, InMemoryTable, person


class InMemoryInventory(InMemoryTable):
    def get_by_code(self, item_code):
        for item in self.list_all():
            if item.item_code == item_code:
                return item
        return None


class InMemoryClearances(InMemoryTable):
    def set_status(self, request_id, status):
        self.update(replace(self.get(request_id), status=status))
        return True


class InMemoryAwards(InMemoryTable):
    def create(self, *, personnel_id, name, awarded_at):
        return 1


def leave(rid, pid, username, status=LeaveStatus.PENDING):
    return LeaveRequest(
        id=rid,
        leave_type="Vacation",
        start_date=date(2026, 3, 9),
        end_date=date(2026, 3, 10),
        num_days=2.0,
        status=status,
        personnel_id=pid,
        username=username,
        employee_name=username.capitalize() + " Cruz",
    )


@pytest.fixture
def container(tmp_path):
    personnel_repo = InMemoryPersonnel(
        [person(1, "ana", rank="FO1", earned_vacation=10.0), person(2, "ben", rank="SFO1", earned_vacation=6.0)]
    )
    leave_repo = InMemoryLeaves(
        [leave(1, 1, "ana"), leave(2, 2, "ben"), leave(3, 2, "ben", status=LeaveStatus.APPROVED)]
    )
    store = LocalJsonStore(tmp_path / "local_store.json")
    roster_repo = LocalRosterRepository(store)
    inventory_repo = InMemoryInventory([InventoryItem(id=1, item_name="Fire Hose", item_code="FH-001")])
    inspection_repo = InMemoryTable()
    training_repo = InMemoryTable()
    recruitment_repo = InMemoryTable()
    return SimpleNamespace(
        personnel_repo=personnel_repo,
        roster_repo=roster_repo,
        leave_repo=leave_repo,
        inventory_repo=inventory_repo,
        inspection_repo=inspection_repo,
        training_repo=training_repo,
        recruitment_repo=recruitment_repo,
        personnel_service=PersonnelService(personnel_repo),
        roster_service=RosterService(roster_repo, personnel_repo),
        leave_service=LeaveService(leave_repo, personnel_repo, LocalLeaveRecordRepository(store)),
        clearance_service=ClearanceService(
            InMemoryClearances(
                [
                    ClearanceRequest(id=1, username="ana", clearance_type="Transfer", date_requested=date(2026, 2, 2)),
                    ClearanceRequest(id=2, username="ben", clearance_type="Retirement", date_requested=date(2026, 2, 3)),
                    ClearanceRequest(
                        id=3,
                        username="ben",
                        clearance_type="Transfer",
                        date_requested=date(2026, 1, 5),
                        status=ClearanceStatus.REJECTED,
                    ),
                ]
            ),
            personnel_repo,
        ),
        award_service=AwardService(InMemoryAwards(), personnel_repo),
        inventory_service=InventoryService(inventory_repo),
        inspection_service=InspectionService(inspection_repo, inventory_repo, personnel_repo),
        training_service=TrainingService(training_repo, personnel_repo),
        recruitment_service=RecruitmentService(recruitment_repo),
    )


@pytest.fixture
def client(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=container)
    return app.test_client()


@pytest.mark.parametrize(
    "path",
    [
        "/personnel",
        "/history",
        "/promotion",
        "/placement",
        "/leave",
        "/leave-records",
        "/my-leave",
        "/clearance",
        "/my-clearance",
        "/awards",
        "/inventory",
        "/inspections",
        "/inspections/history",
        "/trainings",
        "/recruitment",
    ],
)
def test_every_screen_renders(client, path):
    resp = client.get(path)
    assert resp.status_code == 200
    assert b"<table" in resp.data or b"No " in resp.data or b"You have no" in resp.data


def test_index_redirects_to_register(client):
    resp = client.get("/")
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/personnel")


def test_json_listing_applies_query(client):
    data = client.get("/api/leave?card=pending").get_json()

    assert data["screen"] == "leave"
    assert data["filtered_count"] == 2
    assert data["filters"] == {"card": "pending"}
    assert [s["count"] for s in data["summary"]] == [3, 2, 1, 0]


def test_approve_deducts_balance_and_flashes(client, container):
    resp = client.post("/leave/1/approve?card=pending", follow_redirects=False)

    assert resp.status_code == 302
    assert "card=pending" in resp.headers["Location"]
    assert container.personnel_repo.get(1).earned_vacation == 8.0
    assert container.personnel_repo.get(2).earned_vacation == 6.0

    page = client.get(resp.headers["Location"])
    assert b"Leave request approved" in page.data


def test_backend_error_message_is_shown_verbatim(client, container, monkeypatch):
    def failing(*args, **kwargs):
        raise BackendError("permission_denied", "UPDATE command denied to user")

    monkeypatch.setattr(container.leave_repo, "decide", failing)
    page = client.post("/leave/2/approve", follow_redirects=True)

    assert b"UPDATE command denied to user" in page.data
    assert container.leave_repo.get(2).status == LeaveStatus.PENDING


def test_export_sends_workbook(client):
    resp = client.get("/leave/export?card=approved")

    assert resp.status_code == 200
    assert resp.mimetype == "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    assert resp.data[:2] == b"PK"


def test_switch_user_scopes_my_leave(client):
    client.post("/session/user", data={"username": "ben"})

    data = client.get("/api/my_leave").get_json()
    assert data["filtered_count"] == 2

    resp = client.post("/session/user", data={"username": "nobody"}, follow_redirects=True)
    assert b"No personnel with username nobody" in resp.data


def test_my_clearance_shows_only_the_acting_users_requests(client):
    assert client.get("/api/my_clearance").get_json()["filtered_count"] == 0

    client.post("/session/user", data={"username": "ben"})
    data = client.get("/api/my_clearance?f_status=rejected").get_json()

    assert data["filtered_count"] == 1
    assert data["rows"][0]["clearance_type"] == "Transfer"
    assert {s["key"]: s["count"] for s in data["summary"]}["total"] == 2


def test_theme_toggle_sets_cookie(client):
    resp = client.post("/preferences/theme", data={"next": "/personnel"})

    assert resp.status_code == 302
    assert "theme=dark" in resp.headers["Set-Cookie"]


def test_sidebar_toggle_is_kept_in_session(client):
    client.post("/preferences/sidebar")
    with client.session_transaction() as sess:
        assert sess["sidebar_collapsed"] is True

    client.post("/preferences/sidebar/reset")
    with client.session_transaction() as sess:
        assert "sidebar_collapsed" not in sess


def test_inventory_lookup(client):
    assert client.get("/api/inventory/lookup?code=FH-001").get_json()["item_name"] == "Fire Hose"
    assert client.get("/api/inventory/lookup?code=NOPE").status_code == 404


def test_roster_sync_then_promote(client, container):
    client.post("/roster/sync", data={"next": "promotion"})
    ana = [p for p in container.roster_repo.list_all() if p.username == "ana"][0]

    client.post(f"/promotion/{ana.id}/promote", data={"rank": "FO2"})

    assert container.roster_repo.get(ana.id).rank == "FO2"
