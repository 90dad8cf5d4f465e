from __future__ import annotations

import pytest
from werkzeug.security import check_password_hash

from bfp_personnel.core.enums import RecruitmentStage
from bfp_personnel.core.exceptions import ValidationError
from bfp_personnel.recruitment.listing import RECRUITMENT
from bfp_personnel.recruitment.service import CandidateForm, RecruitmentService

from tests.fakes import InMemoryTable


class InMemoryCandidates(InMemoryTable):
    def get_by_username(self, username):
        for c in self.list_all():
            if c.username == username:
                return c
        return None


def form(**overrides):
    data = {"candidate": "Juan Dela Cruz", "position": "Fire Officer 1", "stage": "Screening", "status": "Pending"}
    data.update(overrides)
    return CandidateForm.from_mapping(data)


def test_password_is_stored_hashed():
    repo = InMemoryCandidates()
    svc = RecruitmentService(repo)

    cid = svc.add(form(username="jdc", password="secret123"))
    saved = repo.get(cid)

    assert saved.stage == RecruitmentStage.SCREENING
    assert saved.password_hash != "secret123"
    assert check_password_hash(saved.password_hash, "secret123")
    assert svc.verify_credentials("jdc", "secret123") == saved
    assert svc.verify_credentials("jdc", "wrong") is None


def test_blank_password_keeps_existing_hash():
    repo = InMemoryCandidates()
    svc = RecruitmentService(repo)
    cid = svc.add(form(username="jdc", password="secret123"))
    before = repo.get(cid).password_hash

    svc.update(cid, form(username="jdc", stage="Interview"))

    assert repo.get(cid).password_hash == before
    assert repo.get(cid).stage == RecruitmentStage.INTERVIEW


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"password": "secret123"}, "Username is required"),
        ({"username": "jdc", "password": "123"}, "at least 6"),
        ({"stage": "Hired"}, "Unknown recruitment stage"),
        ({"position": ""}, "Position is required"),
    ],
)
def test_candidate_validation(overrides, message):
    with pytest.raises(ValidationError, match=message):
        RecruitmentService(InMemoryCandidates()).add(form(**overrides))


def test_listing_never_shows_password_hash():
    assert "password_hash" not in [c.field for c in RECRUITMENT.columns]
    assert "password_hash" not in RECRUITMENT.search_fields
