from __future__ import annotations

from datetime import date

import pytest

from bfp_personnel.core.enums import PersonnelStatus
from bfp_personnel.core.exceptions import BackendError, NotFoundError, ValidationError
from bfp_personnel.personnel.service import DATE_SEQUENCE_MESSAGE, DUPLICATE_MESSAGE, PersonnelForm, PersonnelService

from tests.fakes import InMemoryPersonnel, person


def form(**overrides):
    data = {
        "first_name": "Ana",
        "last_name": "Reyes",
        "username": "areyes",
        "badge_number": "B-100",
        "rank": "FO1",
        "birth_date": "1990-05-01",
        "date_hired": "2015-06-01",
        "retirement_date": "2050-05-01",
    }
    data.update(overrides)
    return PersonnelForm.from_mapping(data)


@pytest.fixture
def svc(fixed_today):
    return PersonnelService(InMemoryPersonnel([person(1, "ben", badge_number="B-1")]), today=lambda: fixed_today)


def test_register_then_list(svc):
    new_id = svc.register(form())
    registered = [p for p in svc.list_register() if p.id == new_id][0]

    assert registered.full_name == "Ana Reyes"
    assert registered.status == PersonnelStatus.ACTIVE
    assert registered.date_hired == date(2015, 6, 1)


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"first_name": " "}, "First name is required"),
        ({"birth_date": "2016-01-01"}, "Birth date cannot be after date hired"),
        ({"retirement_date": "2010-01-01"}, "Date hired cannot be after retirement date"),
        ({"date_hired": "2027-01-01", "retirement_date": ""}, "cannot be in the future"),
        ({"birth_date": "01/05/1990"}, "not a valid date"),
    ],
)
def test_register_validation(svc, overrides, message):
    with pytest.raises(ValidationError, match=message):
        svc.register(form(**overrides))


def test_duplicate_username_message(svc):
    with pytest.raises(ValidationError) as exc:
        svc.register(form(username="ben"))
    assert str(exc.value) == DUPLICATE_MESSAGE


def test_constraint_error_becomes_date_sequence_message(fixed_today):
    class Rejecting(InMemoryPersonnel):
        def create(self, person):
            raise BackendError("constraint", "Check constraint 'chk_dates' is violated.", errno=3819)

    with pytest.raises(ValidationError) as exc:
        PersonnelService(Rejecting(), today=lambda: fixed_today).register(form())
    assert str(exc.value) == DATE_SEQUENCE_MESSAGE


def test_update_keeps_balances_and_status(fixed_today):
    repo = InMemoryPersonnel([person(1, "ben", earned_vacation=4.5, status=PersonnelStatus.RETIRED)])
    svc = PersonnelService(repo, today=lambda: fixed_today)

    svc.update(1, form(username="ben", first_name="Benjamin"))

    updated = repo.get(1)
    assert updated.first_name == "Benjamin"
    assert updated.earned_vacation == 4.5
    assert updated.status == PersonnelStatus.RETIRED


def test_status_changes_and_history(svc):
    svc.set_status(1, "retired")
    assert [p.username for p in svc.list_history()] == ["ben"]

    svc.reactivate(1)
    assert svc.list_history() == []

    with pytest.raises(ValidationError):
        svc.set_status(1, "Promoted")


def test_delete_missing_record(svc):
    svc.delete(1)
    with pytest.raises(NotFoundError):
        svc.delete(1)
