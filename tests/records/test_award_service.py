from __future__ import annotations

import pytest

from bfp_personnel.awards.listing import AWARDS
from bfp_personnel.awards.model import Award, classify_award_type
from bfp_personnel.awards.service import AwardService
from bfp_personnel.core.enums import AwardType
from bfp_personnel.core.exceptions import NotFoundError, ValidationError
from bfp_personnel.listing import summary_counts

from tests.fakes import InMemoryPersonnel, person


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Gold Medal of Valor", AwardType.MEDAL),
        ("Letter of Commendation", AwardType.COMMENDATION),
        ("Certificate of Recognition", AwardType.CERTIFICATE),
        ("Service Ribbon", AwardType.RIBBON),
        ("Merit Badge", AwardType.BADGE),
        ("Medal certificate", AwardType.MEDAL),
        ("Best Employee 2025", AwardType.GENERAL),
        (None, AwardType.GENERAL),
    ],
)
def test_classify_award_type(name, expected):
    assert classify_award_type(name) == expected


class InMemoryAwards:
    def __init__(self):
        self.rows = {}

    def list_all(self):
        return list(self.rows.values())

    def create(self, *, personnel_id, name, awarded_at):
        new_id = len(self.rows) + 1
        self.rows[new_id] = Award.from_row(
            {"id": new_id, "personnel_id": personnel_id, "name": name, "uploaded_at": awarded_at, "first_name": "Ana"}
        )
        return new_id

    def delete(self, award_id):
        return self.rows.pop(int(award_id), None) is not None


def test_record_and_delete(fixed_now):
    awards = InMemoryAwards()
    svc = AwardService(awards, InMemoryPersonnel([person(1, "ana")]), now=lambda: fixed_now)

    aid = svc.record(username="ana", award_name="Medal of Merit")
    assert svc.list_awards()[0].award_type == AwardType.MEDAL
    assert svc.list_awards()[0].awarded_at == fixed_now

    svc.delete(aid)
    with pytest.raises(NotFoundError):
        svc.delete(aid)


def test_record_requires_known_personnel():
    svc = AwardService(InMemoryAwards(), InMemoryPersonnel())
    with pytest.raises(ValidationError):
        svc.record(username="ghost", award_name="Badge")
    with pytest.raises(ValidationError, match="Award name is required"):
        svc.record(username="ghost", award_name="  ")


def test_award_cards_count_by_type():
    awards = InMemoryAwards()
    for name in ("Medal A", "Medal B", "Commendation C"):
        awards.create(personnel_id=1, name=name, awarded_at=None)

    counts = {c.key: c.count for c in summary_counts(awards.list_all(), AWARDS)}
    assert counts["total"] == 3
    assert counts["medal"] == 2
