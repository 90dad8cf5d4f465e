from __future__ import annotations

from datetime import datetime
from typing import Callable, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from ..personnel.repository import PersonnelRepository
from .model import Award
from .repository import AwardRepository


class AwardService:
    def __init__(
        self,
        awards: AwardRepository,
        personnel: PersonnelRepository,
        *,
        now: Callable[[], datetime] = now_local,
    ):
        self._awards = awards
        self._personnel = personnel
        self._now = now

    def list_awards(self) -> Sequence[Award]:
        return self._awards.list_all()

    def record(self, *, username: str, award_name: str) -> int:
        name = require_non_empty(award_name, "Award name")
        person = self._personnel.get_by_username((username or "").strip())
        if person is None:
            raise ValidationError(f"No personnel found for username: {username}")
        return self._awards.create(personnel_id=person.id, name=name, awarded_at=self._now())

    def delete(self, award_id: int) -> None:
        if not self._awards.delete(int(award_id)):
            raise NotFoundError("Award not found.")
