from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import TrainingStatus, coerce_enum
from ..core.exceptions import NotFoundError, ValidationError
from ..personnel.repository import PersonnelRepository
from .model import Training
from .repository import TrainingRepository

MAX_DURATION_DAYS = 365


class TrainingService:
    def __init__(self, trainings: TrainingRepository, personnel: PersonnelRepository):
        self._trainings = trainings
        self._personnel = personnel

    def list_trainings(self) -> Sequence[Training]:
        return self._trainings.list_all()

    def _build(
        self,
        *,
        username: str,
        training_date: Optional[date],
        duration_days: str,
        status: str,
        training_id: int = 0,
    ) -> Training:
        person = self._personnel.get_by_username((username or "").strip())
        if person is None:
            raise ValidationError("Please select a personnel.")
        if training_date is None:
            raise ValidationError("Please select a training date.")
        try:
            days = int(duration_days or 1)
        except ValueError:
            raise ValidationError("Duration must be a whole number of days")
        if not 1 <= days <= MAX_DURATION_DAYS:
            raise ValidationError(f"Duration must be between 1 and {MAX_DURATION_DAYS} days")
        target = coerce_enum(TrainingStatus, status or TrainingStatus.PENDING.value, None)
        if target is None:
            raise ValidationError(f"Unknown training status: {status}")

        return Training(
            id=training_id,
            personnel_id=person.id,
            training_date=training_date,
            duration_days=days,
            status=target,
            name=person.full_name,
            rank=person.rank or "",
            username=person.username,
        )

    def add(self, *, username: str, training_date: Optional[date], duration_days: str, status: str) -> int:
        return self._trainings.create(
            self._build(username=username, training_date=training_date, duration_days=duration_days, status=status)
        )

    def update(
        self,
        training_id: int,
        *,
        username: str,
        training_date: Optional[date],
        duration_days: str,
        status: str,
    ) -> None:
        if self._trainings.get(int(training_id)) is None:
            raise NotFoundError("Training not found.")
        self._trainings.update(
            self._build(
                username=username,
                training_date=training_date,
                duration_days=duration_days,
                status=status,
                training_id=int(training_id),
            )
        )

    def delete(self, training_id: int) -> None:
        if not self._trainings.delete(int(training_id)):
            raise NotFoundError("Training not found.")
