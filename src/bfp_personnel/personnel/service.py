from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Callable, Mapping, Optional, Sequence

from ..common.datetime_utils import parse_optional_date, today_local
from ..common.logger import get_logger
from ..common.validators import optional_text, require_non_empty, require_not_future, require_order
from ..core.enums import PersonnelStatus, coerce_enum
from ..core.exceptions import BackendError, NotFoundError, ValidationError
from .model import Personnel
from .repository import PersonnelRepository, RosterRepository

logger = get_logger(__name__)

DUPLICATE_MESSAGE = "Username or badge number already exists."
DATE_SEQUENCE_MESSAGE = "Invalid date sequence. Please check: Birth Date ≤ Date Hired ≤ Retirement Date"


def _parse_date(form: Mapping[str, str], name: str, label: str) -> Optional[date]:
    try:
        return parse_optional_date(form.get(name))
    except ValueError:
        raise ValidationError(f"{label} is not a valid date (YYYY-MM-DD)")


@dataclass(frozen=True)
class PersonnelForm:
    first_name: str
    last_name: str
    username: str
    middle_name: Optional[str] = None
    badge_number: Optional[str] = None
    rank: Optional[str] = None
    station: Optional[str] = None
    designation: Optional[str] = None
    email: Optional[str] = None
    birth_date: Optional[date] = None
    date_hired: Optional[date] = None
    retirement_date: Optional[date] = None
    status: Optional[str] = None

    @classmethod
    def from_mapping(cls, form: Mapping[str, str]) -> "PersonnelForm":
        return cls(
            first_name=form.get("first_name") or "",
            last_name=form.get("last_name") or "",
            username=form.get("username") or "",
            middle_name=optional_text(form.get("middle_name")),
            badge_number=optional_text(form.get("badge_number")),
            rank=optional_text(form.get("rank")),
            station=optional_text(form.get("station")),
            designation=optional_text(form.get("designation")),
            email=optional_text(form.get("email")),
            birth_date=_parse_date(form, "birth_date", "Birth date"),
            date_hired=_parse_date(form, "date_hired", "Date hired"),
            retirement_date=_parse_date(form, "retirement_date", "Retirement date"),
            status=optional_text(form.get("status")),
        )


class PersonnelService:
    def __init__(self, personnel: PersonnelRepository, *, today: Callable[[], date] = today_local):
        self._personnel = personnel
        self._today = today

    def list_register(self) -> Sequence[Personnel]:
        return self._personnel.list_all()

    def list_history(self) -> Sequence[Personnel]:
        return self._personnel.list_separated()

    def _validate(self, form: PersonnelForm) -> Personnel:
        first_name = require_non_empty(form.first_name, "First name")
        last_name = require_non_empty(form.last_name, "Last name")
        username = require_non_empty(form.username, "Username")

        require_order(form.birth_date, form.date_hired, "Birth date cannot be after date hired!")
        require_order(form.date_hired, form.retirement_date, "Date hired cannot be after retirement date!")
        today = self._today()
        require_not_future(form.birth_date, "Birth date", today=today)
        require_not_future(form.date_hired, "Date hired", today=today)

        return Personnel(
            id=0,
            first_name=first_name,
            last_name=last_name,
            username=username,
            middle_name=form.middle_name,
            badge_number=form.badge_number,
            rank=form.rank,
            station=form.station,
            designation=form.designation,
            email=form.email,
            birth_date=form.birth_date,
            date_hired=form.date_hired,
            retirement_date=form.retirement_date,
            status=coerce_enum(PersonnelStatus, form.status, PersonnelStatus.ACTIVE),
        )

    @staticmethod
    def _friendly(e: BackendError) -> Exception:
        if e.code == "duplicate":
            return ValidationError(DUPLICATE_MESSAGE)
        if e.code == "constraint":
            return ValidationError(DATE_SEQUENCE_MESSAGE)
        return e

    def register(self, form: PersonnelForm) -> int:
        person = self._validate(form)
        try:
            new_id = self._personnel.create(person)
        except BackendError as e:
            raise self._friendly(e) from e
        logger.info("Registered personnel %s (id=%s)", person.username, new_id)
        return new_id

    def update(self, personnel_id: int, form: PersonnelForm) -> None:
        existing = self._personnel.get(int(personnel_id))
        if existing is None:
            raise NotFoundError("Personnel record not found.")

        validated = self._validate(form)
        # Balances, promotion date and status are not on the edit form
        person = replace(
            existing,
            first_name=validated.first_name,
            middle_name=validated.middle_name,
            last_name=validated.last_name,
            username=validated.username,
            badge_number=validated.badge_number,
            rank=validated.rank,
            station=validated.station,
            designation=validated.designation,
            email=validated.email,
            birth_date=validated.birth_date,
            date_hired=validated.date_hired,
            retirement_date=validated.retirement_date,
            status=validated.status if form.status else existing.status,
        )
        try:
            self._personnel.update(person)
        except BackendError as e:
            raise self._friendly(e) from e

    def delete(self, personnel_id: int) -> None:
        if not self._personnel.delete(int(personnel_id)):
            raise NotFoundError("Personnel record not found.")

    def set_status(self, personnel_id: int, status: str) -> None:
        target = coerce_enum(PersonnelStatus, status, None)
        if target is None:
            raise ValidationError(f"Unknown personnel status: {status}")
        if not self._personnel.set_status(int(personnel_id), target):
            raise NotFoundError("Personnel record not found.")

    def reactivate(self, personnel_id: int) -> None:
        self.set_status(personnel_id, PersonnelStatus.ACTIVE.value)


class RosterService:
    """Placement and promotion, both working on the local personnel copy."""

    def __init__(
        self,
        roster: RosterRepository,
        register: PersonnelRepository,
        *,
        today: Callable[[], date] = today_local,
    ):
        self._roster = roster
        self._register = register
        self._today = today

    def list_roster(self) -> Sequence[Personnel]:
        return self._roster.list_all()

    def _get(self, personnel_id: int) -> Personnel:
        person = self._roster.get(int(personnel_id))
        if person is None:
            raise NotFoundError("Personnel record not found in database!")
        return person

    def promote(self, personnel_id: int, new_rank: str) -> Personnel:
        new_rank = (new_rank or "").strip()
        if not new_rank:
            raise ValidationError("Please select a valid rank.")
        person = self._get(personnel_id)
        promoted = replace(person, last_rank=person.rank, rank=new_rank, last_promoted=self._today())
        self._roster.save(promoted)
        logger.info("Promoted %s from %s to %s", person.username, person.rank, new_rank)
        return promoted

    def place(self, personnel_id: int, designation: str, station: str) -> Personnel:
        designation = (designation or "").strip()
        station = (station or "").strip()
        if not designation or not station:
            raise ValidationError("Please fill in both designation and station/unit.")
        person = self._get(personnel_id)
        placed = replace(person, designation=designation, station=station)
        self._roster.save(placed)
        return placed

    def sync_from_register(self) -> int:
        """Copy register personnel missing from the local roster; returns how many were added."""
        known = {p.username for p in self._roster.list_all()}
        added = 0
        for person in self._register.list_all():
            if person.status != PersonnelStatus.ACTIVE or person.username in known:
                continue
            self._roster.add(person)
            known.add(person.username)
            added += 1
        logger.info("Synced %s personnel into the local roster", added)
        return added
