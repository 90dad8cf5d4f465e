from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Mapping, Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import parse_optional_date
from ..common.logger import get_logger
from ..common.validators import optional_text, require_min_length, require_non_empty
from ..core.enums import RecruitmentStage, RecruitmentStatus, coerce_enum
from ..core.exceptions import BackendError, NotFoundError, ValidationError
from .model import Candidate
from .repository import RecruitmentRepository

logger = get_logger(__name__)

MIN_PASSWORD_LENGTH = 6


@dataclass(frozen=True)
class CandidateForm:
    candidate: str
    position: str
    application_date: Optional[date]
    stage: str
    interview_date: Optional[date]
    status: str
    username: Optional[str] = None
    password: Optional[str] = None

    @classmethod
    def from_mapping(cls, form: Mapping[str, str]) -> "CandidateForm":
        try:
            applied = parse_optional_date(form.get("application_date"))
            interview = parse_optional_date(form.get("interview_date"))
        except ValueError:
            raise ValidationError("Dates must be in YYYY-MM-DD format")
        return cls(
            candidate=form.get("candidate") or "",
            position=form.get("position") or "",
            application_date=applied,
            stage=form.get("stage") or RecruitmentStage.APPLIED.value,
            interview_date=interview,
            status=form.get("status") or RecruitmentStatus.PENDING.value,
            username=optional_text(form.get("username")),
            password=form.get("password") or None,
        )


class RecruitmentService:
    def __init__(self, candidates: RecruitmentRepository):
        self._candidates = candidates

    def list_candidates(self) -> Sequence[Candidate]:
        return self._candidates.list_all()

    def _apply(self, base: Candidate, form: CandidateForm) -> Candidate:
        stage = coerce_enum(RecruitmentStage, form.stage, None)
        if stage is None:
            raise ValidationError(f"Unknown recruitment stage: {form.stage}")
        status = coerce_enum(RecruitmentStatus, form.status, None)
        if status is None:
            raise ValidationError(f"Unknown recruitment status: {form.status}")

        candidate = replace(
            base,
            candidate=require_non_empty(form.candidate, "Candidate"),
            position=require_non_empty(form.position, "Position"),
            application_date=form.application_date,
            stage=stage,
            interview_date=form.interview_date,
            status=status,
        )

        # Only a hash is kept; a blank password leaves the existing one alone
        if form.password:
            if not form.username:
                raise ValidationError("Username is required when setting a password")
            require_min_length(form.password, "Password", MIN_PASSWORD_LENGTH)
            candidate = replace(candidate, password_hash=generate_password_hash(form.password))
        if form.username:
            candidate = replace(candidate, username=form.username)
        return candidate

    def _save(self, candidate: Candidate, *, create: bool) -> int:
        try:
            if create:
                return self._candidates.create(candidate)
            self._candidates.update(candidate)
            return candidate.id
        except BackendError as e:
            if e.code == "duplicate":
                raise ValidationError("Username already exists.") from e
            raise

    def add(self, form: CandidateForm) -> int:
        candidate = self._apply(Candidate(id=0, candidate="", position=""), form)
        new_id = self._save(candidate, create=True)
        logger.info("Added recruitment candidate %s", new_id)
        return new_id

    def update(self, candidate_id: int, form: CandidateForm) -> None:
        existing = self._candidates.get(int(candidate_id))
        if existing is None:
            raise NotFoundError("Candidate not found.")
        self._save(self._apply(existing, form), create=False)

    def delete(self, candidate_id: int) -> None:
        if not self._candidates.delete(int(candidate_id)):
            raise NotFoundError("Candidate not found.")

    def verify_credentials(self, username: str, password: str) -> Optional[Candidate]:
        candidate = self._candidates.get_by_username((username or "").strip())
        if candidate is None or not candidate.password_hash:
            return None
        if not check_password_hash(candidate.password_hash, password or ""):
            return None
        return candidate
