from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Mapping, Optional

from ..common.datetime_utils import coerce_date
from ..core.enums import RecruitmentStage, RecruitmentStatus, coerce_enum


@dataclass(frozen=True)
class Candidate:
    """Applicant record. ``password_hash`` is never rendered or exported."""

    id: int
    candidate: str
    position: str
    application_date: Optional[date] = None
    stage: RecruitmentStage = RecruitmentStage.APPLIED
    interview_date: Optional[date] = None
    status: RecruitmentStatus = RecruitmentStatus.PENDING
    username: Optional[str] = None
    password_hash: Optional[str] = None

    @classmethod
    def from_row(cls, r: Mapping[str, Any]) -> "Candidate":
        return cls(
            id=int(r["id"]),
            candidate=r.get("candidate") or "",
            position=r.get("position") or "",
            application_date=coerce_date(r.get("application_date")),
            stage=coerce_enum(RecruitmentStage, r.get("stage"), RecruitmentStage.APPLIED),
            interview_date=coerce_date(r.get("interview_date")),
            status=coerce_enum(RecruitmentStatus, r.get("status"), RecruitmentStatus.PENDING),
            username=r.get("username"),
            password_hash=r.get("password_hash"),
        )

    def to_row(self) -> Dict[str, Any]:
        return {
            "candidate": self.candidate,
            "position": self.position,
            "application_date": self.application_date,
            "stage": self.stage.value,
            "interview_date": self.interview_date,
            "status": self.status.value,
            "username": self.username,
            "password_hash": self.password_hash,
        }
