from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Mapping, Optional

from ..common.datetime_utils import coerce_date
from ..common.names import joined_name
from ..core.constants import UNKNOWN
from ..core.enums import TrainingStatus, coerce_enum


@dataclass(frozen=True)
class Training:
    id: int
    personnel_id: Optional[int]
    training_date: Optional[date]
    duration_days: int
    status: TrainingStatus = TrainingStatus.PENDING
    name: str = UNKNOWN
    rank: str = UNKNOWN
    username: Optional[str] = None

    @classmethod
    def from_row(cls, r: Mapping[str, Any]) -> "Training":
        pid = r.get("personnel_id")
        return cls(
            id=int(r["id"]),
            personnel_id=int(pid) if pid is not None else None,
            training_date=coerce_date(r.get("training_date")),
            duration_days=int(r.get("duration_days") or 1),
            status=coerce_enum(TrainingStatus, r.get("status"), TrainingStatus.PENDING),
            name=joined_name(r),
            rank=r.get("rank") or UNKNOWN,
            username=r.get("username"),
        )

    def to_row(self) -> Dict[str, Any]:
        return {
            "personnel_id": self.personnel_id,
            "training_date": self.training_date,
            "duration_days": self.duration_days,
            "status": self.status.value,
        }
