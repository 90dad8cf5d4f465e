from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from ..common.names import joined_name
from ..core.constants import NOT_AVAILABLE
from ..core.enums import AwardType

# First keyword found in the document name decides the type
_KEYWORDS = (
    ("medal", AwardType.MEDAL),
    ("commendation", AwardType.COMMENDATION),
    ("certificate", AwardType.CERTIFICATE),
    ("ribbon", AwardType.RIBBON),
    ("badge", AwardType.BADGE),
)


def classify_award_type(document_name: Optional[str]) -> AwardType:
    name = (document_name or "").lower()
    for keyword, award_type in _KEYWORDS:
        if keyword in name:
            return award_type
    return AwardType.GENERAL


@dataclass(frozen=True)
class Award:
    id: int
    personnel_id: int
    award_name: str
    award_type: AwardType
    full_name: str
    rank: str = NOT_AVAILABLE
    badge_number: str = NOT_AVAILABLE
    awarded_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, r: Mapping[str, Any]) -> "Award":
        name = r.get("name") or ""
        uploaded = r.get("uploaded_at")
        return cls(
            id=int(r["id"]),
            personnel_id=int(r["personnel_id"]),
            award_name=name,
            award_type=classify_award_type(name),
            full_name=joined_name(r),
            rank=r.get("rank") or NOT_AVAILABLE,
            badge_number=r.get("badge_number") or NOT_AVAILABLE,
            awarded_at=uploaded if isinstance(uploaded, datetime) else None,
        )
