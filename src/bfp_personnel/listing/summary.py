from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Sequence

from ..core.constants import TOTAL_CARD
from .spec import ListingSpec


@dataclass(frozen=True)
class SummaryCount:
    key: str
    label: str
    count: int
    active: bool = False


def summary_counts(records: Sequence[Any], spec: ListingSpec, *, active: str = TOTAL_CARD) -> List[SummaryCount]:
    """Card counts over the unfiltered collection, total first."""
    out = [SummaryCount(TOTAL_CARD, spec.total_label, len(records), active == TOTAL_CARD)]
    for card in spec.cards:
        count = sum(1 for r in records if card.matches(r))
        out.append(SummaryCount(card.key, card.label, count, active == card.key))
    return out
