from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from ..common.datetime_utils import coerce_date, parse_optional_date
from ..core.constants import TOTAL_CARD
from .spec import ListingSpec, field_text

_UNSET_CHOICES = {"", "all"}


@dataclass(frozen=True)
class FilterState:
    """User-controlled filter inputs of one list screen."""

    search: str = ""
    card: str = TOTAL_CARD
    dropdowns: Mapping[str, str] = field(default_factory=dict)
    date_from: Optional[date] = None
    date_to: Optional[date] = None

    def with_search(self, text: str) -> "FilterState":
        return replace(self, search=text or "")

    def with_card(self, key: str) -> "FilterState":
        # Clicking the active card again switches back to the total view
        if not key or key == self.card:
            return replace(self, card=TOTAL_CARD)
        return replace(self, card=key)

    def with_dropdown(self, name: str, value: str) -> "FilterState":
        selections = dict(self.dropdowns)
        selections[name] = value or ""
        return replace(self, dropdowns=selections)

    def with_date_range(self, start: Optional[date], end: Optional[date]) -> "FilterState":
        return replace(self, date_from=start, date_to=end)

    @property
    def is_default(self) -> bool:
        return (
            not self.search.strip()
            and self.card == TOTAL_CARD
            and not any((v or "").strip().lower() not in _UNSET_CHOICES for v in self.dropdowns.values())
            and self.date_from is None
            and self.date_to is None
        )

    @classmethod
    def from_query(cls, args: Mapping[str, str], spec: ListingSpec) -> "FilterState":
        """Build from request args: ``q``, ``card``, ``f_<dropdown>``, ``date_from``, ``date_to``."""
        card = (args.get("card") or TOTAL_CARD).strip()
        if spec.card(card) is None:
            card = TOTAL_CARD

        dropdowns = {}
        for d in spec.dropdowns:
            value = (args.get(f"f_{d.name}") or "").strip()
            if value:
                dropdowns[d.name] = value

        def _date(name: str) -> Optional[date]:
            if spec.date_field is None:
                return None
            try:
                return parse_optional_date(args.get(name))
            except ValueError:
                return None

        return cls(
            search=args.get("q") or "",
            card=card,
            dropdowns=dropdowns,
            date_from=_date("date_from"),
            date_to=_date("date_to"),
        )

    def to_query(self) -> dict:
        out: dict = {}
        if self.search:
            out["q"] = self.search
        if self.card != TOTAL_CARD:
            out["card"] = self.card
        for name, value in self.dropdowns.items():
            if value:
                out[f"f_{name}"] = value
        if self.date_from:
            out["date_from"] = self.date_from.isoformat()
        if self.date_to:
            out["date_to"] = self.date_to.isoformat()
        return out


def search_text(record: Any, fields: Sequence[str]) -> str:
    return " ".join(field_text(record, f) for f in fields).lower()


def _in_range(record: Any, spec: ListingSpec, state: FilterState) -> bool:
    if state.date_from is None and state.date_to is None:
        return True
    value = coerce_date(_raw(record, spec.date_field))
    if value is None:
        return False
    if state.date_from is not None and value < state.date_from:
        return False
    if state.date_to is not None and value > state.date_to:
        return False
    return True


def _raw(record: Any, name: Optional[str]) -> Any:
    if name is None:
        return None
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def apply_filters(records: Iterable[Any], state: FilterState, spec: ListingSpec) -> List[Any]:
    """Card, dropdown, search and date predicates ANDed; input order is kept."""
    card = spec.card(state.card)

    dropdowns = []
    for name, value in state.dropdowns.items():
        needle = (value or "").strip().lower()
        d = spec.dropdown(name)
        if d is None or needle in _UNSET_CHOICES:
            continue
        dropdowns.append((d.field, needle))

    term = state.search.strip().lower()

    out: List[Any] = []
    for record in records:
        if card is not None and not card.matches(record):
            continue
        if any(needle not in field_text(record, fld).lower() for fld, needle in dropdowns):
            continue
        if term and term not in search_text(record, spec.search_fields):
            continue
        if spec.date_field and not _in_range(record, spec, state):
            continue
        out.append(record)
    return out
