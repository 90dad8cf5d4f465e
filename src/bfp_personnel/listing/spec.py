from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Sequence

from ..core.constants import DEFAULT_PAGE_SIZE, TOTAL_CARD


def field_value(record: Any, name: str) -> Any:
    """Read a field from either a mapping or a model object."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def field_text(record: Any, name: str) -> str:
    value = field_value(record, name)
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class SummaryCard:
    """A quick filter that also shows how many fetched records it matches.

    Matching is case-insensitive on ``field``: equality by default, substring
    when ``match == "contains"``. A ``predicate`` replaces both.
    """

    key: str
    label: str
    value: str = ""
    field: str = "status"
    match: str = "equals"
    predicate: Optional[Callable[[Any], bool]] = None

    def matches(self, record: Any) -> bool:
        if self.predicate is not None:
            return bool(self.predicate(record))
        actual = field_text(record, self.field).strip().lower()
        target = self.value.strip().lower()
        if self.match == "contains":
            return target in actual
        return actual == target


@dataclass(frozen=True)
class DropdownFilter:
    name: str
    label: str
    field: str
    options: Sequence[str] = ()


@dataclass(frozen=True)
class Column:
    field: str
    label: str


@dataclass(frozen=True)
class ListingSpec:
    """Everything that differs between two list screens."""

    key: str
    title: str
    columns: Sequence[Column]
    search_fields: Sequence[str]
    page_size: int = DEFAULT_PAGE_SIZE
    cards: Sequence[SummaryCard] = ()
    dropdowns: Sequence[DropdownFilter] = ()
    date_field: Optional[str] = None
    total_label: str = "Total"
    empty_message: str = "No records found."
    search_placeholder: str = "Search..."
    extra: Mapping[str, Any] = field(default_factory=dict)

    def card(self, key: str) -> Optional[SummaryCard]:
        if key == TOTAL_CARD:
            return None
        for c in self.cards:
            if c.key == key:
                return c
        return None

    def dropdown(self, name: str) -> Optional[DropdownFilter]:
        for d in self.dropdowns:
            if d.name == name:
                return d
        return None
