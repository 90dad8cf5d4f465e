from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Mapping, Optional

from ..common.datetime_utils import coerce_date
from ..core.constants import UNASSIGNED
from ..core.enums import InventoryStatus, coerce_enum


@dataclass(frozen=True)
class InventoryItem:
    id: int
    item_name: str
    item_code: str
    category: Optional[str] = None
    status: InventoryStatus = InventoryStatus.OPERATIONAL
    assigned_to: str = UNASSIGNED
    purchase_date: Optional[date] = None
    last_checked: Optional[date] = None

    @property
    def is_assigned(self) -> bool:
        return bool(self.assigned_to) and self.assigned_to != UNASSIGNED

    @classmethod
    def from_row(cls, r: Mapping[str, Any]) -> "InventoryItem":
        return cls(
            id=int(r["id"]),
            item_name=r.get("item_name") or "",
            item_code=r.get("item_code") or "",
            category=r.get("category"),
            status=coerce_enum(InventoryStatus, r.get("status"), InventoryStatus.OPERATIONAL),
            assigned_to=(r.get("assigned_to") or "").strip() or UNASSIGNED,
            purchase_date=coerce_date(r.get("purchase_date")),
            last_checked=coerce_date(r.get("last_checked")),
        )

    def to_row(self) -> Dict[str, Any]:
        return {
            "item_name": self.item_name,
            "item_code": self.item_code,
            "category": self.category,
            "status": self.status.value,
            "assigned_to": self.assigned_to if self.is_assigned else None,
            "purchase_date": self.purchase_date,
            "last_checked": self.last_checked,
        }
