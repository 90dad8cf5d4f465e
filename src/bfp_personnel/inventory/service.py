from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Mapping, Optional, Sequence

from ..common.datetime_utils import parse_optional_date
from ..common.logger import get_logger
from ..common.validators import optional_text, require_non_empty, require_order
from ..core.constants import UNASSIGNED
from ..core.enums import InventoryStatus, coerce_enum
from ..core.exceptions import BackendError, NotFoundError, ValidationError
from .model import InventoryItem
from .repository import InventoryRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class InventoryForm:
    item_name: str
    item_code: str
    category: Optional[str]
    status: str
    assigned_to: Optional[str]
    purchase_date: Optional[date]
    last_checked: Optional[date]

    @classmethod
    def from_mapping(cls, form: Mapping[str, str]) -> "InventoryForm":
        try:
            purchase = parse_optional_date(form.get("purchase_date"))
            checked = parse_optional_date(form.get("last_checked"))
        except ValueError:
            raise ValidationError("Dates must be in YYYY-MM-DD format")
        return cls(
            item_name=form.get("item_name") or "",
            item_code=form.get("item_code") or "",
            category=optional_text(form.get("category")),
            status=form.get("status") or InventoryStatus.OPERATIONAL.value,
            assigned_to=optional_text(form.get("assigned_to")),
            purchase_date=purchase,
            last_checked=checked,
        )


class InventoryService:
    def __init__(self, inventory: InventoryRepository):
        self._inventory = inventory

    def list_items(self) -> Sequence[InventoryItem]:
        return self._inventory.list_all()

    def find_by_code(self, item_code: str) -> InventoryItem:
        item = self._inventory.get_by_code((item_code or "").strip())
        if item is None:
            raise NotFoundError(f"No equipment found with code {item_code}")
        return item

    def _build(self, form: InventoryForm, *, item_id: int = 0) -> InventoryItem:
        name = require_non_empty(form.item_name, "Item name")
        code = require_non_empty(form.item_code, "Item code")
        status = coerce_enum(InventoryStatus, form.status, None)
        if status is None:
            raise ValidationError(f"Unknown inventory status: {form.status}")
        require_order(form.purchase_date, form.last_checked, "Last checked cannot be before the purchase date")

        existing = self._inventory.get_by_code(code)
        if existing is not None and existing.id != item_id:
            raise ValidationError(f'Item code "{code}" already exists.')

        return InventoryItem(
            id=item_id,
            item_name=name,
            item_code=code,
            category=form.category,
            status=status,
            assigned_to=form.assigned_to or UNASSIGNED,
            purchase_date=form.purchase_date,
            last_checked=form.last_checked,
        )

    def add(self, form: InventoryForm) -> int:
        item = self._build(form)
        try:
            return self._inventory.create(item)
        except BackendError as e:
            # Lost a race with another insert of the same code
            if e.code == "duplicate":
                raise ValidationError(f'Item code "{item.item_code}" already exists.') from e
            raise

    def update(self, item_id: int, form: InventoryForm) -> None:
        if self._inventory.get(int(item_id)) is None:
            raise NotFoundError("Inventory item not found.")
        self._inventory.update(self._build(form, item_id=int(item_id)))

    def delete(self, item_id: int) -> None:
        if not self._inventory.delete(int(item_id)):
            raise NotFoundError("Inventory item not found.")
        logger.info("Deleted inventory item %s", item_id)
