from __future__ import annotations

from ..core.enums import InventoryStatus
from ..listing import Column, DropdownFilter, ListingSpec, SummaryCard
from ..listing.forms import FormField

STATUS_OPTIONS = tuple(s.value for s in InventoryStatus)
CATEGORY_OPTIONS = ("Firefighting Equipment", "Protective Gear", "Vehicle Equipment", "Medical Equipment", "Communication Equipment")

INVENTORY = ListingSpec(
    key="inventory",
    title="Inventory Control",
    columns=(
        Column("item_name", "Item Name"),
        Column("item_code", "Item Code"),
        Column("category", "Category"),
        Column("status", "Status"),
        Column("assigned_to", "Assigned To"),
        Column("purchase_date", "Purchase Date"),
        Column("last_checked", "Last Checked"),
    ),
    search_fields=("item_name", "item_code", "category", "status", "assigned_to", "purchase_date", "last_checked"),
    cards=(
        SummaryCard("assigned", "Assigned", predicate=lambda i: i.is_assigned),
        SummaryCard("storage", "In Storage", predicate=lambda i: not i.is_assigned),
    ),
    dropdowns=(
        DropdownFilter("category", "Category", "category", CATEGORY_OPTIONS),
        DropdownFilter("status", "Status", "status", STATUS_OPTIONS),
    ),
    total_label="Total Items",
    empty_message="No inventory items found.",
)

INVENTORY_FIELDS = (
    FormField("item_name", "Item Name", required=True),
    FormField("item_code", "Item Code", required=True),
    FormField("category", "Category", kind="select", options=CATEGORY_OPTIONS),
    FormField("status", "Status", kind="select", options=STATUS_OPTIONS, required=True),
    FormField("assigned_to", "Assigned To"),
    FormField("purchase_date", "Purchase Date", kind="date"),
    FormField("last_checked", "Last Checked", kind="date"),
)
