from __future__ import annotations

from ..core.constants import INSPECTION_HISTORY_PAGE_SIZE
from ..core.enums import InspectionStatus
from ..listing import Column, DropdownFilter, ListingSpec, SummaryCard
from ..listing.forms import FormField

STATUS_OPTIONS = tuple(s.value for s in InspectionStatus)

_COLUMNS = (
    Column("inspection_date", "Date"),
    Column("equipment_name", "Equipment"),
    Column("inspector_name", "Inspector"),
    Column("status", "Status"),
    Column("findings", "Findings"),
    Column("recommendations", "Recommendations"),
    Column("notes", "Notes"),
)

INSPECTIONS = ListingSpec(
    key="inspections",
    title="Equipment Inspections",
    columns=_COLUMNS,
    search_fields=("equipment_name", "inspector_name", "status", "findings", "recommendations", "notes"),
    cards=(
        SummaryCard("passed", "Passed", InspectionStatus.PASSED.value),
        SummaryCard("failed", "Failed", InspectionStatus.FAILED.value),
        SummaryCard("attention", "Needs Attention", InspectionStatus.NEEDS_ATTENTION.value),
    ),
    dropdowns=(
        DropdownFilter("equipment", "Equipment", "equipment_name"),
        DropdownFilter("status", "Status", "status", STATUS_OPTIONS),
    ),
    total_label="Total Inspections",
    empty_message="No inspections found.",
)

INSPECTION_HISTORY = ListingSpec(
    key="inspection_history",
    title="Inspection History",
    page_size=INSPECTION_HISTORY_PAGE_SIZE,
    columns=_COLUMNS,
    search_fields=("equipment_name", "inspector_name", "findings", "notes"),
    cards=(SummaryCard("completed", "Completed", InspectionStatus.PASSED.value),),
    dropdowns=(DropdownFilter("status", "Status", "status", STATUS_OPTIONS),),
    date_field="inspection_date",
    total_label="Total Inspections",
    empty_message="No records found. Try adjusting your filters or search terms.",
)

INSPECTION_FIELDS = (
    FormField("equipment_id", "Equipment ID", kind="number", required=True),
    FormField("inspector_id", "Inspector (personnel ID)", kind="number"),
    FormField("inspection_date", "Inspection Date", kind="date", required=True),
    FormField("status", "Status", kind="select", options=STATUS_OPTIONS, required=True),
    FormField("findings", "Findings", kind="textarea"),
    FormField("recommendations", "Recommendations", kind="textarea"),
    FormField("notes", "Notes", kind="textarea"),
)
