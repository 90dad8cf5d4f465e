from __future__ import annotations

from ..core.enums import ClearanceStatus, ClearanceType
from ..listing import Column, DropdownFilter, ListingSpec, SummaryCard
from ..listing.forms import FormField

STATUS_OPTIONS = tuple(s.value for s in ClearanceStatus)
TYPE_OPTIONS = tuple(t.value for t in ClearanceType)

CLEARANCE = ListingSpec(
    key="clearance",
    title="Clearance Records",
    columns=(
        Column("full_name", "Full Name"),
        Column("rank", "Rank"),
        Column("date_requested", "Date Requested"),
        Column("clearance_type", "Clearance Type"),
        Column("status", "Status"),
    ),
    search_fields=("full_name", "rank", "date_requested", "clearance_type", "status"),
    cards=(
        SummaryCard("pending", "Pending", ClearanceStatus.PENDING.value),
        SummaryCard("completed", "Completed", ClearanceStatus.COMPLETED.value),
        SummaryCard("rejected", "Rejected", ClearanceStatus.REJECTED.value),
    ),
    dropdowns=(
        DropdownFilter("status", "Status", "status", STATUS_OPTIONS),
        DropdownFilter("clearance_type", "Clearance Type", "clearance_type", TYPE_OPTIONS),
    ),
    total_label="Total Requests",
    empty_message="No clearance records found.",
)

MY_CLEARANCE = ListingSpec(
    key="my_clearance",
    title="My Clearance Requests",
    columns=(
        Column("date_requested", "Request Date"),
        Column("clearance_type", "Clearance Type"),
        Column("status", "Status"),
    ),
    search_fields=("date_requested", "clearance_type", "status"),
    cards=CLEARANCE.cards,
    dropdowns=CLEARANCE.dropdowns,
    total_label="Total Requests",
    empty_message="You have no clearance requests yet.",
)

CLEARANCE_FIELDS = (
    FormField("username", "Employee Username", required=True),
    FormField("clearance_type", "Clearance Type", kind="select", options=TYPE_OPTIONS, required=True),
)
