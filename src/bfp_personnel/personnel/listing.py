from __future__ import annotations

from ..core.constants import HISTORY_PAGE_SIZE, RANK_OPTIONS
from ..core.enums import PersonnelStatus
from ..listing import Column, DropdownFilter, ListingSpec, SummaryCard
from ..listing.forms import FormField

RANK_DROPDOWN = DropdownFilter("rank", "Rank", "rank", RANK_OPTIONS)

REGISTER = ListingSpec(
    key="personnel",
    title="Personnel Register",
    columns=(
        Column("badge_number", "Badge No."),
        Column("full_name", "Full Name"),
        Column("rank", "Rank"),
        Column("designation", "Designation"),
        Column("station", "Station"),
        Column("username", "Username"),
        Column("date_hired", "Date Hired"),
        Column("status", "Status"),
    ),
    search_fields=("full_name", "rank", "badge_number", "station", "designation", "username"),
    dropdowns=(RANK_DROPDOWN,),
    total_label="Total Personnel",
    empty_message="No personnel found.",
    search_placeholder="Search personnel...",
)

PERSONNEL_FIELDS = (
    FormField("badge_number", "Badge Number"),
    FormField("first_name", "First Name", required=True),
    FormField("middle_name", "Middle Name"),
    FormField("last_name", "Last Name", required=True),
    FormField("username", "Username", required=True),
    FormField("email", "Email"),
    FormField("rank", "Rank", kind="select", options=RANK_OPTIONS),
    FormField("designation", "Designation"),
    FormField("station", "Station"),
    FormField("birth_date", "Birth Date", kind="date"),
    FormField("date_hired", "Date Hired", kind="date"),
    FormField("retirement_date", "Retirement Date", kind="date"),
)

PROMOTION = ListingSpec(
    key="promotion",
    title="Promotion Eligibility",
    columns=(
        Column("full_name", "Full Name"),
        Column("rank", "Current Rank"),
        Column("last_rank", "Previous Rank"),
        Column("last_promoted", "Last Promoted"),
        Column("years_in_rank", "Years in Rank"),
    ),
    search_fields=("first_name", "middle_name", "last_name", "rank"),
    cards=(
        SummaryCard("eligible", "Eligible", predicate=lambda p: p.promotion_eligible),
        SummaryCard("not-eligible", "Not Eligible", predicate=lambda p: not p.promotion_eligible),
    ),
    dropdowns=(RANK_DROPDOWN,),
    total_label="Total Personnel",
    empty_message="No personnel in the local roster.",
)

PLACEMENT = ListingSpec(
    key="placement",
    title="Placement",
    columns=(
        Column("full_name", "Full Name"),
        Column("rank", "Rank"),
        Column("designation", "Designation"),
        Column("station", "Station/Unit"),
        Column("years_since_hire", "Years of Service"),
    ),
    search_fields=("full_name", "rank", "designation", "station"),
    cards=(
        SummaryCard("eligible", "Eligible for Promotion", predicate=lambda p: p.placement_eligible),
        SummaryCard("not-eligible", "Not Eligible", predicate=lambda p: not p.placement_eligible),
    ),
    dropdowns=(RANK_DROPDOWN,),
    total_label="Total Personnel",
    empty_message="No personnel in the local roster.",
)

HISTORY = ListingSpec(
    key="history",
    title="Personnel History",
    page_size=HISTORY_PAGE_SIZE,
    columns=(
        Column("full_name", "Full Name"),
        Column("badge_number", "Badge No."),
        Column("rank", "Rank"),
        Column("status", "Status"),
        Column("clearance_type", "Separation"),
        Column("retirement_date", "Retirement Date"),
        Column("years_of_service", "Years of Service"),
    ),
    search_fields=("full_name", "rank", "badge_number", "status"),
    cards=(
        SummaryCard("retired", "Retired", PersonnelStatus.RETIRED.value, match="contains"),
        SummaryCard("resigned", "Resigned", PersonnelStatus.RESIGNED.value, match="contains"),
        SummaryCard("equipment", "Equipment Completed", PersonnelStatus.EQUIPMENT_COMPLETED.value, match="contains"),
    ),
    total_label="Total Records",
    empty_message="No history records found.",
)
