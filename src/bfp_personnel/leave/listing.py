from __future__ import annotations

from ..core.constants import MY_RECORDS_PAGE_SIZE
from ..core.enums import LeaveStatus, LeaveType
from ..listing import Column, DropdownFilter, ListingSpec, SummaryCard
from ..listing.forms import FormField

STATUS_CARDS = (
    SummaryCard("pending", "Pending", LeaveStatus.PENDING.value),
    SummaryCard("approved", "Approved", LeaveStatus.APPROVED.value),
    SummaryCard("rejected", "Rejected", LeaveStatus.REJECTED.value),
)
STATUS_OPTIONS = tuple(s.value for s in LeaveStatus)
TYPE_OPTIONS = tuple(t.value for t in LeaveType)

MANAGEMENT = ListingSpec(
    key="leave",
    title="Leave Management",
    columns=(
        Column("employee_name", "Employee"),
        Column("leave_type", "Leave Type"),
        Column("start_date", "Start Date"),
        Column("end_date", "End Date"),
        Column("num_days", "Days"),
        Column("location", "Location"),
        Column("status", "Status"),
        Column("approved_by", "Processed By"),
    ),
    search_fields=("employee_name", "leave_type", "location"),
    cards=STATUS_CARDS,
    dropdowns=(DropdownFilter("status", "Status", "status", STATUS_OPTIONS),),
    total_label="Total Requests",
    empty_message="No leave requests found.",
    search_placeholder="Search by employee, type, location...",
)

RECORDS = ListingSpec(
    key="leave_records",
    title="Leave Records",
    columns=(
        Column("full_name", "Full Name"),
        Column("rank", "Rank"),
        Column("date_of_filing", "Date of Filing"),
        Column("leave_type", "Leave Type"),
        Column("start_date", "Start Date"),
        Column("end_date", "End Date"),
        Column("num_days", "Days"),
        Column("status", "Status"),
    ),
    search_fields=("full_name", "rank", "date_of_filing", "leave_type", "start_date", "end_date", "num_days", "status"),
    cards=STATUS_CARDS,
    dropdowns=(
        DropdownFilter("status", "Status", "status", STATUS_OPTIONS),
        DropdownFilter("leave_type", "Leave Type", "leave_type", TYPE_OPTIONS),
    ),
    total_label="Total Requests",
    empty_message="No leave records found.",
)

MY_RECORDS = ListingSpec(
    key="my_leave",
    title="My Leave Records",
    page_size=MY_RECORDS_PAGE_SIZE,
    columns=(
        Column("date_of_filing", "Date Filed"),
        Column("leave_type", "Leave Type"),
        Column("start_date", "Start Date"),
        Column("end_date", "End Date"),
        Column("num_days", "Days"),
        Column("status", "Status"),
        Column("approved_by", "Processed By"),
    ),
    search_fields=("leave_type", "start_date", "end_date", "status"),
    cards=STATUS_CARDS,
    dropdowns=(DropdownFilter("leave_type", "Leave Type", "leave_type", TYPE_OPTIONS),),
    total_label="Total Requests",
    empty_message="You have no leave records yet.",
)

LEAVE_FIELDS = (
    FormField("leave_type", "Leave Type", kind="select", options=TYPE_OPTIONS, required=True),
    FormField("start_date", "Start Date", kind="date", required=True),
    FormField("end_date", "End Date", kind="date", required=True),
    FormField("location", "Location"),
    FormField("reason", "Reason", kind="textarea"),
)
