from __future__ import annotations

from ..core.enums import TrainingStatus
from ..listing import Column, DropdownFilter, ListingSpec, SummaryCard
from ..listing.forms import FormField

STATUS_OPTIONS = tuple(s.value for s in TrainingStatus)

TRAININGS = ListingSpec(
    key="trainings",
    title="Trainings",
    columns=(
        Column("name", "Name"),
        Column("rank", "Rank"),
        Column("training_date", "Date"),
        Column("duration_days", "Days"),
        Column("status", "Status"),
    ),
    search_fields=("name", "rank", "training_date", "duration_days", "status"),
    cards=(
        SummaryCard("pending", "Pending", TrainingStatus.PENDING.value),
        SummaryCard("completed", "Completed", TrainingStatus.COMPLETED.value),
        SummaryCard("ongoing", "Ongoing", TrainingStatus.ONGOING.value),
        SummaryCard("cancelled", "Cancelled", TrainingStatus.CANCELLED.value),
    ),
    dropdowns=(DropdownFilter("status", "Status", "status", STATUS_OPTIONS),),
    total_label="Total Trainings",
    empty_message="No trainings found.",
)

TRAINING_FIELDS = (
    FormField("username", "Personnel Username", required=True),
    FormField("training_date", "Training Date", kind="date", required=True),
    FormField("duration_days", "Duration (Days)", kind="number", required=True),
    FormField("status", "Training Status", kind="select", options=STATUS_OPTIONS, required=True),
)
