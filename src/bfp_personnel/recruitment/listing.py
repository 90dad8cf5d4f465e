from __future__ import annotations

from ..core.enums import RecruitmentStage, RecruitmentStatus
from ..listing import Column, DropdownFilter, ListingSpec, SummaryCard
from ..listing.forms import FormField

STAGE_OPTIONS = tuple(s.value for s in RecruitmentStage)
STATUS_OPTIONS = tuple(s.value for s in RecruitmentStatus)

RECRUITMENT = ListingSpec(
    key="recruitment",
    title="Recruitment",
    columns=(
        Column("candidate", "Candidate"),
        Column("position", "Position"),
        Column("application_date", "Application Date"),
        Column("stage", "Stage"),
        Column("interview_date", "Interview Date"),
        Column("status", "Status"),
        Column("username", "Username"),
    ),
    search_fields=("candidate", "position", "application_date", "stage", "interview_date", "status"),
    cards=(
        SummaryCard("applied", "Applied", RecruitmentStage.APPLIED.value, field="stage"),
        SummaryCard("screening", "Screening", RecruitmentStage.SCREENING.value, field="stage"),
        SummaryCard("interview", "Interview", RecruitmentStage.INTERVIEW.value, field="stage"),
        SummaryCard("final", "Final Review", RecruitmentStage.FINAL_REVIEW.value, field="stage"),
    ),
    dropdowns=(
        DropdownFilter("stage", "Stage", "stage", STAGE_OPTIONS),
        DropdownFilter("status", "Status", "status", STATUS_OPTIONS),
    ),
    total_label="Total Candidates",
    empty_message="No candidates found.",
    search_placeholder="Search candidates...",
)

CANDIDATE_FIELDS = (
    FormField("candidate", "Candidate", required=True),
    FormField("position", "Position", required=True),
    FormField("application_date", "Application Date", kind="date"),
    FormField("stage", "Stage", kind="select", options=STAGE_OPTIONS, required=True),
    FormField("interview_date", "Interview Date", kind="date"),
    FormField("status", "Status", kind="select", options=STATUS_OPTIONS, required=True),
    FormField("username", "Username"),
    FormField("password", "Password", kind="password"),
)
