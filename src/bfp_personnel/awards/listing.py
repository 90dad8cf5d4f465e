from __future__ import annotations

from ..core.enums import AwardType
from ..listing import Column, DropdownFilter, ListingSpec, SummaryCard
from ..listing.forms import FormField

AWARDS = ListingSpec(
    key="awards",
    title="Awards & Commendations",
    columns=(
        Column("full_name", "Full Name"),
        Column("rank", "Rank"),
        Column("badge_number", "Badge No."),
        Column("award_name", "Award"),
        Column("award_type", "Type"),
        Column("awarded_at", "Date"),
    ),
    search_fields=("full_name", "rank", "badge_number", "award_name", "award_type", "awarded_at"),
    cards=(
        SummaryCard("medal", "Medals", AwardType.MEDAL.value, field="award_type"),
        SummaryCard("commendation", "Commendations", AwardType.COMMENDATION.value, field="award_type", match="contains"),
        SummaryCard("certificate", "Certificates", AwardType.CERTIFICATE.value, field="award_type"),
        SummaryCard("ribbon", "Ribbons", AwardType.RIBBON.value, field="award_type"),
        SummaryCard("badge", "Badges", AwardType.BADGE.value, field="award_type"),
    ),
    dropdowns=(DropdownFilter("award_type", "Award Type", "award_type", tuple(t.value for t in AwardType)),),
    total_label="Total Awards",
    empty_message="No awards or commendations found.",
)

AWARD_FIELDS = (
    FormField("username", "Personnel Username", required=True),
    FormField("award_name", "Award Name", required=True),
)
