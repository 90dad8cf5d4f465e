"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

UNKNOWN = "Unknown"
NOT_AVAILABLE = "N/A"
UNASSIGNED = "Unassigned"

# Summary card meaning "no quick filter"
TOTAL_CARD = "total"

DEFAULT_PAGE_SIZE = 5
HISTORY_PAGE_SIZE = 10
MY_RECORDS_PAGE_SIZE = 6
INSPECTION_HISTORY_PAGE_SIZE = 20

# Years in rank (or since hire) before personnel become eligible
ELIGIBILITY_YEARS = 2
DAYS_PER_YEAR = 365.25

AWARD_DOCUMENT_CATEGORY = "Award/Commendation"

RANK_OPTIONS = ("FO1", "FO2", "FO3", "SFO1", "SFO2", "SFO3", "SFO4")
