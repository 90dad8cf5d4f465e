from .filters import FilterState, apply_filters, search_text
from .pagination import PageButton, PageState, clamp_page, page_buttons, paginate, total_pages
from .spec import Column, DropdownFilter, ListingSpec, SummaryCard, field_text, field_value
from .summary import SummaryCount, summary_counts
from .view import MutationResult, RecordListView

__all__ = [
    "Column",
    "DropdownFilter",
    "FilterState",
    "ListingSpec",
    "MutationResult",
    "PageButton",
    "PageState",
    "RecordListView",
    "SummaryCard",
    "SummaryCount",
    "apply_filters",
    "clamp_page",
    "field_text",
    "field_value",
    "page_buttons",
    "paginate",
    "search_text",
    "summary_counts",
    "total_pages",
]
