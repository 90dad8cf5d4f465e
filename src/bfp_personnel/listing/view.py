from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from ..common.logger import get_logger
from ..core.exceptions import BackendError, DomainError
from .filters import FilterState, apply_filters
from .pagination import PageButton, PageState, page_buttons, paginate
from .spec import DropdownFilter, ListingSpec, field_text
from .summary import SummaryCount, summary_counts

logger = get_logger(__name__)

SYSTEM_ERROR_MESSAGE = "A system error occurred. Please try again."


@dataclass(frozen=True)
class MutationResult:
    ok: bool
    message: str


class RecordListView:
    """One list screen: fetch, filter, paginate, count and mutate.

    ``fetch`` returns every record of the screen. The held collection is only
    replaced by a successful refetch, so failed mutations leave it as it was.
    """

    def __init__(
        self,
        spec: ListingSpec,
        fetch: Callable[[], Sequence[Any]],
        *,
        log: Optional[logging.Logger] = None,
    ):
        self.spec = spec
        self._fetch = fetch
        self._log = log or logger
        self.records: List[Any] = []
        self.loading = False
        self.filter_state = FilterState()
        self.page_state = PageState(page_size=spec.page_size)

    @property
    def page(self) -> int:
        return self.page_state.page

    # -------- fetch --------
    def load(self) -> None:
        self.loading = True
        try:
            self.records = list(self._fetch())
        except (BackendError, DomainError) as e:
            self._log.error("Failed to load %s: %s", self.spec.key, e)
            self.records = []
        except Exception:
            self._log.exception("Unexpected error loading %s", self.spec.key)
            self.records = []
        finally:
            self.loading = False

    # -------- filter inputs (each resets to page 1) --------
    def _set_filter(self, state: FilterState) -> None:
        self.filter_state = state
        self.page_state = replace(self.page_state, page=1)

    def set_search(self, text: str) -> None:
        self._set_filter(self.filter_state.with_search(text))

    def select_card(self, key: str) -> None:
        self._set_filter(self.filter_state.with_card(key))

    def set_dropdown(self, name: str, value: str) -> None:
        self._set_filter(self.filter_state.with_dropdown(name, value))

    def set_date_range(self, start: Optional[date], end: Optional[date]) -> None:
        self._set_filter(self.filter_state.with_date_range(start, end))

    def go_to_page(self, page: int) -> None:
        self.page_state = replace(self.page_state, page=int(page)).clamped(len(self.filtered))

    def apply_query(self, args: Mapping[str, str]) -> None:
        """Restore filter and page from a query string."""
        self.filter_state = FilterState.from_query(args, self.spec)
        try:
            page = int(args.get("page") or 1)
        except (TypeError, ValueError):
            page = 1
        self.page_state = replace(self.page_state, page=page)

    # -------- derived view --------
    @property
    def filtered(self) -> List[Any]:
        return apply_filters(self.records, self.filter_state, self.spec)

    @property
    def total_pages(self) -> int:
        return self.page_state.total_pages(len(self.filtered))

    @property
    def current_page(self) -> int:
        return self.page_state.clamped(len(self.filtered)).page

    @property
    def rows(self) -> List[Any]:
        return paginate(self.filtered, self.page_state.page, self.page_state.page_size)

    @property
    def is_empty(self) -> bool:
        return not self.filtered

    @property
    def summary(self) -> List[SummaryCount]:
        return summary_counts(self.records, self.spec, active=self.filter_state.card)

    @property
    def buttons(self) -> List[PageButton]:
        return page_buttons(self.current_page, self.total_pages, empty=self.is_empty)

    def dropdown_options(self, dropdown: DropdownFilter) -> List[str]:
        """Fixed options, or the distinct values present in the fetched records."""
        if dropdown.options:
            return list(dropdown.options)
        values = {field_text(r, dropdown.field) for r in self.records}
        return sorted(v for v in values if v)

    # -------- mutation --------
    def submit(self, action: Callable[[], Any], *, success_message: str = "Saved successfully.") -> MutationResult:
        """Run ``action``; refetch on success, keep state and report the error otherwise."""
        try:
            action()
        except (BackendError, DomainError) as e:
            self._log.warning("Mutation on %s failed: %s", self.spec.key, e)
            return MutationResult(False, str(e))
        except Exception:
            self._log.exception("Unexpected error during mutation on %s", self.spec.key)
            return MutationResult(False, SYSTEM_ERROR_MESSAGE)

        self._log.info("Mutation on %s succeeded", self.spec.key)
        self.load()
        return MutationResult(True, success_message)

    # -------- serialization --------
    def row_dict(self, record: Any) -> Dict[str, str]:
        return {c.field: field_text(record, c.field) for c in self.spec.columns}

    def snapshot(self) -> Dict[str, Any]:
        filtered = self.filtered
        return {
            "screen": self.spec.key,
            "title": self.spec.title,
            "page": self.current_page,
            "page_size": self.page_state.page_size,
            "total_pages": self.total_pages,
            "filtered_count": len(filtered),
            "rows": [self.row_dict(r) for r in paginate(filtered, self.page_state.page, self.page_state.page_size)],
            "summary": [{"key": s.key, "label": s.label, "count": s.count, "active": s.active} for s in self.summary],
            "filters": self.filter_state.to_query(),
        }
