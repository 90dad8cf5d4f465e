from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


def total_pages(count: int, page_size: int) -> int:
    """At least one page, even for an empty result."""
    return max(1, math.ceil(count / page_size))


def clamp_page(page: int, pages: int) -> int:
    return min(max(1, int(page)), max(1, pages))


def paginate(records: Sequence[T], page: int, page_size: int) -> List[T]:
    page = clamp_page(page, total_pages(len(records), page_size))
    start = (page - 1) * page_size
    return list(records[start:start + page_size])


@dataclass(frozen=True)
class PageState:
    page: int = 1
    page_size: int = 5

    def total_pages(self, count: int) -> int:
        return total_pages(count, self.page_size)

    def clamped(self, count: int) -> "PageState":
        return PageState(page=clamp_page(self.page, self.total_pages(count)), page_size=self.page_size)


@dataclass(frozen=True)
class PageButton:
    kind: str  # prev | page | ellipsis | next
    label: str
    page: Optional[int] = None
    active: bool = False
    disabled: bool = False


def page_buttons(page: int, pages: int, *, empty: bool) -> List[PageButton]:
    """Previous, first, a window around ``page``, last, Next.

    The window is ``page`` +/- 1, widened to pages 2-4 near the start and to
    the last three inner pages near the end. Ellipses mark skipped pages;
    everything is disabled for an empty result.
    """
    pages = max(1, pages)
    page = clamp_page(page, pages)

    buttons = [
        PageButton("prev", "Previous", page=max(1, page - 1), disabled=empty or page == 1),
        PageButton("page", "1", page=1, active=page == 1, disabled=empty),
    ]

    start = max(2, page - 1)
    end = min(pages - 1, page + 1)
    if page <= 3:
        end = min(pages - 1, 4)
    if page >= pages - 2:
        start = max(2, pages - 3)

    if start > 2:
        buttons.append(PageButton("ellipsis", "...", disabled=True))
    for i in range(start, end + 1):
        buttons.append(PageButton("page", str(i), page=i, active=i == page, disabled=empty))
    if end < pages - 1:
        buttons.append(PageButton("ellipsis", "...", disabled=True))

    if pages > 1:
        buttons.append(PageButton("page", str(pages), page=pages, active=page == pages, disabled=empty))

    buttons.append(PageButton("next", "Next", page=min(pages, page + 1), disabled=empty or page == pages))
    return buttons
