from __future__ import annotations

import pytest

from bfp_personnel.listing import PageState, clamp_page, page_buttons, paginate, total_pages


@pytest.mark.parametrize("count, size, expected", [(0, 5, 1), (1, 5, 1), (5, 5, 1), (6, 5, 2), (12, 5, 3)])
def test_total_pages(count, size, expected):
    assert total_pages(count, size) == expected


@pytest.mark.parametrize("size", [5, 6, 10, 20])
@pytest.mark.parametrize("count", [0, 1, 4, 5, 11, 20, 41])
def test_pages_concatenate_back_to_the_input(count, size):
    records = list(range(count))
    pages = total_pages(count, size)
    joined = []
    for p in range(1, pages + 1):
        chunk = paginate(records, p, size)
        assert 0 < len(chunk) <= size or count == 0
        joined.extend(chunk)
    assert joined == records


def test_out_of_range_page_clamps():
    records = list(range(12))
    assert paginate(records, 99, 5) == [10, 11]
    assert paginate(records, -3, 5) == [0, 1, 2, 3, 4]
    assert clamp_page(7, 3) == 3
    assert clamp_page(0, 3) == 1


def labels(buttons):
    return [b.label for b in buttons]


def test_single_page_buttons():
    buttons = page_buttons(1, 1, empty=False)
    assert labels(buttons) == ["Previous", "1", "Next"]
    assert buttons[0].disabled and buttons[-1].disabled


def test_window_with_ellipses():
    buttons = page_buttons(5, 10, empty=False)
    assert labels(buttons) == ["Previous", "1", "...", "4", "5", "6", "...", "10", "Next"]
    assert [b.label for b in buttons if b.active] == ["5"]


def test_window_widens_near_the_edges():
    assert labels(page_buttons(1, 10, empty=False)) == ["Previous", "1", "2", "3", "4", "...", "10", "Next"]
    assert labels(page_buttons(3, 10, empty=False)) == ["Previous", "1", "2", "3", "4", "...", "10", "Next"]
    assert labels(page_buttons(10, 10, empty=False)) == ["Previous", "1", "...", "7", "8", "9", "10", "Next"]
    assert labels(page_buttons(8, 10, empty=False)) == ["Previous", "1", "...", "7", "8", "9", "10", "Next"]


def test_small_page_counts_show_every_page():
    assert labels(page_buttons(1, 4, empty=False)) == ["Previous", "1", "2", "3", "4", "Next"]
    assert labels(page_buttons(4, 4, empty=False)) == ["Previous", "1", "2", "3", "4", "Next"]
    assert labels(page_buttons(2, 2, empty=False)) == ["Previous", "1", "2", "Next"]


def test_empty_result_disables_everything():
    assert all(b.disabled for b in page_buttons(1, 1, empty=True))


def test_page_state_clamps_to_result_size():
    state = PageState(page=9, page_size=6)
    assert state.total_pages(13) == 3
    assert state.clamped(13) == PageState(page=3, page_size=6)
    assert state.clamped(0).page == 1
