from __future__ import annotations

from datetime import date

import pytest

from bfp_personnel.listing import Column, DropdownFilter, FilterState, ListingSpec, SummaryCard, apply_filters

SPEC = ListingSpec(
    key="demo",
    title="Demo",
    columns=(Column("name", "Name"), Column("status", "Status")),
    search_fields=("name", "rank"),
    cards=(
        SummaryCard("pending", "Pending", "Pending"),
        SummaryCard("retired", "Retired", "retire", match="contains"),
    ),
    dropdowns=(DropdownFilter("rank", "Rank", "rank", ("FO1", "SFO1")),),
    date_field="filed",
)

RECORDS = [
    {"id": 1, "name": "Ana Reyes", "rank": "FO1", "status": "Pending", "filed": date(2026, 1, 5)},
    {"id": 2, "name": "Ben Cruz", "rank": "SFO1", "status": "Approved", "filed": "2026-01-20"},
    {"id": 3, "name": "Carla Diaz", "rank": "FO1", "status": "pending", "filed": None},
    {"id": 4, "name": "Dan Lim", "rank": "FO2", "status": "Retired (early)", "filed": date(2026, 2, 1)},
]


def ids(records):
    return [r["id"] for r in records]


def test_default_state_keeps_everything_in_order():
    assert ids(apply_filters(RECORDS, FilterState(), SPEC)) == [1, 2, 3, 4]


def test_card_matches_case_insensitively():
    assert ids(apply_filters(RECORDS, FilterState(card="pending"), SPEC)) == [1, 3]


def test_contains_card():
    assert ids(apply_filters(RECORDS, FilterState(card="retired"), SPEC)) == [4]


def test_unknown_card_means_total():
    assert ids(apply_filters(RECORDS, FilterState(card="nope"), SPEC)) == [1, 2, 3, 4]


def test_dropdown_keeps_records_containing_the_value():
    assert ids(apply_filters(RECORDS, FilterState().with_dropdown("rank", "fo1"), SPEC)) == [1, 2, 3]
    assert ids(apply_filters(RECORDS, FilterState().with_dropdown("rank", "SFO"), SPEC)) == [2]


def test_dropdown_matches_part_of_a_longer_value():
    awards = ListingSpec(
        key="awards_demo",
        title="Awards",
        columns=(Column("award_type", "Type"),),
        search_fields=("award_type",),
        dropdowns=(DropdownFilter("type", "Type", "award_type", ("Medal", "Ribbon")),),
    )
    rows = [{"id": "a", "award_type": "Gold Medal"}, {"id": "b", "award_type": "Ribbon"}]
    assert ids(apply_filters(rows, FilterState().with_dropdown("type", "medal"), awards)) == ["a"]


@pytest.mark.parametrize("value", ["", "all", "All"])
def test_dropdown_unset_values(value):
    state = FilterState().with_dropdown("rank", value)
    assert ids(apply_filters(RECORDS, state, SPEC)) == [1, 2, 3, 4]


def test_search_covers_configured_fields_only():
    assert ids(apply_filters(RECORDS, FilterState(search="sfo1"), SPEC)) == [2]
    # status is not a search field
    assert apply_filters(RECORDS, FilterState(search="approved"), SPEC) == []


def test_date_range_is_inclusive_and_skips_undated():
    state = FilterState().with_date_range(date(2026, 1, 5), date(2026, 1, 20))
    assert ids(apply_filters(RECORDS, state, SPEC)) == [1, 2]


def test_filters_are_anded():
    state = FilterState(search="a", card="pending").with_dropdown("rank", "FO1")
    assert ids(apply_filters(RECORDS, state, SPEC)) == [1, 3]


@pytest.mark.parametrize(
    "state",
    [
        FilterState(),
        FilterState(search="an"),
        FilterState(card="pending"),
        FilterState(search="r", card="pending").with_dropdown("rank", "FO1"),
        FilterState().with_date_range(date(2026, 1, 1), None),
    ],
)
def test_apply_filters_is_idempotent(state):
    once = apply_filters(RECORDS, state, SPEC)
    assert apply_filters(once, state, SPEC) == once


@pytest.mark.parametrize("short, longer", [("a", "an"), ("c", "cruz"), ("fo", "sfo1")])
def test_longer_search_never_grows_result(short, longer):
    wide = apply_filters(RECORDS, FilterState(search=short), SPEC)
    narrow = apply_filters(RECORDS, FilterState(search=longer), SPEC)
    assert all(r in wide for r in narrow)


def test_with_card_toggles_back_to_total():
    state = FilterState().with_card("pending")
    assert state.card == "pending"
    assert state.with_card("pending").card == "total"


def test_query_round_trip():
    args = {"q": "ana", "card": "pending", "f_rank": "FO1", "date_from": "2026-01-01", "date_to": "bad"}
    state = FilterState.from_query(args, SPEC)

    assert state.search == "ana"
    assert state.card == "pending"
    assert state.dropdowns == {"rank": "FO1"}
    assert state.date_from == date(2026, 1, 1)
    assert state.date_to is None
    assert state.to_query() == {"q": "ana", "card": "pending", "f_rank": "FO1", "date_from": "2026-01-01"}
    assert not state.is_default
    assert FilterState.from_query({}, SPEC).is_default
