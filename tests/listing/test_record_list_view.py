from __future__ import annotations

import io
from dataclasses import replace
from datetime import date

import pandas as pd

from bfp_personnel.core.enums import LeaveStatus
from bfp_personnel.core.exceptions import BackendError, ValidationError
from bfp_personnel.leave.listing import MANAGEMENT
from bfp_personnel.leave.model import LeaveRequest
from bfp_personnel.listing import RecordListView
from bfp_personnel.listing.export import export_xlsx
from bfp_personnel.listing.view import SYSTEM_ERROR_MESSAGE


def make_requests():
    statuses = [LeaveStatus.PENDING] * 5 + [LeaveStatus.APPROVED] * 4 + [LeaveStatus.REJECTED] * 3
    return [
        LeaveRequest(
            id=i + 1,
            leave_type="Vacation",
            start_date=date(2026, 1, 1),
            end_date=date(2026, 1, 2),
            num_days=2,
            status=status,
            employee_name=f"Employee {i + 1}",
        )
        for i, status in enumerate(statuses)
    ]


def loaded_view(records):
    view = RecordListView(MANAGEMENT, lambda: records)
    view.load()
    return view


def test_pending_card_fits_on_one_page():
    view = loaded_view(make_requests())
    view.select_card("pending")

    assert len(view.rows) == 5
    assert view.total_pages == 1
    assert view.buttons[-1].label == "Next" and view.buttons[-1].disabled


def test_empty_collection():
    view = loaded_view([])

    assert view.is_empty
    assert view.rows == []
    assert all(b.disabled for b in view.buttons)
    assert view.snapshot()["filtered_count"] == 0


def test_unmatched_search_keeps_summary_counts():
    view = loaded_view(make_requests())
    before = [(s.key, s.count) for s in view.summary]

    view.set_search("zzz-no-such-employee")

    assert view.filtered == []
    assert [(s.key, s.count) for s in view.summary] == before
    assert before == [("total", 12), ("pending", 5), ("approved", 4), ("rejected", 3)]


def test_filter_changes_reset_page():
    view = loaded_view(make_requests())
    view.go_to_page(3)
    assert view.current_page == 3

    view.set_search("Employee")
    assert view.page == 1


def test_failed_mutation_keeps_rows_and_message():
    records = make_requests()
    view = loaded_view(records)
    rows_before = list(view.rows)

    def failing():
        raise BackendError("permission_denied", "new row violates row-level security policy")

    result = view.submit(failing)

    assert not result.ok
    assert result.message == "new row violates row-level security policy"
    assert view.rows == rows_before


def test_validation_and_unexpected_errors():
    view = loaded_view(make_requests())

    def invalid():
        raise ValidationError("Please select a valid rank.")

    def broken():
        raise RuntimeError("boom")

    assert view.submit(invalid).message == "Please select a valid rank."
    assert view.submit(broken).message == SYSTEM_ERROR_MESSAGE


def test_successful_mutation_refetches():
    data = make_requests()
    view = RecordListView(MANAGEMENT, lambda: list(data))
    view.load()

    result = view.submit(lambda: data.pop(), success_message="Deleted.")

    assert result.ok and result.message == "Deleted."
    assert len(view.records) == 11


def test_failed_load_yields_empty_list():
    def fetch():
        raise BackendError("connection", "Can't connect to MySQL server")

    view = RecordListView(MANAGEMENT, fetch)
    view.load()
    assert view.records == [] and not view.loading


def test_export_contains_filtered_rows():
    view = loaded_view(make_requests())
    view.select_card("rejected")

    df = pd.read_excel(io.BytesIO(export_xlsx(view.filtered, MANAGEMENT).getvalue()), engine="openpyxl")

    assert list(df.columns) == [c.label for c in MANAGEMENT.columns]
    assert len(df) == 3
    assert set(df["Status"]) == {"Rejected"}


def test_dropdown_and_date_range_inputs_reset_page():
    spec = replace(MANAGEMENT, date_field="start_date")
    records = make_requests()
    records[0] = replace(records[0], start_date=date(2026, 3, 1), end_date=date(2026, 3, 1))
    view = RecordListView(spec, lambda: records)
    view.load()
    view.go_to_page(2)

    view.set_dropdown("status", "pend")
    assert view.page == 1
    assert len(view.filtered) == 5

    view.go_to_page(2)
    view.set_date_range(date(2026, 2, 1), None)
    assert view.page == 1
    assert [r.id for r in view.filtered] == [1]
