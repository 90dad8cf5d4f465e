from __future__ import annotations

from flask import Flask, current_app, request, session

from ..common.datetime_utils import parse_optional_date
from ..container import Container
from ..core.exceptions import ValidationError
from ..listing.forms import FormField, RowAction
from ..listing.web import add_listing_routes, mutate
from .listing import LEAVE_FIELDS, MANAGEMENT, MY_RECORDS, RECORDS


def _approver() -> str:
    return session.get("username") or current_app.config.get("ADMIN_USERNAME") or "Admin"


def _form_date(name: str, label: str):
    try:
        return parse_optional_date(request.form.get(name))
    except ValueError:
        raise ValidationError(f"{label} is not a valid date (YYYY-MM-DD)")


def register(app: Flask, container: Container) -> None:
    leave = container.leave_service

    add_listing_routes(
        app,
        MANAGEMENT,
        leave.list_requests,
        path="/leave",
        endpoint="leave_management",
        row_actions=(
            RowAction("Approve", "leave_approve", style="success", confirm="Approve this leave request?"),
            RowAction(
                "Reject",
                "leave_reject",
                style="danger",
                fields=(FormField("reason", "Reason (optional)"),),
            ),
        ),
    )

    @app.route("/leave/<int:record_id>/approve", methods=["POST"], endpoint="leave_approve")
    def leave_approve(record_id: int):
        return mutate(
            MANAGEMENT,
            leave.list_requests,
            lambda: leave.approve(record_id, approver=_approver()),
            success_message="Leave request approved.",
            endpoint="leave_management",
        )

    @app.route("/leave/<int:record_id>/reject", methods=["POST"], endpoint="leave_reject")
    def leave_reject(record_id: int):
        return mutate(
            MANAGEMENT,
            leave.list_requests,
            lambda: leave.reject(record_id, approver=_approver(), reason=request.form.get("reason", "")),
            success_message="Leave request rejected.",
            endpoint="leave_management",
        )

    add_listing_routes(
        app,
        RECORDS,
        leave.list_local_records,
        path="/leave-records",
        endpoint="leave_records",
    )

    # -------- employee side --------
    def my_requests():
        return leave.list_for_user(session.get("username") or "")

    add_listing_routes(
        app,
        MY_RECORDS,
        my_requests,
        path="/my-leave",
        endpoint="my_leave",
        create_fields=LEAVE_FIELDS,
        create_endpoint="my_leave_file",
    )

    @app.route("/my-leave/new", methods=["POST"], endpoint="my_leave_file")
    def my_leave_file():
        return mutate(
            MY_RECORDS,
            my_requests,
            lambda: leave.file_leave(
                username=session.get("username") or "",
                leave_type=request.form.get("leave_type", ""),
                start_date=_form_date("start_date", "Start date"),
                end_date=_form_date("end_date", "End date"),
                location=request.form.get("location", ""),
                reason=request.form.get("reason", ""),
            ),
            success_message="Leave request submitted successfully!",
            endpoint="my_leave",
        )
