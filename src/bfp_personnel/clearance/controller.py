from __future__ import annotations

from flask import Flask, request, session

from ..container import Container
from ..listing.forms import FormField, RowAction
from ..listing.web import add_listing_routes, mutate
from .listing import CLEARANCE, CLEARANCE_FIELDS, MY_CLEARANCE, STATUS_OPTIONS


def register(app: Flask, container: Container) -> None:
    clearance = container.clearance_service

    add_listing_routes(
        app,
        CLEARANCE,
        clearance.list_requests,
        path="/clearance",
        endpoint="clearance_records",
        create_fields=CLEARANCE_FIELDS,
        create_endpoint="clearance_initiate",
        row_actions=(
            RowAction(
                "Update",
                "clearance_status",
                fields=(FormField("status", "Status", kind="select", options=STATUS_OPTIONS),),
            ),
        ),
    )

    @app.route("/clearance/new", methods=["POST"], endpoint="clearance_initiate")
    def clearance_initiate():
        return mutate(
            CLEARANCE,
            clearance.list_requests,
            lambda: clearance.initiate(
                username=request.form.get("username", ""),
                clearance_type=request.form.get("clearance_type", ""),
            ),
            success_message="Clearance request initiated successfully!",
            endpoint="clearance_records",
        )

    @app.route("/clearance/<int:record_id>/status", methods=["POST"], endpoint="clearance_status")
    def clearance_status(record_id: int):
        status = request.form.get("status", "")
        return mutate(
            CLEARANCE,
            clearance.list_requests,
            lambda: clearance.set_status(record_id, status),
            success_message=f"Status updated to {status}",
            endpoint="clearance_records",
        )

    # -------- employee side --------
    def my_requests():
        return clearance.list_for_user(session.get("username") or "")

    add_listing_routes(
        app,
        MY_CLEARANCE,
        my_requests,
        path="/my-clearance",
        endpoint="my_clearance",
    )
