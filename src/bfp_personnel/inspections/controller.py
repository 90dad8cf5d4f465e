from __future__ import annotations

from flask import Flask, flash, redirect, request, url_for

from ..container import Container
from ..listing.forms import RowAction, form_values
from ..listing.web import add_listing_routes, mutate, render_form
from .listing import INSPECTION_FIELDS, INSPECTION_HISTORY, INSPECTIONS
from .service import InspectionForm


def register(app: Flask, container: Container) -> None:
    inspections = container.inspection_service

    add_listing_routes(
        app,
        INSPECTIONS,
        inspections.list_inspections,
        path="/inspections",
        endpoint="inspections",
        create_fields=INSPECTION_FIELDS,
        create_endpoint="inspection_create",
        edit_endpoint="inspection_edit",
        row_actions=(RowAction("Delete", "inspection_delete", style="danger", confirm="Delete this inspection?"),),
    )

    add_listing_routes(
        app,
        INSPECTION_HISTORY,
        inspections.list_inspections,
        path="/inspections/history",
        endpoint="inspection_history",
    )

    @app.route("/inspections/new", methods=["POST"], endpoint="inspection_create")
    def inspection_create():
        return mutate(
            INSPECTIONS,
            inspections.list_inspections,
            lambda: inspections.record(InspectionForm.from_mapping(request.form)),
            success_message="Inspection recorded successfully!",
            endpoint="inspections",
        )

    @app.route("/inspections/<int:record_id>/edit", methods=["GET", "POST"], endpoint="inspection_edit")
    def inspection_edit(record_id: int):
        if request.method == "POST":
            return mutate(
                INSPECTIONS,
                inspections.list_inspections,
                lambda: inspections.update(record_id, InspectionForm.from_mapping(request.form)),
                success_message="Inspection updated successfully!",
                endpoint="inspections",
            )

        inspection = container.inspection_repo.get(record_id)
        if inspection is None:
            flash("Inspection not found.", "danger")
            return redirect(url_for("inspections"))
        return render_form(
            f"Edit inspection of {inspection.equipment_name}",
            INSPECTION_FIELDS,
            form_values(INSPECTION_FIELDS, inspection),
            action=url_for("inspection_edit", record_id=record_id),
            back=url_for("inspections"),
        )

    @app.route("/inspections/<int:record_id>/delete", methods=["POST"], endpoint="inspection_delete")
    def inspection_delete(record_id: int):
        return mutate(
            INSPECTIONS,
            inspections.list_inspections,
            lambda: inspections.delete(record_id),
            success_message="Inspection deleted.",
            endpoint="inspections",
        )
