from __future__ import annotations

from flask import Flask, flash, redirect, request, url_for

from ..container import Container
from ..core.constants import RANK_OPTIONS
from ..core.enums import PersonnelStatus
from ..listing.forms import FormField, RowAction, form_values
from ..listing.web import add_listing_routes, mutate, render_form
from .listing import HISTORY, PERSONNEL_FIELDS, PLACEMENT, PROMOTION, REGISTER
from .service import PersonnelForm

SEPARATION_OPTIONS = tuple(s.value for s in PersonnelStatus if s != PersonnelStatus.ACTIVE)


def register(app: Flask, container: Container) -> None:
    personnel = container.personnel_service
    roster = container.roster_service

    # -------- register --------
    add_listing_routes(
        app,
        REGISTER,
        personnel.list_register,
        path="/personnel",
        endpoint="personnel_register",
        create_fields=PERSONNEL_FIELDS,
        create_endpoint="personnel_create",
        edit_endpoint="personnel_edit",
        row_actions=(
            RowAction(
                "Separate",
                "personnel_status",
                style="warning",
                fields=(FormField("status", "Status", kind="select", options=SEPARATION_OPTIONS),),
            ),
            RowAction("Delete", "personnel_delete", style="danger", confirm="Delete this personnel record?"),
        ),
    )

    @app.route("/personnel/new", methods=["POST"], endpoint="personnel_create")
    def personnel_create():
        return mutate(
            REGISTER,
            personnel.list_register,
            lambda: personnel.register(PersonnelForm.from_mapping(request.form)),
            success_message="Personnel registered successfully!",
            endpoint="personnel_register",
        )

    @app.route("/personnel/<int:record_id>/edit", methods=["GET", "POST"], endpoint="personnel_edit")
    def personnel_edit(record_id: int):
        if request.method == "POST":
            return mutate(
                REGISTER,
                personnel.list_register,
                lambda: personnel.update(record_id, PersonnelForm.from_mapping(request.form)),
                success_message="Personnel updated successfully!",
                endpoint="personnel_register",
            )

        person = container.personnel_repo.get(record_id)
        if person is None:
            flash("Personnel record not found.", "danger")
            return redirect(url_for("personnel_register"))
        return render_form(
            f"Edit {person.full_name}",
            PERSONNEL_FIELDS,
            form_values(PERSONNEL_FIELDS, person),
            action=url_for("personnel_edit", record_id=record_id),
            back=url_for("personnel_register"),
        )

    @app.route("/personnel/<int:record_id>/delete", methods=["POST"], endpoint="personnel_delete")
    def personnel_delete(record_id: int):
        return mutate(
            REGISTER,
            personnel.list_register,
            lambda: personnel.delete(record_id),
            success_message="Personnel deleted successfully!",
            endpoint="personnel_register",
        )

    @app.route("/personnel/<int:record_id>/status", methods=["POST"], endpoint="personnel_status")
    def personnel_status(record_id: int):
        return mutate(
            REGISTER,
            personnel.list_register,
            lambda: personnel.set_status(record_id, request.form.get("status", "")),
            success_message="Personnel status updated.",
            endpoint="personnel_register",
        )

    # -------- history --------
    add_listing_routes(
        app,
        HISTORY,
        personnel.list_history,
        path="/history",
        endpoint="personnel_history",
        row_actions=(
            RowAction("Reactivate", "personnel_reactivate", style="success", confirm="Reactivate this personnel?"),
        ),
    )

    @app.route("/history/<int:record_id>/reactivate", methods=["POST"], endpoint="personnel_reactivate")
    def personnel_reactivate(record_id: int):
        return mutate(
            HISTORY,
            personnel.list_history,
            lambda: personnel.reactivate(record_id),
            success_message="Personnel has been reactivated",
            endpoint="personnel_history",
        )

    # -------- promotion / placement (local roster) --------
    add_listing_routes(
        app,
        PROMOTION,
        roster.list_roster,
        path="/promotion",
        endpoint="promotion",
        header_actions=(("Sync from register", "roster_sync"),),
        row_actions=(
            RowAction(
                "Promote",
                "promotion_promote",
                fields=(FormField("rank", "Next rank", kind="select", options=RANK_OPTIONS, required=True),),
            ),
        ),
    )

    @app.route("/promotion/<int:record_id>/promote", methods=["POST"], endpoint="promotion_promote")
    def promotion_promote(record_id: int):
        return mutate(
            PROMOTION,
            roster.list_roster,
            lambda: roster.promote(record_id, request.form.get("rank", "")),
            success_message="Promotion recorded successfully!",
            endpoint="promotion",
        )

    add_listing_routes(
        app,
        PLACEMENT,
        roster.list_roster,
        path="/placement",
        endpoint="placement",
        header_actions=(("Sync from register", "roster_sync"),),
        row_actions=(
            RowAction(
                "Save",
                "placement_update",
                fields=(
                    FormField("designation", "Designation", required=True),
                    FormField("station", "Station/Unit", required=True),
                ),
            ),
        ),
    )

    @app.route("/placement/<int:record_id>", methods=["POST"], endpoint="placement_update")
    def placement_update(record_id: int):
        return mutate(
            PLACEMENT,
            roster.list_roster,
            lambda: roster.place(record_id, request.form.get("designation", ""), request.form.get("station", "")),
            success_message="Placement updated successfully!",
            endpoint="placement",
        )

    @app.route("/roster/sync", methods=["POST"], endpoint="roster_sync")
    def roster_sync():
        back = request.form.get("next") or "promotion"
        if back not in {"promotion", "placement"}:
            back = "promotion"
        return mutate(
            PROMOTION,
            roster.list_roster,
            roster.sync_from_register,
            success_message="Local roster synced with the personnel register.",
            endpoint=back,
        )
