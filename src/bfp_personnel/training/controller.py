from __future__ import annotations

from flask import Flask, flash, redirect, request, url_for

from ..common.datetime_utils import parse_optional_date
from ..container import Container
from ..core.exceptions import ValidationError
from ..listing.forms import RowAction, form_values
from ..listing.web import add_listing_routes, mutate, render_form
from .listing import TRAINING_FIELDS, TRAININGS


def _fields() -> dict:
    try:
        training_date = parse_optional_date(request.form.get("training_date"))
    except ValueError:
        raise ValidationError("Training date must be in YYYY-MM-DD format")
    return {
        "username": request.form.get("username", ""),
        "training_date": training_date,
        "duration_days": request.form.get("duration_days", ""),
        "status": request.form.get("status", ""),
    }


def register(app: Flask, container: Container) -> None:
    trainings = container.training_service

    add_listing_routes(
        app,
        TRAININGS,
        trainings.list_trainings,
        path="/trainings",
        endpoint="trainings",
        create_fields=TRAINING_FIELDS,
        create_endpoint="training_create",
        edit_endpoint="training_edit",
        row_actions=(RowAction("Delete", "training_delete", style="danger", confirm="Delete this training?"),),
    )

    @app.route("/trainings/new", methods=["POST"], endpoint="training_create")
    def training_create():
        return mutate(
            TRAININGS,
            trainings.list_trainings,
            lambda: trainings.add(**_fields()),
            success_message="Training added successfully!",
            endpoint="trainings",
        )

    @app.route("/trainings/<int:record_id>/edit", methods=["GET", "POST"], endpoint="training_edit")
    def training_edit(record_id: int):
        if request.method == "POST":
            return mutate(
                TRAININGS,
                trainings.list_trainings,
                lambda: trainings.update(record_id, **_fields()),
                success_message="Training updated successfully!",
                endpoint="trainings",
            )

        training = container.training_repo.get(record_id)
        if training is None:
            flash("Training not found.", "danger")
            return redirect(url_for("trainings"))
        return render_form(
            f"Edit training of {training.name}",
            TRAINING_FIELDS,
            form_values(TRAINING_FIELDS, training),
            action=url_for("training_edit", record_id=record_id),
            back=url_for("trainings"),
        )

    @app.route("/trainings/<int:record_id>/delete", methods=["POST"], endpoint="training_delete")
    def training_delete(record_id: int):
        return mutate(
            TRAININGS,
            trainings.list_trainings,
            lambda: trainings.delete(record_id),
            success_message="Training deleted.",
            endpoint="trainings",
        )
