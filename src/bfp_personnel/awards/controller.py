from __future__ import annotations

from flask import Flask, request

from ..container import Container
from ..listing.forms import RowAction
from ..listing.web import add_listing_routes, mutate
from .listing import AWARD_FIELDS, AWARDS


def register(app: Flask, container: Container) -> None:
    awards = container.award_service

    add_listing_routes(
        app,
        AWARDS,
        awards.list_awards,
        path="/awards",
        endpoint="awards",
        create_fields=AWARD_FIELDS,
        create_endpoint="award_create",
        row_actions=(RowAction("Delete", "award_delete", style="danger", confirm="Delete this award?"),),
    )

    @app.route("/awards/new", methods=["POST"], endpoint="award_create")
    def award_create():
        return mutate(
            AWARDS,
            awards.list_awards,
            lambda: awards.record(
                username=request.form.get("username", ""),
                award_name=request.form.get("award_name", ""),
            ),
            success_message="Award recorded successfully!",
            endpoint="awards",
        )

    @app.route("/awards/<int:record_id>/delete", methods=["POST"], endpoint="award_delete")
    def award_delete(record_id: int):
        return mutate(
            AWARDS,
            awards.list_awards,
            lambda: awards.delete(record_id),
            success_message="Award deleted.",
            endpoint="awards",
        )
