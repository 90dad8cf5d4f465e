from __future__ import annotations

from flask import Flask, flash, redirect, request, url_for

from ..container import Container
from ..listing.forms import RowAction, form_values
from ..listing.web import add_listing_routes, mutate, render_form
from .listing import CANDIDATE_FIELDS, RECRUITMENT
from .service import CandidateForm


def register(app: Flask, container: Container) -> None:
    recruitment = container.recruitment_service

    add_listing_routes(
        app,
        RECRUITMENT,
        recruitment.list_candidates,
        path="/recruitment",
        endpoint="recruitment",
        create_fields=CANDIDATE_FIELDS,
        create_endpoint="candidate_create",
        edit_endpoint="candidate_edit",
        row_actions=(RowAction("Delete", "candidate_delete", style="danger", confirm="Delete this candidate?"),),
    )

    @app.route("/recruitment/new", methods=["POST"], endpoint="candidate_create")
    def candidate_create():
        return mutate(
            RECRUITMENT,
            recruitment.list_candidates,
            lambda: recruitment.add(CandidateForm.from_mapping(request.form)),
            success_message="Candidate added successfully!",
            endpoint="recruitment",
        )

    @app.route("/recruitment/<int:record_id>/edit", methods=["GET", "POST"], endpoint="candidate_edit")
    def candidate_edit(record_id: int):
        if request.method == "POST":
            return mutate(
                RECRUITMENT,
                recruitment.list_candidates,
                lambda: recruitment.update(record_id, CandidateForm.from_mapping(request.form)),
                success_message="Candidate updated successfully!",
                endpoint="recruitment",
            )

        candidate = container.recruitment_repo.get(record_id)
        if candidate is None:
            flash("Candidate not found.", "danger")
            return redirect(url_for("recruitment"))
        values = dict(form_values(CANDIDATE_FIELDS, candidate))
        values["password"] = ""
        return render_form(
            f"Edit {candidate.candidate}",
            CANDIDATE_FIELDS,
            values,
            action=url_for("candidate_edit", record_id=record_id),
            back=url_for("recruitment"),
        )

    @app.route("/recruitment/<int:record_id>/delete", methods=["POST"], endpoint="candidate_delete")
    def candidate_delete(record_id: int):
        return mutate(
            RECRUITMENT,
            recruitment.list_candidates,
            lambda: recruitment.delete(record_id),
            success_message="Candidate deleted.",
            endpoint="recruitment",
        )
