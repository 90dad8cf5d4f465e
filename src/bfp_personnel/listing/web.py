from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Optional, Sequence

from flask import Flask, flash, jsonify, redirect, render_template, request, send_file, url_for

from .export import export_xlsx
from .forms import FormField, RowAction
from .spec import ListingSpec, field_text
from .view import RecordListView

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def open_view(spec: ListingSpec, fetch: Callable[[], Sequence[Any]]) -> RecordListView:
    view = RecordListView(spec, fetch)
    view.apply_query(request.args)
    view.load()
    return view


def render_view(
    view: RecordListView,
    *,
    endpoint: str,
    row_actions: Sequence[RowAction] = (),
    create_fields: Sequence[FormField] = (),
    create_endpoint: Optional[str] = None,
    edit_endpoint: Optional[str] = None,
    export_endpoint: Optional[str] = None,
    template: str = "records/list.html",
    **context,
):
    return render_template(
        template,
        view=view,
        spec=view.spec,
        endpoint=endpoint,
        query=view.filter_state.to_query(),
        row_actions=row_actions,
        create_fields=create_fields,
        create_endpoint=create_endpoint,
        edit_endpoint=edit_endpoint,
        export_endpoint=export_endpoint,
        active_page=view.spec.key,
        cell=field_text,
        **context,
    )


def json_view(view: RecordListView):
    return jsonify(view.snapshot())


def export_view(view: RecordListView):
    output = export_xlsx(view.filtered, view.spec)
    stamp = datetime.now().strftime("%Y%m%d")
    return send_file(
        output,
        download_name=f"{view.spec.key}_{stamp}.xlsx",
        as_attachment=True,
        mimetype=XLSX_MIMETYPE,
    )


def add_listing_routes(
    app: Flask,
    spec: ListingSpec,
    fetch: Callable[[], Sequence[Any]],
    *,
    path: str,
    endpoint: str,
    **render_kwargs,
) -> None:
    """HTML list at ``path``, its xlsx export and ``/api/<screen>`` JSON."""

    def list_page():
        view = open_view(spec, fetch)
        return render_view(view, endpoint=endpoint, export_endpoint=f"{endpoint}_export", **render_kwargs)

    def list_api():
        return json_view(open_view(spec, fetch))

    def list_export():
        return export_view(open_view(spec, fetch))

    app.add_url_rule(path, endpoint=endpoint, view_func=list_page, methods=["GET"])
    app.add_url_rule(f"/api/{spec.key}", endpoint=f"{endpoint}_api", view_func=list_api, methods=["GET"])
    app.add_url_rule(f"{path}/export", endpoint=f"{endpoint}_export", view_func=list_export, methods=["GET"])


def render_form(title: str, fields: Sequence[FormField], values, *, action: str, back: str):
    return render_template("records/form.html", title=title, fields=fields, values=values, action=action, back=back)


def mutate(
    spec: ListingSpec,
    fetch: Callable[[], Sequence[Any]],
    action: Callable[[], Any],
    *,
    success_message: str,
    endpoint: str,
):
    """Run a POSTed mutation through the view, flash the outcome and go back to the list."""
    view = RecordListView(spec, fetch)
    result = view.submit(action, success_message=success_message)
    flash(result.message, "success" if result.ok else "danger")
    return redirect(url_for(endpoint, **_back_query()))


def _back_query() -> dict:
    keep = {}
    for key, value in request.args.items():
        if value:
            keep[key] = value
    return keep
