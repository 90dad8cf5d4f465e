from __future__ import annotations

from flask import Flask, flash, jsonify, redirect, request, url_for

from ..container import Container
from ..core.exceptions import BackendError, NotFoundError
from ..listing.forms import RowAction, form_values
from ..listing.web import add_listing_routes, mutate, render_form
from .listing import INVENTORY, INVENTORY_FIELDS
from .service import InventoryForm


def register(app: Flask, container: Container) -> None:
    inventory = container.inventory_service

    add_listing_routes(
        app,
        INVENTORY,
        inventory.list_items,
        path="/inventory",
        endpoint="inventory",
        create_fields=INVENTORY_FIELDS,
        create_endpoint="inventory_create",
        edit_endpoint="inventory_edit",
        row_actions=(RowAction("Delete", "inventory_delete", style="danger", confirm="Delete this item?"),),
    )

    @app.route("/inventory/new", methods=["POST"], endpoint="inventory_create")
    def inventory_create():
        return mutate(
            INVENTORY,
            inventory.list_items,
            lambda: inventory.add(InventoryForm.from_mapping(request.form)),
            success_message="Item added successfully!",
            endpoint="inventory",
        )

    @app.route("/inventory/<int:record_id>/edit", methods=["GET", "POST"], endpoint="inventory_edit")
    def inventory_edit(record_id: int):
        if request.method == "POST":
            return mutate(
                INVENTORY,
                inventory.list_items,
                lambda: inventory.update(record_id, InventoryForm.from_mapping(request.form)),
                success_message="Item updated successfully!",
                endpoint="inventory",
            )

        item = container.inventory_repo.get(record_id)
        if item is None:
            flash("Inventory item not found.", "danger")
            return redirect(url_for("inventory"))
        return render_form(
            f"Edit {item.item_name}",
            INVENTORY_FIELDS,
            form_values(INVENTORY_FIELDS, item),
            action=url_for("inventory_edit", record_id=record_id),
            back=url_for("inventory"),
        )

    @app.route("/inventory/<int:record_id>/delete", methods=["POST"], endpoint="inventory_delete")
    def inventory_delete(record_id: int):
        return mutate(
            INVENTORY,
            inventory.list_items,
            lambda: inventory.delete(record_id),
            success_message="Item deleted.",
            endpoint="inventory",
        )

    @app.route("/api/inventory/lookup", methods=["GET"], endpoint="inventory_lookup")
    def inventory_lookup():
        try:
            item = inventory.find_by_code(request.args.get("code", ""))
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except BackendError as e:
            return jsonify({"error": e.message, "code": e.code}), 502
        return jsonify({**item.to_row(), "id": item.id, "assigned_to": item.assigned_to})
