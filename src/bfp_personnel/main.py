from __future__ import annotations

import importlib

from dotenv import load_dotenv
from flask import Flask, redirect, url_for

from config import get_settings_module

from .awards.controller import register as register_awards
from .clearance.controller import register as register_clearance
from .common.logger import get_logger, setup_logging
from .container import build_container
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .inspections.controller import register as register_inspections
from .inventory.controller import register as register_inventory
from .leave.controller import register as register_leave
from .personnel.controller import register as register_personnel
from .preferences.controller import register as register_preferences
from .recruitment.controller import register as register_recruitment
from .training.controller import register as register_training

logger = get_logger(__name__)

CONTROLLERS = (
    register_preferences,
    register_personnel,
    register_leave,
    register_clearance,
    register_awards,
    register_inventory,
    register_inspections,
    register_training,
    register_recruitment,
)


def create_app(container=None) -> Flask:
    """Build the Flask app; pass ``container`` to run against fakes."""
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["ADMIN_USERNAME"] = getattr(settings, "ADMIN_USERNAME", "admin")
    app.config["THEME_COOKIE_MAX_AGE"] = int(getattr(settings, "THEME_COOKIE_MAX_AGE", 365 * 24 * 3600))

    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            logger.info("schema ready (tables=%s)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config)
            logger.info("demo seed ready")
        container = build_container(
            db_config=db_config,
            local_store_path=getattr(settings, "LOCAL_STORE_PATH", "instance/local_store.json"),
        )

    for register in CONTROLLERS:
        register(app, container)

    @app.route("/", endpoint="index")
    def index():
        return redirect(url_for("personnel_register"))

    return app
