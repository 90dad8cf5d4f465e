from __future__ import annotations

from flask import Flask, current_app, flash, redirect, request, session, url_for

from ..container import Container
from .store import THEME_COOKIE, UiPreferences


def current_preferences() -> UiPreferences:
    return UiPreferences(session, request.cookies)


def _back():
    target = request.form.get("next") or request.referrer
    # Only same-site paths
    if not target or not target.startswith("/") or target.startswith("//"):
        target = url_for("index")
    return redirect(target)


def register(app: Flask, container: Container) -> None:
    @app.context_processor
    def inject_preferences():
        prefs = current_preferences()
        return {
            "prefs": prefs,
            "current_username": session.get("username"),
        }

    @app.route("/preferences/sidebar", methods=["POST"], endpoint="toggle_sidebar")
    def toggle_sidebar():
        current_preferences().toggle_sidebar()
        return _back()

    @app.route("/preferences/sidebar/reset", methods=["POST"], endpoint="reset_sidebar")
    def reset_sidebar():
        current_preferences().reset_sidebar()
        return _back()

    @app.route("/preferences/theme", methods=["POST"], endpoint="toggle_theme")
    def toggle_theme():
        theme = current_preferences().toggle_theme()
        resp = _back()
        resp.set_cookie(
            THEME_COOKIE,
            theme.value,
            max_age=int(current_app.config.get("THEME_COOKIE_MAX_AGE", 365 * 24 * 3600)),
            samesite="Lax",
        )
        return resp

    @app.route("/session/user", methods=["POST"], endpoint="switch_user")
    def switch_user():
        """Pick the acting account used by My Leave and as leave approver."""
        username = (request.form.get("username") or "").strip()
        if not username:
            session.pop("username", None)
            flash("Acting user cleared.", "info")
            return _back()

        person = container.personnel_repo.get_by_username(username)
        if person is None:
            flash(f"No personnel with username {username}.", "danger")
            return _back()
        session["username"] = person.username
        flash(f"Now acting as {person.full_name}.", "success")
        return _back()
