from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.results import ActionResult
from ..container import Container
from .theme import ThemeSettings


def register(app: Flask, container: Container) -> None:
    @app.route("/preferences/theme", methods=["GET"], endpoint="get_theme")
    def get_theme():
        return jsonify(ActionResult.ok({"is_dark_mode": ThemeSettings(session).is_dark_mode()}).to_dict())

    @app.route("/preferences/theme/toggle", methods=["POST"], endpoint="toggle_theme")
    def toggle_theme():
        return jsonify(ActionResult.ok({"is_dark_mode": ThemeSettings(session).toggle()}).to_dict())
