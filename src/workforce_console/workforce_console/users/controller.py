from __future__ import annotations

import logging

from flask import Flask, jsonify, session

from ..common.results import ActionResult
from ..common.web import current_user_id, login_required, request_data, respond
from ..container import Container
from .service import SessionUser

logger = logging.getLogger(__name__)


def _store_session(user: SessionUser) -> None:
    session.clear()
    session["user_id"] = user.user_id
    session["name"] = user.full_name
    session["role"] = user.role.value
    session["is_admin"] = user.is_admin


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = request_data()

        def _login():
            user = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))
            _store_session(user)
            logger.info("Login %s (%s)", user.user_id, user.role.value)
            return user

        return respond(_login, failure_message="System error during login")

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify(ActionResult.ok().to_dict())

    @app.route("/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        user = container.auth_service.get_session_user(current_user_id())
        if not user:
            session.clear()
            return jsonify(ActionResult.fail("User not authenticated").to_dict()), 401
        return jsonify(ActionResult.ok(user).to_dict())
