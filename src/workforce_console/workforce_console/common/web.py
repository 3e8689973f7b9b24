from __future__ import annotations

from functools import wraps
from typing import Any, Callable, Optional

from flask import jsonify, request, session

from .results import ActionResult, run_action


def current_user_id() -> Optional[str]:
    return session.get("user_id")


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify(ActionResult.fail("User not authenticated").to_dict()), 401
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify(ActionResult.fail("User not authenticated").to_dict()), 401
        if not session.get("is_admin"):
            return jsonify(ActionResult.fail("Forbidden").to_dict()), 403
        return view(*args, **kwargs)

    return wrapper


def request_data() -> dict:
    """JSON body or form fields, whichever the client sent."""
    if request.is_json:
        return request.get_json(silent=True) or {}
    return request.form.to_dict()


def respond(action: Callable[[], Any], *, failure_message: str):
    result, status = run_action(action, failure_message=failure_message)
    return jsonify(result.to_dict()), status
