from __future__ import annotations

from typing import Optional

from flask import Flask, request

from ..common.datetime_utils import parse_iso_date
from ..common.web import current_user_id, login_required, request_data, respond
from ..container import Container
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.exceptions import ValidationError
from .leave import record_label


def _optional_float(value) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError("Invalid coordinates")


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/attendance", methods=["GET"], endpoint="attendance_today")
    @login_required
    def attendance_today():
        def _today():
            user_id = current_user_id()
            record = service.get_today_record(user_id)
            return {
                "today": record,
                "status_label": record_label(record),
                "history": service.get_history_ui(user_id, limit=DEFAULT_HISTORY_LIMIT),
            }

        return respond(_today, failure_message="System error while loading attendance")

    @app.route("/attendance/history", methods=["GET"], endpoint="attendance_history")
    @login_required
    def attendance_history():
        limit = request.args.get("limit", DEFAULT_HISTORY_LIMIT, type=int)
        return respond(
            lambda: service.get_history_ui(current_user_id(), limit=limit),
            failure_message="System error while loading attendance history",
        )

    @app.route("/attendance/clock-in", methods=["POST"], endpoint="clock_in")
    @login_required
    def clock_in():
        data = request_data()
        return respond(
            lambda: service.clock_in(
                current_user_id(),
                latitude=_optional_float(data.get("latitude")),
                longitude=_optional_float(data.get("longitude")),
                location_label=data.get("location_name") or None,
            ),
            failure_message="System error while clocking in",
        )

    @app.route("/attendance/clock-out", methods=["POST"], endpoint="clock_out")
    @login_required
    def clock_out():
        data = request_data()
        return respond(
            lambda: service.clock_out(current_user_id(), str(data.get("attendance_id") or "")),
            failure_message="System error while clocking out",
        )

    @app.route("/attendance/leave", methods=["POST"], endpoint="submit_leave")
    @login_required
    def submit_leave():
        data = request_data()

        def _submit():
            raw_date = (data.get("date") or "").strip()
            try:
                attendance_date = parse_iso_date(raw_date) if raw_date else None
            except ValueError:
                raise ValidationError("Invalid date (YYYY-MM-DD)")
            return service.submit_leave(
                current_user_id(),
                data.get("category") or "",
                data.get("subtype"),
                attendance_date=attendance_date,
                notes=data.get("notes"),
            )

        return respond(_submit, failure_message="System error while submitting leave")
