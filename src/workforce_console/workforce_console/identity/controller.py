from __future__ import annotations

from dataclasses import replace

from flask import Flask, jsonify, request, session

from ..common.datetime_utils import now_local
from ..common.results import ActionResult
from ..common.web import current_user_id, login_required, request_data, respond
from ..container import Container
from ..core.exceptions import ValidationError
from .model import IdentityRecord

FORM_KEY = "slik_form"
HISTORY_KEY = "slik_history"
HISTORY_SIZE = 5


def load_form() -> IdentityRecord:
    stored = session.get(FORM_KEY) or {}
    return IdentityRecord(**{k: str(v) for k, v in stored.items() if k in IdentityRecord.field_names()})


def save_form(record: IdentityRecord) -> IdentityRecord:
    session[FORM_KEY] = record.to_dict()
    return record


def register(app: Flask, container: Container) -> None:
    service = container.identity_service

    @app.route("/sliks/form", methods=["GET"], endpoint="slik_form")
    @login_required
    def slik_form():
        record = load_form()
        return jsonify(
            ActionResult.ok(
                {"form": record, "can_save": record.is_complete, "history": session.get(HISTORY_KEY, [])}
            ).to_dict()
        )

    @app.route("/sliks/form", methods=["PUT"], endpoint="slik_form_edit")
    @login_required
    def slik_form_edit():
        data = request_data()
        updates = {k: str(v) for k, v in data.items() if k in IdentityRecord.field_names() and v is not None}
        return respond(lambda: save_form(replace(load_form(), **updates)), failure_message="System error")

    @app.route("/sliks/extract", methods=["POST"], endpoint="slik_extract")
    @login_required
    def slik_extract():
        def _extract():
            photo = request.files.get("photo")
            if photo is None:
                raise ValidationError("No KTP photo to extract from")
            # On failure the stored form is left exactly as it was.
            record = service.extract_from_image(
                load_form(),
                photo.read(),
                mime_type=photo.mimetype or "image/jpeg",
            )
            return save_form(record)

        return respond(_extract, failure_message="System error during KTP extraction")

    @app.route("/sliks/paste", methods=["POST"], endpoint="slik_paste")
    @login_required
    def slik_paste():
        # Either {"raw_text": "..."} or the pasted text as the raw body.
        body = request.get_json(silent=True) if request.is_json else None
        if isinstance(body, dict) and "raw_text" in body:
            raw_text = body.get("raw_text")
        else:
            raw_text = request.get_data(as_text=True)
        return respond(
            lambda: save_form(service.normalize_from_json(load_form(), raw_text or "")),
            failure_message="System error while reading pasted data",
        )

    @app.route("/sliks/finalize", methods=["POST"], endpoint="slik_finalize")
    @login_required
    def slik_finalize():
        def _finalize():
            result = service.finalize(load_form(), created_by=current_user_id())
            save_form(result.form)
            now = now_local()
            entry = {
                "id": result.slik_id,
                "name": result.full_name,
                "date": now.strftime("%Y-%m-%d"),
                "time": now.strftime("%H:%M"),
            }
            session[HISTORY_KEY] = ([entry] + list(session.get(HISTORY_KEY, [])))[:HISTORY_SIZE]
            return result

        return respond(_finalize, failure_message="System error while saving KTP data")

    @app.route("/sliks/reset", methods=["POST"], endpoint="slik_reset")
    @login_required
    def slik_reset():
        return jsonify(ActionResult.ok(save_form(service.blank())).to_dict())
