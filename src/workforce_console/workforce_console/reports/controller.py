from __future__ import annotations

from dataclasses import asdict
from datetime import date

from flask import Flask, jsonify, session

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.results import ActionResult
from ..common.validators import non_negative_int, require_non_empty
from ..common.web import admin_required, current_user_id, login_required, request_data, respond
from ..container import Container
from ..core.exceptions import ValidationError
from .model import AdReportEntry, AdReportQueue, LeadReportForm

QUEUE_KEY = "ads_queue"


def _report_date(data: dict) -> date:
    raw = (data.get("report_date") or "").strip()
    if not raw:
        return now_local().date()
    try:
        return parse_iso_date(raw)
    except ValueError:
        raise ValidationError("Invalid report date (YYYY-MM-DD)")


def load_queue() -> AdReportQueue:
    return AdReportQueue(entries=[AdReportEntry(**e) for e in session.get(QUEUE_KEY, [])])


def save_queue(queue: AdReportQueue) -> AdReportQueue:
    session[QUEUE_KEY] = [asdict(e) for e in queue.entries]
    return queue


def register(app: Flask, container: Container) -> None:
    service = container.report_service

    @app.route("/reports/leads", methods=["POST"], endpoint="create_lead_report")
    @login_required
    def create_lead_report():
        data = request_data()

        def _create():
            form = LeadReportForm(
                report_date=_report_date(data),
                total_leads=non_negative_int(data.get("total_leads"), "Total leads"),
                call_count=non_negative_int(data.get("call_count"), "Calls"),
                slik_count=non_negative_int(data.get("slik_count"), "SLIK"),
                visit_count=non_negative_int(data.get("visit_count"), "Visits"),
                follow_up=non_negative_int(data.get("follow_up"), "Follow up"),
                berkas_masuk=non_negative_int(data.get("berkas_masuk"), "Berkas masuk"),
                notes=(data.get("notes") or ""),
            )
            return service.create_lead_report(current_user_id(), form, user_name=session.get("name", ""))

        return respond(_create, failure_message="System error while creating report")

    @app.route("/reports/marketers", methods=["GET"], endpoint="list_marketers")
    @admin_required
    def list_marketers():
        profiles = container.profiles_repo.list_active()
        return jsonify(ActionResult.ok([{"id": p.id, "full_name": p.full_name} for p in profiles]).to_dict())

    @app.route("/reports/ads/queue", methods=["GET"], endpoint="ads_queue")
    @admin_required
    def ads_queue():
        return jsonify(ActionResult.ok(load_queue().entries).to_dict())

    @app.route("/reports/ads/queue", methods=["POST"], endpoint="ads_queue_upsert")
    @admin_required
    def ads_queue_upsert():
        data = request_data()

        def _upsert():
            entry = AdReportEntry(
                marketer_id=require_non_empty(data.get("marketer_id"), "Marketer"),
                marketer_name=require_non_empty(data.get("marketer_name"), "Marketer name"),
                budget_set=str(data.get("budget_set") or ""),
                spent_budget=str(data.get("spent_budget") or ""),
                leads=str(data.get("leads") or ""),
                keterangan=str(data.get("keterangan") or ""),
            )
            queue = load_queue()
            queue.upsert(entry)
            return save_queue(queue).entries

        return respond(_upsert, failure_message="System error while queueing report")

    @app.route("/reports/ads/queue/<marketer_id>", methods=["DELETE"], endpoint="ads_queue_remove")
    @admin_required
    def ads_queue_remove(marketer_id: str):
        queue = load_queue()
        queue.remove(marketer_id)
        return jsonify(ActionResult.ok(save_queue(queue).entries).to_dict())

    @app.route("/reports/ads", methods=["POST"], endpoint="submit_ad_reports")
    @admin_required
    def submit_ad_reports():
        data = request_data()

        def _submit():
            queue = load_queue()
            result = service.create_ad_reports(
                current_user_id(),
                queue.entries,
                report_date=_report_date(data),
                user_name=session.get("name", ""),
            )
            queue.clear()
            save_queue(queue)
            return result

        return respond(_submit, failure_message="System error while sending ad reports")
