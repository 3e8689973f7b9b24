from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..common.validators import require_person
from ..core.enums import AdPlatform
from ..core.exceptions import PersistenceError, ValidationError
from .messages import build_ads_message, build_leads_message, cost_per_result, parse_idr, whatsapp_share_url
from .model import AdReportEntry, AdReportRow, LeadReportForm
from .repository import ReportRepository

logger = logging.getLogger(__name__)

DEFAULT_AD_PLATFORM = AdPlatform.FACEBOOK
DEFAULT_CAMPAIGN_NAME = "Laporan Harian"


@dataclass(frozen=True)
class SubmittedReport:
    report_ids: list[str]
    message: str
    share_url: str


def compose_lead_notes(form: LeadReportForm) -> str:
    """Follow-up and berkas-masuk have no column; they ride along in notes."""
    notes = form.notes or ""
    if form.follow_up > 0:
        notes += f"\n[Follow Up: {form.follow_up}]"
    if form.berkas_masuk > 0:
        notes += f"\n[Berkas Masuk: {form.berkas_masuk}]"
    return notes.strip()


def ad_row_for(entry: AdReportEntry, *, report_date: date) -> AdReportRow:
    spent = parse_idr(entry.spent_budget)
    leads = parse_idr(entry.leads)
    return AdReportRow(
        profile_id=entry.marketer_id,
        report_date=report_date,
        platform=DEFAULT_AD_PLATFORM,
        campaign_name=DEFAULT_CAMPAIGN_NAME,
        total_spend=float(spent),
        leads_count=leads,
        cpr=cost_per_result(spent, leads),
        ctr=0.0,
        ai_summary=f"Budget Set: {entry.budget_set} | Note: {entry.keterangan}",
    )


class ReportService:
    """Use case: store daily lead/ad numbers and prepare the WhatsApp recap."""

    def __init__(self, reports: ReportRepository):
        self._reports = reports

    def create_lead_report(self, person_id: Optional[str], form: LeadReportForm, *, user_name: str) -> SubmittedReport:
        person_id = require_person(person_id)
        try:
            report_id = self._reports.create_lead_report(
                profile_id=person_id,
                report_date=form.report_date,
                total_leads=form.total_leads,
                call_count=form.call_count,
                slik_count=form.slik_count,
                visit_count=form.visit_count,
                notes=compose_lead_notes(form),
            )
        except PersistenceError as e:
            logger.error("Error creating report: %s", e)
            raise PersistenceError("Failed to create report") from e

        message = build_leads_message(user_name, form)
        return SubmittedReport(report_ids=[report_id], message=message, share_url=whatsapp_share_url(message))

    def create_ad_reports(
        self,
        person_id: Optional[str],
        entries: Sequence[AdReportEntry],
        *,
        report_date: date,
        user_name: str,
    ) -> SubmittedReport:
        require_person(person_id)
        if not entries:
            raise ValidationError("No ad reports queued")

        report_ids = []
        try:
            for entry in entries:
                report_ids.append(self._reports.create_ad_report(row=ad_row_for(entry, report_date=report_date)))
        except PersistenceError as e:
            logger.error("Error creating ad report: %s", e)
            raise PersistenceError("Failed to create ad report") from e

        message = build_ads_message(user_name, report_date, entries)
        return SubmittedReport(report_ids=report_ids, message=message, share_url=whatsapp_share_url(message))
