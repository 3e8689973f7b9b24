from datetime import date

import pytest

from src.workforce_console.workforce_console.core.enums import AdPlatform
from src.workforce_console.workforce_console.core.exceptions import (
    AuthenticationError,
    PersistenceError,
    ValidationError,
)
from src.workforce_console.workforce_console.reports.model import AdReportEntry, AdReportQueue, LeadReportForm
from src.workforce_console.workforce_console.reports.service import ReportService, compose_lead_notes


class BrokenReports:
    def create_lead_report(self, **kwargs):
        raise PersistenceError("Table 'report_leads' doesn't exist")

    def create_ad_report(self, *, row):
        raise PersistenceError("Table 'report_ads' doesn't exist")


def _form(**overrides):
    values = dict(report_date=date(2026, 10, 19), total_leads=10, call_count=4)
    values.update(overrides)
    return LeadReportForm(**values)


def test_compose_lead_notes():
    assert compose_lead_notes(_form(notes="ramai", follow_up=3, berkas_masuk=1)) == (
        "ramai\n[Follow Up: 3]\n[Berkas Masuk: 1]"
    )
    assert compose_lead_notes(_form(follow_up=2)) == "[Follow Up: 2]"
    assert compose_lead_notes(_form()) == ""


def test_create_lead_report(reports_repo):
    svc = ReportService(reports_repo)

    result = svc.create_lead_report("p1", _form(follow_up=2), user_name="Andika")

    assert result.report_ids == ["lead-1"]
    assert reports_repo.leads[0]["profile_id"] == "p1"
    assert reports_repo.leads[0]["notes"] == "[Follow Up: 2]"
    assert "*Andika*" in result.message
    assert result.share_url.startswith("https://wa.me/?text=")


def test_create_lead_report_store_failure():
    svc = ReportService(BrokenReports())

    with pytest.raises(PersistenceError, match="Failed to create report"):
        svc.create_lead_report("p1", _form(), user_name="Andika")


def test_create_lead_report_requires_person(reports_repo):
    with pytest.raises(AuthenticationError):
        ReportService(reports_repo).create_lead_report(None, _form(), user_name="")


def test_create_ad_reports_one_row_per_entry(reports_repo):
    svc = ReportService(reports_repo)
    entries = [
        AdReportEntry("m1", "Budi", budget_set="200.000", spent_budget="150.000", leads="3", keterangan="ok"),
        AdReportEntry("m2", "Sari", spent_budget="50.000"),
    ]

    result = svc.create_ad_reports("admin", entries, report_date=date(2026, 10, 19), user_name="Admin")

    assert result.report_ids == ["ad-1", "ad-2"]
    first = reports_repo.ads[0]
    assert first.profile_id == "m1"
    assert first.platform == AdPlatform.FACEBOOK
    assert first.total_spend == 150000.0
    assert first.cpr == 50000.0
    assert first.ai_summary == "Budget Set: 200.000 | Note: ok"
    assert reports_repo.ads[1].cpr == 0.0


def test_create_ad_reports_empty_queue(reports_repo):
    with pytest.raises(ValidationError):
        ReportService(reports_repo).create_ad_reports("admin", [], report_date=date(2026, 10, 19), user_name="A")


def test_queue_keeps_one_entry_per_marketer_sorted():
    queue = AdReportQueue()
    queue.upsert(AdReportEntry("m2", "sari", leads="1"))
    queue.upsert(AdReportEntry("m1", "Budi", leads="2"))
    queue.upsert(AdReportEntry("m2", "Sari", leads="5"))

    assert [e.marketer_name for e in queue.entries] == ["Budi", "Sari"]
    assert queue.get("m2").leads == "5"
    assert queue.edit_form_for("m3", "Rina").leads == ""

    queue.remove("m1")
    assert len(queue) == 1
    queue.clear()
    assert len(queue) == 0
