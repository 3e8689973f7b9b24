from __future__ import annotations

from datetime import date
from typing import Protocol

from .model import AdReportRow


class ReportRepository(Protocol):
    def create_lead_report(
        self,
        *,
        profile_id: str,
        report_date: date,
        total_leads: int,
        call_count: int,
        slik_count: int,
        visit_count: int,
        notes: str,
    ) -> str:
        raise NotImplementedError

    def create_ad_report(self, *, row: AdReportRow) -> str:
        raise NotImplementedError
