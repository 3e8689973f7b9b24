from __future__ import annotations

import uuid
from datetime import date

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor
from .model import AdReportRow
from .repository import ReportRepository


class MySQLReportRepository(ReportRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

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
        report_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO report_leads(
                    report_id, profile_id, report_date, total_leads, call_count, slik_count, visit_count, notes
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (report_id, profile_id, report_date, total_leads, call_count, slik_count, visit_count, notes),
            )
        return report_id

    def create_ad_report(self, *, row: AdReportRow) -> str:
        report_ads_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO report_ads(
                    report_ads_id, marketing_id, report_date, platform, campaign_name,
                    total_spend, leads_count, cpr, ctr, ai_summary
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    report_ads_id,
                    row.profile_id,
                    row.report_date,
                    row.platform.value,
                    row.campaign_name,
                    row.total_spend,
                    row.leads_count,
                    row.cpr,
                    row.ctr,
                    row.ai_summary,
                ),
            )
        return report_ads_id
