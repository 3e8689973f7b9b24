"""WhatsApp hand-off text for the daily reports.

The message is only formatted here; delivery happens in the user's own
WhatsApp through a wa.me link.
"""

from __future__ import annotations

from datetime import date
from typing import Sequence
from urllib.parse import quote

from ..common.datetime_utils import format_long_id
from ..core.constants import WHATSAPP_SHARE_BASE
from .model import AdReportEntry, LeadReportForm

SEPARATOR = "----------------------------"

# Same escaping as JavaScript's encodeURIComponent.
_URI_SAFE = "-_.!~*'()"


def parse_idr(value: str) -> int:
    """'1.500.000' -> 1500000; blank -> 0."""
    digits = (value or "").replace(".", "").strip()
    if not digits:
        return 0
    try:
        return int(float(digits.replace(",", ".")))
    except ValueError:
        return 0


def format_thousands(value: float, decimals: int = 0) -> str:
    """Indonesian grouping: dot for thousands, comma for decimals."""
    text = f"{value:,.{decimals}f}"
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def format_idr(value: float, decimals: int = 0) -> str:
    return f"Rp {format_thousands(value, decimals)}"


def cost_per_result(spend: float, leads: int) -> float:
    return spend / leads if leads > 0 else 0.0


def build_leads_message(user_name: str, form: LeadReportForm) -> str:
    return (
        "*Laporan Harian Marketing*\n"
        "\n"
        f"{format_long_id(form.report_date)}\n"
        f"*{user_name}*\n"
        "\n"
        f"Total Respon : {form.total_leads or 0}\n"
        f"Total Follow UP : {form.follow_up or 0}\n"
        f"Total Call : {form.call_count or 0}\n"
        f"Total Slik : {form.slik_count or 0}\n"
        f"Berkas Masuk : {form.berkas_masuk or 0}\n"
        f"Total Ceklok : {form.visit_count or 0}\n"
        f"Keterangan : {form.notes or '-'}"
    )


def build_ads_message(user_name: str, report_date: date, entries: Sequence[AdReportEntry]) -> str:
    formatted_date = format_long_id(report_date)
    lines = ["*Laporan Harian Iklan*", "", formatted_date, f"*{user_name}*", ""]

    total_spent = 0
    total_leads = 0
    for entry in entries:
        budget = parse_idr(entry.budget_set)
        spent = parse_idr(entry.spent_budget)
        leads = parse_idr(entry.leads)
        total_spent += spent
        total_leads += leads

        lines.append(f"Marketing : {entry.marketer_name}")
        lines.append(f"Anggaran Harian : {format_idr(budget)}")
        lines.append(f"Penggunan : {format_idr(spent)}")
        lines.append(f"Database : {leads}")
        lines.append(f"Harga per Leads : {format_idr(cost_per_result(spent, leads), 2)}")
        lines.append(f"Keterangan : {entry.keterangan or '-'}")
        lines.append(SEPARATOR)

    lines.append("")
    lines.append(f"*Rekap Iklan {formatted_date}*")
    lines.append(f"Total Anggaran : {format_idr(total_spent)}")
    lines.append(f"Total Leads : {total_leads}")
    lines.append(f"Rata-Rata : {format_idr(cost_per_result(total_spent, total_leads), 2)}")
    return "\n".join(lines) + "\n"


def whatsapp_share_url(message: str) -> str:
    return f"{WHATSAPP_SHARE_BASE}?text={quote(message, safe=_URI_SAFE)}"
