from __future__ import annotations

from datetime import date, datetime, time
from zoneinfo import ZoneInfo

from ..core.constants import DEFAULT_BUSINESS_TIMEZONE

_ID_WEEKDAYS = ("Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu", "Minggu")
_ID_MONTHS = (
    "Januari",
    "Februari",
    "Maret",
    "April",
    "Mei",
    "Juni",
    "Juli",
    "Agustus",
    "September",
    "Oktober",
    "November",
    "Desember",
)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_hhmm(value: str) -> time:
    """Parse HH:MM (or HH:MM:SS) into time."""
    value = value.strip()
    fmt = "%H:%M:%S" if value.count(":") == 2 else "%H:%M"
    return datetime.strptime(value, fmt).time()


def now_local(tz_name: str = DEFAULT_BUSINESS_TIMEZONE) -> datetime:
    """Current time in the business timezone.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(ZoneInfo(tz_name))


def to_business_time(value: datetime, tz_name: str = DEFAULT_BUSINESS_TIMEZONE) -> datetime:
    """Convert an aware datetime into the business timezone.

    Naive datetimes are assumed to already be business-local.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone(ZoneInfo(tz_name))


def format_long_id(value: date) -> str:
    """Long Indonesian date, e.g. 'Senin, 19 Oktober 2026'."""
    return f"{_ID_WEEKDAYS[value.weekday()]}, {value.day} {_ID_MONTHS[value.month - 1]} {value.year}"
