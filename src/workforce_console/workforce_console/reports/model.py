from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import List, Optional

from ..core.enums import AdPlatform


@dataclass(frozen=True)
class LeadReportForm:
    """Daily marketing numbers as typed into the leads form."""

    report_date: date
    total_leads: int = 0
    call_count: int = 0
    slik_count: int = 0
    visit_count: int = 0
    follow_up: int = 0
    berkas_masuk: int = 0
    notes: str = ""


@dataclass(frozen=True)
class AdReportRow:
    profile_id: str
    report_date: date
    platform: AdPlatform
    campaign_name: str
    total_spend: float
    leads_count: int
    cpr: float
    ctr: float
    ai_summary: str


@dataclass(frozen=True)
class AdReportEntry:
    """One marketer's numbers in the ads queue. Currency fields stay as typed ('1.500.000')."""

    marketer_id: str
    marketer_name: str
    budget_set: str = ""
    spent_budget: str = ""
    leads: str = ""
    keterangan: str = ""


@dataclass
class AdReportQueue:
    """Pending ads entries: at most one per marketer, kept sorted by name."""

    entries: List[AdReportEntry] = field(default_factory=list)

    def upsert(self, entry: AdReportEntry) -> None:
        others = [e for e in self.entries if e.marketer_id != entry.marketer_id]
        self.entries = sorted(others + [entry], key=lambda e: e.marketer_name.casefold())

    def remove(self, marketer_id: str) -> None:
        self.entries = [e for e in self.entries if e.marketer_id != marketer_id]

    def get(self, marketer_id: str) -> Optional[AdReportEntry]:
        for e in self.entries:
            if e.marketer_id == marketer_id:
                return e
        return None

    def edit_form_for(self, marketer_id: str, marketer_name: str) -> AdReportEntry:
        """Prefill the modal with the queued entry, or a blank one."""
        existing = self.get(marketer_id)
        if existing:
            return replace(existing, marketer_name=marketer_name)
        return AdReportEntry(marketer_id=marketer_id, marketer_name=marketer_name)

    def clear(self) -> None:
        self.entries = []

    def __len__(self) -> int:
        return len(self.entries)
