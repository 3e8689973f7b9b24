from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from ...core.enums import AttendanceStatus


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide a clock-in status."""

    @abstractmethod
    def decide_clock_in(self, *, now: datetime) -> StatusDecision:
        raise NotImplementedError
