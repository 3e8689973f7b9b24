from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Late clock-in."""

    def decide_clock_in(self, *, now: datetime) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.LATE)
