from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time, timedelta

from ..core.constants import DEFAULT_LATE_GRACE_MINUTES, DEFAULT_WORK_START
from .strategies.base import AttendanceStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.on_time_strategy import OnTimeStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on the late cutoff."""

    work_start: time = DEFAULT_WORK_START
    grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES

    @property
    def cutoff(self) -> time:
        start = datetime.combine(datetime.min.date(), self.work_start)
        return (start + timedelta(minutes=self.grace_minutes)).time()

    def for_clock_in(self, *, now: datetime) -> AttendanceStrategy:
        # Whole seconds only: 09:15:00.900 still counts as 09:15:00.
        local_time = now.time().replace(microsecond=0, tzinfo=None)
        if local_time > self.cutoff:
            return LateStrategy()
        return OnTimeStrategy()
