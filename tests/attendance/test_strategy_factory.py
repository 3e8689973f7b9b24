from datetime import datetime, time, timezone

from src.workforce_console.workforce_console.attendance.factory import AttendanceStrategyFactory
from src.workforce_console.workforce_console.attendance.strategies.late_strategy import LateStrategy
from src.workforce_console.workforce_console.attendance.strategies.on_time_strategy import OnTimeStrategy
from src.workforce_console.workforce_console.core.enums import AttendanceStatus


def test_factory_cutoff_is_work_start_plus_grace():
    assert AttendanceStrategyFactory().cutoff == time(9, 15)
    assert AttendanceStrategyFactory(work_start=time(8, 0), grace_minutes=5).cutoff == time(8, 5)


def test_factory_on_time_at_exact_cutoff():
    factory = AttendanceStrategyFactory()

    strategy = factory.for_clock_in(now=datetime(2026, 10, 19, 9, 15, 0))

    assert isinstance(strategy, OnTimeStrategy)


def test_factory_late_one_second_after_cutoff():
    factory = AttendanceStrategyFactory()

    strategy = factory.for_clock_in(now=datetime(2026, 10, 19, 9, 15, 1))

    assert isinstance(strategy, LateStrategy)


def test_factory_ignores_sub_second_part():
    factory = AttendanceStrategyFactory()

    strategy = factory.for_clock_in(now=datetime(2026, 10, 19, 9, 15, 0, 900000))

    assert isinstance(strategy, OnTimeStrategy)


def test_factory_compares_wall_clock_of_aware_datetime():
    factory = AttendanceStrategyFactory()

    strategy = factory.for_clock_in(now=datetime(2026, 10, 19, 9, 16, tzinfo=timezone.utc))

    assert isinstance(strategy, LateStrategy)


def test_strategies_decide_status():
    now = datetime(2026, 10, 19, 8, 0)

    assert OnTimeStrategy().decide_clock_in(now=now).status == AttendanceStatus.PRESENT
    assert LateStrategy().decide_clock_in(now=now).status == AttendanceStatus.LATE
