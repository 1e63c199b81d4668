from __future__ import annotations

from ...common.numbers import round_half_up
from ...core.constants import (
    DAYS_PER_MONTH,
    HOLIDAY_MULTIPLIER,
    HOLIDAY_THRESHOLD_MINUTES,
    HOURS_PER_DAY,
    REGULAR_MULTIPLIER,
    REGULAR_THRESHOLD_MINUTES,
)
from .base import OvertimeCalculator
from .time_parser import parse_end_time


class StandardOvertimeCalculator(OvertimeCalculator):
    """Standard rule: overtime starts at 16:30 (08:00 on holidays).

    Pay is base_salary / 30 days / 8 hours, times 1.25 (1.5 on holidays).
    """

    def threshold_minutes(self, *, is_holiday: bool) -> int:
        return HOLIDAY_THRESHOLD_MINUTES if is_holiday else REGULAR_THRESHOLD_MINUTES

    def overtime_hours(self, end_time: str, *, is_holiday: bool) -> float:
        parsed = parse_end_time(end_time)
        if parsed is None:
            return 0.0
        minutes = max(0, parsed.minutes - self.threshold_minutes(is_holiday=is_holiday))
        return round_half_up(minutes / 60)

    def hourly_rate(self, base_salary: float) -> float:
        return base_salary / DAYS_PER_MONTH / HOURS_PER_DAY

    def multiplier(self, *, is_holiday: bool) -> float:
        return HOLIDAY_MULTIPLIER if is_holiday else REGULAR_MULTIPLIER

    def overtime_amount(self, base_salary: float, hours: float, *, is_holiday: bool) -> float:
        return round_half_up(self.overtime_rate(base_salary, is_holiday=is_holiday) * hours)


_standard = StandardOvertimeCalculator()


def compute_overtime_hours(end_time: str, is_holiday: bool = False) -> float:
    return _standard.overtime_hours(end_time, is_holiday=is_holiday)


def compute_overtime_rate(base_salary: float, is_holiday: bool = False) -> float:
    return _standard.overtime_rate(base_salary, is_holiday=is_holiday)


def compute_overtime_amount(base_salary: float, hours: float, is_holiday: bool = False) -> float:
    return _standard.overtime_amount(base_salary, hours, is_holiday=is_holiday)
