import pytest

from src.overtime_tracker.overtime_tracker.common.numbers import round_half_up
from src.overtime_tracker.overtime_tracker.payroll.calculator.standard_calculator import (
    StandardOvertimeCalculator,
    compute_overtime_amount,
    compute_overtime_hours,
    compute_overtime_rate,
)


def test_end_at_threshold_gives_no_overtime():
    assert compute_overtime_hours("16.30") == 0
    assert compute_overtime_hours("4.30") == 0


def test_regular_day_counts_from_half_past_four():
    assert compute_overtime_hours("18.30") == 2.0
    assert compute_overtime_hours("6.30") == 2.0
    assert compute_overtime_hours("4.45") == 0.25


def test_holiday_counts_from_eight():
    assert compute_overtime_hours("18.30", is_holiday=True) == 10.5
    assert compute_overtime_hours("3.00", is_holiday=True) == 7.0


def test_before_threshold_is_clamped_to_zero():
    assert compute_overtime_hours("3.00") == 0
    assert compute_overtime_hours("7:00", is_holiday=True) == 0


def test_hours_rounded_to_two_places():
    assert compute_overtime_hours("5.10") == 0.67
    assert compute_overtime_hours("17:20") == 0.83


def test_unreadable_end_time_gives_zero():
    assert compute_overtime_hours("abc") == 0
    assert compute_overtime_hours("") == 0


def test_overtime_rate():
    assert compute_overtime_rate(2400) == pytest.approx(12.5)
    assert compute_overtime_rate(2400, is_holiday=True) == pytest.approx(15.0)


def test_overtime_amount():
    assert compute_overtime_amount(3000, 2, False) == 31.25
    assert compute_overtime_amount(3000, 2, True) == 37.5
    assert compute_overtime_amount(1000, 1, False) == 5.21


def test_calculator_parts():
    calc = StandardOvertimeCalculator()
    assert calc.threshold_minutes(is_holiday=False) == 990
    assert calc.threshold_minutes(is_holiday=True) == 480
    assert calc.hourly_rate(2400) == pytest.approx(10.0)
    assert calc.multiplier(is_holiday=False) == 1.25
    assert calc.multiplier(is_holiday=True) == 1.5


def test_round_half_up_rounds_halves_away_from_zero():
    assert round_half_up(2.675) == 2.68
    assert round_half_up(0.125) == 0.13
    assert round_half_up(1.005) == 1.01
    assert round_half_up(2.0) == 2.0
    assert round_half_up(10.4166, 3) == 10.417


def test_oversized_tokens_give_zero_without_raising():
    assert compute_overtime_hours("1" + "0" * 400 + ":00") == 0
    assert compute_overtime_hours("9" * 5000 + ".00") == 0
    assert compute_overtime_hours("9" * 5000 + ".00", is_holiday=True) == 0


def test_large_but_finite_hour_still_computes():
    hours = compute_overtime_hours("1" + "0" * 30 + ":00")
    assert hours == pytest.approx(1e30)
