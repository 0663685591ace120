import math

import pytest

from work_tracker.core.exceptions import (
    InvalidBreakTime,
    InvalidMultiplier,
    InvalidRate,
    InvalidTimeFormat,
    ValidationError,
)
from work_tracker.earnings.calculator import (
    EarningsCalculator,
    calculate,
    compute_deductions,
    compute_effective_rate,
    compute_gross,
    compute_hours,
    compute_net,
)
from work_tracker.earnings.deductions.bracket import BracketDeductionModel
from work_tracker.earnings.model import WorkSession


@pytest.mark.parametrize(
    "start, end, expected",
    [
        ("09:00", "17:00", 8.0),
        ("08:15", "12:45", 4.5),
        ("0:00", "23:59", 1439 / 60),
        ("9:05", "9:35", 0.5),
    ],
)
def test_same_day_hours_without_break(start, end, expected):
    assert compute_hours(start, end, 0) == expected


def test_overnight_shift_wraps_past_midnight():
    assert compute_hours("22:00", "06:00", 0) == 8.0


def test_equal_start_and_end_is_zero_hours():
    assert compute_hours("10:00", "10:00", 0) == 0.0


def test_break_longer_than_session_gives_zero_hours():
    assert compute_hours("09:00", "09:15", 30) == 0.0


def test_break_is_subtracted():
    assert compute_hours("09:00", "17:00", 60) == 7.0


@pytest.mark.parametrize("bad", ["24:00", "12:60", "1200", "12:5", "ab:cd", "", "12:00pm"])
def test_malformed_time_raises(bad):
    with pytest.raises(InvalidTimeFormat):
        compute_hours(bad, "17:00", 0)


def test_break_boundaries():
    assert compute_hours("00:00", "12:00", 480) == 4.0
    with pytest.raises(InvalidBreakTime):
        compute_hours("00:00", "12:00", 481)
    with pytest.raises(InvalidBreakTime):
        compute_hours("00:00", "12:00", -1)


def test_effective_rate_applies_multiplier_only_for_overtime():
    assert compute_effective_rate(20, True, 1.5) == 30
    assert compute_effective_rate(20, False, 1.5) == 20
    assert compute_effective_rate(20, True, 1.0) == 20


def test_multiplier_boundaries():
    assert compute_effective_rate(10, True, 3.0) == 30
    with pytest.raises(InvalidMultiplier):
        compute_effective_rate(10, True, 3.01)
    with pytest.raises(InvalidMultiplier):
        compute_effective_rate(10, False, 0.5)


def test_negative_rate_raises():
    with pytest.raises(InvalidRate):
        compute_effective_rate(-1, False, 1.0)


def test_gross_and_net():
    assert compute_gross(8, 30) == 240
    assert compute_net(240, 40) == 200


@pytest.mark.parametrize("gross", [0.0, 1.0, 175.0, 240.0, 1234.56, 98765.4321])
def test_flat_deductions_split_and_sum(gross):
    d = compute_deductions(gross)
    parts = d.federal_tax + d.provincial_tax + d.cpp_contribution + d.ei_contribution
    assert math.isclose(d.total_deductions, 0.146 * gross, rel_tol=1e-9, abs_tol=1e-12)
    assert math.isclose(parts, d.total_deductions, rel_tol=1e-9, abs_tol=1e-12)
    assert math.isclose(compute_net(gross, d.total_deductions), 0.854 * gross, rel_tol=1e-9, abs_tol=1e-12)
    assert min(d.federal_tax, d.provincial_tax, d.cpp_contribution, d.ei_contribution) >= 0


def test_flat_deduction_weights():
    d = compute_deductions(1000.0)
    assert d.federal_tax == pytest.approx(58.4)
    assert d.provincial_tax == pytest.approx(29.2)
    assert d.cpp_contribution == pytest.approx(36.5)
    assert d.ei_contribution == pytest.approx(21.9)


def test_end_to_end_regular_day():
    session = WorkSession(start_time="09:00", end_time="17:00", break_minutes=60, base_hourly_rate=25)

    b = calculate(session)

    assert b.total_hours == 7.0
    assert b.effective_hourly_rate == 25
    assert b.gross_earnings == pytest.approx(175.00)
    assert b.total_deductions == pytest.approx(25.55)
    assert b.net_earnings == pytest.approx(149.45)
    parts = b.federal_tax + b.provincial_tax + b.cpp_contribution + b.ei_contribution
    assert b.net_earnings == pytest.approx(b.gross_earnings - parts)


def test_end_to_end_overtime():
    session = WorkSession(
        start_time="09:00",
        end_time="17:00",
        base_hourly_rate=20,
        is_overtime=True,
        overtime_multiplier=1.5,
    )

    b = calculate(session)

    assert b.total_hours == 8.0
    assert b.effective_hourly_rate == 30
    assert b.gross_earnings == 240


def test_calculate_is_deterministic():
    session = WorkSession(start_time="21:37", end_time="05:11", break_minutes=17, base_hourly_rate=23.17)
    assert calculate(session) == calculate(session)


def test_calculator_uses_bound_deduction_model():
    session = WorkSession(start_time="09:00", end_time="13:00", base_hourly_rate=25)

    flat = EarningsCalculator().calculate(session)
    bracket = EarningsCalculator(BracketDeductionModel()).calculate(session)

    assert flat.gross_earnings == bracket.gross_earnings == 100
    assert flat.total_deductions == pytest.approx(14.6)
    assert bracket.total_deductions == pytest.approx(23.965)
    assert bracket.net_earnings == pytest.approx(100 - 23.965)


@pytest.mark.parametrize("gross", [-10, float("nan"), "100"])
def test_deductions_reject_invalid_gross(gross):
    with pytest.raises(ValidationError):
        compute_deductions(gross)
