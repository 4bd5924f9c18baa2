from __future__ import annotations

from datetime import date

import pytest

from src.domain.value_objects.billing_period import BillingPeriod


@pytest.mark.parametrize("month", range(1, 13))
def test_period_runs_from_26th_of_previous_month_to_25th(month: int):
    period = BillingPeriod.resolve(month, 2024)
    assert period.end_date == date(2024, month, 25)
    assert period.start_date.day == 26
    if month == 1:
        assert (period.start_date.year, period.start_date.month) == (2023, 12)
    else:
        assert (period.start_date.year, period.start_date.month) == (2024, month - 1)


def test_january_crosses_into_previous_year():
    period = BillingPeriod.resolve(1, 2025)
    assert period.start_date == date(2024, 12, 26)
    assert period.end_date == date(2025, 1, 25)


def test_march_of_leap_year_starts_in_february():
    period = BillingPeriod.resolve(3, 2024)
    assert period.start_date == date(2024, 2, 26)
    assert period.end_date == date(2024, 3, 25)


@pytest.mark.parametrize("month", [0, 13, -1])
def test_out_of_range_month_is_rejected(month: int):
    with pytest.raises(ValueError):
        BillingPeriod.resolve(month, 2024)


def test_year_without_previous_december_is_rejected():
    with pytest.raises(ValueError):
        BillingPeriod.resolve(1, 1)


def test_contains_is_inclusive_on_both_ends():
    period = BillingPeriod.resolve(2, 2024)
    assert period.contains(date(2024, 1, 26))
    assert period.contains(date(2024, 2, 25))
    assert not period.contains(date(2024, 1, 25))
    assert not period.contains(date(2024, 2, 26))


@pytest.mark.parametrize(
    ("day", "expected"),
    [
        (date(2024, 2, 25), (2, 2024)),
        (date(2024, 2, 26), (3, 2024)),
        (date(2024, 1, 1), (1, 2024)),
        (date(2024, 12, 26), (1, 2025)),
        (date(2024, 12, 31), (1, 2025)),
    ],
)
def test_containing_picks_the_period_a_day_belongs_to(day: date, expected: tuple[int, int]):
    period = BillingPeriod.containing(day)
    assert (period.month, period.year) == expected
    assert period.contains(day)
