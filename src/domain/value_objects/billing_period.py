from __future__ import annotations

from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date

# The pharmacy closes its books on the 25th; a period runs 26th -> 25th.
PERIOD_START_DAY = 26
PERIOD_END_DAY = 25


@dataclass(slots=True, frozen=True)
class BillingPeriod:
    """Inclusive ``[start_date, end_date]`` reporting window.

    The period named by ``(month, year)`` ends on the 25th of that month and
    starts on the 26th of the month before it, so January's period begins in
    December of the previous year.
    """

    month: int
    year: int
    start_date: date
    end_date: date

    @classmethod
    def resolve(cls, month: int, year: int) -> BillingPeriod:
        if not 1 <= month <= 12:
            raise ValueError(f"month must be between 1 and 12, got {month}")
        # January needs year - 1 to exist as well
        if not MINYEAR <= year <= MAXYEAR or (month == 1 and year == MINYEAR):
            raise ValueError(f"year out of range for month {month}: {year}")
        if month == 1:
            start = date(year - 1, 12, PERIOD_START_DAY)
        else:
            start = date(year, month - 1, PERIOD_START_DAY)
        return cls(
            month=month,
            year=year,
            start_date=start,
            end_date=date(year, month, PERIOD_END_DAY),
        )

    @classmethod
    def containing(cls, day: date) -> BillingPeriod:
        """Return the period ``day`` belongs to (26th onwards rolls forward)."""
        if day.day <= PERIOD_END_DAY:
            return cls.resolve(day.month, day.year)
        if day.month == 12:
            return cls.resolve(1, day.year + 1)
        return cls.resolve(day.month + 1, day.year)

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date
