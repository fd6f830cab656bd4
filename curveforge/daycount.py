"""Day-count conventions turning a pair of dates into a year fraction."""

from __future__ import annotations

import abc
import calendar
import enum
import math
from datetime import date

__all__ = [
    "DayCountConvention",
    "DayCountConventionBase",
    "Act360",
    "Act365F",
    "ActAct",
    "Thirty360",
    "Thirty365",
    "ThirtyAct",
    "create_daycount_convention",
]


class DayCountConvention(enum.Enum):
    """Supported day-count conventions."""

    ACT_360 = enum.auto()
    ACT_365 = enum.auto()
    ACT_365F = enum.auto()
    ACT_ACT = enum.auto()
    THIRTY_360 = enum.auto()
    THIRTY_365 = enum.auto()
    THIRTY_365F = enum.auto()


def _round_half_away(value: float) -> int:
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def _thirty_day_count(start: date, end: date) -> int:
    start_day = min(start.day, 30)
    end_day = min(end.day, 30)
    return (end.year - start.year) * 360 + (end.month - start.month) * 30 + (end_day - start_day)


def _year_periods(start: date, end: date):
    """Split ``[start, end)`` at year boundaries, ordering the dates first."""
    if start > end:
        start, end = end, start
    current = start
    while current < end:
        following = min(date(current.year + 1, 1, 1), end)
        yield current, following
        current = following


class DayCountConventionBase(abc.ABC):
    """A rule measuring the time between two dates in years."""

    @abc.abstractmethod
    def __call__(self, start: date, end: date) -> float:
        """Year fraction from ``start`` to ``end``."""

    def year_fraction(self, start: date, end: date) -> float:
        """Year fraction from ``start`` to ``end``."""
        return self(start, end)

    def months_fraction(self, start: date, end: date) -> int:
        """Whole months between the dates, rounded half away from zero."""
        return _round_half_away(self.year_fraction(start, end) * 12.0)


class Act360(DayCountConventionBase):
    """Actual days over 360."""

    def __call__(self, start: date, end: date) -> float:
        return (end - start).days / 360.0


class Act365F(DayCountConventionBase):
    """Actual days over a fixed 365."""

    def __call__(self, start: date, end: date) -> float:
        return (end - start).days / 365.0


class ActAct(DayCountConventionBase):
    """Actual days over the actual length of each calendar year spanned."""

    def __call__(self, start: date, end: date) -> float:
        return sum(
            (following - current).days / (366.0 if calendar.isleap(current.year) else 365.0)
            for current, following in _year_periods(start, end)
        )


class Thirty360(DayCountConventionBase):
    """30-day months over 360."""

    def __call__(self, start: date, end: date) -> float:
        return _thirty_day_count(start, end) / 360.0


class Thirty365(DayCountConventionBase):
    """30-day months over 365."""

    def __call__(self, start: date, end: date) -> float:
        return _thirty_day_count(start, end) / 365.0


class ThirtyAct(DayCountConventionBase):
    """30/365 per calendar year spanned, scaled by 366/365 in leap years.

    Each yearly piece is measured from its end back to its start.
    """

    def __call__(self, start: date, end: date) -> float:
        thirty_365 = Thirty365()
        total = 0.0
        for current, following in _year_periods(start, end):
            piece = thirty_365(following, current)
            if calendar.isleap(current.year):
                piece = piece * 366 / 365
            total += piece
        return total


_CONVENTIONS: dict[DayCountConvention, type[DayCountConventionBase]] = {
    DayCountConvention.ACT_360: Act360,
    DayCountConvention.ACT_365F: Act365F,
    DayCountConvention.ACT_365: Act365F,
    DayCountConvention.ACT_ACT: ActAct,
    DayCountConvention.THIRTY_360: Thirty360,
    DayCountConvention.THIRTY_365: Thirty365,
    DayCountConvention.THIRTY_365F: ThirtyAct,
}


def create_daycount_convention(convention: DayCountConvention) -> DayCountConventionBase:
    """Build the day-count rule for ``convention``."""
    try:
        convention_type = _CONVENTIONS[convention]
    except (KeyError, TypeError):
        raise ValueError("Unknown DayCountConvention value") from None
    return convention_type()