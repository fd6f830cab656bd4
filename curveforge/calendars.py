"""Exchange holiday calendars and business-day arithmetic."""

from __future__ import annotations

import abc
from datetime import date, timedelta

__all__ = [
    "CalendarBase",
    "CalendarNYSE",
    "CalendarLSE",
    "CalendarTSE",
    "CalendarHKEX",
    "CalendarSSE",
    "CalendarEuronext",
    "CalendarASX",
    "CalendarTSX",
    "CalendarNSE",
    "CalendarBSE",
]

_MONDAY = 0
_THURSDAY = 3
_SATURDAY = 5
_SUNDAY = 6

# Consecutive non-business days that may be skipped when stepping.
_MAX_SKIPPED_DAYS = 10

_ONE_DAY = timedelta(days=1)


def _is_weekend(day: date) -> bool:
    return day.weekday() in (_SATURDAY, _SUNDAY)


def _observed(day: date) -> date:
    """Move a Saturday holiday to Friday and a Sunday holiday to Monday."""
    weekday = day.weekday()
    if weekday == _SATURDAY:
        return day - _ONE_DAY
    if weekday == _SUNDAY:
        return day + _ONE_DAY
    return day


def _first_weekday(year: int, month: int, weekday: int) -> date:
    """First day of the month falling on ``weekday``."""
    day = date(year, month, 1)
    while day.weekday() != weekday:
        day += _ONE_DAY
    return day


def _last_weekday_on_or_before(day: date, weekday: int) -> date:
    while day.weekday() != weekday:
        day -= _ONE_DAY
    return day


def _easter_sunday(year: int) -> date:
    """Easter Sunday, approximated as the first Sunday of April."""
    return _first_weekday(year, 4, _SUNDAY)


def _observed_set(year: int, month_days: list[tuple[int, int]]) -> set[date]:
    return {_observed(date(year, month, day)) for month, day in month_days}


def _fixed_set(year: int, month_days: list[tuple[int, int]]) -> set[date]:
    return {date(year, month, day) for month, day in month_days}


def _indian_exchange_holidays(year: int) -> set[date]:
    holidays = _observed_set(year, [(1, 26), (8, 15), (10, 2), (12, 25)])
    holidays |= _fixed_set(year, [(3, 10), (4, 6), (5, 24), (7, 31), (11, 14), (11, 30)])
    holidays.add(_easter_sunday(year) - timedelta(days=2))
    return holidays


class CalendarBase(abc.ABC):
    """A trading calendar: weekends plus an exchange-specific holiday set."""

    @abc.abstractmethod
    def holidays(self, year: int) -> frozenset[date]:
        """Holidays the calendar recognises for ``year`` (weekends excluded)."""

    def is_holiday(self, date: date) -> bool:
        """True when ``date`` is a weekend day or an exchange holiday."""
        return _is_weekend(date) or date in self.holidays(date.year)

    def _step_to_business_day(self, start: date, step: timedelta, direction: str) -> date:
        candidate = start + step
        for _ in range(_MAX_SKIPPED_DAYS + 1):
            if not self.is_holiday(candidate):
                return candidate
            candidate += step
        raise RuntimeError(f"Cannot find {direction} business day")

    def next_business_day(self, date: date) -> date:
        """The first business day strictly after ``date``."""
        return self._step_to_business_day(date, _ONE_DAY, "next")

    def prev_business_day(self, date: date) -> date:
        """The last business day strictly before ``date``."""
        return self._step_to_business_day(date, -_ONE_DAY, "previous")

    def day_in_between(self, start: date, end: date) -> int:
        """Count the steps from ``start`` through business days until ``end`` is passed."""
        days = 0
        current = start
        while current <= end:
            current = self.next_business_day(current)
            days += 1
        return days


class CalendarNYSE(CalendarBase):
    """New York Stock Exchange."""

    def holidays(self, year: int) -> frozenset[date]:
        holidays = _observed_set(year, [(1, 1), (7, 4), (12, 25)])
        holidays.add(_first_weekday(year, 1, _MONDAY))
        holidays.add(_first_weekday(year, 2, _MONDAY))
        holidays.add(_first_weekday(year, 11, _THURSDAY))
        return frozenset(holidays)


class CalendarLSE(CalendarBase):
    """London Stock Exchange."""

    def holidays(self, year: int) -> frozenset[date]:
        holidays = _observed_set(year, [(1, 1), (12, 25), (12, 26)])
        easter = _easter_sunday(year)
        holidays.add(easter - timedelta(days=2))
        holidays.add(easter + _ONE_DAY)
        holidays.add(_first_weekday(year, 5, _MONDAY))
        holidays.add(_last_weekday_on_or_before(date(year, 5, 31), _MONDAY))
        holidays.add(_last_weekday_on_or_before(date(year, 8, 31), _MONDAY))
        return frozenset(holidays)


class CalendarTSE(CalendarBase):
    """Tokyo Stock Exchange."""

    def holidays(self, year: int) -> frozenset[date]:
        holidays = _observed_set(year, [(1, 1), (12, 23), (12, 25)])
        holidays |= _fixed_set(
            year,
            [(3, 20), (4, 29), (5, 3), (5, 4), (5, 5), (8, 11), (9, 23), (11, 3), (11, 23)],
        )
        for month in (1, 7, 9, 10):
            holidays.add(_first_weekday(year, month, _MONDAY))
        return frozenset(holidays)


class CalendarHKEX(CalendarBase):
    """Hong Kong Stock Exchange."""

    def holidays(self, year: int) -> frozenset[date]:
        holidays = _observed_set(year, [(1, 1), (7, 1), (10, 1), (12, 25)])
        holidays |= _fixed_set(
            year,
            [(2, 12), (2, 13), (2, 14), (4, 4), (5, 1), (6, 14), (9, 22), (10, 14)],
        )
        easter = _easter_sunday(year)
        holidays.add(easter - timedelta(days=2))
        holidays.add(easter + _ONE_DAY)
        return frozenset(holidays)


class CalendarSSE(CalendarBase):
    """Shanghai Stock Exchange."""

    def holidays(self, year: int) -> frozenset[date]:
        holidays = _observed_set(year, [(1, 1), (5, 1), (10, 1), (10, 2), (10, 3)])
        holidays |= _fixed_set(year, [(2, 12), (2, 13), (2, 14), (4, 4), (6, 14), (9, 22)])
        return frozenset(holidays)


class CalendarEuronext(CalendarBase):
    """Euronext."""

    def holidays(self, year: int) -> frozenset[date]:
        holidays = _observed_set(year, [(1, 1), (12, 25), (12, 26)])
        holidays |= _fixed_set(year, [(5, 1), (7, 14), (11, 1), (11, 11)])
        easter = _easter_sunday(year)
        holidays.add(easter - timedelta(days=2))
        holidays.add(easter + _ONE_DAY)
        holidays.add(easter + timedelta(days=39))
        holidays.add(easter + timedelta(days=50))
        return frozenset(holidays)


class CalendarASX(CalendarBase):
    """Australian Securities Exchange."""

    def holidays(self, year: int) -> frozenset[date]:
        holidays = _observed_set(year, [(1, 1), (1, 26), (12, 25), (12, 26)])
        holidays.add(date(year, 4, 25))
        easter = _easter_sunday(year)
        holidays.add(easter - timedelta(days=2))
        holidays.add(easter + _ONE_DAY)
        holidays.add(_first_weekday(year, 6, _MONDAY))
        holidays.add(_first_weekday(year, 10, _MONDAY))
        return frozenset(holidays)


class CalendarTSX(CalendarBase):
    """Toronto Stock Exchange."""

    def holidays(self, year: int) -> frozenset[date]:
        holidays = _observed_set(year, [(1, 1), (7, 1), (12, 25), (12, 26)])
        holidays.add(_first_weekday(year, 2, _MONDAY))
        easter = _easter_sunday(year)
        holidays.add(easter - timedelta(days=2))
        holidays.add(easter + _ONE_DAY)
        holidays.add(_last_weekday_on_or_before(date(year, 5, 24), _MONDAY))
        holidays.add(_first_weekday(year, 9, _MONDAY))
        holidays.add(_first_weekday(year, 10, _MONDAY))
        return frozenset(holidays)


class CalendarNSE(CalendarBase):
    """National Stock Exchange of India."""

    def holidays(self, year: int) -> frozenset[date]:
        return frozenset(_indian_exchange_holidays(year))


class CalendarBSE(CalendarBase):
    """Bombay Stock Exchange."""

    def holidays(self, year: int) -> frozenset[date]:
        return frozenset(_indian_exchange_holidays(year))