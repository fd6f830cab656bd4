"""Exchange identifiers and construction of their holiday calendars."""

from __future__ import annotations

import enum

from curveforge.calendars import (
    CalendarASX,
    CalendarBase,
    CalendarBSE,
    CalendarEuronext,
    CalendarHKEX,
    CalendarLSE,
    CalendarNSE,
    CalendarNYSE,
    CalendarSSE,
    CalendarTSE,
    CalendarTSX,
)

__all__ = ["FinancialCalendar", "create_calendar", "name"]


class FinancialCalendar(enum.Enum):
    """Exchanges with a known holiday calendar."""

    NYSE = enum.auto()
    LSE = enum.auto()
    TSE = enum.auto()
    HKEX = enum.auto()
    SSE = enum.auto()
    Euronext = enum.auto()
    ASX = enum.auto()
    TSX = enum.auto()
    BSE = enum.auto()
    NSE = enum.auto()


_CALENDAR_TYPES: dict[FinancialCalendar, type[CalendarBase]] = {
    FinancialCalendar.NYSE: CalendarNYSE,
    FinancialCalendar.LSE: CalendarLSE,
    FinancialCalendar.TSE: CalendarTSE,
    FinancialCalendar.HKEX: CalendarHKEX,
    FinancialCalendar.SSE: CalendarSSE,
    FinancialCalendar.Euronext: CalendarEuronext,
    FinancialCalendar.ASX: CalendarASX,
    FinancialCalendar.TSX: CalendarTSX,
    FinancialCalendar.BSE: CalendarBSE,
    FinancialCalendar.NSE: CalendarNSE,
}

_NAMES: dict[FinancialCalendar, str] = {
    FinancialCalendar.NYSE: "New York Stock Exchange",
    FinancialCalendar.LSE: "London Stock Exchange",
    FinancialCalendar.TSE: "Tokyo Stock Exchange",
    FinancialCalendar.HKEX: "Hong Kong Stock Exchange",
    FinancialCalendar.SSE: "Shanghai Stock Exchange",
    FinancialCalendar.Euronext: "Euronext",
    FinancialCalendar.ASX: "Australian Securities Exchange",
    FinancialCalendar.TSX: "Toronto Stock Exchange",
    FinancialCalendar.BSE: "Bombay Stock Exchange",
    FinancialCalendar.NSE: "National Stock Exchange of India",
}


def create_calendar(calendar: FinancialCalendar) -> CalendarBase:
    """Build the holiday calendar of the given exchange."""
    try:
        calendar_type = _CALENDAR_TYPES[calendar]
    except (KeyError, TypeError):
        raise ValueError("Unknown FinancialCalendar value") from None
    return calendar_type()


def name(calendar: FinancialCalendar) -> str:
    """Full name of the exchange, or an empty string for an unknown value."""
    try:
        return _NAMES.get(calendar, "")
    except TypeError:
        return ""