from datetime import date, timedelta

import pytest

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


class _AlwaysClosed(CalendarBase):
    def holidays(self, year):
        start = date(year, 1, 1)
        return frozenset(start + timedelta(days=n) for n in range(366)
                         if (start + timedelta(days=n)).year == year)


def test_nyse_independence_day_2023():
    assert CalendarNYSE().is_holiday(date(2023, 7, 4)) is True


def test_nyse_ordinary_weekday_is_business_day():
    assert CalendarNYSE().is_holiday(date(2023, 7, 5)) is False


def test_weekends_are_holidays():
    calendars = [
        CalendarNYSE(),
        CalendarLSE(),
        CalendarTSE(),
        CalendarHKEX(),
        CalendarSSE(),
        CalendarEuronext(),
        CalendarASX(),
        CalendarTSX(),
        CalendarNSE(),
        CalendarBSE(),
    ]
    saturday = [calendar.is_holiday(date(2023, 7, 8)) for calendar in calendars]
    sunday = [calendar.is_holiday(date(2023, 7, 9)) for calendar in calendars]
    assert saturday == [True] * len(calendars)
    assert sunday == [True] * len(calendars)


def test_saturday_christmas_observed_on_friday():
    assert date(2021, 12, 24) in CalendarNYSE().holidays(2021)
    assert CalendarNYSE().is_holiday(date(2021, 12, 24)) is True


def test_sunday_holiday_observed_on_monday():
    # 1 January 2023 is a Sunday.
    assert date(2023, 1, 2) in CalendarNYSE().holidays(2023)


def test_nyse_holiday_set_2025():
    expected = {
        date(2025, 1, 1),
        date(2025, 7, 4),
        date(2025, 12, 25),
        date(2025, 1, 6),
        date(2025, 2, 3),
        date(2025, 11, 6),
    }
    assert CalendarNYSE().holidays(2025) == expected


def test_lse_easter_and_bank_holidays_2024():
    holidays = CalendarLSE().holidays(2024)
    assert date(2024, 4, 5) in holidays
    assert date(2024, 4, 8) in holidays
    assert date(2024, 5, 6) in holidays
    assert date(2024, 5, 27) in holidays
    assert date(2024, 8, 26) in holidays


def test_euronext_ascension_and_whit_monday_2024():
    holidays = CalendarEuronext().holidays(2024)
    assert date(2024, 5, 16) in holidays
    assert date(2024, 5, 27) in holidays
    assert date(2024, 7, 14) in holidays


def test_tsx_victoria_day_2024():
    assert date(2024, 5, 20) in CalendarTSX().holidays(2024)


def test_asx_anzac_day():
    assert CalendarASX().is_holiday(date(2024, 4, 25)) is True


def test_tse_fixed_holidays():
    holidays = CalendarTSE().holidays(2024)
    assert {date(2024, 5, 3), date(2024, 5, 4), date(2024, 5, 5)} <= holidays


def test_hkex_and_sse_share_lunar_placeholders():
    hk = CalendarHKEX().holidays(2024)
    ss = CalendarSSE().holidays(2024)
    lunar = {date(2024, 2, 12), date(2024, 2, 13), date(2024, 2, 14)}
    assert lunar <= hk
    assert lunar <= ss


def test_nse_and_bse_agree():
    assert CalendarNSE().holidays(2024) == CalendarBSE().holidays(2024)
    assert date(2024, 4, 5) in CalendarNSE().holidays(2024)
    assert date(2024, 4, 8) not in CalendarNSE().holidays(2024)


def test_next_business_day_skips_holiday():
    assert CalendarNYSE().next_business_day(date(2023, 7, 3)) == date(2023, 7, 5)


def test_next_business_day_skips_weekend():
    assert CalendarNYSE().next_business_day(date(2023, 7, 7)) == date(2023, 7, 10)


def test_prev_business_day_skips_holiday():
    assert CalendarNYSE().prev_business_day(date(2023, 7, 5)) == date(2023, 7, 3)


def test_prev_business_day_skips_weekend():
    assert CalendarNYSE().prev_business_day(date(2023, 7, 10)) == date(2023, 7, 7)


def test_day_in_between_full_week():
    assert CalendarNYSE().day_in_between(date(2023, 7, 10), date(2023, 7, 14)) == 5


def test_day_in_between_same_day():
    assert CalendarNYSE().day_in_between(date(2023, 7, 10), date(2023, 7, 10)) == 1


def test_day_in_between_reversed_range():
    assert CalendarNYSE().day_in_between(date(2023, 7, 14), date(2023, 7, 10)) == 0


def test_no_business_day_found_raises():
    closed = _AlwaysClosed()
    with pytest.raises(RuntimeError):
        CalendarBase.next_business_day(closed, date(2023, 6, 1))
    with pytest.raises(RuntimeError):
        CalendarBase.prev_business_day(closed, date(2023, 6, 1))


def test_base_calendar_is_abstract():
    with pytest.raises(TypeError):
        CalendarBase()