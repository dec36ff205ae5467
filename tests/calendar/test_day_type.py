"""Tests for holiday-aware day-type resolution."""

from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from mojvis.calendar.resolver import (
    DateParseError,
    date_key,
    format_date_for_display,
    get_day_type,
    get_holiday_info,
    is_holiday,
    is_same_day,
    to_civil_date,
    today,
)
from mojvis.models.enums import DayType, Language
from mojvis.models.holiday import HolidayCalendar, HolidayEntry


class TestGetDayType:
    @pytest.mark.parametrize(
        ("day", "expected"),
        [
            (date(2026, 3, 2), DayType.MON),
            (date(2026, 3, 3), DayType.TUE),
            (date(2026, 3, 4), DayType.WED),
            (date(2026, 3, 5), DayType.THU),
            (date(2026, 3, 6), DayType.FRI),
            (date(2026, 3, 7), DayType.SAT),
            (date(2026, 3, 8), DayType.SUN),
        ],
    )
    def test_explicit_weekdays(
        self, day: date, expected: DayType, holidays: HolidayCalendar
    ) -> None:
        assert get_day_type(day, holidays) is expected

    def test_holiday_on_wednesday(self, holidays: HolidayCalendar) -> None:
        remembrance_day = date(2026, 11, 18)
        assert remembrance_day.weekday() == 2
        assert get_day_type(remembrance_day, holidays) is DayType.HOLIDAY

    @pytest.mark.parametrize(
        "key", ["2026-01-01", "2026-04-05", "2026-04-06", "2026-06-04", "2026-12-26"]
    )
    def test_holidays_override_weekday(self, key: str, holidays: HolidayCalendar) -> None:
        assert get_day_type(key, holidays) is DayType.HOLIDAY

    def test_holiday_wire_value(self) -> None:
        assert DayType.HOLIDAY == "PRAZNIK"

    def test_string_input(self, holidays: HolidayCalendar) -> None:
        assert get_day_type("2026-03-04", holidays) is DayType.WED

    def test_aware_datetime_converted_to_local_zone(self, holidays: HolidayCalendar) -> None:
        # 23:30 UTC on Dec 24 is already Christmas in Zagreb (UTC+1).
        instant = datetime(2026, 12, 24, 23, 30, tzinfo=UTC)
        assert instant.date() == date(2026, 12, 24)
        assert get_day_type(instant, holidays) is DayType.HOLIDAY

    def test_summer_offset(self, holidays: HolidayCalendar) -> None:
        # 22:30 UTC on Aug 14 is 00:30 on Aug 15 in Zagreb (UTC+2).
        assert get_day_type(datetime(2026, 8, 14, 22, 30, tzinfo=UTC), holidays) is DayType.HOLIDAY
        assert get_day_type(datetime(2026, 8, 14, 21, 30, tzinfo=UTC), holidays) is DayType.FRI

    def test_naive_datetime_is_local_wall_clock(self, holidays: HolidayCalendar) -> None:
        assert get_day_type(datetime(2026, 12, 24, 23, 30), holidays) is DayType.THU

    def test_idempotent(self, holidays: HolidayCalendar) -> None:
        results = {get_day_type("2026-05-30", holidays) for _ in range(3)}
        assert results == {DayType.HOLIDAY}

    def test_independent_of_wall_clock(self, holidays: HolidayCalendar) -> None:
        key = "2026-07-01"
        instants = [
            datetime(2026, 7, 1, 0, 0, tzinfo=timezone(timedelta(hours=2))),
            datetime(2026, 7, 1, 12, 0, tzinfo=timezone(timedelta(hours=2))),
            datetime(2026, 7, 1, 21, 59, tzinfo=UTC),
        ]
        expected = get_day_type(key, holidays)
        assert all(get_day_type(i, holidays) is expected for i in instants)

    def test_empty_calendar_only_weekdays(self) -> None:
        empty = HolidayCalendar(timezone="Europe/Zagreb")
        assert get_day_type("2026-12-25", empty) is DayType.FRI


class TestDateParsing:
    @pytest.mark.parametrize(
        "value", ["", "2026-13-01", "2026-02-30", "26-01-01", "2026/01/01", "20260101", "tomorrow"]
    )
    def test_malformed_strings(self, value: str, holidays: HolidayCalendar) -> None:
        with pytest.raises(DateParseError):
            get_day_type(value, holidays)

    def test_unsupported_type(self, holidays: HolidayCalendar) -> None:
        with pytest.raises(DateParseError):
            get_day_type(20260101, holidays)  # type: ignore[arg-type]

    def test_parse_error_is_value_error(self) -> None:
        assert issubclass(DateParseError, ValueError)

    def test_surrounding_whitespace_allowed(self, holidays: HolidayCalendar) -> None:
        assert to_civil_date(" 2026-01-06 ", holidays.zone) == date(2026, 1, 6)


class TestHolidayHelpers:
    @pytest.mark.parametrize(
        "value",
        [
            date(2026, 6, 22),
            "2026-06-22",
            date(2026, 6, 23),
            datetime(2026, 6, 21, 22, 30, tzinfo=UTC),
            datetime(2026, 6, 22, 22, 30, tzinfo=UTC),
        ],
    )
    def test_key_lookup_agrees_with_is_holiday(self, value: object, holidays: HolidayCalendar) -> None:
        key = date_key(value, holidays)  # type: ignore[arg-type]
        assert (key in holidays) is is_holiday(value, holidays)  # type: ignore[arg-type]
        assert (get_day_type(value, holidays) is DayType.HOLIDAY) is is_holiday(value, holidays)  # type: ignore[arg-type]

    def test_holiday_info(self, holidays: HolidayCalendar) -> None:
        info = get_holiday_info("2026-05-01", holidays)
        assert isinstance(info, HolidayEntry)
        assert info.name_hr == "Praznik rada"
        assert info.name_en == "Labour Day"
        assert get_holiday_info("2026-05-02", holidays) is None

    def test_today_uses_calendar_zone(self, holidays: HolidayCalendar) -> None:
        assert today(holidays, datetime(2026, 3, 1, 23, 30, tzinfo=UTC)) == date(2026, 3, 2)

    def test_today_defaults_to_current_time(self, holidays: HolidayCalendar) -> None:
        assert isinstance(today(holidays), date)

    def test_is_same_day(self, holidays: HolidayCalendar) -> None:
        assert is_same_day(datetime(2026, 3, 1, 23, 30, tzinfo=UTC), "2026-03-02", holidays)
        assert not is_same_day("2026-03-01", date(2026, 3, 2), holidays)


class TestFormatDateForDisplay:
    def test_croatian(self, holidays: HolidayCalendar) -> None:
        assert format_date_for_display("2026-11-18", holidays) == "srijeda, 18. studenoga 2026."

    def test_english(self, holidays: HolidayCalendar) -> None:
        assert (
            format_date_for_display(date(2026, 11, 18), holidays, Language.EN)
            == "Wednesday, November 18, 2026"
        )

    def test_instant_shown_in_calendar_zone(self, holidays: HolidayCalendar) -> None:
        value = datetime(2026, 3, 1, 23, 30, tzinfo=UTC)
        assert format_date_for_display(value, holidays, "hr") == "ponedjeljak, 2. ožujka 2026."
        assert format_date_for_display(value, holidays, "en") == "Monday, March 2, 2026"

    def test_unknown_language_rejected(self, holidays: HolidayCalendar) -> None:
        with pytest.raises(ValueError):
            format_date_for_display("2026-11-18", holidays, "de")

    def test_malformed_date_raises(self, holidays: HolidayCalendar) -> None:
        with pytest.raises(DateParseError):
            format_date_for_display("18.11.2026", holidays)
