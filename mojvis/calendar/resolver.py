"""Day-type resolution for transport schedules.

Every conversion goes through the holiday calendar's civil timezone so that
instants close to midnight land on the same day everywhere. A holiday
(PRAZNIK) always outranks the weekday it falls on.
"""

from __future__ import annotations

import datetime
import re
from typing import TYPE_CHECKING

from mojvis.models.enums import WEEKDAY_DAY_TYPES, DayType, Language

if TYPE_CHECKING:
    from zoneinfo import ZoneInfo

    from mojvis.models.holiday import HolidayCalendar, HolidayEntry

DateInput = datetime.date | datetime.datetime | str

_DATE_KEY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Monday first, matching date.weekday().
WEEKDAY_NAMES: dict[Language, tuple[str, ...]] = {
    Language.HR: ("ponedjeljak", "utorak", "srijeda", "četvrtak", "petak", "subota", "nedjelja"),
    Language.EN: ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
}

# Croatian months in the genitive, as used after a day number.
MONTH_NAMES: dict[Language, tuple[str, ...]] = {
    Language.HR: (
        "siječnja",
        "veljače",
        "ožujka",
        "travnja",
        "svibnja",
        "lipnja",
        "srpnja",
        "kolovoza",
        "rujna",
        "listopada",
        "studenoga",
        "prosinca",
    ),
    Language.EN: (
        "January",
        "February",
        "March",
        "April",
        "May",
        "June",
        "July",
        "August",
        "September",
        "October",
        "November",
        "December",
    ),
}


class DateParseError(ValueError):
    """A date input could not be interpreted as a civil date."""


def to_civil_date(value: DateInput, zone: ZoneInfo) -> datetime.date:
    """Normalize *value* to a calendar date in *zone*.

    - ``date``: used as-is.
    - timezone-aware ``datetime``: converted to *zone* first.
    - naive ``datetime``: taken as wall-clock time in *zone*.
    - ``str``: must be ``YYYY-MM-DD``.
    """
    if isinstance(value, datetime.datetime):
        if value.tzinfo is not None and value.utcoffset() is not None:
            return value.astimezone(zone).date()
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not _DATE_KEY_RE.match(text):
            raise DateParseError(f"Expected a YYYY-MM-DD date, got {value!r}")
        try:
            return datetime.date.fromisoformat(text)
        except ValueError as exc:
            raise DateParseError(f"Invalid calendar date: {value!r}") from exc
    raise DateParseError(f"Unsupported date input type: {type(value).__name__}")


def date_key(value: DateInput, holidays: HolidayCalendar) -> str:
    """Canonical ``YYYY-MM-DD`` key of *value* in the calendar's timezone."""
    return to_civil_date(value, holidays.zone).isoformat()


def is_holiday(value: DateInput, holidays: HolidayCalendar) -> bool:
    return date_key(value, holidays) in holidays


def get_holiday_info(value: DateInput, holidays: HolidayCalendar) -> HolidayEntry | None:
    """Return the holiday falling on *value*, or None on ordinary days."""
    return holidays.entry(date_key(value, holidays))


def get_day_type(value: DateInput, holidays: HolidayCalendar) -> DayType:
    """Resolve the schedule day type for *value*.

    Returns ``DayType.HOLIDAY`` for any date in *holidays*, otherwise the
    explicit weekday. There is no generic "weekday" type: schedules differ
    per day.

    Raises:
        DateParseError: if *value* is not a usable date.
    """
    day = to_civil_date(value, holidays.zone)
    if day.isoformat() in holidays:
        return DayType.HOLIDAY
    return WEEKDAY_DAY_TYPES[day.weekday()]


def today(holidays: HolidayCalendar, now: datetime.datetime | None = None) -> datetime.date:
    """Current civil date in the calendar's timezone."""
    if now is None:
        now = datetime.datetime.now(datetime.UTC)
    return to_civil_date(now, holidays.zone)


def is_same_day(a: DateInput, b: DateInput, holidays: HolidayCalendar) -> bool:
    return date_key(a, holidays) == date_key(b, holidays)


def format_date_for_display(
    value: DateInput,
    holidays: HolidayCalendar,
    language: Language | str = Language.HR,
) -> str:
    """Long human-readable date in the calendar's timezone.

    ``hr``: ``srijeda, 18. studenoga 2026.``
    ``en``: ``Wednesday, November 18, 2026``
    """
    lang = Language(language)
    day = to_civil_date(value, holidays.zone)
    weekday = WEEKDAY_NAMES[lang][day.weekday()]
    month = MONTH_NAMES[lang][day.month - 1]
    if lang is Language.HR:
        return f"{weekday}, {day.day}. {month} {day.year}."
    return f"{weekday}, {month} {day.day}, {day.year}"
