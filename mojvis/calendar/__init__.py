"""Transport calendar: holiday-aware day-type resolution."""

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

__all__ = [
    "DateParseError",
    "date_key",
    "format_date_for_display",
    "get_day_type",
    "get_holiday_info",
    "is_holiday",
    "is_same_day",
    "to_civil_date",
    "today",
]
