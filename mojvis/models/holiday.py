"""Holiday calendar models and JSON loading.

Holiday lists are static, versioned per calendar year and shipped as JSON
files (``holidays-<country>-<year>.json``). Nothing is fetched at runtime.
The host application loads them once at startup into an immutable
:class:`HolidayCalendar` and passes that object to the calendar resolver.
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Iterable
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    ValidationError,
    field_validator,
    model_validator,
)

log = logging.getLogger(__name__)


class HolidayConfigError(ValueError):
    """A holiday file is missing, malformed or inconsistent with the others."""


def _check_timezone(value: str) -> str:
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown timezone: {value!r}") from exc
    return value


class HolidayEntry(BaseModel):
    """A single public holiday."""

    date: datetime.date
    name_hr: str = Field(description="Croatian holiday name")
    name_en: str = Field(description="English holiday name")

    model_config = ConfigDict(frozen=True)


class HolidayFile(BaseModel):
    """Contents of one per-year holiday JSON file."""

    country: str
    year: int
    timezone: str
    holidays: list[HolidayEntry] = Field(default_factory=list)

    @field_validator("timezone")
    @classmethod
    def _valid_timezone(cls, value: str) -> str:
        return _check_timezone(value)


class HolidayCalendar(BaseModel):
    """Immutable holiday lookup for one civil timezone.

    ``keys`` holds the canonical ``YYYY-MM-DD`` date keys; membership is the
    only operation the resolver needs.
    """

    timezone: str = Field(description="IANA timezone used for all date conversions")
    holidays: tuple[HolidayEntry, ...] = ()
    years: tuple[int, ...] = ()

    model_config = ConfigDict(frozen=True)

    _by_key: dict[str, HolidayEntry] = PrivateAttr(default_factory=dict)

    @field_validator("timezone")
    @classmethod
    def _valid_timezone(cls, value: str) -> str:
        return _check_timezone(value)

    @model_validator(mode="after")
    def _no_duplicate_dates(self) -> HolidayCalendar:
        dates = [entry.date for entry in self.holidays]
        if len(set(dates)) != len(dates):
            raise ValueError("Holiday dates must be unique")
        return self

    def model_post_init(self, __context: object) -> None:
        self._by_key = {entry.date.isoformat(): entry for entry in self.holidays}

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @property
    def keys(self) -> frozenset[str]:
        return frozenset(self._by_key)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def __len__(self) -> int:
        return len(self._by_key)

    def entry(self, key: str) -> HolidayEntry | None:
        return self._by_key.get(key)


def read_holiday_file(path: Path) -> HolidayFile:
    """Parse and sanity-check a single holiday file."""
    try:
        data = HolidayFile.model_validate_json(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise HolidayConfigError(f"Holiday file not found: {path}") from exc
    except ValidationError as exc:
        raise HolidayConfigError(f"Invalid holiday file {path}: {exc}") from exc

    for entry in data.holidays:
        if entry.date.year != data.year:
            raise HolidayConfigError(
                f"{path}: holiday {entry.date.isoformat()} is outside declared year {data.year}"
            )
    return data


def load_holiday_calendar(
    paths: Iterable[Path],
    *,
    timezone: str | None = None,
) -> HolidayCalendar:
    """Merge one or more per-year holiday files into a single calendar.

    Args:
        paths: Holiday JSON files, one per year.
        timezone: Expected civil timezone. Defaults to the timezone declared
            by the first file; every file must agree with it.

    Raises:
        HolidayConfigError: on unreadable files, mismatched timezones,
            a year loaded twice, or a date listed twice.
    """
    entries: list[HolidayEntry] = []
    years: list[int] = []
    seen: set[datetime.date] = set()
    tz = timezone

    for path in paths:
        data = read_holiday_file(Path(path))
        if tz is None:
            tz = data.timezone
        elif data.timezone != tz:
            raise HolidayConfigError(
                f"{path}: timezone {data.timezone!r} does not match {tz!r}"
            )
        if data.year in years:
            raise HolidayConfigError(f"{path}: year {data.year} loaded twice")
        years.append(data.year)

        for entry in data.holidays:
            if entry.date in seen:
                raise HolidayConfigError(f"{path}: duplicate holiday {entry.date.isoformat()}")
            seen.add(entry.date)
            entries.append(entry)

        log.info("Loaded %d holidays for %s %d from %s", len(data.holidays), data.country, data.year, path)

    if tz is None:
        raise HolidayConfigError("No holiday files given and no timezone configured")

    try:
        return HolidayCalendar(
            timezone=tz,
            holidays=tuple(sorted(entries, key=lambda e: e.date)),
            years=tuple(sorted(years)),
        )
    except ValidationError as exc:
        raise HolidayConfigError(f"Invalid holiday calendar: {exc}") from exc
