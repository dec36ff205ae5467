"""Shared test fixtures."""

from datetime import UTC, datetime, timedelta

import pytest

from mojvis.config import DEFAULT_HOLIDAY_FILES
from mojvis.models.enums import Municipality, Tag, ViewerMode
from mojvis.models.holiday import HolidayCalendar, load_holiday_calendar
from mojvis.models.message import InboxMessage
from mojvis.models.viewer import ViewerContext


@pytest.fixture
def now() -> datetime:
    return datetime(2026, 7, 15, 10, 0, tzinfo=UTC)


@pytest.fixture
def holidays() -> HolidayCalendar:
    return load_holiday_calendar(DEFAULT_HOLIDAY_FILES)


@pytest.fixture
def visitor() -> ViewerContext:
    return ViewerContext(device_id="device-visitor", mode=ViewerMode.VISITOR)


@pytest.fixture
def local_a() -> ViewerContext:
    return ViewerContext(
        device_id="device-a", mode=ViewerMode.LOCAL, municipality=Municipality.MUNICIPALITY_A
    )


@pytest.fixture
def local_b() -> ViewerContext:
    return ViewerContext(
        device_id="device-b", mode=ViewerMode.LOCAL, municipality=Municipality.MUNICIPALITY_B
    )


@pytest.fixture
def general_message() -> InboxMessage:
    return InboxMessage(
        id="msg-general",
        title_hr="Obavijest o radu ureda",
        body_hr="Gradski ured radi skraćeno u petak.",
        title_en="Office hours notice",
        body_en="The town office closes early on Friday.",
        tags=[Tag.GENERAL],
    )


@pytest.fixture
def municipal_message() -> InboxMessage:
    return InboxMessage(
        id="msg-municipal-a",
        title_hr="Prekid vodoopskrbe",
        body_hr="Zbog radova na mreži voda neće biti od 8 do 12 sati.",
        tags=[Tag.MUNICIPALITY_A],
    )


@pytest.fixture
def urgent_message(now: datetime) -> InboxMessage:
    return InboxMessage(
        id="msg-urgent",
        title_hr="Otkazan trajekt",
        body_hr="Zbog nevremena otkazane su sve jutarnje linije.",
        title_en="Ferry cancelled",
        body_en="All morning sailings are cancelled due to the storm.",
        tags=[Tag.URGENT, Tag.SEA_TRANSPORT],
        active_from=now - timedelta(hours=1),
        active_to=now + timedelta(hours=5),
    )
