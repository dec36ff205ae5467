"""Viewer eligibility, active windows and banner placement."""

from __future__ import annotations

import datetime
import logging
from typing import TYPE_CHECKING

from mojvis.eligibility.tags import is_aware, is_urgent, resolve_municipality
from mojvis.models.enums import MUNICIPAL_TAGS, ScreenContext, Tag, ViewerMode

if TYPE_CHECKING:
    from collections.abc import Iterable

    from mojvis.models.message import InboxMessage
    from mojvis.models.viewer import ViewerContext

log = logging.getLogger(__name__)


def _log_decision(
    message: InboxMessage, viewer: ViewerContext, eligible: bool, reason: str
) -> None:
    log.debug(
        "message=%s device=%s mode=%s municipality=%s eligible=%s reason=%s",
        message.id,
        viewer.device_id,
        viewer.mode,
        viewer.municipality,
        eligible,
        reason,
    )


def _outside_window(message: InboxMessage, now: datetime.datetime) -> bool:
    if message.active_from is None and message.active_to is None:
        return False
    # A clock without a timezone cannot be placed in the window.
    if not is_aware(now):
        return True
    if message.active_from is not None and now < message.active_from:
        return True
    return message.active_to is not None and now > message.active_to


def is_eligible_for_viewer(
    message: InboxMessage,
    viewer: ViewerContext,
    now: datetime.datetime | None = None,
) -> bool:
    """Decide whether *viewer* may see *message*.

    Checks short-circuit in this order: soft delete, municipal scope, active
    window. Pass ``now=None`` for historical retrieval by id, which ignores
    the active window. A message with no window bounds is never filtered
    by time.
    """
    if message.is_deleted:
        _log_decision(message, viewer, False, "soft-deleted")
        return False

    municipality = resolve_municipality(message.tags)
    if municipality is not None:
        if viewer.mode is not ViewerMode.LOCAL:
            _log_decision(message, viewer, False, "visitor cannot see municipal message")
            return False
        if viewer.municipality != municipality:
            _log_decision(
                message, viewer, False, f"municipality mismatch: {municipality} vs {viewer.municipality}"
            )
            return False

    if now is not None and _outside_window(message, now):
        _log_decision(message, viewer, False, "outside active window")
        return False

    _log_decision(message, viewer, True, "eligible")
    return True


def is_within_active_window(message: InboxMessage, now: datetime.datetime) -> bool:
    """Return True if *now* falls inside the message's active window.

    Banner semantics: a message with neither bound set has no window and is
    never inside one. Either bound may be open-ended; both are inclusive.
    """
    if message.active_from is None and message.active_to is None:
        return False
    return not _outside_window(message, now)


def is_banner_eligible(
    message: InboxMessage,
    viewer: ViewerContext,
    now: datetime.datetime,
) -> bool:
    """Return True if *message* should be shown to *viewer* as a banner now."""
    if not is_eligible_for_viewer(message, viewer, now):
        return False
    if not is_within_active_window(message, now):
        _log_decision(message, viewer, False, "no active window")
        return False
    return True


def is_banner_for_screen(message: InboxMessage, screen: ScreenContext | str) -> bool:
    """Return True if a banner for *message* belongs on *screen*.

    - home: urgent, general or municipal messages (never culture)
    - road transport: road_transport or urgent
    - sea transport: sea_transport or urgent
    """
    try:
        screen = ScreenContext(screen)
    except ValueError:
        return False

    tags = message.tags
    match screen:
        case ScreenContext.HOME:
            return (
                is_urgent(tags)
                or Tag.GENERAL in tags
                or any(t in tags for t in MUNICIPAL_TAGS)
            )
        case ScreenContext.TRANSPORT_ROAD:
            return Tag.ROAD_TRANSPORT in tags or is_urgent(tags)
        case ScreenContext.TRANSPORT_SEA:
            return Tag.SEA_TRANSPORT in tags or is_urgent(tags)
    return False


def filter_eligible_messages(
    messages: Iterable[InboxMessage],
    viewer: ViewerContext,
    now: datetime.datetime | None = None,
) -> list[InboxMessage]:
    return [m for m in messages if is_eligible_for_viewer(m, viewer, now)]


def filter_banner_messages(
    messages: Iterable[InboxMessage],
    viewer: ViewerContext,
    now: datetime.datetime,
) -> list[InboxMessage]:
    return [m for m in messages if is_banner_eligible(m, viewer, now)]


def filter_banners_for_screen(
    messages: Iterable[InboxMessage],
    screen: ScreenContext | str,
) -> list[InboxMessage]:
    """Keep the (already banner-eligible) messages placed on *screen*."""
    return [m for m in messages if is_banner_for_screen(m, screen)]
