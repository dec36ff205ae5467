"""Push notification gating and device targeting.

The engine only decides *whether* an urgent message is pushed and *to
whom*. Sending goes through the push provider, and the caller marks the
message locked in storage once the push is out.
"""

from __future__ import annotations

import datetime
import logging
from typing import TYPE_CHECKING

from mojvis.eligibility.tags import is_aware, is_urgent, resolve_municipality
from mojvis.models.enums import Language, ViewerMode
from mojvis.models.push import PushContent

if TYPE_CHECKING:
    from collections.abc import Iterable

    from mojvis.models.message import InboxMessage
    from mojvis.models.push import PushTarget

log = logging.getLogger(__name__)


def should_trigger_push(
    tags: Iterable[str],
    active_from: datetime.datetime | None,
    active_to: datetime.datetime | None,
    now: datetime.datetime,
) -> bool:
    """Return True iff an urgent message with a full window is active at *now*.

    Both window bounds are inclusive. A bound or *now* without a timezone
    never triggers a push.
    """
    if not is_urgent(tags):
        return False
    if active_from is None or active_to is None:
        return False
    if not (is_aware(active_from) and is_aware(active_to) and is_aware(now)):
        log.debug("push not triggered: naive window bound or clock")
        return False
    return active_from <= now <= active_to


def build_push_content(message: InboxMessage) -> tuple[PushContent, PushContent | None]:
    """Return the Croatian payload and the English one, if the message has it."""
    hr = PushContent(title=message.title_hr, body=message.body_hr, inbox_message_id=message.id)
    if not message.has_english:
        return hr, None
    en = PushContent(
        title=message.title_en or "", body=message.body_en or "", inbox_message_id=message.id
    )
    return hr, en


def select_push_targets(
    message: InboxMessage,
    targets: Iterable[PushTarget],
) -> list[PushTarget]:
    """Narrow registered devices down to those that should receive *message*.

    - Devices that opted out of push never receive one.
    - Municipal messages reach only devices registered as locals of that
      municipality.
    - English-locale devices are skipped when the message has no English
      text; there is no fallback to Croatian.
    """
    municipality = resolve_municipality(message.tags)
    has_english = message.has_english
    selected: list[PushTarget] = []
    skipped_opt_out = 0
    skipped_scope = 0
    skipped_locale = 0

    for target in targets:
        if not target.push_opt_in:
            skipped_opt_out += 1
            continue
        if municipality is not None and (
            target.mode is not ViewerMode.LOCAL or target.municipality != municipality
        ):
            skipped_scope += 1
            continue
        if target.locale is Language.EN and not has_english:
            skipped_locale += 1
            continue
        selected.append(target)

    log.debug(
        "message=%s push targets=%d skipped_opt_out=%d skipped_scope=%d skipped_locale=%d",
        message.id,
        len(selected),
        skipped_opt_out,
        skipped_scope,
        skipped_locale,
    )
    return selected
