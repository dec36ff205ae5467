"""Viewer context extraction from request headers.

Headers:
- ``X-Device-ID``: anonymous device identifier
- ``X-User-Mode``: ``visitor`` or ``local``
- ``X-Municipality``: required for local users
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mojvis.models.enums import Municipality, RejectionCode, ViewerMode
from mojvis.models.result import Rejection
from mojvis.models.viewer import ViewerContext, ViewerContextOk

if TYPE_CHECKING:
    from collections.abc import Mapping

log = logging.getLogger(__name__)

DEVICE_ID_HEADER = "x-device-id"
USER_MODE_HEADER = "x-user-mode"
MUNICIPALITY_HEADER = "x-municipality"


def parse_viewer_context(headers: Mapping[str, str | None]) -> ViewerContextOk | Rejection:
    """Build a validated :class:`ViewerContext` from request headers.

    Header names are matched case-insensitively. A missing or unknown mode
    means visitor, and a visitor's municipality header is ignored. A local
    user without a valid municipality is rejected with
    ``MUNICIPALITY_REQUIRED``.
    """
    normalized = {k.lower(): (v or "").strip() for k, v in headers.items()}

    device_id = normalized.get(DEVICE_ID_HEADER) or "anonymous"
    mode = ViewerMode.LOCAL if normalized.get(USER_MODE_HEADER) == ViewerMode.LOCAL else ViewerMode.VISITOR
    raw_municipality = normalized.get(MUNICIPALITY_HEADER, "")

    if mode is ViewerMode.VISITOR:
        if raw_municipality:
            log.debug("Ignoring municipality %r for visitor device %s", raw_municipality, device_id)
        return ViewerContextOk(context=ViewerContext(device_id=device_id, mode=mode))

    try:
        municipality = Municipality(raw_municipality)
    except ValueError:
        return Rejection(
            code=RejectionCode.MUNICIPALITY_REQUIRED,
            error="Local users must select a municipality.",
            field=MUNICIPALITY_HEADER,
        )

    return ViewerContextOk(
        context=ViewerContext(device_id=device_id, mode=mode, municipality=municipality)
    )
