"""Tag taxonomy rules: tag-set validation, urgent rules, municipal scoping."""

from __future__ import annotations

import datetime
from collections.abc import Iterable

from mojvis.models.enums import MUNICIPAL_TAGS, URGENT_CONTEXT_TAGS, Municipality, RejectionCode, Tag
from mojvis.models.result import VALID, Rejection, ValidationResult

MAX_TAGS = 2

_TAXONOMY: frozenset[str] = frozenset(t.value for t in Tag)


def is_aware(value: datetime.datetime) -> bool:
    return value.tzinfo is not None and value.utcoffset() is not None


def _naive_fields(
    active_from: datetime.datetime | None,
    active_to: datetime.datetime | None,
) -> list[str]:
    return [
        name
        for name, value in (("active_from", active_from), ("active_to", active_to))
        if value is not None and not is_aware(value)
    ]


def _naive_rejection(naive: list[str]) -> Rejection:
    return Rejection(
        code=RejectionCode.ACTIVE_WINDOW_INVALID,
        error=f"{' and '.join(naive)} must include a timezone.",
        field=",".join(naive),
    )


def validate_tag_rules(tags: Iterable[str], *, require_tag: bool = False) -> ValidationResult:
    """Validate a tag set against the fixed taxonomy.

    Rules, checked in order:
    - at most two tags (``TAGS_MAX_EXCEEDED``)
    - at least one tag when *require_tag* is set (``TAGS_EMPTY``)
    - no repeated tag (``TAGS_DUPLICATE``)
    - every tag from the taxonomy (``TAG_INVALID``)
    - not both municipal tags (``TAGS_DUAL_MUNICIPAL``)

    Urgent-specific rules are checked separately by
    :func:`validate_urgent_rules`.
    """
    tag_list = list(tags)

    if len(tag_list) > MAX_TAGS:
        return Rejection(
            code=RejectionCode.TAGS_MAX_EXCEEDED,
            error=f"Maximum {MAX_TAGS} tags allowed, got {len(tag_list)}.",
            field="tags",
        )

    if require_tag and not tag_list:
        return Rejection(
            code=RejectionCode.TAGS_EMPTY,
            error="At least one tag is required.",
            field="tags",
        )

    if len(set(tag_list)) != len(tag_list):
        return Rejection(
            code=RejectionCode.TAGS_DUPLICATE,
            error="Duplicate tags are not allowed.",
            field="tags",
        )

    for tag in tag_list:
        if tag not in _TAXONOMY:
            return Rejection(
                code=RejectionCode.TAG_INVALID,
                error=f"Tag {tag!r} is not a valid tag.",
                field="tags",
            )

    if all(t in tag_list for t in MUNICIPAL_TAGS):
        return Rejection(
            code=RejectionCode.TAGS_DUAL_MUNICIPAL,
            error="A message can belong to only one municipality.",
            field="tags",
        )

    return VALID


def validate_urgent_rules(
    tags: Iterable[str],
    active_from: datetime.datetime | None,
    active_to: datetime.datetime | None,
) -> ValidationResult:
    """Validate the extra rules an urgent message must satisfy.

    An urgent message needs exactly one context tag next to ``urgent`` and
    both ends of its active window, each timezone-aware. Non-urgent tag
    sets always pass.
    """
    tag_list = list(tags)
    if Tag.URGENT not in tag_list:
        return VALID

    others = [t for t in tag_list if t != Tag.URGENT]
    context = [t for t in others if t in URGENT_CONTEXT_TAGS]
    if len(others) != 1 or len(context) != 1:
        return Rejection(
            code=RejectionCode.URGENT_MISSING_CONTEXT,
            error=(
                "Urgent messages require exactly one context tag "
                f"({', '.join(sorted(URGENT_CONTEXT_TAGS))})."
            ),
            field="tags",
        )

    missing = [
        name
        for name, value in (("active_from", active_from), ("active_to", active_to))
        if value is None
    ]
    if missing:
        return Rejection(
            code=RejectionCode.URGENT_MISSING_DATES,
            error=f"Urgent messages require both active_from and active_to; missing {' and '.join(missing)}.",
            field=",".join(missing),
        )

    naive = _naive_fields(active_from, active_to)
    if naive:
        return _naive_rejection(naive)

    return VALID


def validate_active_window(
    active_from: datetime.datetime | None,
    active_to: datetime.datetime | None,
) -> ValidationResult:
    """Reject a window whose end does not come after its start.

    Bounds without a timezone are rejected before any comparison.
    """
    naive = _naive_fields(active_from, active_to)
    if naive:
        return _naive_rejection(naive)
    if active_from is not None and active_to is not None and active_from >= active_to:
        return Rejection(
            code=RejectionCode.ACTIVE_WINDOW_INVALID,
            error="active_to must be after active_from.",
            field="active_to",
        )
    return VALID


def validate_message_rules(
    tags: Iterable[str],
    active_from: datetime.datetime | None,
    active_to: datetime.datetime | None,
    *,
    require_tag: bool = False,
) -> ValidationResult:
    """Run every message rule and return the first rejection, if any."""
    tag_list = list(tags)
    for result in (
        validate_tag_rules(tag_list, require_tag=require_tag),
        validate_urgent_rules(tag_list, active_from, active_to),
        validate_active_window(active_from, active_to),
    ):
        if not result.valid:
            return result
    return VALID


def is_urgent(tags: Iterable[str]) -> bool:
    return Tag.URGENT in list(tags)


def is_municipal(tags: Iterable[str]) -> bool:
    return resolve_municipality(tags) is not None


def resolve_municipality(tags: Iterable[str]) -> Municipality | None:
    """Return the municipality a tag set is scoped to, if any.

    ``municipality_A`` wins if both municipal tags are present; validation
    rejects that combination, but persisted rows may predate the rule.
    """
    tag_list = list(tags)
    for tag in MUNICIPAL_TAGS:
        if tag in tag_list:
            return Municipality(tag.value)
    return None
