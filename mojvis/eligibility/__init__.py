"""Inbox eligibility engine.

Pure rule functions deciding which inbox messages are valid, who may see
them, where banners go and when an urgent message is pushed.
"""

from mojvis.eligibility.context import parse_viewer_context
from mojvis.eligibility.push import build_push_content, select_push_targets, should_trigger_push
from mojvis.eligibility.tags import (
    is_municipal,
    is_urgent,
    resolve_municipality,
    validate_active_window,
    validate_message_rules,
    validate_tag_rules,
    validate_urgent_rules,
)
from mojvis.eligibility.visibility import (
    filter_banner_messages,
    filter_banners_for_screen,
    filter_eligible_messages,
    is_banner_eligible,
    is_banner_for_screen,
    is_eligible_for_viewer,
    is_within_active_window,
)

__all__ = [
    "build_push_content",
    "filter_banner_messages",
    "filter_banners_for_screen",
    "filter_eligible_messages",
    "is_banner_eligible",
    "is_banner_for_screen",
    "is_eligible_for_viewer",
    "is_municipal",
    "is_urgent",
    "is_within_active_window",
    "parse_viewer_context",
    "resolve_municipality",
    "select_push_targets",
    "should_trigger_push",
    "validate_active_window",
    "validate_message_rules",
    "validate_tag_rules",
    "validate_urgent_rules",
]
