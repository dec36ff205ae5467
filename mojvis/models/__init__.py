"""Data models for inbox messages, viewers, push targets and holidays."""

from mojvis.models.enums import (
    DayType,
    Language,
    Municipality,
    RejectionCode,
    ScreenContext,
    Tag,
    ViewerMode,
)
from mojvis.models.holiday import HolidayCalendar, HolidayConfigError, HolidayEntry
from mojvis.models.message import InboxMessage, LocalizedText
from mojvis.models.push import PushContent, PushTarget
from mojvis.models.result import VALID, Rejection, Valid, ValidationResult
from mojvis.models.viewer import ViewerContext, ViewerContextOk

__all__ = [
    "VALID",
    "DayType",
    "HolidayCalendar",
    "HolidayConfigError",
    "HolidayEntry",
    "InboxMessage",
    "Language",
    "LocalizedText",
    "Municipality",
    "PushContent",
    "PushTarget",
    "Rejection",
    "RejectionCode",
    "ScreenContext",
    "Tag",
    "Valid",
    "ValidationResult",
    "ViewerContext",
    "ViewerContextOk",
    "ViewerMode",
]
