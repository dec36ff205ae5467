"""Enums for the inbox taxonomy, viewer context and transport calendar."""

from enum import StrEnum


class Tag(StrEnum):
    """Fixed inbox tag taxonomy. A message carries at most two of these."""

    ROAD_TRANSPORT = "road_transport"
    SEA_TRANSPORT = "sea_transport"
    CULTURE = "culture"
    GENERAL = "general"
    URGENT = "urgent"
    MUNICIPALITY_A = "municipality_A"
    MUNICIPALITY_B = "municipality_B"


class Municipality(StrEnum):
    """Municipalities a local viewer can belong to.

    Values match the corresponding municipal tags.
    """

    MUNICIPALITY_A = "municipality_A"
    MUNICIPALITY_B = "municipality_B"


class ViewerMode(StrEnum):
    VISITOR = "visitor"
    LOCAL = "local"


class Language(StrEnum):
    HR = "hr"
    EN = "en"


class ScreenContext(StrEnum):
    """Screens where banners can be placed."""

    HOME = "home"
    TRANSPORT_ROAD = "transport_road"
    TRANSPORT_SEA = "transport_sea"


class DayType(StrEnum):
    """Schedule lookup key: an explicit weekday or the holiday override."""

    MON = "MON"
    TUE = "TUE"
    WED = "WED"
    THU = "THU"
    FRI = "FRI"
    SAT = "SAT"
    SUN = "SUN"
    HOLIDAY = "PRAZNIK"


class RejectionCode(StrEnum):
    """Machine-readable codes for failed validation rules."""

    TAGS_EMPTY = "TAGS_EMPTY"
    TAGS_MAX_EXCEEDED = "TAGS_MAX_EXCEEDED"
    TAGS_DUPLICATE = "TAGS_DUPLICATE"
    TAG_INVALID = "TAG_INVALID"
    TAGS_DUAL_MUNICIPAL = "TAGS_DUAL_MUNICIPAL"
    URGENT_MISSING_CONTEXT = "URGENT_MISSING_CONTEXT"
    URGENT_MISSING_DATES = "URGENT_MISSING_DATES"
    ACTIVE_WINDOW_INVALID = "ACTIVE_WINDOW_INVALID"
    MUNICIPALITY_REQUIRED = "MUNICIPALITY_REQUIRED"


MUNICIPAL_TAGS: tuple[Tag, ...] = (Tag.MUNICIPALITY_A, Tag.MUNICIPALITY_B)

# Tags that may accompany "urgent"; everything in the taxonomy except urgent itself.
URGENT_CONTEXT_TAGS: frozenset[str] = frozenset(t.value for t in Tag if t is not Tag.URGENT)

# Python weekday() index (Monday == 0) to explicit day type.
WEEKDAY_DAY_TYPES: tuple[DayType, ...] = (
    DayType.MON,
    DayType.TUE,
    DayType.WED,
    DayType.THU,
    DayType.FRI,
    DayType.SAT,
    DayType.SUN,
)
