"""Central configuration for the eligibility engine and calendar resolver."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from mojvis.models.holiday import HolidayCalendar, load_holiday_calendar

# Paths
PACKAGE_ROOT = Path(__file__).parent
DATA_DIR = PACKAGE_ROOT / "data"

# Defaults
DEFAULT_TIMEZONE = "Europe/Zagreb"
DEFAULT_HOLIDAY_FILES: tuple[Path, ...] = (DATA_DIR / "holidays-hr-2026.json",)


def _holiday_files_from_env() -> tuple[Path, ...]:
    raw = os.environ.get("MOJVIS_HOLIDAY_FILES", "")
    paths = tuple(Path(p) for p in raw.split(os.pathsep) if p.strip())
    return paths or DEFAULT_HOLIDAY_FILES


@dataclass(frozen=True)
class EngineConfig:
    """Process-wide configuration, built once by the host at startup."""

    timezone: str = field(default_factory=lambda: os.environ.get("MOJVIS_TIMEZONE", DEFAULT_TIMEZONE))
    holiday_files: tuple[Path, ...] = field(default_factory=_holiday_files_from_env)

    def load_holidays(self) -> HolidayCalendar:
        """Read the configured holiday files into an immutable calendar."""
        return load_holiday_calendar(self.holiday_files, timezone=self.timezone)
