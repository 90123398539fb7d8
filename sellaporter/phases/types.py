"""Launch window and custom phase models.

Raw records (as entered by page authors) are pydantic models; the values
computed from them for a single resolution are frozen dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from pydantic import AliasChoices, BaseModel, Field

from sellaporter.phases.constants import SECONDS_PER_DAY


def ensure_utc(dt: datetime) -> datetime:
    """Normalize datetime to UTC-aware.

    Naive datetimes are assumed to be UTC.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


class CustomPhaseConfig(BaseModel):
    """Raw custom phase record as stored on a page.

    Attributes:
        name: Phase label used as the visibility/shortcode matching key
        start_offset: Days before launch start when the phase opens
        end_offset: Days before launch start when the phase closes
    """

    name: str | None = Field(default=None, validation_alias=AliasChoices("name", "phase_name"))
    start_offset: int | float | str | None = Field(default=None, validation_alias=AliasChoices("start_offset", "phase_start_offset"))
    end_offset: int | float | str | None = Field(default=None, validation_alias=AliasChoices("end_offset", "phase_end_offset"))


class LaunchWindowConfig(BaseModel):
    """Raw launch configuration for one page.

    Dates and times are free-form strings; they are normalized at
    resolution time, never on load.
    """

    start_date: str | None = None
    start_time: str | None = None
    end_date: str | None = None
    end_time: str | None = None
    phases: list[CustomPhaseConfig] = Field(default_factory=list)


@dataclass(frozen=True)
class LaunchWindow:
    """Normalized launch window.

    ``end`` is None when the end date failed to normalize; the sale/postsale
    comparison is skipped in that case.
    """

    start: datetime
    end: datetime | None = None


@dataclass(frozen=True)
class CustomPhase:
    """Custom phase expressed as day offsets before the launch start."""

    name: str
    start_offset_days: int
    end_offset_days: int

    def window(self, launch_start: datetime) -> tuple[datetime, datetime]:
        """Return (phase_start, phase_end) for a launch start.

        The window is empty when phase_start is after phase_end.
        """
        phase_start = launch_start - timedelta(seconds=self.start_offset_days * SECONDS_PER_DAY)
        phase_end = launch_start - timedelta(seconds=self.end_offset_days * SECONDS_PER_DAY)
        return phase_start, phase_end

    def contains(self, launch_start: datetime, now: datetime) -> bool:
        phase_start, phase_end = self.window(launch_start)
        return phase_start <= now <= phase_end


@dataclass(frozen=True)
class ResolutionContext:
    """Per-request resolution input.

    Attributes:
        now: Instant to classify (wall clock unless overridden for testing)
        override_phase: Phase label that bypasses all date logic when set
    """

    now: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    override_phase: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "now", ensure_utc(self.now))
