"""Sales phase resolution.

Classifies an instant against a page's launch window and its custom phases:

- before the launch start the page is in ``presale``
- between start and end it is in ``sale``
- from the end onwards it is in ``postsale``
- any custom phase whose window contains the instant replaces the above;
  custom phases are scanned in declaration order and the last match wins

Configuration problems never escape this module. They are logged and the
page stays in ``presale``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from loguru import logger

from sellaporter.phases.constants import NOT_APPLICABLE, Phase
from sellaporter.phases.datetime_normalizer import to_instant, utc_offset
from sellaporter.phases.errors import InvalidConfigurationError
from sellaporter.phases.types import (
    CustomPhase,
    CustomPhaseConfig,
    LaunchWindow,
    LaunchWindowConfig,
    ResolutionContext,
)


class PhaseSource(Protocol):
    """Collaborator that supplies configuration for one page and request."""

    def is_phase_aware_page(self) -> bool: ...

    def get_configured_launch_window(self) -> LaunchWindowConfig | None: ...

    def get_configured_custom_phases(self) -> list[CustomPhaseConfig]: ...

    def get_override_phase_from_request(self) -> str | None: ...

    def wall_clock_now(self) -> datetime: ...


def _coerce_offset(value: int | float | str | None) -> int:
    if value is None:
        return 0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0
    return int(float(value))


def coerce_custom_phases(records: list[CustomPhaseConfig]) -> list[CustomPhase]:
    """Convert raw phase records into CustomPhase values, keeping declaration order.

    Records without a name or with a non-numeric offset are skipped.
    Offsets are not range-checked.
    """
    phases: list[CustomPhase] = []
    for index, record in enumerate(records):
        name = (record.name or "").strip()
        if not name:
            logger.warning(f"Skipping custom phase #{index}: no phase name")
            continue
        try:
            start_offset = _coerce_offset(record.start_offset)
            end_offset = _coerce_offset(record.end_offset)
        except (TypeError, ValueError, OverflowError):
            logger.warning(
                f"Skipping custom phase '{name}': non-numeric offsets start={record.start_offset!r} end={record.end_offset!r}"
            )
            continue
        phases.append(CustomPhase(name=name, start_offset_days=start_offset, end_offset_days=end_offset))
    return phases


def normalize_launch_window(config: LaunchWindowConfig, tz_offset: str = "+00:00") -> LaunchWindow:
    """Normalize the raw launch dates into a LaunchWindow.

    Args:
        config: Raw launch configuration
        tz_offset: UTC offset applied to both dates

    Returns:
        LaunchWindow; ``end`` is None when the end date is invalid

    Raises:
        InvalidConfigurationError: If the start date is invalid
    """
    try:
        start = to_instant(config.start_date, config.start_time, tz_offset)
    except InvalidConfigurationError as e:
        e.field = "start"
        raise

    try:
        end = to_instant(config.end_date, config.end_time, tz_offset)
    except InvalidConfigurationError as e:
        logger.warning(f"Invalid launch end configuration ({e}); sale/postsale cannot be determined")
        end = None

    return LaunchWindow(start=start, end=end)


def resolve_phase(
    context: ResolutionContext,
    config: LaunchWindowConfig | None,
    tz_offset: str = "+00:00",
    phase_aware: bool = True,
) -> str:
    """Resolve the phase label for an instant.

    Args:
        context: Instant to classify and optional override
        config: Raw launch configuration, or None when unavailable
        tz_offset: UTC offset applied to the configured dates and times
        phase_aware: Whether the page uses the phase-aware template

    Returns:
        "presale", "sale", "postsale", a custom phase name, or "" when the
        page is not phase-aware or has no configuration
    """
    if not phase_aware or config is None:
        return NOT_APPLICABLE

    if context.override_phase is not None:
        logger.debug(f"Phase overridden by request: {context.override_phase}")
        return context.override_phase

    phase = Phase.PRESALE.value

    try:
        window = normalize_launch_window(config, tz_offset)
    except InvalidConfigurationError as e:
        logger.warning(f"Invalid launch start configuration ({e}); defaulting to {phase}")
        return phase

    now = context.now
    if window.end is not None and window.start <= now:
        phase = Phase.POSTSALE.value if window.end <= now else Phase.SALE.value

    # Not short-circuited: a matching custom phase replaces sale/postsale too
    for custom in coerce_custom_phases(config.phases):
        try:
            matched = custom.contains(window.start, now)
        except OverflowError:
            logger.warning(f"Custom phase '{custom.name}' window falls outside the supported date range; ignoring it")
            continue
        if matched:
            phase = custom.name

    return phase


class PhaseResolver:
    """Request-scoped phase resolver.

    Create one instance per request. The first resolution is memoized for
    the life of the instance; the request override is checked on every call.
    """

    def __init__(self, source: PhaseSource, tz_name: str = "UTC") -> None:
        self._source = source
        self._tz_name = tz_name
        self._cached: str | None = None

    def resolve_phase(self) -> str:
        if not self._source.is_phase_aware_page():
            return NOT_APPLICABLE

        override = self._source.get_override_phase_from_request()
        if override is not None:
            return override

        if self._cached is not None:
            return self._cached

        window_config = self._source.get_configured_launch_window()
        if window_config is None:
            return NOT_APPLICABLE

        config = window_config.model_copy(update={"phases": self._source.get_configured_custom_phases()})
        context = ResolutionContext(now=self._source.wall_clock_now())
        try:
            tz_offset = utc_offset(self._tz_name, context.now)
        except OverflowError:
            logger.warning(f"Cannot compute {self._tz_name} offset at {context.now.isoformat()}; using +00:00")
            tz_offset = "+00:00"
        self._cached = resolve_phase(context, config, tz_offset=tz_offset)
        logger.debug(f"Resolved phase '{self._cached}' at {context.now.isoformat()}")
        return self._cached
