"""Phase source for a page and request.

Request overrides are namespaced under a single query key so they do not
collide with other parameters. Both spellings are accepted::

    /pages/spring-launch?sellaporter[phase]=sale&sellaporter[now]=2024-06-02T10:00:00Z
    /pages/spring-launch?sellaporter.phase=sale
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime, timezone

from loguru import logger

from sellaporter.pages.models import Page
from sellaporter.phases.types import CustomPhaseConfig, LaunchWindowConfig, ensure_utc

_EPOCH = re.compile(r"^-?\d+(\.\d+)?$")


def extract_namespaced_args(
    query: Mapping[str, str] | Iterable[tuple[str, str]],
    namespace: str = "sellaporter",
) -> dict[str, str]:
    """Collect ``namespace[key]`` and ``namespace.key`` query parameters.

    Args:
        query: Query parameters as a mapping or (key, value) pairs
        namespace: Query namespace

    Returns:
        Dict of key -> value; on repeated keys the last value wins
    """
    pattern = re.compile(rf"^{re.escape(namespace)}(?:\[([\w-]+)\]|\.([\w-]+))$")
    items = query.items() if isinstance(query, Mapping) else query
    args: dict[str, str] = {}
    for key, value in items:
        match = pattern.match(key)
        if match:
            args[match.group(1) or match.group(2)] = value
    return args


def parse_test_instant(raw: str | None) -> datetime | None:
    """Parse a test instant given as epoch seconds or ISO 8601.

    Returns:
        Aware UTC datetime, or None when raw is empty or unparseable
    """
    if not raw:
        return None
    value = raw.strip()
    try:
        if _EPOCH.match(value):
            return datetime.fromtimestamp(float(value), tz=timezone.utc)
        return ensure_utc(datetime.fromisoformat(value))
    except (ValueError, OverflowError, OSError):
        logger.warning(f"Ignoring unparseable test instant '{raw}'")
        return None


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PagePhaseSource:
    """Supplies one page's configuration and one request's overrides to a PhaseResolver."""

    def __init__(
        self,
        page: Page,
        request_args: dict[str, str] | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.page = page
        self.request_args = request_args or {}
        self._clock = clock

    def is_phase_aware_page(self) -> bool:
        return self.page.is_phase_aware

    def get_configured_launch_window(self) -> LaunchWindowConfig | None:
        if self.page.custom_fields is None:
            return None
        return self.page.custom_fields.launch_window()

    def get_configured_custom_phases(self) -> list[CustomPhaseConfig]:
        if self.page.custom_fields is None:
            return []
        return list(self.page.custom_fields.launch_phases)

    def get_override_phase_from_request(self) -> str | None:
        return self.request_args.get("phase")

    def wall_clock_now(self) -> datetime:
        return parse_test_instant(self.request_args.get("now")) or self._clock()
