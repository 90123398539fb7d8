"""Date/time normalization for launch configuration.

Authors enter dates and times as free-form text (``2016-01-14``, ``9:30``).
Everything that is not a digit is stripped, the pieces are combined into a
compact ISO 8601 string (``20160114T093000+00:00``) and parsed to an aware
instant.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from loguru import logger

from sellaporter.phases.constants import DEFAULT_TIME
from sellaporter.phases.errors import InvalidConfigurationError
from sellaporter.phases.types import ensure_utc

_NON_DIGITS = re.compile(r"\D+")


def _digits(raw: str | None) -> str:
    return _NON_DIGITS.sub("", raw or "")


def clean_date(date_raw: str | None) -> str:
    """Strip a raw date down to its ``YYYYMMDD`` digits.

    Args:
        date_raw: Date as entered (e.g. "2016-01-14" or "20160114")

    Returns:
        Eight-digit date string

    Raises:
        InvalidConfigurationError: If no usable date digits remain
    """
    digits = _digits(date_raw)
    if not digits:
        raise InvalidConfigurationError("Invalid date information supplied.", raw_value=date_raw)
    if len(digits) != 8:
        raise InvalidConfigurationError(f"Date '{digits[:16]}' does not reduce to YYYYMMDD.", raw_value=date_raw)
    if int(digits) == 0:
        raise InvalidConfigurationError("Invalid date information supplied.", raw_value=date_raw)
    return digits


def clean_time(time_raw: str | None) -> str:
    """Format a raw time as a six-digit ``HHMMSS`` clock value.

    The digits are zero-padded on the left to four places and seconds are
    always ``00`` ("9:30" -> "093000", "0:00" -> "000000"). Values that do
    not produce a valid clock time fall back to midnight.
    """
    digits = _digits(time_raw)
    if len(digits) > 4:
        logger.warning(f"Invalid time '{time_raw[:16]}' supplied, defaulting to midnight")
        return DEFAULT_TIME

    formatted = f"{int(digits) if digits else 0:04d}00"
    if int(formatted[:2]) > 23 or int(formatted[2:4]) > 59:
        logger.warning(f"Invalid time '{time_raw}' supplied, defaulting to midnight")
        return DEFAULT_TIME
    return formatted


def to_iso8601(date_raw: str | None, time_raw: str | None = "00:00", tz_offset: str = "+00:00") -> str:
    """Build a compact ISO 8601 timestamp from raw date and time strings.

    Args:
        date_raw: Date as entered by the author
        time_raw: Time as entered by the author
        tz_offset: Fixed UTC offset (e.g. "+02:00")

    Returns:
        ISO 8601 string such as "20160114T093000+02:00"

    Raises:
        InvalidConfigurationError: If the date portion is invalid
    """
    return f"{clean_date(date_raw)}T{clean_time(time_raw)}{tz_offset}"


def to_instant(date_raw: str | None, time_raw: str | None = "00:00", tz_offset: str = "+00:00") -> datetime:
    """Normalize raw date and time strings into an aware UTC instant.

    Raises:
        InvalidConfigurationError: If the date is invalid or the offset malformed
    """
    iso = to_iso8601(date_raw, time_raw, tz_offset)
    try:
        return datetime.strptime(iso, "%Y%m%dT%H%M%S%z").astimezone(timezone.utc)
    except (ValueError, OverflowError) as e:
        raise InvalidConfigurationError(f"Cannot parse launch timestamp '{iso}': {e}", raw_value=date_raw) from e


def utc_offset(tz_name: str, at: datetime | None = None) -> str:
    """Render a zone's UTC offset at an instant as "+HH:MM".

    Args:
        tz_name: IANA timezone name (e.g. "Europe/Berlin")
        at: Instant at which to evaluate the offset; defaults to now

    Returns:
        Offset string such as "+02:00"
    """
    moment = ensure_utc(at) if at else datetime.now(timezone.utc)
    raw = moment.astimezone(ZoneInfo(tz_name)).strftime("%z")
    return f"{raw[:3]}:{raw[3:5]}"
