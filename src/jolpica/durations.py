"""Parsers for the compact lap/gap time notation and times of day used by the API.

Durations are returned as :class:`datetime.timedelta` and times of day as
:class:`datetime.time`. Both are exact: sub-second digits are scaled to whole
milliseconds, never rounded through floating point.

Supported notations:
    Duration:     ``[[H:]MM:]SS.fff``  e.g. ``"1:22.327"``, ``"0.4"``, ``"2:02:53.7"``
    Delta:        ``+[M:]S.fff``       e.g. ``"+2.137"``, ``"+1:14.240"``, ``"+103.588"``
    Time of day:  ``HH:MM:SSZ``        e.g. ``"11:30:00Z"``
"""

from __future__ import annotations

import re
from datetime import time, timedelta

from jolpica.exceptions import InvalidDurationError, InvalidTimeError

_DURATION_RE = re.compile(r"(?:(\d{1,2}):)?(?:([0-5]?\d):)?([0-5]?\d)\.(\d{1,3})", re.ASCII)
_DELTA_RE = re.compile(r"\+(?:(\d{1,2}):)?(\d{1,3})\.(\d{1,3})", re.ASCII)
_TIME_RE = re.compile(r"(\d{2}):(\d{2}):(\d{2})(Z?)", re.ASCII)


def duration_hms_ms(hours: int, minutes: int, seconds: int, milliseconds: int) -> timedelta:
    """Build an exact duration from hours, minutes, seconds and milliseconds."""
    return timedelta(hours=hours, minutes=minutes, seconds=seconds, milliseconds=milliseconds)


def duration_m_s_ms(minutes: int, seconds: int, milliseconds: int) -> timedelta:
    return duration_hms_ms(0, minutes, seconds, milliseconds)


def duration_s_ms(seconds: int, milliseconds: int) -> timedelta:
    return duration_hms_ms(0, 0, seconds, milliseconds)


def _subsecond_to_millis(digits: str) -> int:
    """Right-pad 1-3 sub-second digits to milliseconds, e.g. ``"1"`` -> 100, ``"12"`` -> 120."""
    return int(digits.ljust(3, "0"))


def parse_duration(text: str) -> timedelta:
    """Parse a lap or gap time such as ``"1:22.327"`` into an exact duration.

    Raises:
        InvalidDurationError: If the text does not match ``[[H:]MM:]SS.fff``, has more
            than three sub-second digits, or has minutes/seconds above 59.
    """
    match = _DURATION_RE.fullmatch(text)
    if match is None:
        raise InvalidDurationError(f"Invalid duration: {text!r}")

    # With a single leading group it is the minutes; with two, the first one is the hours.
    first, second, seconds, subsecond = match.groups()
    if second is not None:
        hours, minutes = int(first), int(second)
    else:
        hours, minutes = 0, int(first or 0)
    if minutes > 59:
        raise InvalidDurationError(f"Invalid duration: {text!r} has minutes above 59")

    return duration_hms_ms(hours, minutes, int(seconds), _subsecond_to_millis(subsecond))


def parse_delta(text: str) -> timedelta:
    """Parse a gap-to-leader such as ``"+1:14.240"`` into an exact duration.

    Unlike :func:`parse_duration`, the seconds group may exceed 59 when no minutes
    are given (e.g. ``"+103.588"``), as the API reports some gaps that way.

    Raises:
        InvalidDurationError: If the text is not a ``+``-prefixed delta.
    """
    match = _DELTA_RE.fullmatch(text)
    if match is None:
        raise InvalidDurationError(f"Invalid delta time: {text!r}")

    minutes, seconds, subsecond = match.groups()
    return duration_m_s_ms(int(minutes or 0), int(seconds), _subsecond_to_millis(subsecond))


def parse_time(text: str, *, require_utc_suffix: bool = True) -> time:
    """Parse a ``HH:MM:SSZ`` time of day.

    Args:
        text: Time text, 24-hour clock, no fractional seconds.
        require_utc_suffix: Whether the trailing ``Z`` is mandatory. Pit stop times are
            reported without it, so their models parse with ``False``.

    Raises:
        InvalidTimeError: If the suffix is missing (when required), the layout is wrong,
            or any component is out of range.
    """
    match = _TIME_RE.fullmatch(text)
    if match is None:
        raise InvalidTimeError(f"Invalid time: {text!r}")

    hour, minute, second, suffix = match.groups()
    if require_utc_suffix and not suffix:
        raise InvalidTimeError(f"Invalid time: {text!r} is missing the 'Z' suffix")

    try:
        return time(int(hour), int(minute), int(second))
    except ValueError as exc:
        raise InvalidTimeError(f"Invalid time: {text!r}: {exc}") from exc
