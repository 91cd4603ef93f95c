"""Tiny time helpers for opening-hours strings and countdowns."""

import re

from ..models import HoursSpec, HoursRangeError, ParseError

MINUTES_PER_DAY = 24 * 60
HOURS_SEPARATOR = " - "

_HHMM_RE = re.compile(r"^(\d{2}):(\d{2})$")


def parse_hhmm(s: str) -> int:
    h, m = s.split(":")  # 'HH:MM', bounds are not checked here
    return int(h) * 60 + int(m)  # minutes since midnight


def format_hhmm(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"  # expects 0..1439


def format_duration(minutes: int) -> str:
    """Render a countdown: '45 min', '2h', '1h30'."""
    if minutes < 60:
        return f"{minutes} min"
    hours, rest = divmod(minutes, 60)
    if rest == 0:
        return f"{hours}h"
    return f"{hours}h{rest:02d}"


def parse_time(token: str) -> int:
    """Strict 'HH:MM' to minutes; raises ParseError or HoursRangeError."""
    m = _HHMM_RE.match(token)
    if not m:
        raise ParseError(f"Invalid time {token!r}, expected HH:MM")
    hh, mi = int(m.group(1)), int(m.group(2))
    if not (0 <= hh <= 23 and 0 <= mi <= 59):
        raise HoursRangeError(f"Time {token!r} is outside 00:00-23:59")
    return parse_hhmm(token)


def parse_hours(text: str) -> HoursSpec:
    """Parse 'HH:MM - HH:MM' into an HoursSpec.

    Raises ParseError when the separator is missing or a side is not an
    'HH:MM' token, HoursRangeError when a component is out of range.
    """
    if not isinstance(text, str) or HOURS_SEPARATOR not in text:
        raise ParseError(f"Hours {text!r} must look like 'HH:MM - HH:MM'")
    open_raw, close_raw = text.split(HOURS_SEPARATOR, 1)
    open_s, close_s = open_raw.strip(), close_raw.strip()
    return HoursSpec(
        open=open_s,
        close=close_s,
        open_minutes=parse_time(open_s),
        close_minutes=parse_time(close_s),
    )


def in_window(mins: int, start: int, end: int) -> bool:
    if start <= end:
        return start <= mins < end  # simple range
    return mins >= start or mins < end  # wrap-over-midnight


def minute_of_day(dt) -> int:
    return dt.hour * 60 + dt.minute  # seconds discarded
