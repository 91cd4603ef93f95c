"""
Opening-status evaluation for a single daily interval.
Handles same-day and overnight (past midnight) opening hours.
"""

import logging
from datetime import datetime

from .models import StatusKind, StatusResult
from .util.time_utils import (
    MINUTES_PER_DAY, format_duration, format_hhmm, in_window, minute_of_day,
    parse_hours,
)


logger = logging.getLogger(__name__)

CLOSING_SOON_MINUTES = 30

MESSAGE_OPEN = "Ouvert jusqu'à {time}"
MESSAGE_CLOSING_SOON = "Ferme bientôt ({time})"
MESSAGE_OPENS_TODAY = "Fermé - Ouvre à {time}"
MESSAGE_OPENS_TOMORROW = "Fermé - Ouvre demain à {time}"


def _open_result(close_minutes: int, minutes_until_close: int) -> StatusResult:
    closing_soon = minutes_until_close <= CLOSING_SOON_MINUTES
    template = MESSAGE_CLOSING_SOON if closing_soon else MESSAGE_OPEN
    return StatusResult(
        is_open=True,
        status=StatusKind.CLOSING_SOON if closing_soon else StatusKind.OPEN,
        message=template.format(time=format_hhmm(close_minutes)),
        time_until_close=format_duration(minutes_until_close),
        minutes_until_close=minutes_until_close,
    )


def _closed_result(open_minutes: int, template: str) -> StatusResult:
    next_open = format_hhmm(open_minutes)
    return StatusResult(
        is_open=False,
        status=StatusKind.CLOSED,
        message=template.format(time=next_open),
        next_open_time=next_open,
    )


def evaluate_status(hours: str, now: datetime) -> StatusResult:
    """
    Evaluate the opening status of `hours` at instant `now`.

    Args:
        hours: Opening hours as 'HH:MM - HH:MM'; a close time earlier than
            the open time means the venue closes after midnight
        now: Current instant, already in the venue's local offset

    Returns:
        A new StatusResult

    Raises:
        ParseError: If `hours` is malformed or out of range
    """
    spec = parse_hours(hours)
    open_m = spec.open_minutes
    close_m = spec.close_minutes
    now_m = minute_of_day(now)

    if open_m == close_m:
        logger.debug(f"Degenerate hours {hours!r}: open equals close, always closed")

    if in_window(now_m, open_m, close_m):
        if spec.is_overnight and now_m >= open_m:
            # Evening portion: to midnight, then on to close
            minutes_until_close = (MINUTES_PER_DAY - now_m) + close_m
        else:
            minutes_until_close = close_m - now_m
        return _open_result(close_m, minutes_until_close)

    # Overnight venues are closed only between close and open on the same day
    if spec.is_overnight or now_m < open_m:
        return _closed_result(open_m, MESSAGE_OPENS_TODAY)
    return _closed_result(open_m, MESSAGE_OPENS_TOMORROW)


def current_status(hours: str, clock) -> StatusResult:
    """Evaluate `hours` at the clock's current instant."""
    return evaluate_status(hours, clock.now())
