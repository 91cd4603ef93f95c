"""
Venue Status package.
Open / closing soon / closed status and countdown from daily opening hours.
"""

__version__ = "0.1.0"

from .evaluator import evaluate_status, current_status, CLOSING_SOON_MINUTES
from .models import (
    HoursSpec, StatusKind, StatusResult,
    ParseError, HoursRangeError, UnknownVenueError,
)
from .poller import StatusPoller
from .presentation import status_color, status_icon
from .service import VenueStatusService
from .util.clock import FixedOffsetClock, FrozenClock
from .util.time_utils import parse_hours, parse_hhmm, format_hhmm, format_duration

__all__ = [
    "evaluate_status",
    "current_status",
    "CLOSING_SOON_MINUTES",
    "HoursSpec",
    "StatusKind",
    "StatusResult",
    "ParseError",
    "HoursRangeError",
    "UnknownVenueError",
    "StatusPoller",
    "status_color",
    "status_icon",
    "VenueStatusService",
    "FixedOffsetClock",
    "FrozenClock",
    "parse_hours",
    "parse_hhmm",
    "format_hhmm",
    "format_duration",
]
