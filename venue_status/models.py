"""
Core data models for venue opening status.
Value types are immutable; every evaluation produces fresh instances.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ParseError(ValueError):
    """Hours string is not of the form 'HH:MM - HH:MM'."""


class HoursRangeError(ParseError):
    """Hour or minute component is outside the 24-hour clock."""


class UnknownVenueError(KeyError):
    """Requested venue is not present in the configuration."""


class StatusKind(str, Enum):
    """Opening status of a venue."""
    OPEN = "open"
    CLOSED = "closed"
    CLOSING_SOON = "closing_soon"


@dataclass(frozen=True)
class HoursSpec:
    """Daily opening interval, both ends as canonical 'HH:MM' strings."""
    open: str
    close: str
    open_minutes: int
    close_minutes: int

    @property
    def is_overnight(self) -> bool:
        """Closing time precedes opening time, so the interval crosses midnight."""
        return self.close_minutes < self.open_minutes


class StatusResult(BaseModel):
    """Status of a venue at one instant."""
    model_config = ConfigDict(frozen=True)

    is_open: bool
    status: StatusKind
    message: str
    next_open_time: Optional[str] = None      # HH:MM, closed results only
    time_until_close: Optional[str] = None    # e.g. '15 min', '1h30'
    minutes_until_close: Optional[int] = None
