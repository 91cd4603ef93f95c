"""Clock sources for status evaluation."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone


class FixedOffsetClock:
    """Wall clock pinned to a fixed UTC offset, never adjusted for DST."""

    def __init__(self, utc_offset_hours: float = 1):
        self.utc_offset_hours = utc_offset_hours
        self.tz = timezone(timedelta(hours=utc_offset_hours))

    def now(self) -> datetime:
        return datetime.now(self.tz)


class FrozenClock:
    """Clock that returns a set instant; advance() moves it forward."""

    def __init__(self, instant: datetime):
        self.instant = instant

    def now(self) -> datetime:
        return self.instant

    def advance(self, seconds: float) -> None:
        self.instant = self.instant + timedelta(seconds=seconds)
