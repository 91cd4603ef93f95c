"""
Periodic status refresh for one hours string.
Re-evaluates on a fixed cadence and publishes each result to a single subscriber.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from .evaluator import evaluate_status
from .models import ParseError, StatusResult


logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_SECONDS = 60.0


class StatusPoller:
    """Owns one periodic task per subscription.

    Use `start()`/`stop()` from inside a running event loop, or
    `async with StatusPoller(...)` for scoped acquisition.
    """

    def __init__(
        self,
        hours: str,
        subscriber: Callable[[StatusResult], None],
        clock,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
        on_error: Optional[Callable[[Exception], None]] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._hours = hours
        self._subscriber = subscriber
        self._clock = clock
        self._on_error = on_error
        self._sleep = sleep
        self.interval_seconds = interval_seconds
        self._task: Optional[asyncio.Task] = None
        self._lock = asyncio.Lock()
        self.latest: Optional[StatusResult] = None
        self.last_error: Optional[Exception] = None

    @property
    def hours(self) -> str:
        return self._hours

    @property
    def running(self) -> bool:
        return self._task is not None

    def start(self) -> None:
        """Publish a result now, then every `interval_seconds`."""
        if self._task is not None:
            return
        loop = asyncio.get_running_loop()
        self._tick()
        self._task = loop.create_task(self._run())
        logger.debug(f"Poller started for {self._hours!r} every {self.interval_seconds}s")

    async def stop(self) -> None:
        """Cancel the periodic task; no publications happen after this returns."""
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            # Only the periodic task's cancellation ends here; the caller's propagates
            current = asyncio.current_task()
            if current is not None and current.cancelling():
                raise
        logger.debug(f"Poller stopped for {self._hours!r}")

    async def set_hours(self, hours: str) -> None:
        """Switch to a new hours string and restart the cadence from zero.

        Overlapping calls are serialized, so the last call's string wins.
        """
        async with self._lock:
            if hours == self._hours:
                return
            was_running = self.running
            await self.stop()
            self._hours = hours
            if was_running:
                self.start()

    async def _run(self) -> None:
        while True:
            await self._sleep(self.interval_seconds)
            self._tick()

    def _tick(self) -> None:
        hours = self._hours
        try:
            result = evaluate_status(hours, self._clock.now())
        except ParseError as e:
            # One bad tick must not end the schedule
            self._report(e)
            logger.warning(f"Status evaluation failed for {hours!r}: {e}")
            return
        self.last_error = None
        self.latest = result
        logger.debug(f"Published {result.status.value} for {hours!r}")
        try:
            self._subscriber(result)
        except Exception as e:
            self._report(e)
            logger.exception(f"Subscriber failed on status for {hours!r}")

    def _report(self, error: Exception) -> None:
        self.last_error = error
        if self._on_error is not None:
            self._on_error(error)

    async def __aenter__(self) -> "StatusPoller":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()
