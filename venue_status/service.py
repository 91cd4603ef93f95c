"""
Main service layer for venue status.
Loads configuration, owns the clock, and evaluates or watches venues.
"""

import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

import yaml

from .evaluator import evaluate_status
from .models import StatusResult, UnknownVenueError
from .poller import StatusPoller
from .presentation import status_color, status_icon
from .schemas import AppConfig, Settings, StatusResponse, VenueConfig
from .util.clock import FixedOffsetClock


logger = logging.getLogger(__name__)


class VenueStatusService:
    """Main service for venue opening status."""

    def __init__(self, config_path: Optional[str] = None, config: Optional[AppConfig] = None, clock=None):
        """Initialize service from a config object or a YAML file."""
        self.settings = Settings()
        if config is None:
            config = self._load_config(config_path or self.settings.config_path)
        self.config = config
        self.clock = clock or FixedOffsetClock(self.config.clock.utc_offset_hours)

        self._setup_logging()
        logger.info(f"Loaded {len(self.config.venues)} venue(s)")

    def _load_config(self, config_path: str) -> AppConfig:
        """Load configuration from YAML file."""
        try:
            with open(config_path, 'r') as f:
                config_data = yaml.safe_load(f) or {}
            return AppConfig(**config_data)
        except Exception as e:
            logger.error(f"Failed to load configuration: {e}")
            raise

    def _setup_logging(self) -> None:
        """Setup logging configuration."""
        logging.basicConfig(
            level=getattr(logging, self.config.logging.level),
            format=self.config.logging.format
        )

    def venues(self) -> List[VenueConfig]:
        return list(self.config.venues)

    def get_venue(self, name: str) -> VenueConfig:
        for venue in self.config.venues:
            if venue.name == name:
                return venue
        raise UnknownVenueError(name)

    def evaluate(self, hours: str, now: Optional[datetime] = None) -> StatusResult:
        """Evaluate an hours string at `now` (default: the service clock)."""
        return evaluate_status(hours, now or self.clock.now())

    def venue_status(self, name: str, now: Optional[datetime] = None) -> StatusResult:
        return self.evaluate(self.get_venue(name).hours, now)

    def status_response(self, hours: str, venue: Optional[str] = None,
                        now: Optional[datetime] = None) -> StatusResponse:
        """Build the badge payload for the UI."""
        now = now or self.clock.now()
        result = self.evaluate(hours, now)
        return StatusResponse(
            venue=venue,
            hours=hours,
            color=status_color(result.status),
            icon=status_icon(result.is_open),
            evaluated_at=now.isoformat(),
            **result.model_dump(),
        )

    def watch(self, hours: str, subscriber: Callable[[StatusResult], None],
              **kwargs) -> StatusPoller:
        """Create a poller for `hours` on the configured cadence (not started)."""
        kwargs.setdefault("interval_seconds", self.config.poller.interval_seconds)
        return StatusPoller(hours, subscriber, self.clock, **kwargs)

    def watch_venue(self, name: str, subscriber: Callable[[StatusResult], None],
                    **kwargs) -> StatusPoller:
        return self.watch(self.get_venue(name).hours, subscriber, **kwargs)

    def health_check(self) -> Dict[str, Any]:
        """Report configuration health."""
        return {
            "status": "healthy",
            "version": self.config.project.version,
            "venues_configured": len(self.config.venues),
            "utc_offset_hours": self.config.clock.utc_offset_hours,
            "timestamp": self.clock.now().isoformat()
        }
