"""
Pydantic schemas for configuration, settings, and API responses.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import StatusKind
from .util.time_utils import parse_hours


class VenueConfig(BaseModel):
    """Venue entry from params.yaml."""
    name: str = Field(min_length=1)
    hours: str  # 'HH:MM - HH:MM'

    @field_validator('hours')
    @classmethod
    def hours_parse(cls, v):
        """Reject hours strings that would fail on every evaluation."""
        parse_hours(v)
        return v


class ClockConfig(BaseModel):
    """Fixed UTC offset of the venues' local time (no DST)."""
    utc_offset_hours: float = Field(default=1, ge=-12, le=14)


class PollerConfig(BaseModel):
    """Status refresh cadence."""
    interval_seconds: float = Field(default=60.0, gt=0)


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR)$"
    )
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


class ProjectConfig(BaseModel):
    """Top-level project configuration."""
    name: str = Field(default="Venue Status")
    version: str = Field(default="0.1.0")


class AppConfig(BaseModel):
    """Complete application configuration loaded from params.yaml."""
    project: ProjectConfig = Field(default_factory=ProjectConfig)
    clock: ClockConfig = Field(default_factory=ClockConfig)
    poller: PollerConfig = Field(default_factory=PollerConfig)
    venues: List[VenueConfig] = Field(default_factory=list)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator('venues')
    @classmethod
    def unique_names(cls, v):
        names = [venue.name for venue in v]
        dupes = sorted({n for n in names if names.count(n) > 1})
        if dupes:
            raise ValueError(f"Duplicate venue names: {', '.join(dupes)}")
        return v


class Settings(BaseSettings):
    """Environment-based settings."""
    config_path: str = Field(default="config/params.yaml", alias="VENUE_STATUS_CONFIG")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )


# API Response Schemas
class StatusResponse(BaseModel):
    """Status badge payload for one venue."""
    venue: Optional[str] = None
    hours: str
    is_open: bool
    status: StatusKind
    message: str
    next_open_time: Optional[str] = None
    time_until_close: Optional[str] = None
    minutes_until_close: Optional[int] = None
    color: str
    icon: str
    evaluated_at: str


class VenueResponse(BaseModel):
    """Configured venue."""
    name: str
    hours: str


class HealthResponse(BaseModel):
    """API health check response."""
    status: str
    version: str
    venues_configured: int
    utc_offset_hours: float
    timestamp: str
