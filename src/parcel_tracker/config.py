"""parcel-tracker configuration."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ParcelTrackerConfig(BaseSettings):
    """Runtime config read from ``PARCEL_TRACKER_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="PARCEL_TRACKER_")

    database_url: str = "sqlite+aiosqlite:///tracker.db"
    strict_transitions: bool = Field(
        default=False,
        description="Only accept the single next status in set_status.",
    )
    echo_sql: bool = False
    log_level: LogLevel = "INFO"
