# backend/carwash/core/config.py
import logging
import os
from pathlib import Path
from typing import Annotated, List, Literal

from dotenv import load_dotenv
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from .constants import ALLOWED_ORIGINS

logger = logging.getLogger(__name__)

# Load .env file only if not in CI
if not os.getenv("CI"):
    env_path = Path(__file__).parent.parent.parent / ".env"  # Goes up to backend/.env
    logger.info(f"[CONFIG] Looking for .env at: {env_path}")
    load_dotenv(env_path)


def _parse_hhmm(value: str) -> tuple[int, int]:
    hour_str, minute_str = value.split(":")
    hour, minute = int(hour_str), int(minute_str)
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise ValueError(f"Invalid time of day: {value}")
    return hour, minute


class Settings(BaseSettings):
    environment: Literal["development", "test", "staging", "production"] = Field(
        default="development",
        description="Deployment environment name",
    )
    database_url: str = Field(
        default="sqlite:///./carwash.db",
        alias="DATABASE_URL",
        description="SQLAlchemy database URL",
    )
    sql_echo: bool = Field(default=False, description="Echo SQL statements to the log")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    business_timezone: str = Field(
        default="America/New_York",
        description="IANA timezone used to evaluate working days and hours",
    )

    # Availability constraints
    booking_min_advance_hours: int = Field(
        default=2, ge=0, description="Minimum notice required before a booking starts"
    )
    booking_max_advance_days: int = Field(
        default=30, ge=1, description="How far ahead customers may book"
    )
    working_hours_start: str = Field(default="09:00", description="Opening time (HH:MM)")
    working_hours_end: str = Field(default="18:00", description="Closing time (HH:MM)")
    working_days: Annotated[List[int], NoDecode] = Field(
        default_factory=lambda: [0, 1, 2, 3, 4],
        description="Working weekdays, Monday=0 through Sunday=6",
    )
    slot_duration_minutes: int = Field(default=60, ge=5, le=480)
    slot_buffer_minutes: int = Field(default=15, ge=0, le=240)

    # Pricing
    mobile_location_multiplier: float = Field(
        default=1.0, gt=0, description="Price multiplier applied to mobile washes"
    )
    in_store_location_multiplier: float = Field(
        default=1.0, gt=0, description="Price multiplier applied to in-store washes"
    )

    confirmation_code_length: int = Field(
        default=8,
        ge=6,
        le=16,
        description="Length of the human-typable confirmation code",
    )

    cors_origins: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: list(ALLOWED_ORIGINS),
        description="Comma-separated origins allowed by CORS",
    )

    model_config = SettingsConfigDict(
        env_file=".env" if not os.getenv("CI") else None,
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("working_hours_start", "working_hours_end")
    @classmethod
    def _validate_time_of_day(cls, v: str) -> str:
        _parse_hhmm(v)
        return v

    @field_validator("working_days", mode="before")
    @classmethod
    def _parse_working_days(cls, value: object) -> object:
        if isinstance(value, str):
            return [int(token) for token in value.split(",") if token.strip()]
        return value

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_cors_origins(cls, value: object) -> list[str]:
        if value is None:
            return []
        if isinstance(value, str):
            return [token.strip() for token in value.split(",") if token.strip()]
        if isinstance(value, (list, tuple, set)):
            return [str(token).strip() for token in value if str(token).strip()]
        raise ValueError("cors_origins must be a comma-separated string or list")

    @field_validator("working_days")
    @classmethod
    def _validate_working_days(cls, v: List[int]) -> List[int]:
        if any(day < 0 or day > 6 for day in v):
            raise ValueError("working_days entries must be between 0 (Monday) and 6 (Sunday)")
        return sorted(set(v))

    @model_validator(mode="after")
    def _check_working_window(self) -> "Settings":
        if _parse_hhmm(self.working_hours_start) >= _parse_hhmm(self.working_hours_end):
            raise ValueError("working_hours_start must be before working_hours_end")
        return self

    @property
    def opening_time(self) -> tuple[int, int]:
        return _parse_hhmm(self.working_hours_start)

    @property
    def closing_time(self) -> tuple[int, int]:
        return _parse_hhmm(self.working_hours_end)

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


settings = Settings()
