"""Application-wide constants for the Premium Car Wash platform."""

from __future__ import annotations

from decimal import Decimal
import os

from .enums import BookingStatus, VehicleSize, VehicleType

BRAND_NAME = "Premium Car Wash"

API_TITLE = f"{BRAND_NAME} API"
API_DESCRIPTION = "Service catalog, availability and booking API for Premium Car Wash"
API_VERSION = "1.0.0"

# Text constraints
MAX_NOTES_LENGTH = 1000

# Query limits
DEFAULT_QUERY_LIMIT = 100
MAX_QUERY_LIMIT = 1000

# Recent activity window for the client dashboard
RECENT_ACTIVITY_DAYS = 30
RECENT_ACTIVITY_LIMIT = 10

# Dashboard recommendations (discounts in percent)
MAX_RECOMMENDATIONS = 3
FAVORITE_SERVICE_DISCOUNT_PERCENT = 10
UPGRADE_DISCOUNT_PERCENT = 15
NEW_CATEGORY_DISCOUNT_PERCENT = 5

VEHICLE_TYPE_MULTIPLIERS: dict[VehicleType, Decimal] = {
    VehicleType.SEDAN: Decimal("1.0"),
    VehicleType.SUV: Decimal("1.3"),
    VehicleType.TRUCK: Decimal("1.4"),
    VehicleType.VAN: Decimal("1.5"),
    VehicleType.MOTORCYCLE: Decimal("0.7"),
}

VEHICLE_SIZE_MULTIPLIERS: dict[VehicleSize, Decimal] = {
    VehicleSize.SMALL: Decimal("1.0"),
    VehicleSize.MEDIUM: Decimal("1.2"),
    VehicleSize.LARGE: Decimal("1.5"),
    VehicleSize.XL: Decimal("1.8"),
}

# Operator-driven lifecycle; terminal statuses map to an empty set
ALLOWED_STATUS_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.PENDING: frozenset({BookingStatus.CONFIRMED, BookingStatus.CANCELLED}),
    BookingStatus.CONFIRMED: frozenset({BookingStatus.IN_PROGRESS, BookingStatus.CANCELLED}),
    BookingStatus.IN_PROGRESS: frozenset({BookingStatus.COMPLETED}),
    BookingStatus.COMPLETED: frozenset(),
    BookingStatus.CANCELLED: frozenset(),
}

DEFAULT_DEV_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


def _split_env(name: str) -> list[str]:
    value = os.getenv(name, "")
    return [origin.strip() for origin in value.split(",") if origin.strip()]


ALLOWED_ORIGINS = (
    _split_env("ALLOWED_ORIGINS")
    or _split_env("CORS_ALLOW_ORIGINS")
    or DEFAULT_DEV_ORIGINS + ["https://premiumcarwash.com", "https://www.premiumcarwash.com"]
)
