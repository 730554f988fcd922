# backend/carwash/core/enums.py
"""
Core enums for the car wash platform.

Stored as plain strings in the database; the enums give the service layer
and schemas a single source of truth for the allowed values.
"""

from enum import Enum


class BookingStatus(str, Enum):
    """Booking lifecycle statuses."""

    PENDING = "pending"  # Created by the booking workflow
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class VehicleType(str, Enum):
    """Vehicle body types used for pricing."""

    SEDAN = "sedan"
    SUV = "suv"
    TRUCK = "truck"
    VAN = "van"
    MOTORCYCLE = "motorcycle"


class VehicleSize(str, Enum):
    """Vehicle size class; scales the vehicle type multiplier."""

    SMALL = "small"
    MEDIUM = "medium"  # Assumed when the customer does not say
    LARGE = "large"
    XL = "xl"


class LocationType(str, Enum):
    """Where the wash takes place."""

    MOBILE = "mobile"  # We drive to the customer's address
    IN_STORE = "in_store"  # Customer brings the vehicle to a designated location


class UserRole(str, Enum):
    """Standard user roles."""

    CUSTOMER = "customer"
    OPERATOR = "operator"
    ADMIN = "admin"
    MANAGER = "manager"
