# backend/carwash/schemas/booking.py
"""
Booking schemas for the car wash platform.

VehicleInfo and Location are immutable snapshots: once a booking request is
submitted they are stored on the booking as-is.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, field_validator

from ..core.constants import MAX_NOTES_LENGTH
from ..core.enums import BookingStatus, LocationType, VehicleSize, VehicleType
from .base import Money, StandardizedModel, StrictRequestModel


def _max_vehicle_year() -> int:
    return datetime.now().year + 1


class VehicleInfo(BaseModel):
    """Description of the vehicle to be washed."""

    model_config = ConfigDict(frozen=True, extra="forbid", use_enum_values=True)

    make: str = Field(..., min_length=1, max_length=50)
    model: str = Field(..., min_length=1, max_length=50)
    year: int = Field(..., ge=1900)
    color: str = Field(..., min_length=1, max_length=30)
    license_plate: Optional[str] = Field(None, max_length=16)
    vehicle_type: VehicleType = VehicleType.SEDAN
    vehicle_size: VehicleSize = VehicleSize.MEDIUM

    @field_validator("year")
    @classmethod
    def validate_year(cls, v: int) -> int:
        """Reject model years that do not exist yet."""
        if v > _max_vehicle_year():
            raise ValueError(f"year must be at most {_max_vehicle_year()}")
        return v

    @field_validator("license_plate")
    @classmethod
    def normalize_plate(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        cleaned = v.strip().upper()
        return cleaned or None


class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class Location(BaseModel):
    """
    Where the wash happens: the customer's address for a mobile wash, or the
    chosen store's address for an in-store one. The full address is required
    for both.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", use_enum_values=True)

    location_type: LocationType = LocationType.MOBILE
    address: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    zip_code: str = Field(..., min_length=3, max_length=10)
    coordinates: Optional[Coordinates] = None


class BookingCreate(StrictRequestModel):
    """
    Booking request payload.

    All fields are required except ``notes``. ``scheduled_date`` must carry
    a timezone so it can be evaluated against business hours.
    """

    customer_id: str = Field(..., min_length=1, description="Customer making the booking")
    service_id: str = Field(..., min_length=1, description="Service being booked")
    vehicle_info: VehicleInfo
    location: Location
    scheduled_date: AwareDatetime = Field(..., description="Requested start of the wash")
    notes: Optional[str] = Field(None, max_length=MAX_NOTES_LENGTH)

    @field_validator("notes")
    @classmethod
    def blank_notes_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        stripped = v.strip()
        return stripped or None


class BookingResponse(StandardizedModel):
    """Booking as returned by the API."""

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: str
    customer_id: str
    service_id: str
    vehicle_info: VehicleInfo
    location: Location
    scheduled_date: datetime
    status: BookingStatus
    price: Money
    notes: Optional[str] = None
    confirmation_code: str
    created_at: datetime
    updated_at: datetime


class BookingCreateResponse(StandardizedModel):
    """Success payload of the booking workflow."""

    booking: BookingResponse
    estimated_price: Money
    confirmation_code: str


class BookingStatusUpdate(StrictRequestModel):
    """Operator request to move a booking through its lifecycle."""

    status: BookingStatus


class BookingListResponse(StandardizedModel):
    items: List[BookingResponse]
    total: int
