# backend/carwash/schemas/customer.py
"""Customer profile and saved vehicle schemas."""

from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, Field, field_validator

from ..core.enums import VehicleSize, VehicleType
from .base import StandardizedModel, StrictRequestModel
from .booking import _max_vehicle_year
from .dashboard import CustomerSummary


def _normalize_plate(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    cleaned = value.strip().upper()
    if not cleaned:
        raise ValueError("license_plate cannot be blank")
    return cleaned


def _check_year(value: Optional[int]) -> Optional[int]:
    if value is not None and value > _max_vehicle_year():
        raise ValueError(f"year must be at most {_max_vehicle_year()}")
    return value


class VehicleCreate(StrictRequestModel):
    """Add a vehicle to a customer's garage."""

    model_config = ConfigDict(use_enum_values=True, validate_default=True)

    make: str = Field(..., min_length=1, max_length=50)
    model: str = Field(..., min_length=1, max_length=50)
    year: int = Field(..., ge=1900)
    color: str = Field(..., min_length=1, max_length=30)
    license_plate: str = Field(..., min_length=1, max_length=16)
    vehicle_type: VehicleType = VehicleType.SEDAN
    vehicle_size: VehicleSize = VehicleSize.MEDIUM
    vin: Optional[str] = Field(None, min_length=17, max_length=17)
    notes: Optional[str] = Field(None, max_length=500)
    set_primary: bool = False

    @field_validator("year")
    @classmethod
    def validate_year(cls, v: Optional[int]) -> Optional[int]:
        return _check_year(v)

    @field_validator("license_plate")
    @classmethod
    def normalize_plate(cls, v: Optional[str]) -> Optional[str]:
        return _normalize_plate(v)


class VehicleUpdate(StrictRequestModel):
    """Partial update; omitted fields keep their value."""

    model_config = ConfigDict(use_enum_values=True, validate_default=True)

    make: Optional[str] = Field(None, min_length=1, max_length=50)
    model: Optional[str] = Field(None, min_length=1, max_length=50)
    year: Optional[int] = Field(None, ge=1900)
    color: Optional[str] = Field(None, min_length=1, max_length=30)
    license_plate: Optional[str] = Field(None, min_length=1, max_length=16)
    vehicle_type: Optional[VehicleType] = None
    vehicle_size: Optional[VehicleSize] = None
    vin: Optional[str] = Field(None, min_length=17, max_length=17)
    notes: Optional[str] = Field(None, max_length=500)

    @field_validator("year")
    @classmethod
    def validate_year(cls, v: Optional[int]) -> Optional[int]:
        return _check_year(v)

    @field_validator("license_plate")
    @classmethod
    def normalize_plate(cls, v: Optional[str]) -> Optional[str]:
        return _normalize_plate(v)


class VehicleResponse(StandardizedModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    customer_id: str
    make: str
    model: str
    year: int
    color: str
    license_plate: str
    vehicle_type: VehicleType
    vehicle_size: VehicleSize
    vin: Optional[str] = None
    notes: Optional[str] = None
    is_primary: bool
    created_at: datetime
    updated_at: datetime


class CustomerProfileResponse(StandardizedModel):
    customer: CustomerSummary
    vehicles: List[VehicleResponse] = []
    primary_vehicle_id: Optional[str] = None
