# backend/carwash/schemas/service.py
"""Service catalog and availability schemas."""

from datetime import date, datetime
from typing import List, Optional

from pydantic import ConfigDict

from .base import Money, StandardizedModel


class ServiceResponse(StandardizedModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    slug: str
    description: Optional[str] = None
    category: str
    price: Money
    duration_minutes: int
    is_active: bool


class ServiceListResponse(StandardizedModel):
    items: List[ServiceResponse]
    total: int


class TimeSlotResponse(StandardizedModel):
    start_time: datetime
    end_time: datetime
    is_available: bool


class AvailabilityResponse(StandardizedModel):
    service_id: str
    day: date
    slots: List[TimeSlotResponse]
    is_fully_booked: bool


class AvailabilityDayResponse(StandardizedModel):
    day: date
    slots: List[TimeSlotResponse]
    is_fully_booked: bool


class AvailabilityWindowResponse(StandardizedModel):
    service_id: str
    start_day: date
    end_day: date
    days: List[AvailabilityDayResponse]
