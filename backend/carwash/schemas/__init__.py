"""Pydantic schemas for request validation and API responses."""

from .booking import (
    BookingCreate,
    BookingCreateResponse,
    BookingListResponse,
    BookingResponse,
    BookingStatusUpdate,
    Coordinates,
    Location,
    VehicleInfo,
)
from .dashboard import ActivityItem, ClientDashboardResponse, CustomerSummary, DashboardStats
from .service import AvailabilityResponse, ServiceListResponse, ServiceResponse, TimeSlotResponse

__all__ = [
    "ActivityItem",
    "AvailabilityResponse",
    "BookingCreate",
    "BookingCreateResponse",
    "BookingListResponse",
    "BookingResponse",
    "BookingStatusUpdate",
    "ClientDashboardResponse",
    "Coordinates",
    "CustomerSummary",
    "DashboardStats",
    "Location",
    "ServiceListResponse",
    "ServiceResponse",
    "TimeSlotResponse",
    "VehicleInfo",
]
