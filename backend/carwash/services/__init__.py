"""Service layer for the car wash platform."""

from .availability_service import AvailabilityConstraints, AvailabilityService, TimeSlot
from .base import BaseService
from .booking_service import BookingCreateResult, BookingService
from .catalog_service import CatalogService
from .client_dashboard_service import ClientDashboardService
from .pricing_service import PricingCalculation, PricingService

__all__ = [
    "AvailabilityConstraints",
    "AvailabilityService",
    "BaseService",
    "BookingCreateResult",
    "BookingService",
    "CatalogService",
    "ClientDashboardService",
    "PricingCalculation",
    "PricingService",
]
