# backend/carwash/api/dependencies/services.py
"""
Service layer dependencies for dependency injection.

This module provides factory functions that create service instances
with their required dependencies properly injected.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from ...services.availability_service import AvailabilityService
from ...services.booking_service import BookingService
from ...services.catalog_service import CatalogService
from ...services.client_dashboard_service import ClientDashboardService
from ...services.customer_service import CustomerService
from ...services.pricing_service import PricingService
from .database import get_db


@lru_cache(maxsize=1)
def get_pricing_service() -> PricingService:
    """Pricing holds no session, so one instance serves every request."""
    return PricingService()


def get_availability_service(db: Session = Depends(get_db)) -> AvailabilityService:
    return AvailabilityService(db)


def get_booking_service(
    db: Session = Depends(get_db),
    pricing: PricingService = Depends(get_pricing_service),
    availability: AvailabilityService = Depends(get_availability_service),
) -> BookingService:
    """
    Get booking service instance.

    Args:
        db: Database session
        pricing: Price calculator
        availability: Slot availability checker

    Returns:
        BookingService instance
    """
    return BookingService(db, pricing=pricing, availability=availability)


def get_catalog_service(db: Session = Depends(get_db)) -> CatalogService:
    return CatalogService(db)


def get_client_dashboard_service(db: Session = Depends(get_db)) -> ClientDashboardService:
    return ClientDashboardService(db)


def get_customer_service(db: Session = Depends(get_db)) -> CustomerService:
    return CustomerService(db)
