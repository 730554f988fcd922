# backend/carwash/api/dependencies/__init__.py
"""
Central export point for all dependencies.

This module re-exports all dependencies from submodules
for convenient access throughout the application.
"""

from .database import get_db
from .services import (
    get_availability_service,
    get_booking_service,
    get_catalog_service,
    get_client_dashboard_service,
    get_customer_service,
    get_pricing_service,
)

__all__ = [
    # Database
    "get_db",
    # Services
    "get_availability_service",
    "get_booking_service",
    "get_catalog_service",
    "get_client_dashboard_service",
    "get_customer_service",
    "get_pricing_service",
]
