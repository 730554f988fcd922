# backend/carwash/repositories/__init__.py
"""
Repository Pattern Implementation for the car wash platform

This package provides the repository layer for data access,
separating business logic from database queries.

Usage:
    from carwash.repositories import RepositoryFactory

    repository = RepositoryFactory.create_booking_repository(db)
    upcoming = repository.list_upcoming_for_customer(customer_id, now)
"""

from .base_repository import BaseRepository, IRepository
from .booking_repository import BookingRepository
from .factory import RepositoryFactory
from .service_repository import ServiceRepository
from .user_repository import UserRepository
from .vehicle_repository import VehicleRepository

__all__ = [
    "BaseRepository",
    "BookingRepository",
    "IRepository",
    "RepositoryFactory",
    "ServiceRepository",
    "UserRepository",
    "VehicleRepository",
]
