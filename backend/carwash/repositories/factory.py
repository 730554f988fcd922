# backend/carwash/repositories/factory.py
"""
Repository Factory for the car wash platform

Provides centralized creation of repository instances,
ensuring consistent initialization and dependency injection.
"""

from sqlalchemy.orm import Session

from .booking_repository import BookingRepository
from .service_repository import ServiceRepository
from .user_repository import UserRepository
from .vehicle_repository import VehicleRepository


class RepositoryFactory:
    """
    Factory class for creating repository instances.

    Centralizes repository creation to ensure consistent initialization
    and makes it easy to swap implementations if needed.
    """

    @staticmethod
    def create_booking_repository(db: Session) -> BookingRepository:
        """Create repository for booking operations."""
        return BookingRepository(db)

    @staticmethod
    def create_service_repository(db: Session) -> ServiceRepository:
        """Create repository for the service catalog."""
        return ServiceRepository(db)

    @staticmethod
    def create_user_repository(db: Session) -> UserRepository:
        """Create repository for user lookups."""
        return UserRepository(db)

    @staticmethod
    def create_vehicle_repository(db: Session) -> VehicleRepository:
        """Create repository for saved vehicles."""
        return VehicleRepository(db)
