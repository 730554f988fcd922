# backend/carwash/repositories/vehicle_repository.py
"""
Vehicle Repository for the car wash platform

Saved vehicles are the one entity that is hard-deleted: bookings keep
their own vehicle snapshot, so nothing references a vehicle row.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..models.vehicle import Vehicle
from .base_repository import BaseRepository


class VehicleRepository(BaseRepository[Vehicle]):
    """Repository for a customer's saved vehicles."""

    def __init__(self, db: Session):
        super().__init__(db, Vehicle)
        self.logger = logging.getLogger(__name__)

    def list_for_customer(self, customer_id: str) -> List[Vehicle]:
        """Primary vehicle first, then oldest first."""
        query = (
            self._build_query()
            .filter(Vehicle.customer_id == customer_id)
            .order_by(Vehicle.is_primary.desc(), Vehicle.created_at.asc(), Vehicle.id.asc())
        )
        return self._execute_query(query)

    def get_by_license_plate(self, license_plate: str) -> Optional[Vehicle]:
        return self.find_one_by(license_plate=license_plate.strip().upper())

    def clear_primary(self, customer_id: str) -> None:
        """Unmark every primary vehicle of the customer; flushes, never commits."""
        with self._guard("update"):
            for vehicle in (
                self._build_query()
                .filter(Vehicle.customer_id == customer_id, Vehicle.is_primary.is_(True))
                .all()
            ):
                vehicle.is_primary = False
            self.db.flush()

    def delete(self, vehicle: Vehicle) -> None:
        with self._guard("delete", rollback=True):
            self.db.delete(vehicle)
            self.db.flush()
        self.logger.info("Removed vehicle %s of customer %s", vehicle.id, vehicle.customer_id)
