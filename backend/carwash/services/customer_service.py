# backend/carwash/services/customer_service.py
"""
Customer Service for the car wash platform

Handles the customer's profile and their saved vehicles:
- Reading the profile (customer details plus vehicles)
- Adding, editing and removing vehicles
- Choosing the primary vehicle

Whenever a customer has vehicles, exactly one of them is primary. A customer
always keeps at least one vehicle once they have added one.
"""

from datetime import datetime, timezone
import logging
from typing import Any, Callable, Dict, List, Optional

from sqlalchemy.orm import Session

from ..core.exceptions import (
    BusinessRuleException,
    ConflictException,
    CustomerNotFoundException,
    NotFoundException,
)
from ..core.ulid_helper import generate_ulid
from ..models.user import User
from ..models.vehicle import Vehicle
from ..repositories.factory import RepositoryFactory
from ..repositories.user_repository import UserRepository
from ..repositories.vehicle_repository import VehicleRepository
from ..schemas.customer import VehicleCreate, VehicleUpdate
from .base import BaseService

logger = logging.getLogger(__name__)


class CustomerService(BaseService):
    def __init__(
        self,
        db: Session,
        user_repository: Optional[UserRepository] = None,
        vehicle_repository: Optional[VehicleRepository] = None,
        now_provider: Optional[Callable[[], datetime]] = None,
    ):
        super().__init__(db)
        self.user_repository = user_repository or RepositoryFactory.create_user_repository(db)
        self.vehicle_repository = (
            vehicle_repository or RepositoryFactory.create_vehicle_repository(db)
        )
        self._now_provider = now_provider or (lambda: datetime.now(timezone.utc))

    @BaseService.measure_operation("get_profile")
    def get_profile(self, customer_id: str) -> Dict[str, Any]:
        """
        Customer details and saved vehicles, primary first.

        Raises:
            CustomerNotFoundException: Customer does not exist
        """
        customer = self._get_customer(customer_id)
        vehicles = self.vehicle_repository.list_for_customer(customer_id)
        primary = next((v for v in vehicles if v.is_primary), None)
        return {
            "customer": customer,
            "vehicles": vehicles,
            "primary_vehicle_id": primary.id if primary else None,
        }

    def list_vehicles(self, customer_id: str) -> List[Vehicle]:
        self._get_customer(customer_id)
        return self.vehicle_repository.list_for_customer(customer_id)

    @BaseService.measure_operation("add_vehicle")
    def add_vehicle(self, customer_id: str, data: VehicleCreate) -> Vehicle:
        """
        Save a vehicle for the customer.

        The first vehicle is always primary; later ones only when
        ``set_primary`` is requested.

        Raises:
            CustomerNotFoundException: Customer does not exist
            ConflictException: License plate already registered
        """
        self.log_operation("add_vehicle", customer_id=customer_id)
        self._get_customer(customer_id)
        self._ensure_plate_free(data.license_plate)

        existing = self.vehicle_repository.list_for_customer(customer_id)
        make_primary = data.set_primary or not existing
        now = self._now_provider()

        with self.transaction():
            if make_primary and existing:
                self.vehicle_repository.clear_primary(customer_id)
            vehicle = self.vehicle_repository.create(
                id=generate_ulid(),
                customer_id=customer_id,
                is_primary=make_primary,
                created_at=now,
                updated_at=now,
                **data.model_dump(exclude={"set_primary"}),
            )

        self.logger.info("Customer %s added vehicle %s", customer_id, vehicle.id)
        return vehicle

    @BaseService.measure_operation("update_vehicle")
    def update_vehicle(self, customer_id: str, vehicle_id: str, data: VehicleUpdate) -> Vehicle:
        """
        Raises:
            NotFoundException: Vehicle missing or owned by someone else
            ConflictException: New license plate already registered
        """
        vehicle = self._get_owned_vehicle(customer_id, vehicle_id)
        changes = data.model_dump(exclude_unset=True)
        plate = changes.get("license_plate")
        if plate is not None and plate != vehicle.license_plate:
            self._ensure_plate_free(plate)

        with self.transaction():
            updated = self.vehicle_repository.update(
                vehicle.id, updated_at=self._now_provider(), **changes
            )
        return updated

    @BaseService.measure_operation("set_primary_vehicle")
    def set_primary_vehicle(self, customer_id: str, vehicle_id: str) -> Vehicle:
        vehicle = self._get_owned_vehicle(customer_id, vehicle_id)
        if vehicle.is_primary:
            return vehicle

        with self.transaction():
            self.vehicle_repository.clear_primary(customer_id)
            updated = self.vehicle_repository.update(
                vehicle.id, is_primary=True, updated_at=self._now_provider()
            )
        self.logger.info("Vehicle %s is now primary for customer %s", vehicle_id, customer_id)
        return updated

    @BaseService.measure_operation("remove_vehicle")
    def remove_vehicle(self, customer_id: str, vehicle_id: str) -> None:
        """
        Delete a saved vehicle; removing the primary promotes the oldest
        remaining vehicle.

        Raises:
            NotFoundException: Vehicle missing or owned by someone else
            BusinessRuleException: It is the customer's only vehicle
        """
        vehicle = self._get_owned_vehicle(customer_id, vehicle_id)
        vehicles = self.vehicle_repository.list_for_customer(customer_id)
        if len(vehicles) <= 1:
            raise BusinessRuleException(
                "Cannot remove the only vehicle on file",
                code="LAST_VEHICLE",
                details={"vehicle_id": vehicle_id},
            )

        was_primary = bool(vehicle.is_primary)
        with self.transaction():
            self.vehicle_repository.delete(vehicle)
            if was_primary:
                successor = next(v for v in vehicles if v.id != vehicle.id)
                self.vehicle_repository.update(
                    successor.id, is_primary=True, updated_at=self._now_provider()
                )

    def _get_customer(self, customer_id: str) -> User:
        customer = self.user_repository.get_by_id(customer_id)
        if customer is None:
            raise CustomerNotFoundException(customer_id)
        return customer

    def _get_owned_vehicle(self, customer_id: str, vehicle_id: str) -> Vehicle:
        self._get_customer(customer_id)
        vehicle = self.vehicle_repository.get_by_id(vehicle_id)
        # Someone else's vehicle looks exactly like a missing one
        if vehicle is None or vehicle.customer_id != customer_id:
            raise NotFoundException(
                "Vehicle not found", code="VEHICLE_NOT_FOUND", details={"vehicle_id": vehicle_id}
            )
        return vehicle

    def _ensure_plate_free(self, license_plate: str) -> None:
        if self.vehicle_repository.get_by_license_plate(license_plate) is not None:
            raise ConflictException(
                "License plate already registered",
                code="LICENSE_PLATE_TAKEN",
                details={"license_plate": license_plate},
            )
