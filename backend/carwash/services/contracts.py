"""Capability contracts consumed by the booking workflow.

Each contract is the narrowest interface the workflow needs from one
collaborator, so repositories, pricing and availability implementations
(or test doubles) can be swapped independently.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..models.booking import Booking
    from ..models.service import Service
    from ..models.user import User
    from ..schemas.booking import Location, VehicleInfo


@runtime_checkable
class CustomerLookup(Protocol):
    """Finds customers by id."""

    def get_by_id(self, id: Any) -> Optional["User"]:
        ...


@runtime_checkable
class ServiceLookup(Protocol):
    """Finds catalog services by id, active or not."""

    def get_by_id(self, id: Any) -> Optional["Service"]:
        ...


@runtime_checkable
class BookingWriter(Protocol):
    """Persists a new booking; may assign or confirm its identifier."""

    def create(self, **kwargs: Any) -> "Booking":
        ...


@runtime_checkable
class PriceCalculator(Protocol):
    """Quotes a price for a service on a given vehicle at a given location."""

    def calculate_price(
        self, service: "Service", vehicle_info: "VehicleInfo", location: "Location"
    ) -> Decimal:
        ...


@runtime_checkable
class AvailabilityChecker(Protocol):
    """Answers whether a service can be scheduled at a given start time."""

    def check_availability(self, service_id: str, scheduled_date: datetime) -> bool:
        ...
