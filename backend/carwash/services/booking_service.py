# backend/carwash/services/booking_service.py
"""
Booking Service for the car wash platform

Handles the booking lifecycle:
- Creating bookings (customer, service and slot checks, pricing, persistence)
- Looking bookings up by id or confirmation code
- Listing a customer's bookings
- Operator status transitions

Every collaborator is injected through a narrow contract (see contracts.py),
so the workflow holds no state of its own between calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
import logging
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy.orm import Session

from ..core.config import settings
from ..core.constants import ALLOWED_STATUS_TRANSITIONS, DEFAULT_QUERY_LIMIT
from ..core.enums import BookingStatus
from ..core.exceptions import (
    CustomerNotFoundException,
    InvalidStatusTransitionException,
    NotFoundException,
    ServiceNotAvailableException,
    TimeSlotUnavailableException,
)
from ..core.ulid_helper import (
    generate_confirmation_code,
    generate_ulid,
    normalize_confirmation_code,
)
from ..models.booking import Booking
from ..monitoring.prometheus_metrics import prometheus_metrics
from ..repositories.factory import RepositoryFactory
from .availability_service import AvailabilityService
from .base import BaseService
from .pricing_service import PricingService

if TYPE_CHECKING:
    from ..repositories.booking_repository import BookingRepository
    from ..schemas.booking import BookingCreate
    from .contracts import (
        AvailabilityChecker,
        BookingWriter,
        CustomerLookup,
        PriceCalculator,
        ServiceLookup,
    )

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BookingCreateResult:
    """Outcome of a successful booking request."""

    booking: Booking
    estimated_price: Decimal
    confirmation_code: str


class BookingService(BaseService):
    """
    Service layer for booking operations.

    Collaborators default to the SQLAlchemy repositories and the concrete
    pricing and availability services; tests pass their own.
    """

    def __init__(
        self,
        db: Session,
        customer_lookup: Optional["CustomerLookup"] = None,
        service_lookup: Optional["ServiceLookup"] = None,
        booking_writer: Optional["BookingWriter"] = None,
        pricing: Optional["PriceCalculator"] = None,
        availability: Optional["AvailabilityChecker"] = None,
        repository: Optional["BookingRepository"] = None,
    ):
        """
        Initialize booking service.

        Args:
            db: Database session
            customer_lookup: Finds customers by id
            service_lookup: Finds services by id
            booking_writer: Persists new bookings
            pricing: Quotes the booking price
            availability: Decides whether the slot is free
            repository: Booking repository used for reads and status updates
        """
        super().__init__(db)
        self.repository = repository or RepositoryFactory.create_booking_repository(db)
        self.customer_lookup = customer_lookup or RepositoryFactory.create_user_repository(db)
        self.service_lookup = service_lookup or RepositoryFactory.create_service_repository(db)
        self.booking_writer = booking_writer or self.repository
        self.pricing = pricing or PricingService()
        self.availability = availability or AvailabilityService(
            db, repository=self.repository, service_lookup=self.service_lookup
        )

    @BaseService.measure_operation("create_booking")
    def create_booking(self, request: "BookingCreate") -> BookingCreateResult:
        """
        Create a pending booking.

        Checks run in order and the first failure stops the workflow before
        any later collaborator is called.

        Args:
            request: Validated booking request

        Returns:
            The stored booking, its price and the customer confirmation code

        Raises:
            CustomerNotFoundException: Customer does not exist
            ServiceNotAvailableException: Service missing or inactive
            TimeSlotUnavailableException: Slot rejected by availability
        """
        self.log_operation(
            "create_booking",
            customer_id=request.customer_id,
            service_id=request.service_id,
            scheduled_date=request.scheduled_date.isoformat(),
        )

        customer = self.customer_lookup.get_by_id(request.customer_id)
        if customer is None:
            prometheus_metrics.inc_booking_outcome("customer_not_found")
            raise CustomerNotFoundException(request.customer_id)

        service = self.service_lookup.get_by_id(request.service_id)
        if service is None or not service.is_active:
            prometheus_metrics.inc_booking_outcome("service_not_available")
            raise ServiceNotAvailableException(request.service_id)

        if not self.availability.check_availability(request.service_id, request.scheduled_date):
            prometheus_metrics.inc_booking_outcome("slot_unavailable")
            raise TimeSlotUnavailableException(request.service_id, request.scheduled_date)

        price = self.pricing.calculate_price(service, request.vehicle_info, request.location)
        confirmation_code = generate_confirmation_code(settings.confirmation_code_length)
        now = datetime.now(timezone.utc)

        with self.transaction():
            booking = self.booking_writer.create(
                id=generate_ulid(),
                customer_id=request.customer_id,
                service_id=request.service_id,
                vehicle_info=request.vehicle_info.model_dump(mode="json"),
                location=request.location.model_dump(mode="json"),
                scheduled_date=request.scheduled_date,
                status=BookingStatus.PENDING.value,
                price=price,
                notes=request.notes,
                confirmation_code=confirmation_code,
                created_at=now,
                updated_at=now,
            )

        prometheus_metrics.inc_booking_outcome("created")
        self.logger.info(
            "Booking %s created for customer %s at %s",
            booking.id,
            request.customer_id,
            price,
        )
        return BookingCreateResult(
            booking=booking, estimated_price=price, confirmation_code=confirmation_code
        )

    def get_booking(self, booking_id: str) -> Booking:
        booking = self.repository.get_by_id(booking_id)
        if booking is None:
            raise NotFoundException(
                "Booking not found", code="BOOKING_NOT_FOUND", details={"booking_id": booking_id}
            )
        return booking

    def get_booking_by_confirmation_code(self, code: str) -> Booking:
        """Look a booking up by the code given to the customer (case-insensitive)."""
        booking = self.repository.get_by_confirmation_code(normalize_confirmation_code(code))
        if booking is None:
            raise NotFoundException(
                "Booking not found", code="BOOKING_NOT_FOUND", details={"confirmation_code": code}
            )
        return booking

    @BaseService.measure_operation("list_customer_bookings")
    def list_customer_bookings(
        self,
        customer_id: str,
        status: Optional[BookingStatus] = None,
        skip: int = 0,
        limit: int = DEFAULT_QUERY_LIMIT,
    ) -> List[Booking]:
        if self.customer_lookup.get_by_id(customer_id) is None:
            raise CustomerNotFoundException(customer_id)
        status_value = BookingStatus(status).value if status else None
        return self.repository.list_for_customer(
            customer_id, status=status_value, skip=skip, limit=limit
        )

    @BaseService.measure_operation("update_booking_status")
    def update_booking_status(self, booking_id: str, new_status: BookingStatus) -> Booking:
        """
        Move a booking to ``new_status``.

        Raises:
            NotFoundException: Booking does not exist
            InvalidStatusTransitionException: Transition not allowed from the current status
        """
        booking = self.get_booking(booking_id)
        current = BookingStatus(booking.status)
        requested = BookingStatus(new_status)

        if requested not in ALLOWED_STATUS_TRANSITIONS[current]:
            raise InvalidStatusTransitionException(booking_id, current.value, requested.value)

        self.log_operation(
            "update_booking_status",
            booking_id=booking_id,
            from_status=current.value,
            to_status=requested.value,
        )
        with self.transaction():
            updated = self.repository.update_status(
                booking_id, requested.value, datetime.now(timezone.utc)
            )
        return updated or booking
