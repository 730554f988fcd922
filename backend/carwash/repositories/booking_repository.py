# backend/carwash/repositories/booking_repository.py
"""
Booking Repository for the car wash platform

Implements all data access operations for booking management:
- Creation (called by the booking workflow)
- Lookups by id and confirmation code
- Customer history and upcoming bookings
- Slot occupancy queries used by the availability service
- Status updates
"""

from datetime import datetime
import logging
from typing import Any, List, Optional

from sqlalchemy.orm import Session

from ..models.booking import ACTIVE_BOOKING_STATUSES, Booking
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class BookingRepository(BaseRepository[Booking]):
    """
    Repository for booking data access.

    Bookings are never deleted; status changes go through ``update_status``.
    """

    def __init__(self, db: Session):
        super().__init__(db, Booking)
        self.logger = logging.getLogger(__name__)

    def create(self, **kwargs: Any) -> Booking:
        """Persist a new booking and log it."""
        booking = super().create(**kwargs)
        self.logger.info(
            "Created booking %s for customer %s (service %s)",
            booking.id,
            booking.customer_id,
            booking.service_id,
        )
        return booking

    def get_by_confirmation_code(self, confirmation_code: str) -> Optional[Booking]:
        return self.find_one_by(confirmation_code=confirmation_code)

    def list_for_customer(
        self,
        customer_id: str,
        status: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Booking]:
        """Customer's bookings, newest scheduled first."""
        query = self._build_query().filter(Booking.customer_id == customer_id)
        if status:
            query = query.filter(Booking.status == status)
        query = query.order_by(Booking.scheduled_date.desc()).offset(skip).limit(limit)
        return self._execute_query(query)

    def list_upcoming_for_customer(
        self, customer_id: str, now: datetime, limit: int = 10
    ) -> List[Booking]:
        """Active bookings scheduled after ``now``, soonest first."""
        query = (
            self._build_query()
            .filter(
                Booking.customer_id == customer_id,
                Booking.status.in_(ACTIVE_BOOKING_STATUSES),
                Booking.scheduled_date > now,
            )
            .order_by(Booking.scheduled_date.asc())
            .limit(limit)
        )
        return self._execute_query(query)

    def list_created_since(self, customer_id: str, since: datetime, limit: int = 10) -> List[Booking]:
        """Bookings the customer created at or after ``since``, newest first."""
        query = (
            self._build_query()
            .filter(Booking.customer_id == customer_id, Booking.created_at >= since)
            .order_by(Booking.created_at.desc())
            .limit(limit)
        )
        return self._execute_query(query)

    def list_active_for_service_between(
        self, service_id: str, start: datetime, end: datetime
    ) -> List[Booking]:
        """Active bookings for a service with ``start <= scheduled_date < end``."""
        query = (
            self._build_query()
            .filter(
                Booking.service_id == service_id,
                Booking.scheduled_date >= start,
                Booking.scheduled_date < end,
                Booking.status.in_(ACTIVE_BOOKING_STATUSES),
            )
            .order_by(Booking.scheduled_date.asc())
        )
        return self._execute_query(query)

    def update_status(self, booking_id: str, status: str, updated_at: datetime) -> Optional[Booking]:
        return self.update(booking_id, status=status, updated_at=updated_at)
