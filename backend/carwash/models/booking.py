# backend/carwash/models/booking.py
"""
Booking model for the car wash platform.

A booking is the single owning record of a scheduled wash. It references
the customer and the service by id, snapshots the vehicle and location as
JSON, and fixes the price quoted at creation time. Bookings are never
deleted; they only move through the status lifecycle.
"""

import logging

from sqlalchemy import JSON, Column, ForeignKey, Index, Numeric, String, Text
import ulid

from ..core.enums import BookingStatus
from ..database import Base
from .types import UTCDateTime

logger = logging.getLogger(__name__)

# Statuses that still occupy a time slot
ACTIVE_BOOKING_STATUSES = (
    BookingStatus.PENDING.value,
    BookingStatus.CONFIRMED.value,
    BookingStatus.IN_PROGRESS.value,
)


class Booking(Base):
    """
    Scheduled wash for a customer's vehicle.

    Attributes:
        id: ULID primary key, generated by the booking workflow
        customer_id: Reference to the customer (users.id)
        service_id: Reference to the booked service (services.id)
        vehicle_info: Vehicle snapshot (make, model, year, color, plate, type)
        location: Where the wash happens (mobile address or in-store)
        scheduled_date: Start of the wash, stored in UTC
        status: Lifecycle status
        price: Price quoted at creation; never recomputed
        notes: Optional customer notes
        confirmation_code: Short code shared with the customer
    """

    __tablename__ = "bookings"

    id = Column(String(26), primary_key=True, index=True, default=lambda: str(ulid.ULID()))
    customer_id = Column(String(26), ForeignKey("users.id"), nullable=False, index=True)
    service_id = Column(String(26), ForeignKey("services.id"), nullable=False)

    vehicle_info = Column(JSON, nullable=False)
    location = Column(JSON, nullable=False)
    scheduled_date = Column(UTCDateTime, nullable=False)

    status = Column(String(20), nullable=False, default=BookingStatus.PENDING.value, index=True)
    price = Column(Numeric(10, 2), nullable=False)
    notes = Column(Text, nullable=True)
    confirmation_code = Column(String(16), nullable=False, unique=True, index=True)

    created_at = Column(UTCDateTime, nullable=False)
    updated_at = Column(UTCDateTime, nullable=False)

    __table_args__ = (Index("ix_bookings_service_schedule", "service_id", "scheduled_date"),)

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_BOOKING_STATUSES

    def __repr__(self) -> str:
        return f"<Booking {self.id} {self.status} service={self.service_id}>"
