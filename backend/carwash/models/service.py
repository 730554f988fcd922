# backend/carwash/models/service.py
"""
Service model for the car wash platform.

A service is an offering in the catalog (e.g. "Premium Wash"). Services
are soft-deleted via ``is_active`` so historical bookings keep a valid
reference; only active services can be booked.
"""

import logging

from sqlalchemy import Boolean, Column, Integer, Numeric, String, Text
from sqlalchemy.sql import func
import ulid

from ..database import Base
from .types import UTCDateTime

logger = logging.getLogger(__name__)


class Service(Base):
    """
    Catalog entry for a bookable wash or detailing service.

    Attributes:
        id: ULID primary key
        name: Display name
        slug: URL-friendly unique name
        description: Optional long description
        category: Category slug (wash, detailing, protection, ...)
        price: Base price in USD before vehicle and location adjustments
        duration_minutes: Expected duration of the service
        is_active: Whether the service is currently offered
    """

    __tablename__ = "services"

    id = Column(String(26), primary_key=True, index=True, default=lambda: str(ulid.ULID()))
    name = Column(String(120), nullable=False)
    slug = Column(String(120), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=True)
    category = Column(String(50), nullable=False, default="wash", index=True)
    price = Column(Numeric(10, 2), nullable=False)
    duration_minutes = Column(Integer, nullable=False, default=60)
    is_active = Column(Boolean, nullable=False, default=True, index=True)

    created_at = Column(UTCDateTime, server_default=func.now())
    updated_at = Column(UTCDateTime, onupdate=func.now())

    def __repr__(self) -> str:
        state = "active" if self.is_active else "inactive"
        return f"<Service {self.slug} ${self.price} {state}>"
