# backend/carwash/models/user.py
"""
User model for the car wash platform.

Customers, operators and staff share one table, differentiated by ``role``.
Bookings reference users by id; user data is never copied onto a booking.
"""

import logging

from sqlalchemy import Boolean, Column, String
from sqlalchemy.sql import func
import ulid

from ..core.enums import UserRole
from ..database import Base
from .types import UTCDateTime

logger = logging.getLogger(__name__)


class User(Base):
    """
    Platform user.

    Attributes:
        id: ULID primary key
        email: Unique email address
        first_name: User's first name
        last_name: User's last name
        phone: Optional phone number
        role: One of customer, operator, admin, manager
        is_active: Whether the account is active
        created_at: Account creation timestamp
        updated_at: Last update timestamp
    """

    __tablename__ = "users"

    id = Column(String(26), primary_key=True, index=True, default=lambda: str(ulid.ULID()))
    email = Column(String(255), unique=True, nullable=False, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    phone = Column(String(32), nullable=True)
    role = Column(String(20), nullable=False, default=UserRole.CUSTOMER.value)
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(UTCDateTime, server_default=func.now())
    updated_at = Column(UTCDateTime, onupdate=func.now())

    def __repr__(self) -> str:
        return f"<User {self.email} ({self.role})>"
