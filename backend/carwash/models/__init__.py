"""
Database models for the car wash platform.

- User: customers and staff
- Service: catalog of bookable services
- Booking: scheduled washes
- Vehicle: customers' saved vehicles
"""

from .booking import ACTIVE_BOOKING_STATUSES, Booking
from .service import Service
from .user import User
from .vehicle import Vehicle

__all__ = [
    "ACTIVE_BOOKING_STATUSES",
    "Booking",
    "Service",
    "User",
    "Vehicle",
]
