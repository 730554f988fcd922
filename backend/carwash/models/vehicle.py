# backend/carwash/models/vehicle.py
"""
Vehicle model for the car wash platform.

Customers keep a garage of saved vehicles. Exactly one of a customer's
vehicles is primary whenever they have any. Bookings never reference a
saved vehicle; they snapshot the vehicle details instead, so a vehicle can
be edited or removed without touching booking history.
"""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text
import ulid

from ..core.enums import VehicleSize, VehicleType
from ..database import Base
from .types import UTCDateTime


class Vehicle(Base):
    """
    A customer's saved vehicle.

    Attributes:
        id: ULID primary key
        customer_id: Owner (users.id)
        license_plate: Uppercased plate, unique across all customers
        is_primary: Preselected vehicle when the customer books
    """

    __tablename__ = "vehicles"

    id = Column(String(26), primary_key=True, index=True, default=lambda: str(ulid.ULID()))
    customer_id = Column(String(26), ForeignKey("users.id"), nullable=False, index=True)

    make = Column(String(50), nullable=False)
    model = Column(String(50), nullable=False)
    year = Column(Integer, nullable=False)
    color = Column(String(30), nullable=False)
    license_plate = Column(String(16), nullable=False, unique=True, index=True)
    vehicle_type = Column(String(20), nullable=False, default=VehicleType.SEDAN.value)
    vehicle_size = Column(String(10), nullable=False, default=VehicleSize.MEDIUM.value)
    vin = Column(String(17), nullable=True)
    notes = Column(Text, nullable=True)
    is_primary = Column(Boolean, nullable=False, default=False)

    created_at = Column(UTCDateTime, nullable=False)
    updated_at = Column(UTCDateTime, nullable=False)

    def __repr__(self) -> str:
        marker = " primary" if self.is_primary else ""
        return f"<Vehicle {self.license_plate} {self.make} {self.model}{marker}>"
