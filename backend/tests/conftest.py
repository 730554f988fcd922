# backend/tests/conftest.py
"""
Pytest configuration for the car wash backend.

Every test runs against a fresh in-memory SQLite database; the application's
configured database is never touched.
"""

import os
import sys

# CRITICAL: Set testing mode BEFORE any carwash imports!
os.environ["DATABASE_URL"] = "sqlite://"

# Add the backend directory to Python path so imports work
backend_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, backend_dir)

from datetime import datetime, time, timedelta, timezone
from decimal import Decimal

from fastapi.testclient import TestClient
import pytest
import pytz
from sqlalchemy.orm import Session, sessionmaker

from carwash.api.dependencies.database import get_db
from carwash.core.config import settings
from carwash.core.enums import BookingStatus
from carwash.core.ulid_helper import generate_confirmation_code, generate_ulid
from carwash.database import Base, create_db_engine
from carwash.main import app
from carwash.models.booking import Booking
from carwash.models.service import Service
from carwash.models.user import User
from carwash.models.vehicle import Vehicle


@pytest.fixture
def test_engine():
    engine = create_db_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(test_engine) -> Session:
    TestSession = sessionmaker(bind=test_engine, autoflush=False, expire_on_commit=False)
    session = TestSession()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def client(db):
    """TestClient whose requests share the test session."""

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def test_customer(db) -> User:
    customer = User(
        email="jane.customer@example.com",
        first_name="Jane",
        last_name="Customer",
        phone="+15125550100",
    )
    db.add(customer)
    db.commit()
    return customer


@pytest.fixture
def test_service(db) -> Service:
    service = Service(
        name="Premium Wash",
        slug="premium-wash",
        description="Exterior wash, wax and tyre shine",
        category="wash",
        price=Decimal("42.50"),
        duration_minutes=60,
        is_active=True,
    )
    db.add(service)
    db.commit()
    return service


@pytest.fixture
def inactive_service(db) -> Service:
    service = Service(
        name="Retired Detail",
        slug="retired-detail",
        category="detailing",
        price=Decimal("120.00"),
        duration_minutes=120,
        is_active=False,
    )
    db.add(service)
    db.commit()
    return service


def next_bookable_start(days_ahead: int = 3, hour: int = 10) -> datetime:
    """First working day at least ``days_ahead`` days out, at ``hour`` business time, in UTC."""
    tz = pytz.timezone(settings.business_timezone)
    day = datetime.now(tz).date() + timedelta(days=days_ahead)
    while day.weekday() not in settings.working_days:
        day += timedelta(days=1)
    return tz.localize(datetime.combine(day, time(hour, 0))).astimezone(timezone.utc)


def make_booking(
    db: Session,
    customer: User,
    service: Service,
    scheduled_date: datetime,
    status: BookingStatus = BookingStatus.PENDING,
    price: Decimal = Decimal("42.50"),
    created_at: datetime | None = None,
) -> Booking:
    created = created_at or datetime.now(timezone.utc)
    booking = Booking(
        id=generate_ulid(),
        customer_id=customer.id,
        service_id=service.id,
        vehicle_info={
            "make": "Toyota",
            "model": "Camry",
            "year": 2021,
            "color": "Blue",
            "license_plate": "ABC123",
            "vehicle_type": "sedan",
        },
        location={
            "location_type": "mobile",
            "address": "100 Congress Ave",
            "city": "Austin",
            "state": "TX",
            "zip_code": "78701",
            "coordinates": None,
        },
        scheduled_date=scheduled_date,
        status=status.value,
        price=price,
        confirmation_code=generate_confirmation_code(),
        created_at=created,
        updated_at=created,
    )
    db.add(booking)
    db.commit()
    return booking


@pytest.fixture
def bookable_start():
    return next_bookable_start


@pytest.fixture
def booking_factory(db, test_customer, test_service):
    def _factory(**kwargs):
        kwargs.setdefault("scheduled_date", next_bookable_start())
        customer = kwargs.pop("customer", test_customer)
        service = kwargs.pop("service", test_service)
        return make_booking(db, customer, service, **kwargs)

    return _factory


@pytest.fixture
def vehicle_factory(db, test_customer):
    def _factory(license_plate, is_primary=False, customer=None, created_at=None):
        created = created_at or datetime.now(timezone.utc)
        vehicle = Vehicle(
            id=generate_ulid(),
            customer_id=(customer or test_customer).id,
            make="Honda",
            model="Civic",
            year=2020,
            color="Grey",
            license_plate=license_plate,
            vehicle_type="sedan",
            vehicle_size="medium",
            is_primary=is_primary,
            created_at=created,
            updated_at=created,
        )
        db.add(vehicle)
        db.commit()
        return vehicle

    return _factory
