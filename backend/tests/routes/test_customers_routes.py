# backend/tests/routes/test_customers_routes.py
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from carwash.core.enums import BookingStatus


def test_customer_bookings(client, test_customer, booking_factory, bookable_start):
    first = booking_factory(scheduled_date=bookable_start(days_ahead=3))
    second = booking_factory(
        scheduled_date=bookable_start(days_ahead=7), status=BookingStatus.CONFIRMED
    )

    r = client.get(f"/api/v1/customers/{test_customer.id}/bookings")
    assert r.status_code == 200
    body = r.json()
    assert body["total"] == 2
    assert [b["id"] for b in body["items"]] == [second.id, first.id]

    r = client.get(
        f"/api/v1/customers/{test_customer.id}/bookings", params={"status": "confirmed"}
    )
    assert [b["id"] for b in r.json()["items"]] == [second.id]


def test_customer_bookings_unknown_customer(client):
    r = client.get("/api/v1/customers/missing/bookings")

    assert r.status_code == 404
    assert r.json()["detail"]["code"] == "CUSTOMER_NOT_FOUND"


def test_dashboard(client, test_customer, test_service, booking_factory, bookable_start):
    now = datetime.now(timezone.utc)
    upcoming = booking_factory(scheduled_date=bookable_start())
    booking_factory(
        scheduled_date=now - timedelta(days=3),
        status=BookingStatus.COMPLETED,
        price=Decimal("60.00"),
        created_at=now - timedelta(days=5),
    )

    r = client.get(f"/api/v1/customers/{test_customer.id}/dashboard")

    assert r.status_code == 200, r.text
    body = r.json()
    assert body["customer"]["email"] == test_customer.email
    assert [b["id"] for b in body["upcoming_bookings"]] == [upcoming.id]
    stats = body["stats"]
    assert stats["total_bookings"] == 2
    assert stats["completed_bookings"] == 1
    assert stats["total_spent"] == 60.0
    assert stats["favorite_service_id"] == test_service.id
    assert {item["type"] for item in body["recent_activity"]} == {"booking", "payment"}
    assert body["recommendations"][0]["service_id"] == test_service.id
    assert body["recommendations"][0]["priority"] == 1


def test_dashboard_unknown_customer(client):
    assert client.get("/api/v1/customers/missing/dashboard").status_code == 404


def test_customer_profile(client, test_customer, vehicle_factory):
    vehicle_factory("SPARE1")
    primary = vehicle_factory("PRI1", is_primary=True)

    r = client.get(f"/api/v1/customers/{test_customer.id}")

    assert r.status_code == 200, r.text
    body = r.json()
    assert body["customer"]["id"] == test_customer.id
    assert [v["license_plate"] for v in body["vehicles"]] == ["PRI1", "SPARE1"]
    assert body["primary_vehicle_id"] == primary.id


def test_customer_profile_unknown_customer(client):
    r = client.get("/api/v1/customers/missing")

    assert r.status_code == 404
    assert r.json()["detail"]["code"] == "CUSTOMER_NOT_FOUND"


def test_vehicle_management_flow(client, test_customer):
    base = f"/api/v1/customers/{test_customer.id}/vehicles"
    payload = {"make": "Toyota", "model": "RAV4", "year": 2022, "color": "White"}

    r = client.post(base, json={**payload, "license_plate": "rav 4", "vehicle_type": "suv"})
    assert r.status_code == 201, r.text
    first = r.json()
    assert first["is_primary"] is True
    assert first["license_plate"] == "RAV 4"
    assert first["vehicle_size"] == "medium"

    r = client.post(base, json={**payload, "license_plate": "SECOND"})
    second = r.json()
    assert r.status_code == 201
    assert second["is_primary"] is False

    r = client.patch(f"{base}/{second['id']}", json={"color": "Black"})
    assert r.status_code == 200
    assert r.json()["color"] == "Black"

    r = client.post(f"{base}/{second['id']}/primary")
    assert r.status_code == 200
    assert r.json()["is_primary"] is True

    r = client.delete(f"{base}/{second['id']}")
    assert r.status_code == 204

    r = client.get(base)
    assert [(v["id"], v["is_primary"]) for v in r.json()] == [(first["id"], True)]

    r = client.delete(f"{base}/{first['id']}")
    assert r.status_code == 422
    assert r.json()["detail"]["code"] == "LAST_VEHICLE"


def test_duplicate_license_plate_conflicts(client, test_customer, vehicle_factory):
    vehicle_factory("ABC123")

    r = client.post(
        f"/api/v1/customers/{test_customer.id}/vehicles",
        json={
            "make": "Mazda",
            "model": "3",
            "year": 2019,
            "color": "Red",
            "license_plate": "abc123",
        },
    )

    assert r.status_code == 409
    assert r.json()["detail"]["code"] == "LICENSE_PLATE_TAKEN"


def test_unknown_vehicle_is_not_found(client, test_customer):
    r = client.patch(
        f"/api/v1/customers/{test_customer.id}/vehicles/missing", json={"color": "Black"}
    )

    assert r.status_code == 404
    assert r.json()["detail"]["code"] == "VEHICLE_NOT_FOUND"
