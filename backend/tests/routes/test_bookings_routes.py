# backend/tests/routes/test_bookings_routes.py
"""API tests for /api/v1/bookings against an in-memory database."""

from unittest.mock import Mock

from fastapi.testclient import TestClient

from carwash.api.dependencies import get_booking_service
from carwash.main import app


def booking_payload(customer_id, service_id, scheduled_date, **overrides):
    payload = {
        "customer_id": customer_id,
        "service_id": service_id,
        "vehicle_info": {
            "make": "Honda",
            "model": "Civic",
            "year": 2022,
            "color": "Silver",
            "license_plate": "xyz 789",
            "vehicle_type": "sedan",
        },
        "location": {
            "location_type": "mobile",
            "address": "500 W 2nd St",
            "city": "Austin",
            "state": "TX",
            "zip_code": "78701",
        },
        "scheduled_date": scheduled_date.isoformat(),
        "notes": "Park in visitor spot",
    }
    payload.update(overrides)
    return payload


def test_create_booking_returns_pending_priced_booking(
    client, test_customer, test_service, bookable_start
):
    r = client.post(
        "/api/v1/bookings",
        json=booking_payload(test_customer.id, test_service.id, bookable_start()),
    )

    assert r.status_code == 201, r.text
    body = r.json()
    assert body["estimated_price"] == 51.0  # medium sedan: 42.50 x 1.2
    assert len(body["confirmation_code"]) == 8
    booking = body["booking"]
    assert booking["status"] == "pending"
    assert booking["price"] == 51.0
    assert booking["customer_id"] == test_customer.id
    assert booking["service_id"] == test_service.id
    assert booking["vehicle_info"]["license_plate"] == "XYZ 789"
    assert booking["confirmation_code"] == body["confirmation_code"]
    assert booking["id"] != body["confirmation_code"]


def test_small_vehicle_is_quoted_at_base_price(client, test_customer, test_service, bookable_start):
    payload = booking_payload(test_customer.id, test_service.id, bookable_start())
    payload["vehicle_info"]["vehicle_size"] = "small"

    r = client.post("/api/v1/bookings", json=payload)

    assert r.status_code == 201, r.text
    assert r.json()["estimated_price"] == 42.5


def test_booked_booking_can_be_fetched_by_id_and_code(
    client, test_customer, test_service, bookable_start
):
    created = client.post(
        "/api/v1/bookings",
        json=booking_payload(test_customer.id, test_service.id, bookable_start()),
    ).json()
    booking_id = created["booking"]["id"]
    code = created["confirmation_code"]

    r = client.get(f"/api/v1/bookings/{booking_id}")
    assert r.status_code == 200
    assert r.json()["confirmation_code"] == code

    r = client.get(f"/api/v1/bookings/confirmation/{code.lower()}")
    assert r.status_code == 200
    assert r.json()["id"] == booking_id


def test_same_slot_cannot_be_booked_twice(client, test_customer, test_service, bookable_start):
    payload = booking_payload(test_customer.id, test_service.id, bookable_start())
    assert client.post("/api/v1/bookings", json=payload).status_code == 201

    r = client.post("/api/v1/bookings", json=payload)

    assert r.status_code == 409
    assert r.json()["detail"]["code"] == "TIME_SLOT_UNAVAILABLE"
    assert r.json()["detail"]["message"] == "Selected time slot is not available"


def test_unknown_customer(client, test_service, bookable_start):
    r = client.post(
        "/api/v1/bookings",
        json=booking_payload("01HZZZZZZZZZZZZZZZZZZZZZZZ", test_service.id, bookable_start()),
    )

    assert r.status_code == 404
    assert r.json()["detail"]["code"] == "CUSTOMER_NOT_FOUND"


def test_inactive_service(client, test_customer, inactive_service, bookable_start):
    r = client.post(
        "/api/v1/bookings",
        json=booking_payload(test_customer.id, inactive_service.id, bookable_start()),
    )

    assert r.status_code == 404
    assert r.json()["detail"]["code"] == "SERVICE_NOT_AVAILABLE"


def test_naive_datetime_and_extra_fields_rejected(client, test_customer, test_service, bookable_start):
    naive = bookable_start().replace(tzinfo=None)
    r = client.post(
        "/api/v1/bookings", json=booking_payload(test_customer.id, test_service.id, naive)
    )
    assert r.status_code == 422

    r = client.post(
        "/api/v1/bookings",
        json=booking_payload(test_customer.id, test_service.id, bookable_start(), coupon="FREE"),
    )
    assert r.status_code == 422


def test_status_lifecycle(client, test_customer, test_service, bookable_start):
    booking_id = client.post(
        "/api/v1/bookings",
        json=booking_payload(test_customer.id, test_service.id, bookable_start()),
    ).json()["booking"]["id"]

    r = client.patch(f"/api/v1/bookings/{booking_id}/status", json={"status": "confirmed"})
    assert r.status_code == 200
    assert r.json()["status"] == "confirmed"

    r = client.patch(f"/api/v1/bookings/{booking_id}/status", json={"status": "pending"})
    assert r.status_code == 422
    assert r.json()["detail"]["code"] == "INVALID_STATUS_TRANSITION"


def test_unknown_booking(client):
    r = client.get("/api/v1/bookings/01HZZZZZZZZZZZZZZZZZZZZZZZ")

    assert r.status_code == 404
    assert r.json()["detail"]["code"] == "BOOKING_NOT_FOUND"


def test_unexpected_errors_are_not_translated(bookable_start):
    failing = Mock()
    failing.create_booking.side_effect = RuntimeError("pricing backend down")
    app.dependency_overrides[get_booking_service] = lambda: failing
    try:
        client = TestClient(app, raise_server_exceptions=False)
        r = client.post(
            "/api/v1/bookings",
            json=booking_payload("C1", "S1", bookable_start()),
        )
    finally:
        app.dependency_overrides.clear()

    assert r.status_code == 500
    failing.create_booking.assert_called_once()
