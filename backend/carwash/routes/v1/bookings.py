# backend/carwash/routes/v1/bookings.py
"""
Booking routes - API v1

Versioned booking endpoints under /api/v1/bookings.
All business logic delegated to BookingService.

Endpoints:
    POST / - Create a pending booking
    GET /confirmation/{code} - Look a booking up by confirmation code
    GET /{booking_id} - Booking details
    PATCH /{booking_id}/status - Operator status transition
"""

import asyncio
import logging

from fastapi import APIRouter, Body, Depends, status
from fastapi.params import Path

from ...api.dependencies import get_booking_service
from ...core.exceptions import DomainException
from ...schemas.booking import (
    BookingCreate,
    BookingCreateResponse,
    BookingResponse,
    BookingStatusUpdate,
)
from ...services.booking_service import BookingService
from .errors import handle_domain_exception

logger = logging.getLogger(__name__)

# V1 router - no prefix here, will be added when mounting in main.py
router = APIRouter(tags=["bookings-v1"])

ULID_PATH_PATTERN = r"^[0-9A-HJKMNP-TV-Z]{26}$"


@router.post(
    "",
    response_model=BookingCreateResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        404: {"description": "Customer not found or service not available"},
        409: {"description": "Selected time slot is not available"},
    },
)
async def create_booking(
    booking_data: BookingCreate = Body(...),
    booking_service: BookingService = Depends(get_booking_service),
) -> BookingCreateResponse:
    """Create a pending booking and return its price and confirmation code."""
    try:
        result = await asyncio.to_thread(booking_service.create_booking, booking_data)
    except DomainException as e:
        handle_domain_exception(e)

    return BookingCreateResponse(
        booking=BookingResponse.model_validate(result.booking),
        estimated_price=result.estimated_price,
        confirmation_code=result.confirmation_code,
    )


@router.get("/confirmation/{code}", response_model=BookingResponse)
async def get_booking_by_confirmation_code(
    code: str = Path(..., min_length=4, max_length=32),
    booking_service: BookingService = Depends(get_booking_service),
) -> BookingResponse:
    try:
        booking = await asyncio.to_thread(booking_service.get_booking_by_confirmation_code, code)
    except DomainException as e:
        handle_domain_exception(e)
    return BookingResponse.model_validate(booking)


@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking(
    booking_id: str = Path(..., pattern=ULID_PATH_PATTERN),
    booking_service: BookingService = Depends(get_booking_service),
) -> BookingResponse:
    try:
        booking = await asyncio.to_thread(booking_service.get_booking, booking_id)
    except DomainException as e:
        handle_domain_exception(e)
    return BookingResponse.model_validate(booking)


@router.patch("/{booking_id}/status", response_model=BookingResponse)
async def update_booking_status(
    booking_id: str = Path(..., pattern=ULID_PATH_PATTERN),
    update: BookingStatusUpdate = Body(...),
    booking_service: BookingService = Depends(get_booking_service),
) -> BookingResponse:
    """Move a booking along its lifecycle (pending, confirmed, in_progress, completed, cancelled)."""
    try:
        booking = await asyncio.to_thread(
            booking_service.update_booking_status, booking_id, update.status
        )
    except DomainException as e:
        handle_domain_exception(e)
    return BookingResponse.model_validate(booking)
