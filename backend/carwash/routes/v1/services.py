# backend/carwash/routes/v1/services.py
"""
Service catalog routes - API v1

Endpoints:
    GET / - Active services, optionally filtered by category
    GET /{service_id} - Single service
    GET /{service_id}/availability - Day's slots for a service
    GET /{service_id}/availability/window - Slots for a range of days
"""

import asyncio
from datetime import date
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.params import Path

from ...api.dependencies import get_availability_service, get_catalog_service
from ...core.exceptions import DomainException
from ...schemas.service import (
    AvailabilityDayResponse,
    AvailabilityResponse,
    AvailabilityWindowResponse,
    ServiceListResponse,
    ServiceResponse,
    TimeSlotResponse,
)
from ...services.availability_service import AvailabilityService, TimeSlot
from ...services.catalog_service import CatalogService
from .errors import handle_domain_exception

logger = logging.getLogger(__name__)

router = APIRouter(tags=["services-v1"])


@router.get("", response_model=ServiceListResponse)
async def list_services(
    category: Optional[str] = Query(None, max_length=50),
    catalog_service: CatalogService = Depends(get_catalog_service),
) -> ServiceListResponse:
    services = await asyncio.to_thread(catalog_service.list_services, category)
    items = [ServiceResponse.model_validate(s) for s in services]
    return ServiceListResponse(items=items, total=len(items))


@router.get("/{service_id}", response_model=ServiceResponse)
async def get_service(
    service_id: str = Path(...),
    catalog_service: CatalogService = Depends(get_catalog_service),
) -> ServiceResponse:
    try:
        service = await asyncio.to_thread(catalog_service.get_service, service_id)
    except DomainException as e:
        handle_domain_exception(e)
    return ServiceResponse.model_validate(service)


@router.get("/{service_id}/availability", response_model=AvailabilityResponse)
async def get_service_availability(
    service_id: str = Path(...),
    day: date = Query(..., description="Day to list slots for (YYYY-MM-DD)"),
    catalog_service: CatalogService = Depends(get_catalog_service),
    availability_service: AvailabilityService = Depends(get_availability_service),
) -> AvailabilityResponse:
    """List the day's slots; a day without any free slot is reported as fully booked."""
    try:
        await asyncio.to_thread(catalog_service.get_service, service_id)
    except DomainException as e:
        handle_domain_exception(e)

    slots = await asyncio.to_thread(availability_service.get_available_slots, service_id, day)
    return AvailabilityResponse(
        service_id=service_id,
        day=day,
        slots=[_slot_response(slot) for slot in slots],
        is_fully_booked=not any(slot.is_available for slot in slots),
    )


@router.get("/{service_id}/availability/window", response_model=AvailabilityWindowResponse)
async def get_service_availability_window(
    service_id: str = Path(...),
    start_day: date = Query(..., description="First day of the window (YYYY-MM-DD)"),
    end_day: date = Query(..., description="Last day of the window, inclusive"),
    catalog_service: CatalogService = Depends(get_catalog_service),
    availability_service: AvailabilityService = Depends(get_availability_service),
) -> AvailabilityWindowResponse:
    """Slots for each day in the range, with a fully-booked flag per day."""
    try:
        await asyncio.to_thread(catalog_service.get_service, service_id)
        days = await asyncio.to_thread(
            availability_service.get_availability_window, service_id, start_day, end_day
        )
    except DomainException as e:
        handle_domain_exception(e)

    return AvailabilityWindowResponse(
        service_id=service_id,
        start_day=start_day,
        end_day=end_day,
        days=[
            AvailabilityDayResponse(
                day=d.day,
                slots=[_slot_response(slot) for slot in d.slots],
                is_fully_booked=d.is_fully_booked,
            )
            for d in days
        ],
    )


def _slot_response(slot: TimeSlot) -> TimeSlotResponse:
    return TimeSlotResponse(
        start_time=slot.start_time, end_time=slot.end_time, is_available=slot.is_available
    )
