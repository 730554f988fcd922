# backend/carwash/routes/v1/customers.py
"""
Customer routes - API v1

Endpoints:
    GET /{customer_id} - Profile with saved vehicles
    GET /{customer_id}/bookings - Customer's booking history
    GET /{customer_id}/dashboard - Client dashboard
    GET /{customer_id}/vehicles - Saved vehicles, primary first
    POST /{customer_id}/vehicles - Add a vehicle
    PATCH /{customer_id}/vehicles/{vehicle_id} - Edit a vehicle
    POST /{customer_id}/vehicles/{vehicle_id}/primary - Make a vehicle primary
    DELETE /{customer_id}/vehicles/{vehicle_id} - Remove a vehicle
"""

import asyncio
import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Query, Response, status
from fastapi.params import Path

from ...api.dependencies import (
    get_booking_service,
    get_client_dashboard_service,
    get_customer_service,
)
from ...core.constants import DEFAULT_QUERY_LIMIT, MAX_QUERY_LIMIT
from ...core.enums import BookingStatus
from ...core.exceptions import DomainException
from ...schemas.booking import BookingListResponse, BookingResponse
from ...schemas.customer import (
    CustomerProfileResponse,
    VehicleCreate,
    VehicleResponse,
    VehicleUpdate,
)
from ...schemas.dashboard import (
    ActivityItem,
    ClientDashboardResponse,
    CustomerSummary,
    DashboardStats,
    ServiceRecommendation,
)
from ...services.booking_service import BookingService
from ...services.client_dashboard_service import ClientDashboardService
from ...services.customer_service import CustomerService
from .errors import handle_domain_exception

logger = logging.getLogger(__name__)

router = APIRouter(tags=["customers-v1"])


@router.get("/{customer_id}/bookings", response_model=BookingListResponse)
async def list_customer_bookings(
    customer_id: str = Path(...),
    status: Optional[BookingStatus] = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(DEFAULT_QUERY_LIMIT, ge=1, le=MAX_QUERY_LIMIT),
    booking_service: BookingService = Depends(get_booking_service),
) -> BookingListResponse:
    try:
        bookings = await asyncio.to_thread(
            booking_service.list_customer_bookings,
            customer_id,
            status=status,
            skip=skip,
            limit=limit,
        )
    except DomainException as e:
        handle_domain_exception(e)

    items = [BookingResponse.model_validate(b) for b in bookings]
    return BookingListResponse(items=items, total=len(items))


@router.get("/{customer_id}/dashboard", response_model=ClientDashboardResponse)
async def get_client_dashboard(
    customer_id: str = Path(...),
    dashboard_service: ClientDashboardService = Depends(get_client_dashboard_service),
) -> ClientDashboardResponse:
    try:
        data = await asyncio.to_thread(dashboard_service.get_dashboard, customer_id)
    except DomainException as e:
        handle_domain_exception(e)

    return ClientDashboardResponse(
        customer=CustomerSummary.model_validate(data["customer"]),
        upcoming_bookings=[BookingResponse.model_validate(b) for b in data["upcoming_bookings"]],
        recent_activity=[ActivityItem(**item) for item in data["recent_activity"]],
        stats=DashboardStats(**data["stats"]),
        recommendations=[ServiceRecommendation(**item) for item in data["recommendations"]],
    )


@router.get("/{customer_id}", response_model=CustomerProfileResponse)
async def get_customer_profile(
    customer_id: str = Path(...),
    customer_service: CustomerService = Depends(get_customer_service),
) -> CustomerProfileResponse:
    try:
        data = await asyncio.to_thread(customer_service.get_profile, customer_id)
    except DomainException as e:
        handle_domain_exception(e)

    return CustomerProfileResponse(
        customer=CustomerSummary.model_validate(data["customer"]),
        vehicles=[VehicleResponse.model_validate(v) for v in data["vehicles"]],
        primary_vehicle_id=data["primary_vehicle_id"],
    )


@router.get("/{customer_id}/vehicles", response_model=List[VehicleResponse])
async def list_vehicles(
    customer_id: str = Path(...),
    customer_service: CustomerService = Depends(get_customer_service),
) -> List[VehicleResponse]:
    try:
        vehicles = await asyncio.to_thread(customer_service.list_vehicles, customer_id)
    except DomainException as e:
        handle_domain_exception(e)

    return [VehicleResponse.model_validate(v) for v in vehicles]


@router.post(
    "/{customer_id}/vehicles",
    response_model=VehicleResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"description": "License plate already registered"}},
)
async def add_vehicle(
    customer_id: str = Path(...),
    vehicle_data: VehicleCreate = Body(...),
    customer_service: CustomerService = Depends(get_customer_service),
) -> VehicleResponse:
    try:
        vehicle = await asyncio.to_thread(customer_service.add_vehicle, customer_id, vehicle_data)
    except DomainException as e:
        handle_domain_exception(e)

    return VehicleResponse.model_validate(vehicle)


@router.patch("/{customer_id}/vehicles/{vehicle_id}", response_model=VehicleResponse)
async def update_vehicle(
    customer_id: str = Path(...),
    vehicle_id: str = Path(...),
    vehicle_data: VehicleUpdate = Body(...),
    customer_service: CustomerService = Depends(get_customer_service),
) -> VehicleResponse:
    try:
        vehicle = await asyncio.to_thread(
            customer_service.update_vehicle, customer_id, vehicle_id, vehicle_data
        )
    except DomainException as e:
        handle_domain_exception(e)

    return VehicleResponse.model_validate(vehicle)


@router.post("/{customer_id}/vehicles/{vehicle_id}/primary", response_model=VehicleResponse)
async def set_primary_vehicle(
    customer_id: str = Path(...),
    vehicle_id: str = Path(...),
    customer_service: CustomerService = Depends(get_customer_service),
) -> VehicleResponse:
    try:
        vehicle = await asyncio.to_thread(
            customer_service.set_primary_vehicle, customer_id, vehicle_id
        )
    except DomainException as e:
        handle_domain_exception(e)

    return VehicleResponse.model_validate(vehicle)


@router.delete(
    "/{customer_id}/vehicles/{vehicle_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={422: {"description": "The customer's only vehicle cannot be removed"}},
)
async def remove_vehicle(
    customer_id: str = Path(...),
    vehicle_id: str = Path(...),
    customer_service: CustomerService = Depends(get_customer_service),
) -> Response:
    try:
        await asyncio.to_thread(customer_service.remove_vehicle, customer_id, vehicle_id)
    except DomainException as e:
        handle_domain_exception(e)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
