# backend/carwash/schemas/dashboard.py
"""Client dashboard schemas."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import ConfigDict

from .base import Money, StandardizedModel
from .booking import BookingResponse


class CustomerSummary(StandardizedModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    first_name: str
    last_name: str
    phone: Optional[str] = None


class DashboardStats(StandardizedModel):
    total_bookings: int
    bookings_this_month: int
    completed_bookings: int
    total_spent: Money
    spent_this_month: Money
    favorite_service_id: Optional[str] = None


class ActivityItem(StandardizedModel):
    id: str
    type: str
    title: str
    description: str
    date: datetime
    status: str
    metadata: Dict[str, Any] = {}


class ServiceRecommendation(StandardizedModel):
    service_id: str
    service_name: str
    reason: str
    priority: int  # 1 is shown first
    discount_percent: int


class ClientDashboardResponse(StandardizedModel):
    customer: CustomerSummary
    upcoming_bookings: List[BookingResponse]
    recent_activity: List[ActivityItem]
    stats: DashboardStats
    recommendations: List[ServiceRecommendation] = []
