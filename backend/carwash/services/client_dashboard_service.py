# backend/carwash/services/client_dashboard_service.py
"""
Client Dashboard Service

Builds the customer's dashboard: upcoming bookings, booking statistics,
service recommendations and a short feed of recent activity.
"""

from collections import Counter
from datetime import datetime, timedelta, timezone
from decimal import Decimal
import logging
from typing import Any, Callable, Dict, List, Optional

from sqlalchemy.orm import Session

from ..core.constants import (
    FAVORITE_SERVICE_DISCOUNT_PERCENT,
    MAX_QUERY_LIMIT,
    MAX_RECOMMENDATIONS,
    NEW_CATEGORY_DISCOUNT_PERCENT,
    RECENT_ACTIVITY_DAYS,
    RECENT_ACTIVITY_LIMIT,
    UPGRADE_DISCOUNT_PERCENT,
)
from ..core.enums import BookingStatus
from ..core.exceptions import CustomerNotFoundException
from ..models.booking import Booking
from ..models.service import Service
from ..repositories.booking_repository import BookingRepository
from ..repositories.factory import RepositoryFactory
from ..repositories.service_repository import ServiceRepository
from ..repositories.user_repository import UserRepository
from .base import BaseService

logger = logging.getLogger(__name__)

UPCOMING_LIMIT = 10


class ClientDashboardService(BaseService):
    def __init__(
        self,
        db: Session,
        user_repository: Optional[UserRepository] = None,
        booking_repository: Optional[BookingRepository] = None,
        service_repository: Optional[ServiceRepository] = None,
        now_provider: Optional[Callable[[], datetime]] = None,
    ):
        super().__init__(db)
        self.user_repository = user_repository or RepositoryFactory.create_user_repository(db)
        self.booking_repository = (
            booking_repository or RepositoryFactory.create_booking_repository(db)
        )
        self.service_repository = (
            service_repository or RepositoryFactory.create_service_repository(db)
        )
        self._now_provider = now_provider or (lambda: datetime.now(timezone.utc))

    @BaseService.measure_operation("get_dashboard")
    def get_dashboard(self, customer_id: str) -> Dict[str, Any]:
        """
        Assemble the dashboard payload for a customer.

        Raises:
            CustomerNotFoundException: Customer does not exist
        """
        customer = self.user_repository.get_by_id(customer_id)
        if customer is None:
            raise CustomerNotFoundException(customer_id)

        now = self._now_provider()
        all_bookings = self.booking_repository.list_for_customer(customer_id, limit=MAX_QUERY_LIMIT)
        upcoming = self.booking_repository.list_upcoming_for_customer(
            customer_id, now, limit=UPCOMING_LIMIT
        )
        recent = self.booking_repository.list_created_since(
            customer_id, now - timedelta(days=RECENT_ACTIVITY_DAYS), limit=RECENT_ACTIVITY_LIMIT
        )

        return {
            "customer": customer,
            "upcoming_bookings": upcoming,
            "stats": self.calculate_stats(all_bookings, now),
            "recommendations": self.generate_recommendations(
                all_bookings, self.service_repository.list_active()
            ),
            "recent_activity": self.build_recent_activity(recent),
        }

    @staticmethod
    def calculate_stats(bookings: List[Booking], now: datetime) -> Dict[str, Any]:
        """
        Totals over the customer's bookings; money only counts completed ones.

        "This month" means scheduled on or after the first of the current UTC
        month, so a wash booked last month and done this month counts here.
        """
        month_start = now.astimezone(timezone.utc).replace(
            day=1, hour=0, minute=0, second=0, microsecond=0
        )

        def in_current_month(booking: Booking) -> bool:
            scheduled = booking.scheduled_date
            if scheduled.tzinfo is None:
                scheduled = scheduled.replace(tzinfo=timezone.utc)
            return scheduled >= month_start

        completed = [b for b in bookings if b.status == BookingStatus.COMPLETED.value]
        service_counts = Counter(b.service_id for b in bookings)
        favorite = service_counts.most_common(1)[0][0] if service_counts else None

        return {
            "total_bookings": len(bookings),
            "bookings_this_month": sum(1 for b in bookings if in_current_month(b)),
            "completed_bookings": len(completed),
            "total_spent": sum((Decimal(b.price) for b in completed), Decimal("0")),
            "spent_this_month": sum(
                (Decimal(b.price) for b in completed if in_current_month(b)), Decimal("0")
            ),
            "favorite_service_id": favorite,
        }

    @staticmethod
    def generate_recommendations(
        bookings: List[Booking], services: List[Service]
    ) -> List[Dict[str, Any]]:
        """
        Up to MAX_RECOMMENDATIONS active services, favourite first.

        1. The most booked service that is still offered
        2. A pricier, never-booked service in the favourite's category
        3. The cheapest service from a category the customer has never booked
        """
        active = {s.id: s for s in services}
        counts = Counter(b.service_id for b in bookings)
        recommendations: List[Dict[str, Any]] = []

        def recommend(service: Service, reason: str, priority: int, discount: int) -> None:
            recommendations.append(
                {
                    "service_id": service.id,
                    "service_name": service.name,
                    "reason": reason,
                    "priority": priority,
                    "discount_percent": discount,
                }
            )

        favorite = next((active[sid] for sid, _ in counts.most_common() if sid in active), None)
        if favorite is not None:
            recommend(favorite, "Your favorite service", 1, FAVORITE_SERVICE_DISCOUNT_PERCENT)
            upgrades = [
                s
                for s in services
                if s.category == favorite.category
                and s.id not in counts
                and Decimal(s.price) > Decimal(favorite.price)
            ]
            if upgrades:
                upgrade = max(upgrades, key=lambda s: Decimal(s.price))
                recommend(
                    upgrade, f"An upgrade on {favorite.name}", 2, UPGRADE_DISCOUNT_PERCENT
                )

        booked_categories = {active[sid].category for sid in counts if sid in active}
        unexplored = [s for s in services if s.category not in booked_categories]
        if unexplored:
            pick = min(unexplored, key=lambda s: (Decimal(s.price), s.name))
            recommend(
                pick, f"Try our {pick.category} services", 3, NEW_CATEGORY_DISCOUNT_PERCENT
            )

        return recommendations[:MAX_RECOMMENDATIONS]

    @staticmethod
    def build_recent_activity(bookings: List[Booking]) -> List[Dict[str, Any]]:
        """
        Activity feed entries, newest first, capped at RECENT_ACTIVITY_LIMIT.

        Every booking yields a booking entry; completed bookings also yield
        a payment entry.
        """
        activities: List[Dict[str, Any]] = []
        for booking in bookings:
            amount = float(booking.price)
            activities.append(
                {
                    "id": f"booking-{booking.id}",
                    "type": "booking",
                    "title": f"Booking {booking.status}",
                    "description": f"Service {booking.service_id} - "
                    f"{booking.scheduled_date.isoformat()}",
                    "date": booking.created_at,
                    "status": booking.status,
                    "metadata": {"booking_id": booking.id, "amount": amount},
                }
            )
            if booking.status == BookingStatus.COMPLETED.value:
                activities.append(
                    {
                        "id": f"payment-{booking.id}",
                        "type": "payment",
                        "title": "Payment processed",
                        "description": f"${amount:.2f} for service {booking.service_id}",
                        "date": booking.updated_at,
                        "status": BookingStatus.COMPLETED.value,
                        "metadata": {"booking_id": booking.id, "amount": amount},
                    }
                )

        activities.sort(key=lambda item: item["date"], reverse=True)
        return activities[:RECENT_ACTIVITY_LIMIT]
