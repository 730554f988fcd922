# backend/carwash/repositories/service_repository.py
"""
Service Repository for the car wash platform

Catalog queries. Inactive services stay in the table so existing bookings
keep a valid reference; catalog listings only return active ones.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..models.service import Service
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class ServiceRepository(BaseRepository[Service]):
    """Repository for Service data access."""

    def __init__(self, db: Session):
        super().__init__(db, Service)

    def get_by_slug(self, slug: str) -> Optional[Service]:
        return self.find_one_by(slug=slug)

    def list_active(self, skip: int = 0, limit: int = 100) -> List[Service]:
        """Active services ordered by price, cheapest first."""
        query = (
            self._build_query()
            .filter(Service.is_active.is_(True))
            .order_by(Service.price.asc(), Service.name.asc())
            .offset(skip)
            .limit(limit)
        )
        return self._execute_query(query)

    def list_by_category(self, category: str, active_only: bool = True) -> List[Service]:
        query = self._build_query().filter(Service.category == category)
        if active_only:
            query = query.filter(Service.is_active.is_(True))
        return self._execute_query(query.order_by(Service.price.asc(), Service.name.asc()))
