# backend/carwash/services/catalog_service.py
"""Read access to the car wash service catalog."""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy.orm import Session

from ..core.exceptions import NotFoundException
from ..models.service import Service
from ..repositories.factory import RepositoryFactory
from .base import BaseService

if TYPE_CHECKING:
    from ..repositories.service_repository import ServiceRepository


class CatalogService(BaseService):
    """Lists bookable services and fetches single services."""

    def __init__(self, db: Session, repository: Optional["ServiceRepository"] = None):
        super().__init__(db)
        self.repository = repository or RepositoryFactory.create_service_repository(db)

    @BaseService.measure_operation("list_services")
    def list_services(self, category: Optional[str] = None) -> List[Service]:
        """Active services, optionally limited to one category."""
        if category:
            return self.repository.list_by_category(category.strip().lower())
        return self.repository.list_active()

    def get_service(self, service_id: str) -> Service:
        service = self.repository.get_by_id(service_id)
        if service is None:
            raise NotFoundException(
                "Service not found", code="SERVICE_NOT_FOUND", details={"service_id": service_id}
            )
        return service
