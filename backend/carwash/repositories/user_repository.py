# backend/carwash/repositories/user_repository.py
"""
User Repository for the car wash platform

Lookups used by the booking workflow (customer existence) and the
client dashboard.
"""

import logging
from typing import Any, Optional

from sqlalchemy.orm import Session

from ..models.user import User
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User]):
    """Repository for User data access."""

    def __init__(self, db: Session):
        """Initialize with User model."""
        super().__init__(db, User)
        self.logger = logging.getLogger(__name__)

    def get_by_id(self, id: Any) -> Optional[User]:
        """Get user by ID, or None when the id is unknown."""
        if id is None:
            return None
        return self.find_one_by(id=str(id))

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email (emails are stored lowercase)."""
        return self.find_one_by(email=email.strip().lower())
