# backend/carwash/core/exceptions.py
"""
Business errors raised by the car wash services.

Each class carries the HTTP status it maps to; routes turn them into
responses with ``to_http_exception()`` so the service layer never imports
FastAPI response types directly.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from fastapi import HTTPException, status

HTTP_422_UNPROCESSABLE: int = getattr(status, "HTTP_422_UNPROCESSABLE_CONTENT", 422)


class DomainException(Exception):
    """Root of the business error hierarchy; unmapped subclasses surface as 500."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "code": self.code, "details": self.details}

    def to_http_exception(self) -> HTTPException:
        return HTTPException(status_code=self.status_code, detail=self.to_dict())


class ValidationException(DomainException):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundException(DomainException):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictException(DomainException):
    status_code = status.HTTP_409_CONFLICT


class BusinessRuleException(DomainException):
    """Request is well-formed but the booking rules reject it."""

    status_code = HTTP_422_UNPROCESSABLE


# Booking workflow failures


class CustomerNotFoundException(NotFoundException):
    """Raised when a booking references a customer that does not exist."""

    def __init__(self, customer_id: str):
        super().__init__(
            message="Customer not found",
            code="CUSTOMER_NOT_FOUND",
            details={"customer_id": customer_id},
        )


class ServiceNotAvailableException(NotFoundException):
    """Raised when a booked service is missing or no longer offered."""

    def __init__(self, service_id: str):
        super().__init__(
            message="Service not available",
            code="SERVICE_NOT_AVAILABLE",
            details={"service_id": service_id},
        )


class TimeSlotUnavailableException(ConflictException):
    """Raised when the requested time slot cannot be scheduled."""

    def __init__(self, service_id: str, scheduled_date: datetime):
        super().__init__(
            message="Selected time slot is not available",
            code="TIME_SLOT_UNAVAILABLE",
            details={
                "service_id": service_id,
                "scheduled_date": scheduled_date.isoformat(),
            },
        )


class InvalidStatusTransitionException(BusinessRuleException):
    """Raised when an operator requests a status change the lifecycle forbids."""

    def __init__(self, booking_id: str, current_status: str, requested_status: str):
        super().__init__(
            message=f"Cannot change booking status from {current_status} to {requested_status}",
            code="INVALID_STATUS_TRANSITION",
            details={
                "booking_id": booking_id,
                "current_status": current_status,
                "requested_status": requested_status,
            },
        )


class RepositoryException(Exception):
    """A query or write failed in the data access layer; carries no HTTP mapping."""
