# backend/carwash/services/availability_service.py
"""
Availability Service for the car wash platform

Decides whether a service can be scheduled at a requested start time:
- inside the advance booking window (minimum notice, maximum days ahead)
- on a working day and within working hours, in the business timezone
- long enough before closing for the service's own duration
- not overlapping another active booking of the same service
  (service duration plus buffer on either side)

Double booking under concurrent requests is ultimately the persistence
layer's concern; this check is a read-then-decide guard.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, timezone
import logging
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence

import pytz
from sqlalchemy.orm import Session

from ..core.config import settings
from ..core.exceptions import ValidationException
from ..repositories.factory import RepositoryFactory
from .base import BaseService

if TYPE_CHECKING:
    from ..repositories.booking_repository import BookingRepository
    from .contracts import ServiceLookup

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AvailabilityConstraints:
    """Scheduling rules applied to every service."""

    min_advance_hours: int
    max_advance_days: int
    working_hours_start: time
    working_hours_end: time
    working_days: Sequence[int] = field(default_factory=tuple)  # Monday=0
    slot_duration_minutes: int = 60
    buffer_minutes: int = 15
    timezone_name: str = "America/New_York"

    @property
    def slot_duration(self) -> timedelta:
        return timedelta(minutes=self.slot_duration_minutes)

    @property
    def blocking_window(self) -> timedelta:
        """Two starts closer than this would overlap once the buffer is included."""
        return timedelta(minutes=self.slot_duration_minutes + self.buffer_minutes)

    @classmethod
    def from_settings(cls) -> "AvailabilityConstraints":
        open_h, open_m = settings.opening_time
        close_h, close_m = settings.closing_time
        return cls(
            min_advance_hours=settings.booking_min_advance_hours,
            max_advance_days=settings.booking_max_advance_days,
            working_hours_start=time(open_h, open_m),
            working_hours_end=time(close_h, close_m),
            working_days=tuple(settings.working_days),
            slot_duration_minutes=settings.slot_duration_minutes,
            buffer_minutes=settings.slot_buffer_minutes,
            timezone_name=settings.business_timezone,
        )


@dataclass(frozen=True)
class TimeSlot:
    start_time: datetime
    end_time: datetime
    is_available: bool


@dataclass(frozen=True)
class AvailabilityDay:
    """One day of an availability window."""

    day: date
    slots: List[TimeSlot]

    @property
    def is_fully_booked(self) -> bool:
        return not any(slot.is_available for slot in self.slots)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class AvailabilityService(BaseService):
    """
    Service layer for availability checks.

    Implements the AvailabilityChecker contract used by BookingService.
    A service's own ``duration_minutes`` sets how long its slots last;
    unknown services fall back to the configured slot duration.
    """

    def __init__(
        self,
        db: Session,
        repository: Optional["BookingRepository"] = None,
        constraints: Optional[AvailabilityConstraints] = None,
        now_provider: Optional[Callable[[], datetime]] = None,
        service_lookup: Optional["ServiceLookup"] = None,
    ):
        super().__init__(db)
        self.repository = repository or RepositoryFactory.create_booking_repository(db)
        self.service_lookup = service_lookup or RepositoryFactory.create_service_repository(db)
        self.constraints = constraints or AvailabilityConstraints.from_settings()
        self._now_provider = now_provider or (lambda: datetime.now(timezone.utc))
        self.tz = pytz.timezone(self.constraints.timezone_name)

    def get_constraints(self) -> AvailabilityConstraints:
        return self.constraints

    def get_service_duration(self, service_id: str) -> timedelta:
        service = self.service_lookup.get_by_id(service_id)
        minutes = getattr(service, "duration_minutes", None) if service is not None else None
        return timedelta(minutes=minutes or self.constraints.slot_duration_minutes)

    @BaseService.measure_operation("check_availability")
    def check_availability(self, service_id: str, scheduled_date: datetime) -> bool:
        """
        Check whether ``service_id`` can start at ``scheduled_date``.

        Naive datetimes are interpreted as UTC.
        """
        start = _as_utc(scheduled_date)
        duration = self.get_service_duration(service_id)
        reason = self._calendar_rejection(start, _as_utc(self._now_provider()), duration)
        if reason:
            self.logger.info(
                "Slot rejected for service %s at %s: %s", service_id, start.isoformat(), reason
            )
            return False

        window = self._blocking_window(duration)
        nearby = self.repository.list_active_for_service_between(
            service_id, start - window, start + window
        )
        if self._overlaps(start, [b.scheduled_date for b in nearby], window):
            self.logger.info(
                "Slot rejected for service %s at %s: overlaps existing booking",
                service_id,
                start.isoformat(),
            )
            return False
        return True

    @BaseService.measure_operation("get_available_slots")
    def get_available_slots(self, service_id: str, day: date) -> List[TimeSlot]:
        """
        List the day's slots for a service, each flagged available or not.

        Slots start at opening time and step by the service duration plus
        buffer; the last slot must end by closing time. Non-working days have
        no slots.
        """
        if day.weekday() not in self.constraints.working_days:
            return []
        return self._slots_for_day(service_id, day, self.get_service_duration(service_id))

    @BaseService.measure_operation("get_availability_window")
    def get_availability_window(
        self, service_id: str, start_day: date, end_day: date
    ) -> List[AvailabilityDay]:
        """
        Slots for every day from ``start_day`` to ``end_day`` inclusive.

        Raises:
            ValidationException: The range is reversed or longer than the
                booking horizon
        """
        if end_day < start_day:
            raise ValidationException(
                "end_day must not be before start_day",
                code="INVALID_DATE_RANGE",
                details={"start_day": start_day.isoformat(), "end_day": end_day.isoformat()},
            )
        span = (end_day - start_day).days + 1
        if span > self.constraints.max_advance_days + 1:
            raise ValidationException(
                f"Availability window cannot exceed {self.constraints.max_advance_days + 1} days",
                code="DATE_RANGE_TOO_LONG",
                details={"days": span},
            )

        duration = self.get_service_duration(service_id)
        days: List[AvailabilityDay] = []
        for offset in range(span):
            day = start_day + timedelta(days=offset)
            if day.weekday() in self.constraints.working_days:
                slots = self._slots_for_day(service_id, day, duration)
            else:
                slots = []
            days.append(AvailabilityDay(day=day, slots=slots))
        return days

    def _slots_for_day(self, service_id: str, day: date, duration: timedelta) -> List[TimeSlot]:
        opening = self._localize(day, self.constraints.working_hours_start)
        closing = self._localize(day, self.constraints.working_hours_end)
        window = self._blocking_window(duration)

        existing = [
            b.scheduled_date
            for b in self.repository.list_active_for_service_between(
                service_id, opening - window, closing + window
            )
        ]
        now = _as_utc(self._now_provider())

        slots: List[TimeSlot] = []
        current = opening
        while current + duration <= closing:
            is_available = self._calendar_rejection(
                current, now, duration
            ) is None and not self._overlaps(current, existing, window)
            slots.append(
                TimeSlot(start_time=current, end_time=current + duration, is_available=is_available)
            )
            current = current + window
        return slots

    def _blocking_window(self, duration: timedelta) -> timedelta:
        """Two starts closer than this would overlap once the buffer is included."""
        return duration + timedelta(minutes=self.constraints.buffer_minutes)

    def _localize(self, day: date, at: time) -> datetime:
        """Business-local wall clock time on ``day`` as a UTC datetime."""
        return self.tz.localize(datetime.combine(day, at)).astimezone(timezone.utc)

    def _calendar_rejection(
        self, start: datetime, now: datetime, duration: timedelta
    ) -> Optional[str]:
        """Return why ``start`` falls outside the bookable calendar, or None."""
        c = self.constraints
        if start < now + timedelta(hours=c.min_advance_hours):
            return f"must book at least {c.min_advance_hours} hours in advance"
        if start > now + timedelta(days=c.max_advance_days):
            return f"cannot book more than {c.max_advance_days} days ahead"

        local = start.astimezone(self.tz)
        if local.weekday() not in c.working_days:
            return "not a working day"

        opening = self._localize(local.date(), c.working_hours_start)
        closing = self._localize(local.date(), c.working_hours_end)
        if start < opening or start + duration > closing:
            return "outside working hours"
        return None

    @staticmethod
    def _overlaps(start: datetime, existing_starts: Sequence[datetime], window: timedelta) -> bool:
        return any(abs(_as_utc(other) - start) < window for other in existing_starts)
