"""Price quotes for car wash bookings."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
import logging
from typing import TYPE_CHECKING, Any, Mapping, Optional

from ..core.config import settings
from ..core.constants import VEHICLE_SIZE_MULTIPLIERS, VEHICLE_TYPE_MULTIPLIERS
from ..core.enums import LocationType, VehicleSize, VehicleType
from ..core.exceptions import ValidationException

if TYPE_CHECKING:
    from ..models.service import Service
    from ..schemas.booking import Location, VehicleInfo

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class PricingCalculation:
    """Breakdown of a price quote."""

    base_price: Decimal
    vehicle_multiplier: Decimal
    location_multiplier: Decimal
    total_price: Decimal
    estimated_duration_minutes: int


class PricingService:
    """
    Quote prices from the service's base price, the vehicle and the location.

    The vehicle multiplier is the type factor times the size factor; a
    vehicle with no stated size is priced as medium.

    total = base price x vehicle multiplier x location multiplier, rounded
    half-up to cents. Promotions, taxes and bundles are not part of the quote.
    """

    def __init__(
        self,
        vehicle_multipliers: Optional[Mapping[VehicleType, Decimal]] = None,
        size_multipliers: Optional[Mapping[VehicleSize, Decimal]] = None,
        location_multipliers: Optional[Mapping[LocationType, Decimal]] = None,
    ) -> None:
        self.vehicle_multipliers = dict(vehicle_multipliers or VEHICLE_TYPE_MULTIPLIERS)
        self.size_multipliers = dict(size_multipliers or VEHICLE_SIZE_MULTIPLIERS)
        self.location_multipliers = dict(
            location_multipliers
            or {
                LocationType.MOBILE: _to_decimal(settings.mobile_location_multiplier),
                LocationType.IN_STORE: _to_decimal(settings.in_store_location_multiplier),
            }
        )
        self.logger = logging.getLogger(self.__class__.__name__)

    def calculate_price(
        self, service: "Service", vehicle_info: "VehicleInfo", location: "Location"
    ) -> Decimal:
        """Return the total price for the booking."""
        return self.calculate_detailed_price(service, vehicle_info, location).total_price

    def calculate_detailed_price(
        self, service: "Service", vehicle_info: "VehicleInfo", location: "Location"
    ) -> PricingCalculation:
        base_price = _to_decimal(service.price)
        if base_price < 0:
            raise ValidationException(
                "Service price cannot be negative",
                code="NEGATIVE_SERVICE_PRICE",
                details={"service_id": service.id},
            )

        vehicle_multiplier = self.get_vehicle_multiplier(
            vehicle_info.vehicle_type, vehicle_info.vehicle_size
        )
        location_multiplier = self.get_location_multiplier(location)
        total = (base_price * vehicle_multiplier * location_multiplier).quantize(
            CENT, rounding=ROUND_HALF_UP
        )

        self.logger.debug(
            "Quoted %s for service %s (vehicle x%s, location x%s)",
            total,
            service.id,
            vehicle_multiplier,
            location_multiplier,
        )
        return PricingCalculation(
            base_price=base_price,
            vehicle_multiplier=vehicle_multiplier,
            location_multiplier=location_multiplier,
            total_price=total,
            estimated_duration_minutes=int(getattr(service, "duration_minutes", None) or 60),
        )

    def get_vehicle_multiplier(
        self,
        vehicle_type: VehicleType | str,
        vehicle_size: VehicleSize | str = VehicleSize.MEDIUM,
    ) -> Decimal:
        try:
            type_key = VehicleType(vehicle_type)
        except ValueError:
            raise ValidationException(
                f"Unsupported vehicle type: {vehicle_type}",
                code="UNSUPPORTED_VEHICLE_TYPE",
                details={"vehicle_type": str(vehicle_type)},
            )
        try:
            size_key = VehicleSize(vehicle_size)
        except ValueError:
            raise ValidationException(
                f"Unsupported vehicle size: {vehicle_size}",
                code="UNSUPPORTED_VEHICLE_SIZE",
                details={"vehicle_size": str(vehicle_size)},
            )
        type_factor = self.vehicle_multipliers.get(type_key, Decimal("1.0"))
        size_factor = self.size_multipliers.get(size_key, Decimal("1.0"))
        return type_factor * size_factor

    def get_location_multiplier(self, location: "Location") -> Decimal:
        key = LocationType(location.location_type)
        return self.location_multipliers.get(key, Decimal("1.0"))
