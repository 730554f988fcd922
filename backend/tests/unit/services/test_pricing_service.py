# backend/tests/unit/services/test_pricing_service.py
"""Unit tests for PricingService quotes."""

from decimal import Decimal
from unittest.mock import Mock

import pytest

from carwash.core.enums import LocationType, VehicleSize, VehicleType
from carwash.core.exceptions import ValidationException
from carwash.schemas.booking import Location, VehicleInfo
from carwash.services.pricing_service import PricingCalculation, PricingService


def vehicle(
    vehicle_type: VehicleType = VehicleType.SEDAN,
    vehicle_size: VehicleSize = VehicleSize.SMALL,
) -> VehicleInfo:
    return VehicleInfo(
        make="Ford",
        model="F-150",
        year=2019,
        color="Red",
        vehicle_type=vehicle_type,
        vehicle_size=vehicle_size,
    )


def location(location_type: LocationType = LocationType.MOBILE) -> Location:
    return Location(
        location_type=location_type,
        address="1 Main St",
        city="Springfield",
        state="IL",
        zip_code="62701",
    )


@pytest.fixture
def service():
    return Mock(id="S1", price=Decimal("42.50"), duration_minutes=45)


class TestCalculatePrice:
    def test_small_sedan_mobile_is_base_price(self, service):
        assert PricingService().calculate_price(service, vehicle(), location()) == Decimal("42.50")

    def test_unstated_size_is_priced_as_medium(self, service):
        unsized = VehicleInfo(make="Honda", model="Civic", year=2022, color="Blue")

        assert unsized.vehicle_size == VehicleSize.MEDIUM.value
        assert PricingService().calculate_price(service, unsized, location()) == Decimal("51.00")

    @pytest.mark.parametrize(
        "vehicle_type, expected",
        [
            (VehicleType.SUV, Decimal("55.25")),
            (VehicleType.TRUCK, Decimal("59.50")),
            (VehicleType.VAN, Decimal("63.75")),
            (VehicleType.MOTORCYCLE, Decimal("29.75")),
        ],
    )
    def test_vehicle_type_multipliers(self, service, vehicle_type, expected):
        assert PricingService().calculate_price(service, vehicle(vehicle_type), location()) == expected

    @pytest.mark.parametrize(
        "vehicle_size, expected",
        [
            (VehicleSize.MEDIUM, Decimal("66.30")),
            (VehicleSize.LARGE, Decimal("82.88")),
            (VehicleSize.XL, Decimal("99.45")),
        ],
    )
    def test_size_scales_type_multiplier(self, service, vehicle_size, expected):
        quote = PricingService().calculate_price(
            service, vehicle(VehicleType.SUV, vehicle_size), location()
        )

        assert quote == expected

    def test_rounds_half_up_to_cents(self):
        service = Mock(id="S1", price=Decimal("10.05"), duration_minutes=30)
        pricing = PricingService(location_multipliers={LocationType.MOBILE: Decimal("1.5")})

        # 10.05 x 1.5 = 15.075
        assert pricing.calculate_price(service, vehicle(), location()) == Decimal("15.08")

    def test_location_multiplier_applies(self, service):
        pricing = PricingService(
            location_multipliers={
                LocationType.MOBILE: Decimal("1.2"),
                LocationType.IN_STORE: Decimal("1.0"),
            }
        )

        assert pricing.calculate_price(service, vehicle(), location()) == Decimal("51.00")
        assert pricing.calculate_price(
            service, vehicle(), location(LocationType.IN_STORE)
        ) == Decimal("42.50")

    def test_float_base_price_is_converted_exactly(self):
        service = Mock(id="S1", price=19.99, duration_minutes=30)
        assert PricingService().calculate_price(service, vehicle(), location()) == Decimal("19.99")


class TestDetailedPrice:
    def test_breakdown(self, service):
        calc = PricingService().calculate_detailed_price(
            service, vehicle(VehicleType.SUV, VehicleSize.MEDIUM), location()
        )

        assert isinstance(calc, PricingCalculation)
        assert calc.base_price == Decimal("42.50")
        assert calc.vehicle_multiplier == Decimal("1.56")
        assert calc.location_multiplier == Decimal("1.0")
        assert calc.total_price == Decimal("66.30")
        assert calc.estimated_duration_minutes == 45

    def test_negative_price_rejected(self):
        service = Mock(id="S9", price=Decimal("-1.00"), duration_minutes=30)

        with pytest.raises(ValidationException) as exc_info:
            PricingService().calculate_detailed_price(service, vehicle(), location())

        assert exc_info.value.code == "NEGATIVE_SERVICE_PRICE"

    def test_unknown_vehicle_type_rejected(self):
        with pytest.raises(ValidationException) as exc_info:
            PricingService().get_vehicle_multiplier("hovercraft")

        assert exc_info.value.code == "UNSUPPORTED_VEHICLE_TYPE"

    def test_unknown_vehicle_size_rejected(self):
        with pytest.raises(ValidationException) as exc_info:
            PricingService().get_vehicle_multiplier(VehicleType.SEDAN, "huge")

        assert exc_info.value.code == "UNSUPPORTED_VEHICLE_SIZE"
