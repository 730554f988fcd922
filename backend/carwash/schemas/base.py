"""
Shared pydantic bases and field types for API payloads.

Prices are Decimal everywhere inside the service layer and only become
floats at the JSON boundary.
"""
from decimal import ROUND_HALF_UP, Decimal
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer

CENT = Decimal("0.01")


def _to_cents(value: object) -> Decimal:
    if isinstance(value, bool):
        raise ValueError("Money cannot be a boolean")
    if isinstance(value, float):
        value = str(value)
    try:
        return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)  # type: ignore[arg-type]
    except (ArithmeticError, TypeError, ValueError) as exc:
        raise ValueError(f"Invalid money amount: {value!r}") from exc


# Decimal rounded to cents; serialized as a JSON number
Money = Annotated[
    Decimal,
    BeforeValidator(_to_cents),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class StandardizedModel(BaseModel):
    """Response base: enums are emitted by value."""

    model_config = ConfigDict(use_enum_values=True, populate_by_name=True)


class StrictRequestModel(BaseModel):
    """Request base: unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)
