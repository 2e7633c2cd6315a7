from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from car_market.domain.errors import InternalError


CAR_NUMBER_COUNTER = "car_number"
CAR_NUMBER_WIDTH = 7
MAX_CAR_NUMBER = 10**CAR_NUMBER_WIDTH - 1  # 9,999,999


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class CarNumberOverflowError(InternalError):
    """Raised when an allocated value does not fit the fixed car number width.

    The width is never widened: listings are ordered by the zero-padded
    string, which only matches numeric order while every number has the
    same width.
    """

    error_code: str = "CAR_NUMBER_OVERFLOW"

    def __init__(self, value: int) -> None:
        super().__init__(
            f"Car number {value} does not fit in {CAR_NUMBER_WIDTH} digits",
            value=value,
        )


# ==============================================================================
# Car Number Formatting
# ==============================================================================


def format_car_number(value: int) -> str:
    """
    Render an allocated sequence value as a car number.

    Args:
        value: Raw value returned by the sequence allocator (1-based)

    Returns:
        7-character decimal string, left-padded with '0' (e.g. 42 -> "0000042")

    Raises:
        CarNumberOverflowError: If value is not in 1..9,999,999
    """
    if value < 1 or value > MAX_CAR_NUMBER:
        raise CarNumberOverflowError(value)
    return str(value).zfill(CAR_NUMBER_WIDTH)


def parse_car_number(car_number: str) -> int:
    """Parse a car number back into the allocator's integer value."""
    if len(car_number) != CAR_NUMBER_WIDTH or not car_number.isdigit():
        raise ValueError(f"Invalid car number: {car_number!r}")
    return int(car_number)


# ==============================================================================
# Entities
# ==============================================================================


@dataclass(frozen=True, slots=True)
class NewCarListing:
    """A fully composed listing that has not been persisted yet."""

    seller_id: str
    car_number: str
    car_model: str | None = None
    car_year: int | None = None
    price: Decimal | None = None
    description: str | None = None
    car_type: str | None = None
    manufacturer: str | None = None
    images: list[str] = field(default_factory=list)
    is_sold: bool = False


@dataclass(frozen=True, slots=True)
class CarListing:
    id: str
    seller_id: str
    car_number: str
    created_at: datetime
    car_model: str | None = None
    car_year: int | None = None
    price: Decimal | None = None
    description: str | None = None
    car_type: str | None = None
    manufacturer: str | None = None
    images: list[str] = field(default_factory=list)
    is_sold: bool = False
