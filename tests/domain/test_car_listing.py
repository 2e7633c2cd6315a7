"""Tests for car number formatting and listing entities."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from car_market.domain.car_listing import (
    CAR_NUMBER_COUNTER,
    MAX_CAR_NUMBER,
    CarListing,
    CarNumberOverflowError,
    NewCarListing,
    format_car_number,
    parse_car_number,
)
from car_market.domain.errors import InternalError
from car_market.domain.seller import Seller


# ==============================================================================
# format_car_number
# ==============================================================================


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1, "0000001"),
        (42, "0000042"),
        (1234567, "1234567"),
        (MAX_CAR_NUMBER, "9999999"),
    ],
)
def test_format_car_number_pads_to_seven_digits(value: int, expected: str) -> None:
    assert format_car_number(value) == expected


def test_format_car_number_rejects_values_wider_than_seven_digits() -> None:
    """Overflow is rejected instead of silently widening the number."""
    with pytest.raises(CarNumberOverflowError) as exc_info:
        format_car_number(MAX_CAR_NUMBER + 1)

    assert exc_info.value.error_code == "CAR_NUMBER_OVERFLOW"
    assert exc_info.value.context["value"] == 10_000_000
    assert isinstance(exc_info.value, InternalError)


def test_format_car_number_rejects_zero_and_negative() -> None:
    with pytest.raises(CarNumberOverflowError):
        format_car_number(0)
    with pytest.raises(CarNumberOverflowError):
        format_car_number(-5)


def test_formatted_car_number_parses_back_to_allocated_value() -> None:
    for value in (1, 9, 10, 999, 1_000_000, MAX_CAR_NUMBER):
        assert parse_car_number(format_car_number(value)) == value


def test_formatted_car_numbers_sort_like_integers() -> None:
    values = [10, 2, 1000, 99, 1]

    by_string = sorted(values, key=format_car_number)

    assert by_string == sorted(values)


@pytest.mark.parametrize("bad", ["", "123", "12345678", "00000a1", " 000001"])
def test_parse_car_number_rejects_malformed_input(bad: str) -> None:
    with pytest.raises(ValueError):
        parse_car_number(bad)


def test_car_number_counter_name() -> None:
    assert CAR_NUMBER_COUNTER == "car_number"


# ==============================================================================
# Entities
# ==============================================================================


def test_new_car_listing_defaults() -> None:
    """A new listing starts unsold with no images and no details."""
    listing = NewCarListing(seller_id="s-1", car_number="0000001")

    assert listing.is_sold is False
    assert listing.images == []
    assert listing.car_model is None
    assert listing.price is None


def test_new_car_listing_images_are_not_shared_between_instances() -> None:
    first = NewCarListing(seller_id="s-1", car_number="0000001")
    second = NewCarListing(seller_id="s-1", car_number="0000002")

    assert first.images is not second.images


def test_car_listing_is_immutable() -> None:
    car = CarListing(
        id="c-1",
        seller_id="s-1",
        car_number="0000001",
        created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
    )

    with pytest.raises(AttributeError):
        car.is_sold = True  # type: ignore[misc]


@pytest.mark.parametrize(
    "entity",
    [
        NewCarListing(seller_id="s-1", car_number="0000001"),
        CarListing(
            id="c-1",
            seller_id="s-1",
            car_number="0000001",
            created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
        ),
        Seller(id="s-1", name="Kim Minjun"),
    ],
)
def test_entities_are_slotted(entity: object) -> None:
    assert "__slots__" in vars(type(entity))
    assert not hasattr(entity, "__dict__")
