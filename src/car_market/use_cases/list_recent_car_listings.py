from __future__ import annotations

import logging
from dataclasses import dataclass

from car_market.domain.car_listing import CarListing
from car_market.domain.errors import InternalError, PersistenceError, ValidationError
from car_market.ports.car_listing_repository import CarListingRepository

logger = logging.getLogger(__name__)

DEFAULT_RECENT_LIMIT = 3


@dataclass(frozen=True, slots=True)
class ListRecentCarListingsRequest:
    limit: int = DEFAULT_RECENT_LIMIT


@dataclass(frozen=True, slots=True)
class ListRecentCarListingsResponse:
    cars: list[CarListing]


class ListRecentCarListings:
    """
    The newest listings (by creation time, newest first) for the home page cards.

    Store failures are reported with a generic message only; the
    underlying reason is logged, not returned.
    """

    def __init__(self, car_listing_repository: CarListingRepository) -> None:
        self._repository = car_listing_repository

    def execute(self, request: ListRecentCarListingsRequest) -> ListRecentCarListingsResponse:
        if request.limit <= 0:
            raise ValidationError("limit must be > 0")

        try:
            cars = self._repository.list_recent(request.limit)
        except PersistenceError as exc:
            logger.error("Recent car listings lookup failed", extra={"reason": exc.context.get("reason")})
            raise InternalError("Server error") from exc

        return ListRecentCarListingsResponse(cars=cars)
