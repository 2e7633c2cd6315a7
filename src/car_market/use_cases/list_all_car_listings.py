from __future__ import annotations

from dataclasses import dataclass

from car_market.domain.car_listing import CarListing
from car_market.ports.car_listing_repository import CarListingRepository


@dataclass(frozen=True, slots=True)
class ListAllCarListingsResponse:
    cars: list[CarListing]


class ListAllCarListings:
    """
    Every listing, ascending by car number.

    Ordering is delegated to the repository. No authentication is needed.
    """

    def __init__(self, car_listing_repository: CarListingRepository) -> None:
        self._repository = car_listing_repository

    def execute(self) -> ListAllCarListingsResponse:
        return ListAllCarListingsResponse(cars=self._repository.list_all())
