from __future__ import annotations

from dataclasses import dataclass

from car_market.domain.car_listing import CarListing
from car_market.ports.car_listing_repository import CarListingRepository


@dataclass(frozen=True, slots=True)
class ListSellerCarListingsRequest:
    seller_id: str


@dataclass(frozen=True, slots=True)
class ListSellerCarListingsResponse:
    cars: list[CarListing]


class ListSellerCarListings:
    """Listings owned by the requesting seller, in store-native order."""

    def __init__(self, car_listing_repository: CarListingRepository) -> None:
        self._repository = car_listing_repository

    def execute(self, request: ListSellerCarListingsRequest) -> ListSellerCarListingsResponse:
        return ListSellerCarListingsResponse(cars=self._repository.list_by_seller(request.seller_id))
