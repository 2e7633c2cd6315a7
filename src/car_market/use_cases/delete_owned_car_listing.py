"""Delete car listing by owner use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from car_market.domain.car_listing import CarListing
from car_market.ports.car_listing_repository import CarListingRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeleteOwnedCarListingRequest:
    car_id: str
    requester_id: str


@dataclass(frozen=True, slots=True)
class DeleteOwnedCarListingResponse:
    """deleted is None when nothing was removed."""

    deleted: CarListing | None


class DeleteOwnedCarListing:
    """
    Use case for removing a listing on behalf of its owner.

    Not exposed as an HTTP route; other services call it directly.

    Responsibilities:
    - Delegate a single conditional delete (id AND owner) to the repository
    - Return an empty result for unknown ids and for listings owned by
      someone else alike, so non-owners learn nothing about existence
    """

    def __init__(self, car_listing_repository: CarListingRepository) -> None:
        self._repository = car_listing_repository

    def execute(self, request: DeleteOwnedCarListingRequest) -> DeleteOwnedCarListingResponse:
        deleted = self._repository.delete_owned(request.car_id, request.requester_id)

        if deleted is not None:
            logger.info(
                "Car listing deleted",
                extra={"car_id": deleted.id, "car_number": deleted.car_number, "seller_id": deleted.seller_id},
            )

        return DeleteOwnedCarListingResponse(deleted=deleted)
