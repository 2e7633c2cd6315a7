from __future__ import annotations

import threading
import uuid
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Callable

from car_market.domain.car_listing import CarListing, NewCarListing
from car_market.domain.errors import PersistenceError
from car_market.ports.car_listing_repository import CarListingRepository


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryCarListingRepository(CarListingRepository):
    """
    Canonical contract implementation for tests.

    - Stores listings in insertion order (the store-native order)
    - Assigns UUID ids and created_at from an injectable clock
    - Rejects duplicate car numbers like the unique index does
    - Deletion matches id AND owner under one lock
    """

    def __init__(
        self,
        listings: list[CarListing] | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._listings: list[CarListing] = list(listings or [])
        self._clock = clock
        self._lock = threading.Lock()

    def add(self, listing: NewCarListing) -> CarListing:
        with self._lock:
            if any(existing.car_number == listing.car_number for existing in self._listings):
                raise PersistenceError(
                    "Failed to save car listing",
                    reason=f"duplicate car_number {listing.car_number}",
                )

            fields = asdict(listing)
            fields["images"] = list(listing.images)
            stored = CarListing(id=str(uuid.uuid4()), created_at=self._clock(), **fields)
            self._listings.append(stored)
            return stored

    def list_by_seller(self, seller_id: str) -> list[CarListing]:
        with self._lock:
            return [listing for listing in self._listings if listing.seller_id == seller_id]

    def list_all(self) -> list[CarListing]:
        with self._lock:
            return sorted(self._listings, key=lambda listing: listing.car_number)

    def list_recent(self, limit: int) -> list[CarListing]:
        with self._lock:
            newest_first = sorted(self._listings, key=lambda listing: listing.created_at, reverse=True)
            return newest_first[:limit]

    def delete_owned(self, car_id: str, seller_id: str) -> CarListing | None:
        with self._lock:
            for index, listing in enumerate(self._listings):
                if listing.id == car_id and listing.seller_id == seller_id:
                    return self._listings.pop(index)
            return None

    def get(self, car_id: str) -> CarListing | None:
        """Lookup by id regardless of owner (test inspection helper)."""
        with self._lock:
            return next((listing for listing in self._listings if listing.id == car_id), None)
