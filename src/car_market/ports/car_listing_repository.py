from __future__ import annotations

from abc import ABC, abstractmethod

from car_market.domain.car_listing import CarListing, NewCarListing


class CarListingRepository(ABC):
    """
    Port for car listing persistence.

    Implementations assign the listing id and creation timestamp on insert.
    Store failures must surface as PersistenceError.
    """

    @abstractmethod
    def add(self, listing: NewCarListing) -> CarListing:
        """
        Persist a new listing.

        Args:
            listing: Fully composed listing (car number already allocated)

        Returns:
            The stored CarListing with id and created_at populated
        """
        ...

    @abstractmethod
    def list_by_seller(self, seller_id: str) -> list[CarListing]:
        """All listings owned by seller_id, in store-native order."""
        ...

    @abstractmethod
    def list_all(self) -> list[CarListing]:
        """All listings, ascending by car number."""
        ...

    @abstractmethod
    def list_recent(self, limit: int) -> list[CarListing]:
        """The `limit` most recently created listings, newest first."""
        ...

    @abstractmethod
    def delete_owned(self, car_id: str, seller_id: str) -> CarListing | None:
        """
        Delete a listing only if it belongs to seller_id.

        Must be a single conditional delete (match on id AND owner), so a
        missing listing and a listing owned by someone else look the same.

        Returns:
            The deleted listing, or None if nothing matched
        """
        ...
