"""PostgreSQL implementation of CarListingRepository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from car_market.domain.car_listing import CarListing, NewCarListing
from car_market.domain.errors import PersistenceError
from car_market.infra.db.models.car_listing import CarListingRow
from car_market.ports.car_listing_repository import CarListingRepository

if TYPE_CHECKING:
    from sqlalchemy.sql import Select

logger = logging.getLogger(__name__)


class PostgresCarListingRepository(CarListingRepository):
    """
    PostgreSQL implementation of CarListingRepository.

    - Uses SQLAlchemy ORM for database access
    - Sorting is pushed down to ORDER BY (car_number / created_at)
    - Owner-scoped deletion is one DELETE ... WHERE id AND seller_id RETURNING
    - Wraps SQLAlchemyError into PersistenceError with the driver message as reason
    - Converts CarListingRow (infrastructure) to CarListing (domain)
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def add(self, listing: NewCarListing) -> CarListing:
        """
        Insert a listing and return it with id and created_at populated.

        Flushes immediately so constraint violations (e.g. a duplicate
        car_number) surface here instead of at request-end commit.
        """
        row = CarListingRow(
            seller_id=UUID(listing.seller_id),
            car_number=listing.car_number,
            car_model=listing.car_model,
            car_year=listing.car_year,
            price=listing.price,
            description=listing.description,
            car_type=listing.car_type,
            manufacturer=listing.manufacturer,
            images=list(listing.images),
            is_sold=listing.is_sold,
        )

        try:
            self._session.add(row)
            self._session.flush()
            self._session.refresh(row)  # Load server-side created_at
        except SQLAlchemyError as exc:
            raise self._failure("Failed to save car listing", exc) from exc

        return self._to_domain(row)

    def list_by_seller(self, seller_id: str) -> list[CarListing]:
        try:
            owner = UUID(seller_id)
        except ValueError:  # Not a UUID, so it cannot own anything
            return []

        query = select(CarListingRow).where(CarListingRow.seller_id == owner)
        return self._fetch(query, "Failed to load seller's car listings")

    def list_all(self) -> list[CarListing]:
        # Fixed-width zero padding makes string order equal numeric order
        query = select(CarListingRow).order_by(CarListingRow.car_number.asc())
        return self._fetch(query, "Failed to load car listings")

    def list_recent(self, limit: int) -> list[CarListing]:
        query = select(CarListingRow).order_by(CarListingRow.created_at.desc()).limit(limit)
        return self._fetch(query, "Failed to load recent car listings")

    def delete_owned(self, car_id: str, seller_id: str) -> CarListing | None:
        """
        Delete a listing if and only if seller_id owns it.

        Args:
            car_id: Listing ID (malformed IDs match nothing)
            seller_id: Requesting seller ID

        Returns:
            Deleted CarListing, or None when nothing matched
        """
        try:
            listing_uuid = UUID(car_id)
            owner_uuid = UUID(seller_id)
        except ValueError:  # Invalid UUID format
            return None

        stmt = (
            delete(CarListingRow)
            .where(CarListingRow.id == listing_uuid, CarListingRow.seller_id == owner_uuid)
            .returning(CarListingRow)
        )

        try:
            row = self._session.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise self._failure("Failed to delete car listing", exc) from exc

        return self._to_domain(row) if row else None

    def _fetch(self, query: Select[tuple[CarListingRow]], message: str) -> list[CarListing]:
        try:
            rows = self._session.execute(query).scalars().all()
        except SQLAlchemyError as exc:
            raise self._failure(message, exc) from exc

        return [self._to_domain(row) for row in rows]

    def _failure(self, message: str, exc: SQLAlchemyError) -> PersistenceError:
        logger.error(
            message,
            exc_info=exc,
            extra={"error_type": type(exc).__name__},
        )
        return PersistenceError(message, reason=str(exc))

    def _to_domain(self, row: CarListingRow) -> CarListing:
        """
        Convert database model (CarListingRow) to domain entity (CarListing).

        Args:
            row: SQLAlchemy CarListingRow model

        Returns:
            CarListing domain entity
        """
        return CarListing(
            id=str(row.id),  # Convert UUID to string
            seller_id=str(row.seller_id),
            car_number=row.car_number,
            created_at=row.created_at,
            car_model=row.car_model,
            car_year=row.car_year,
            price=row.price,  # Already Decimal from NUMERIC column
            description=row.description,
            car_type=row.car_type,
            manufacturer=row.manufacturer,
            images=list(row.images or []),
            is_sold=row.is_sold,
        )
