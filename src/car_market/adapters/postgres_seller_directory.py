"""PostgreSQL implementation of SellerDirectory."""

from __future__ import annotations

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from car_market.domain.errors import PersistenceError
from car_market.domain.seller import Seller
from car_market.infra.db.models.seller import SellerRow
from car_market.ports.seller_directory import SellerDirectory

logger = logging.getLogger(__name__)


class PostgresSellerDirectory(SellerDirectory):
    """Resolves seller identities against the sellers table."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def resolve(self, seller_id: str) -> Seller | None:
        """
        Look up a seller by ID.

        Args:
            seller_id: Caller identity (expected to be a UUID string)

        Returns:
            Seller if found, None otherwise (including malformed IDs)
        """
        try:
            seller_uuid = UUID(seller_id)
        except ValueError:  # Invalid UUID format
            return None

        query = select(SellerRow).where(SellerRow.id == seller_uuid)

        try:
            row = self._session.execute(query).scalar_one_or_none()
        except SQLAlchemyError as exc:
            logger.error("Failed to look up seller", exc_info=exc, extra={"seller_id": seller_id})
            raise PersistenceError("Failed to look up seller", reason=str(exc)) from exc

        if row is None:
            return None

        return Seller(id=str(row.id), name=row.name, created_at=row.created_at)
