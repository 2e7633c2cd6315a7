"""PostgreSQL implementation of SequenceAllocator."""

from __future__ import annotations

import logging

from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from car_market.domain.errors import PersistenceError
from car_market.infra.db.models.counter import CounterRow
from car_market.ports.sequence_allocator import SequenceAllocator

logger = logging.getLogger(__name__)


class PostgresSequenceAllocator(SequenceAllocator):
    """
    Counter allocation through a single upsert statement.

    Executes:
        INSERT INTO counters (name, seq) VALUES (:name, 1)
        ON CONFLICT (name) DO UPDATE SET seq = counters.seq + 1
        RETURNING seq

    PostgreSQL takes a row lock for the conflicting row, so concurrent
    callers are serialized on the counter row and each one reads its own
    post-increment value. The missing-row case is handled by the same
    statement, so there is no check-then-create race.

    The increment is committed immediately. This releases the row lock
    before the caller goes on to write files and insert the listing, and
    it means an allocated number stays consumed if those later steps fail.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize allocator with database session.

        Args:
            session: SQLAlchemy session; it is committed after each allocation
        """
        self._session = session

    def allocate(self, counter_name: str) -> int:
        stmt = (
            insert(CounterRow)
            .values(name=counter_name, seq=1)
            .on_conflict_do_update(
                index_elements=[CounterRow.name],
                set_={"seq": CounterRow.seq + 1},
            )
            .returning(CounterRow.seq)
        )

        try:
            value = self._session.execute(stmt).scalar_one()
            self._session.commit()
        except SQLAlchemyError as exc:
            self._session.rollback()
            logger.error(
                "Failed to allocate sequence value",
                exc_info=exc,
                extra={"counter_name": counter_name},
            )
            raise PersistenceError("Failed to allocate sequence value", reason=str(exc)) from exc

        logger.debug("Allocated sequence value", extra={"counter_name": counter_name, "value": value})
        return value
