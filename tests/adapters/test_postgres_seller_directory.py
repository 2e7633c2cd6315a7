"""Unit test suite for PostgresSellerDirectory."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from unittest.mock import MagicMock, Mock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from car_market.adapters.postgres_seller_directory import PostgresSellerDirectory
from car_market.domain.errors import PersistenceError
from car_market.domain.seller import Seller
from car_market.infra.db.models.seller import SellerRow


@pytest.fixture()
def mock_session() -> Mock:
    return Mock(spec=Session)


def test_resolve_returns_seller(mock_session: Mock) -> None:
    seller_id = uuid.uuid4()
    row = SellerRow(id=seller_id, name="Kim Minjun", created_at=datetime(2025, 1, 1, tzinfo=timezone.utc))
    row._sa_instance_state = MagicMock()  # type: ignore
    mock_session.execute.return_value.scalar_one_or_none.return_value = row

    seller = PostgresSellerDirectory(mock_session).resolve(str(seller_id))

    assert seller == Seller(
        id=str(seller_id),
        name="Kim Minjun",
        created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
    )


def test_resolve_returns_none_when_missing(mock_session: Mock) -> None:
    mock_session.execute.return_value.scalar_one_or_none.return_value = None

    assert PostgresSellerDirectory(mock_session).resolve(str(uuid.uuid4())) is None


def test_resolve_malformed_id_returns_none_without_query(mock_session: Mock) -> None:
    assert PostgresSellerDirectory(mock_session).resolve("not-a-uuid") is None
    mock_session.execute.assert_not_called()


def test_resolve_wraps_database_errors(mock_session: Mock) -> None:
    mock_session.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))

    with pytest.raises(PersistenceError):
        PostgresSellerDirectory(mock_session).resolve(str(uuid.uuid4()))
