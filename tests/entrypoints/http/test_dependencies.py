"""
Unit tests for FastAPI dependency injection functions.

This test suite verifies the dependency wiring logic:
- get_db() yields a database session per request
- Use case factories wire Postgres adapters to the request session
- Stateless singletons (media storage, access gate) are cached
- Sessions and use cases are never cached

Tests use mocks to verify wiring without requiring a real database.
"""

from __future__ import annotations

from types import GeneratorType
from unittest.mock import MagicMock, Mock, patch

import pytest

from car_market.adapters.local_media_storage import LocalMediaStorage
from car_market.adapters.postgres_car_listing_repository import PostgresCarListingRepository
from car_market.adapters.postgres_seller_directory import PostgresSellerDirectory
from car_market.adapters.postgres_sequence_allocator import PostgresSequenceAllocator
from car_market.adapters.static_token_access_gate import StaticTokenAccessGate
from car_market.entrypoints.http.dependencies import (
    get_access_gate,
    get_db,
    get_list_all_car_listings_use_case,
    get_list_recent_car_listings_use_case,
    get_list_seller_car_listings_use_case,
    get_media_storage,
    get_register_car_listing_use_case,
)
from car_market.use_cases.list_all_car_listings import ListAllCarListings
from car_market.use_cases.list_recent_car_listings import ListRecentCarListings
from car_market.use_cases.list_seller_car_listings import ListSellerCarListings
from car_market.use_cases.register_car_listing import RegisterCarListing


@pytest.fixture(autouse=True)
def clear_singletons():
    get_media_storage.cache_clear()
    get_access_gate.cache_clear()
    yield
    get_media_storage.cache_clear()
    get_access_gate.cache_clear()


def session_context(session: Mock) -> MagicMock:
    context_manager = MagicMock()
    context_manager.__enter__.return_value = session
    context_manager.__exit__.return_value = None
    return context_manager


# ==============================================================================
# get_db() - Database Session Provider
# ==============================================================================


def test_get_db_yields_session_from_get_session() -> None:
    mock_session = Mock()
    mock_context_manager = session_context(mock_session)

    with patch("car_market.entrypoints.http.dependencies.get_session") as mock_get_session:
        mock_get_session.return_value = mock_context_manager

        generator = get_db()
        session = next(generator)

        mock_get_session.assert_called_once()
        assert session is mock_session

        # Complete the generator (simulates FastAPI cleanup)
        with pytest.raises(StopIteration):
            next(generator)

        mock_context_manager.__enter__.assert_called_once()
        mock_context_manager.__exit__.assert_called_once()


def test_get_db_is_generator() -> None:
    with patch("car_market.entrypoints.http.dependencies.get_session"):
        assert isinstance(get_db(), GeneratorType)


def test_get_db_exits_context_on_exception() -> None:
    mock_context_manager = session_context(Mock())

    with patch("car_market.entrypoints.http.dependencies.get_session") as mock_get_session:
        mock_get_session.return_value = mock_context_manager

        generator = get_db()
        next(generator)

        with pytest.raises(RuntimeError):
            generator.throw(RuntimeError("Simulated error during request"))

        mock_context_manager.__exit__.assert_called_once()


def test_get_db_creates_new_session_each_call() -> None:
    with patch("car_market.entrypoints.http.dependencies.get_session") as mock_get_session:
        mock_get_session.return_value = session_context(Mock())
        session1 = next(get_db())

        mock_get_session.return_value = session_context(Mock())
        session2 = next(get_db())

        assert mock_get_session.call_count == 2
        assert session1 is not session2


# ==============================================================================
# get_register_car_listing_use_case()
# ==============================================================================


def test_register_use_case_shares_request_session() -> None:
    """Seller lookup, allocator and repository all run on the request session."""
    mock_session = Mock()
    storage = Mock()

    use_case = get_register_car_listing_use_case(db=mock_session, media_storage=storage)

    assert isinstance(use_case, RegisterCarListing)
    assert isinstance(use_case._seller_directory, PostgresSellerDirectory)
    assert isinstance(use_case._sequence_allocator, PostgresSequenceAllocator)
    assert isinstance(use_case._repository, PostgresCarListingRepository)
    assert use_case._seller_directory._session is mock_session
    assert use_case._sequence_allocator._session is mock_session
    assert use_case._repository._session is mock_session
    assert use_case._media_intake._storage is storage


def test_register_use_case_fresh_instance_each_call() -> None:
    use_case_1 = get_register_car_listing_use_case(db=Mock(), media_storage=Mock())
    use_case_2 = get_register_car_listing_use_case(db=Mock(), media_storage=Mock())

    assert use_case_1 is not use_case_2
    assert use_case_1._repository is not use_case_2._repository


# ==============================================================================
# Listing use case factories
# ==============================================================================


@pytest.mark.parametrize(
    ("factory", "use_case_type"),
    [
        (get_list_seller_car_listings_use_case, ListSellerCarListings),
        (get_list_all_car_listings_use_case, ListAllCarListings),
        (get_list_recent_car_listings_use_case, ListRecentCarListings),
    ],
)
def test_listing_factories_wire_repository_to_session(factory, use_case_type) -> None:
    mock_session = Mock()

    use_case = factory(db=mock_session)

    assert isinstance(use_case, use_case_type)
    assert isinstance(use_case._repository, PostgresCarListingRepository)
    assert use_case._repository._session is mock_session


def test_per_request_dependencies_are_not_cached() -> None:
    # lru_cache adds __wrapped__
    assert not hasattr(get_db, "__wrapped__")
    assert not hasattr(get_register_car_listing_use_case, "__wrapped__")
    assert not hasattr(get_list_seller_car_listings_use_case, "__wrapped__")
    assert not hasattr(get_list_all_car_listings_use_case, "__wrapped__")
    assert not hasattr(get_list_recent_car_listings_use_case, "__wrapped__")


# ==============================================================================
# Cached singletons
# ==============================================================================


def test_media_storage_is_rooted_at_upload_dir(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("UPLOAD_DIR", str(tmp_path))

    storage = get_media_storage()

    assert isinstance(storage, LocalMediaStorage)
    assert storage.root == tmp_path
    assert get_media_storage() is storage


def test_access_gate_reads_access_tokens(monkeypatch) -> None:
    monkeypatch.setenv("ACCESS_TOKENS", "tok-1:550e8400-e29b-41d4-a716-446655440000")

    gate = get_access_gate()

    assert isinstance(gate, StaticTokenAccessGate)
    assert gate.authenticate("tok-1") == "550e8400-e29b-41d4-a716-446655440000"
    assert get_access_gate() is gate
