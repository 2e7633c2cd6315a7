"""
Dependency injection for FastAPI routes.

Key principle: Database sessions should be per-request, not cached.
Only stateless singletons (file storage, access gate) use lru_cache.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from car_market.adapters.local_media_storage import LocalMediaStorage
from car_market.adapters.postgres_car_listing_repository import PostgresCarListingRepository
from car_market.adapters.postgres_seller_directory import PostgresSellerDirectory
from car_market.adapters.postgres_sequence_allocator import PostgresSequenceAllocator
from car_market.adapters.static_token_access_gate import StaticTokenAccessGate
from car_market.infra.config import access_tokens, upload_dir
from car_market.infra.db.session import get_session
from car_market.ports.access_gate import AccessGate
from car_market.ports.media_storage import MediaStorage
from car_market.use_cases.list_all_car_listings import ListAllCarListings
from car_market.use_cases.list_recent_car_listings import ListRecentCarListings
from car_market.use_cases.list_seller_car_listings import ListSellerCarListings
from car_market.use_cases.media_intake import MediaIntake
from car_market.use_cases.register_car_listing import RegisterCarListing


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() commits on success, rolls back on
    exception and always closes the session.

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


@lru_cache
def get_media_storage() -> MediaStorage:
    """Filesystem storage rooted at UPLOAD_DIR (stateless, shared)."""
    return LocalMediaStorage(root=upload_dir())


@lru_cache
def get_access_gate() -> AccessGate:
    """
    Token verifier used by authenticated routes.

    Replace through app.dependency_overrides to plug in an external
    identity provider.
    """
    return StaticTokenAccessGate(access_tokens())


def get_register_car_listing_use_case(
    db: Session = Depends(get_db),
    media_storage: MediaStorage = Depends(get_media_storage),
) -> RegisterCarListing:
    """
    Factory function that returns a configured RegisterCarListing use case.

    Seller lookup, allocator and repository share the request session.
    The allocator commits its increment on that session right away.

    Args:
        db: Database session (injected by FastAPI via Depends(get_db))
        media_storage: Upload storage (injected, cached)

    Returns:
        RegisterCarListing: Configured use case instance
    """
    return RegisterCarListing(
        seller_directory=PostgresSellerDirectory(session=db),
        sequence_allocator=PostgresSequenceAllocator(session=db),
        media_intake=MediaIntake(media_storage=media_storage),
        car_listing_repository=PostgresCarListingRepository(session=db),
    )


def get_list_seller_car_listings_use_case(db: Session = Depends(get_db)) -> ListSellerCarListings:
    repository = PostgresCarListingRepository(session=db)
    return ListSellerCarListings(car_listing_repository=repository)


def get_list_all_car_listings_use_case(db: Session = Depends(get_db)) -> ListAllCarListings:
    repository = PostgresCarListingRepository(session=db)
    return ListAllCarListings(car_listing_repository=repository)


def get_list_recent_car_listings_use_case(db: Session = Depends(get_db)) -> ListRecentCarListings:
    repository = PostgresCarListingRepository(session=db)
    return ListRecentCarListings(car_listing_repository=repository)
