"""Register car listing use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from car_market.domain.car_listing import (
    CAR_NUMBER_COUNTER,
    CarListing,
    NewCarListing,
    format_car_number,
)
from car_market.domain.errors import NotFoundError
from car_market.ports.car_listing_repository import CarListingRepository
from car_market.ports.seller_directory import SellerDirectory
from car_market.ports.sequence_allocator import SequenceAllocator
from car_market.use_cases.media_intake import MediaIntake, UploadedImage

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RegisterCarListingRequest:
    """Registration input. Listing details are passed through as supplied."""

    seller_id: str
    car_model: str | None = None
    car_year: int | None = None
    price: Decimal | None = None
    description: str | None = None
    car_type: str | None = None
    manufacturer: str | None = None
    image: UploadedImage | None = None


@dataclass(frozen=True, slots=True)
class RegisterCarListingResponse:
    car_id: str
    car_number: str
    car: CarListing


class RegisterCarListing:
    """
    Use case for registering a car for sale.

    Steps run strictly in order, each only if the previous succeeded:
    1. Resolve the seller (NotFoundError if absent; nothing else happens)
    2. Allocate the next car number
    3. Store the optional image
    4. Persist the listing with is_sold=False

    A car number allocated in step 2 is not given back if step 3 or 4
    fails. Numbering is unique and monotonic, not dense.
    """

    def __init__(
        self,
        seller_directory: SellerDirectory,
        sequence_allocator: SequenceAllocator,
        media_intake: MediaIntake,
        car_listing_repository: CarListingRepository,
    ) -> None:
        """
        Initialize use case with dependencies.

        Args:
            seller_directory: Identity lookup for the requesting seller
            sequence_allocator: Source of car numbers
            media_intake: Stores the uploaded image
            car_listing_repository: Listing persistence
        """
        self._seller_directory = seller_directory
        self._sequence_allocator = sequence_allocator
        self._media_intake = media_intake
        self._repository = car_listing_repository

    def execute(self, request: RegisterCarListingRequest) -> RegisterCarListingResponse:
        """
        Execute the registration.

        Args:
            request: Seller identity, listing details and optional image

        Returns:
            RegisterCarListingResponse with the new listing's id and car number

        Raises:
            NotFoundError: If the seller does not exist
            CarNumberOverflowError: If the counter no longer fits 7 digits
            PersistenceError: If any store operation fails
        """
        # 1. Seller check comes before allocation so unknown sellers consume no number
        seller = self._seller_directory.resolve(request.seller_id)
        if seller is None:
            raise NotFoundError(resource="Seller", identifier=request.seller_id)

        # 2. Allocate
        car_number = format_car_number(self._sequence_allocator.allocate(CAR_NUMBER_COUNTER))

        # 3. Media
        images = self._media_intake.intake(request.image)

        # 4. Persist
        car = self._repository.add(
            NewCarListing(
                seller_id=seller.id,
                car_number=car_number,
                car_model=request.car_model,
                car_year=request.car_year,
                price=request.price,
                description=request.description,
                car_type=request.car_type,
                manufacturer=request.manufacturer,
                images=images,
                is_sold=False,
            )
        )

        logger.info(
            "Car listing registered",
            extra={"car_id": car.id, "car_number": car.car_number, "seller_id": seller.id},
        )

        return RegisterCarListingResponse(car_id=car.id, car_number=car.car_number, car=car)
