from __future__ import annotations

from decimal import Decimal, InvalidOperation

from car_market.domain.car_listing import CarListing
from car_market.domain.errors import ValidationError
from car_market.entrypoints.http.dtos.car_listings import (
    CarListingDTO,
    CarListResponseDTO,
    RegisterCarFormDTO,
    RegisterCarResponseDTO,
)
from car_market.use_cases.media_intake import UploadedImage
from car_market.use_cases.register_car_listing import (
    RegisterCarListingRequest,
    RegisterCarListingResponse,
)

REGISTERED_MESSAGE = "Car registered"


class CarListingMapper:
    """Maps between REST DTOs and domain models for car listings."""

    @staticmethod
    def to_register_request(
        dto: RegisterCarFormDTO,
        seller_id: str,
        image: UploadedImage | None,
    ) -> RegisterCarListingRequest:
        """
        Converts the registration form to a domain request.

        Handles string → Decimal conversion of the price at the boundary.
        An absent or blank price stays None.

        Raises:
            ValidationError: If price is present but not a valid decimal
        """
        price: Decimal | None = None
        if dto.price is not None and dto.price.strip():
            try:
                price = Decimal(dto.price.strip())
            except (InvalidOperation, ValueError):
                raise ValidationError(
                    errors=[
                        {
                            "field": "price",
                            "message": f"Must be a valid decimal: {dto.price}",
                            "code": "INVALID_DECIMAL",
                        }
                    ]
                )
            if not price.is_finite():
                raise ValidationError(
                    errors=[
                        {
                            "field": "price",
                            "message": f"Must be a finite decimal: {dto.price}",
                            "code": "INVALID_DECIMAL",
                        }
                    ]
                )

        return RegisterCarListingRequest(
            seller_id=seller_id,
            car_model=dto.car_model,
            car_year=dto.car_year,
            price=price,
            description=dto.description,
            car_type=dto.type,  # DTO uses 'type', domain uses 'car_type'
            manufacturer=dto.manufacturer,
            image=image,
        )

    @staticmethod
    def to_register_response(result: RegisterCarListingResponse) -> RegisterCarResponseDTO:
        return RegisterCarResponseDTO(
            message=REGISTERED_MESSAGE,
            car_id=result.car_id,
            car_number=result.car_number,
        )

    @staticmethod
    def to_car_response(car: CarListing) -> CarListingDTO:
        """
        Converts domain CarListing to REST response DTO.

        Handles Decimal → str conversion at the boundary.
        """
        return CarListingDTO(
            id=car.id,
            seller_id=car.seller_id,
            car_number=car.car_number,
            car_model=car.car_model,
            car_year=car.car_year,
            price=str(car.price) if car.price is not None else None,
            description=car.description,
            type=car.car_type,
            manufacturer=car.manufacturer,
            images=list(car.images),
            is_sold=car.is_sold,
            created_at=car.created_at,
        )

    @staticmethod
    def to_list_response(cars: list[CarListing]) -> CarListResponseDTO:
        return CarListResponseDTO(cars=[CarListingMapper.to_car_response(car) for car in cars])
