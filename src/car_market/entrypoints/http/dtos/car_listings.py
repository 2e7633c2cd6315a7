from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RegisterCarFormDTO(BaseModel):
    """Multipart form fields for registering a car.

    Every field is optional: missing details are stored as null.
    """

    car_model: str | None = Field(default=None, examples=["Avante"])
    car_year: int | None = Field(default=None, examples=[2021])
    price: str | None = Field(
        default=None,
        description="Price as decimal string",
        examples=["18500000"],
    )
    description: str | None = Field(default=None, examples=["Single owner, no accidents"])
    type: str | None = Field(default=None, description="Car category", examples=["Sedan"])
    manufacturer: str | None = Field(default=None, examples=["Hyundai"])


class RegisterCarResponseDTO(BaseModel):
    message: str
    car_id: str
    car_number: str = Field(description="7-digit zero-padded display number", examples=["0000042"])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "Car registered",
                "car_id": "550e8400-e29b-41d4-a716-446655440000",
                "car_number": "0000042",
            }
        }
    )


class CarListingDTO(BaseModel):
    id: str
    seller_id: str
    car_number: str
    car_model: str | None
    car_year: int | None
    price: str | None
    description: str | None
    type: str | None
    manufacturer: str | None
    images: list[str]
    is_sold: bool
    created_at: datetime


class CarListResponseDTO(BaseModel):
    cars: list[CarListingDTO]
