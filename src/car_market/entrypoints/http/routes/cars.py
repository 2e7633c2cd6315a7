from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from car_market.entrypoints.http.dependencies import (
    get_list_all_car_listings_use_case,
    get_list_recent_car_listings_use_case,
    get_list_seller_car_listings_use_case,
    get_register_car_listing_use_case,
)
from car_market.entrypoints.http.dtos.car_listings import (
    CarListResponseDTO,
    RegisterCarFormDTO,
    RegisterCarResponseDTO,
)
from car_market.entrypoints.http.error_responses import ErrorResponse
from car_market.entrypoints.http.mappers.car_listing_mapper import CarListingMapper
from car_market.entrypoints.http.security import get_current_seller_id
from car_market.use_cases.list_all_car_listings import ListAllCarListings
from car_market.use_cases.list_recent_car_listings import (
    ListRecentCarListings,
    ListRecentCarListingsRequest,
)
from car_market.use_cases.list_seller_car_listings import (
    ListSellerCarListings,
    ListSellerCarListingsRequest,
)
from car_market.use_cases.media_intake import UploadedImage
from car_market.use_cases.register_car_listing import RegisterCarListing


router = APIRouter(prefix="/cars", tags=["Cars"])


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=RegisterCarResponseDTO,
    summary="Register a car for sale",
    description="""
    Register a car listing for the authenticated seller.

    ## Request
    - `multipart/form-data` with `car_model`, `car_year`, `price`,
      `description`, `type`, `manufacturer` and an optional `image` file
    - Missing fields are stored as null

    ## Car number
    - Every registration receives the next 7-digit number (e.g. `0000042`)
    - Numbers are unique and increasing; a failed registration may leave a gap
    """,
    responses={
        401: {"model": ErrorResponse, "description": "Missing or invalid access token"},
        404: {"model": ErrorResponse, "description": "Seller does not exist"},
        500: {"model": ErrorResponse, "description": "Registration failed"},
    },
)
def register_car(
    car_model: str | None = Form(default=None),
    car_year: int | None = Form(default=None),
    price: str | None = Form(default=None),
    description: str | None = Form(default=None),
    car_type: str | None = Form(default=None, alias="type"),
    manufacturer: str | None = Form(default=None),
    image: UploadFile | None = File(default=None),
    seller_id: str = Depends(get_current_seller_id),
    use_case: RegisterCarListing = Depends(get_register_car_listing_use_case),
) -> RegisterCarResponseDTO:
    """Register car endpoint following parse → execute → map → return pattern."""
    form = RegisterCarFormDTO(
        car_model=car_model,
        car_year=car_year,
        price=price,
        description=description,
        type=car_type,
        manufacturer=manufacturer,
    )
    upload = UploadedImage(filename=image.filename or "", content=image.file) if image else None

    # 1. Map to domain request
    request = CarListingMapper.to_register_request(form, seller_id=seller_id, image=upload)

    # 2. Execute use case
    result = use_case.execute(request)

    # 3. Map to response
    return CarListingMapper.to_register_response(result)


@router.get(
    "/mycars",
    response_model=CarListResponseDTO,
    summary="List my cars",
    responses={401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def list_my_cars(
    seller_id: str = Depends(get_current_seller_id),
    use_case: ListSellerCarListings = Depends(get_list_seller_car_listings_use_case),
) -> CarListResponseDTO:
    result = use_case.execute(ListSellerCarListingsRequest(seller_id=seller_id))
    return CarListingMapper.to_list_response(result.cars)


@router.get(
    "/all",
    response_model=CarListResponseDTO,
    summary="List all cars",
    description="All listings ordered by car number ascending. No authentication required.",
    responses={500: {"model": ErrorResponse}},
)
def list_all_cars(
    use_case: ListAllCarListings = Depends(get_list_all_car_listings_use_case),
) -> CarListResponseDTO:
    result = use_case.execute()
    return CarListingMapper.to_list_response(result.cars)


@router.get(
    "/recent",
    response_model=CarListResponseDTO,
    summary="List recent cars",
    description="The 3 most recently registered listings, newest first. No authentication required.",
    responses={500: {"model": ErrorResponse}},
)
def list_recent_cars(
    use_case: ListRecentCarListings = Depends(get_list_recent_car_listings_use_case),
) -> CarListResponseDTO:
    result = use_case.execute(ListRecentCarListingsRequest())
    return CarListingMapper.to_list_response(result.cars)
