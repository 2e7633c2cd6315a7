from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from car_market.entrypoints.http.exception_handlers import register_exception_handlers
from car_market.entrypoints.http.routes.cars import router as cars_router
from car_market.entrypoints.http.routes.health import router as health_router
from car_market.infra.config import upload_dir
from car_market.infra.db.session import dispose_engine


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    upload_dir().mkdir(parents=True, exist_ok=True)
    yield
    dispose_engine()


def build_app() -> FastAPI:
    app = FastAPI(
        title="Car Market API",
        description="""
        Used-car marketplace API for sellers listing their cars.

        ## Features
        - Register a car with an optional photo and get its 7-digit car number
        - List your own cars
        - List all cars (by car number) and the most recent cars

        ## Authentication
        `register` and `mycars` require `Authorization: Bearer <token>`.
        Listing all and recent cars is public.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        contact={
            "name": "Car Market Team",
            "email": "dev@car-market.example",
        },
        license_info={
            "name": "Proprietary",
        },
        lifespan=lifespan,
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(cars_router, prefix="/v1")

    # Uploaded car photos, referenced by the stored names in listing.images
    app.mount("/uploads", StaticFiles(directory=upload_dir(), check_dir=False), name="uploads")

    return app


app = build_app()
