from fastapi import FastAPI

from parts_market.entrypoints.http.exception_handlers import register_exception_handlers
from parts_market.entrypoints.http.routes.cars import router as cars_router
from parts_market.entrypoints.http.routes.categories import router as categories_router
from parts_market.entrypoints.http.routes.health import router as health_router
from parts_market.entrypoints.http.routes.locations import router as locations_router
from parts_market.entrypoints.http.routes.products import router as products_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Parts Market API",
        description="""
        Car spare-parts marketplace API for Iraq.

        ## Features
        - Search approved parts with filters, ranked by dealer proximity
        - Product details
        - Car brands and models for compatibility filters
        - Part categories
        - Iraqi provinces and cities

        ## Authentication
        Read-only catalog endpoints; no authentication required.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        contact={
            "name": "Parts Market Team",
            "email": "dev@parts-market.iq",
        },
        license_info={
            "name": "Proprietary",
        },
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(products_router, prefix="/v1")
    app.include_router(categories_router, prefix="/v1")
    app.include_router(cars_router, prefix="/v1")
    app.include_router(locations_router, prefix="/v1")

    return app


app = build_app()
