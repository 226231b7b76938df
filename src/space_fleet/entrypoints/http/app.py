from fastapi import FastAPI

from space_fleet.entrypoints.http.exception_handlers import register_exception_handlers
from space_fleet.entrypoints.http.routes.health import router as health_router
from space_fleet.entrypoints.http.routes.ships import router as ships_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Space Fleet API",
        description="""
        Registry of starships with validated fields and computed ratings.

        ## Features
        - Register, edit and remove ships
        - List and count ships with filters, ordering and pagination
        - Server-side rating from speed, usage and production year

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        license_info={
            "name": "Proprietary",
        },
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(ships_router, prefix="/v1")

    return app


app = build_app()
