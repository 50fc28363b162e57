from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from product_catalog.entrypoints.http.exception_handlers import register_exception_handlers
from product_catalog.entrypoints.http.middleware import register_request_logging
from product_catalog.entrypoints.http.routes.health import router as health_router
from product_catalog.entrypoints.http.routes.products import router as products_router
from product_catalog.infra.config import cors_allow_origins
from product_catalog.infra.logging_setup import configure_logging


def build_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Product Catalog API",
        description="""
        Catalog of priced, categorized products.

        ## Features
        - Create, read, partially update and delete products
        - List products filtered by category and price range
        - Page-based retrieval, newest first

        ## Authentication
        Not handled by this service.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_allow_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_request_logging(app)

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(products_router, prefix="/api")

    return app


app = build_app()
