from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from typing import Optional
import logging

from warehouse_api.config import Settings, get_settings
from warehouse_api.database import Base, create_db_engine, create_session_factory
from warehouse_api.exceptions import WarehouseAPIError, InvalidRequestError
from warehouse_api.middleware import RequestLoggingMiddleware
from warehouse_api.validators.product import ProductValidator
from warehouse_api.api import products, health

# Make sure the table is registered on Base before create_all runs
import warehouse_api.models.product  # noqa: F401

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    Opens the connection pool on startup and disposes of it on shutdown.
    """
    settings: Settings = app.state.settings

    # Startup
    logger.info("Starting up application...")
    engine = create_db_engine(settings)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    logger.info("Ensuring database tables exist...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database ready")

    try:
        yield
    finally:
        # Shutdown
        logger.info("Shutting down application...")
        engine.dispose()
        logger.info("Connection pool closed")


async def handle_app_error(request: Request, exc: WarehouseAPIError) -> JSONResponse:
    """Render any application error as {"detail": message} with its status code."""
    if exc.status_code >= 500:
        logger.error(f"{exc.__class__.__name__}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed path or query parameters are plain 400s, never 422s."""
    locations = {error["loc"][0] for error in exc.errors() if error.get("loc")}
    if "path" in locations:
        error = InvalidRequestError("Invalid ID")
    else:
        error = InvalidRequestError()
    return await handle_app_error(request, error)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Explicit settings; loaded from the environment when omitted
    """
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    app = FastAPI(
        title="Warehouse API",
        description="""
        A small CRUD service for warehouse products.

        - **Reads** (`GET /products`, `GET /products/{id}`) are public
        - **Writes** (`POST`, `PUT`, `DELETE`) require the `X-API-Key` header
        """,
        version=VERSION,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.product_validator = ProductValidator()

    app.add_middleware(RequestLoggingMiddleware)
    app.add_exception_handler(WarehouseAPIError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)

    # Include API routers
    app.include_router(health.router)
    app.include_router(products.public_router)
    app.include_router(products.protected_router)

    @app.get("/", tags=["Root"])
    def root():
        """Root endpoint with API information."""
        return {
            "name": "Warehouse API",
            "version": VERSION,
            "docs": "/docs",
            "health": "/health"
        }

    return app
