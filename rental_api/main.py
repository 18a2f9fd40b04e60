"""
FastAPI application entry point.
Main application setup and configuration.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from typing import Optional
import logging

from rental_api.config import Settings, get_settings
from rental_api.repositories.property import PropertyRepository
from rental_api.routers import properties_router
from rental_api.utils.exceptions import APIException
from rental_api.services.error_handler import ErrorHandlerService
from rental_api.middleware import RequestLoggingMiddleware

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)


def create_app(
    settings: Optional[Settings] = None,
    property_repository: Optional[PropertyRepository] = None
) -> FastAPI:
    """
    Build a configured FastAPI application.

    Each application owns its own property repository (``app.state``), so
    separate instances never share records.

    Args:
        settings: Settings override, defaults to the cached environment settings
        property_repository: Repository override, defaults to a fresh empty one

    Returns:
        FastAPI application
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan manager.
        Handles startup and shutdown events.
        """
        logger.info(f"Starting {settings.app_name} v{settings.app_version}")
        logger.info(f"Environment: {settings.environment}")
        logger.info(f"API endpoints available at {settings.api_prefix}/properties")
        yield
        logger.info("Shutting down application")

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="""
    A minimal API for managing rental property records.

    ## Features

    * **Property Management**: create, read, update and delete rental properties
    * **Filtering**: list properties by status (available, rented, maintenance)
    * **Pagination**: limit/offset pagination of property lists

    Records are kept in memory and are lost when the process stops.
    """,
        docs_url="/docs",
        redoc_url="/redoc",
        # collection routes are registered with and without the trailing slash
        redirect_slashes=False,
        openapi_tags=[
            {
                "name": "Properties",
                "description": "Rental property management"
            },
            {
                "name": "Info",
                "description": "API information"
            }
        ],
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.property_repository = property_repository if property_repository is not None else PropertyRepository()

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    # Add request logging middleware
    app.add_middleware(
        RequestLoggingMiddleware,
        max_request_size=settings.max_request_size,
        enable_request_logging=settings.enable_request_logging
    )

    # Include API routers
    app.include_router(properties_router, prefix=settings.api_prefix)

    # Global exception handlers using ErrorHandlerService
    @app.exception_handler(APIException)
    async def api_exception_handler(request: Request, exc: APIException):
        """Handle custom API exceptions with structured error responses."""
        return ErrorHandlerService.handle_api_exception(exc, request)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle malformed request bodies as validation errors."""
        return ErrorHandlerService.handle_request_validation_error(exc, request)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle routing errors (unknown routes, unsupported methods)."""
        return ErrorHandlerService.handle_http_exception(exc, request)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions with secure error responses."""
        return ErrorHandlerService.handle_unexpected_error(exc, request)

    @app.get("/", tags=["Info"])
    async def root():
        """
        Root endpoint providing basic API information.
        """
        return {
            "message": settings.app_name,
            "version": settings.app_version,
            "endpoints": {
                "properties": f"{settings.api_prefix}/properties",
                "docs": "/docs"
            }
        }

    return app


app = create_app()


def run() -> None:
    """Run the API with uvicorn using the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "rental_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )


if __name__ == "__main__":
    run()
