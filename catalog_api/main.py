"""Catalog API main application module.

This module initializes the FastAPI application and configures
core middleware, routers, exception handlers and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from catalog_api.api.admin_products import router as admin_products_router
from catalog_api.api.categories import router as categories_router
from catalog_api.api.health import router as health_router
from catalog_api.api.middleware import setup_middleware
from catalog_api.api.products import router as products_router
from catalog_api.domain import DomainError, NotFoundError, ValidationError
from catalog_api.infrastructure.config import settings
from catalog_api.infrastructure.logging import configure_logging
from catalog_api.infrastructure.memory import (
    get_memory_category_repository,
    get_memory_product_repository,
)
from catalog_api.infrastructure.seed import seed_catalog

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    # Startup
    configure_logging()
    logger.info(
        "Starting Catalog API",
        version=settings.api_version,
        debug=settings.debug,
        repository_backend=settings.repository_backend,
    )

    if settings.repository_backend == "memory" and settings.seed_demo_data:
        await seed_catalog(
            get_memory_category_repository(), get_memory_product_repository()
        )

    yield

    # Shutdown
    logger.info("Shutting down Catalog API")


app = FastAPI(
    title="Catalog API",
    description="Product catalog backend: categories, products and variants",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Setup custom middleware (request ID, error handling)
setup_middleware(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(categories_router)
app.include_router(products_router)
app.include_router(admin_products_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


def _error_response(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    details: list[dict] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details or [],
            "request_id": getattr(request.state, "request_id", None),
        },
    )


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    """Handle business rule violations as 400 responses."""
    logger.info(
        "Validation failed",
        path=request.url.path,
        field=exc.field,
        error=exc.message,
    )
    return _error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "VALIDATION_ERROR",
        exc.message,
        [{"field": exc.field, "message": exc.message}],
    )


@app.exception_handler(NotFoundError)
async def not_found_error_handler(request: Request, exc: NotFoundError):
    """Handle missing entities as 404 responses."""
    return _error_response(
        request, status.HTTP_404_NOT_FOUND, exc.error_code, exc.message
    )


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    """Handle any other domain error as a 400 response."""
    return _error_response(
        request, status.HTTP_400_BAD_REQUEST, "DOMAIN_ERROR", exc.message
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
):
    """Handle malformed requests with consistent format."""
    details = [
        {
            "field": ".".join(str(part) for part in error["loc"][1:]) or None,
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
    logger.info("Request validation failed", path=request.url.path, errors=details)
    return _error_response(
        request,
        422,
        "REQUEST_VALIDATION_ERROR",
        "Request validation failed",
        details,
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions with consistent format."""
    return _error_response(request, exc.status_code, "ERROR", str(exc.detail))


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """Handle uncaught exceptions with consistent format."""
    logger.exception(
        "Unhandled exception in handler",
        path=request.url.path,
        method=request.method,
        error=str(exc),
    )
    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_ERROR",
        "An internal error occurred",
    )
