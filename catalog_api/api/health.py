"""Health check endpoints.

Provides endpoints for monitoring service health and readiness.
"""

from fastapi import APIRouter
from sqlalchemy import text

from catalog_api.api.schemas import HealthResponse
from catalog_api.infrastructure.config import settings
from catalog_api.infrastructure.database import engine

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    return HealthResponse(
        status="healthy",
        service="catalog-api",
        version=settings.api_version,
    )


@router.get("/ready")
async def readiness_check() -> dict[str, str]:
    """Check if service is ready to accept requests.

    With the SQL backend the database must answer a trivial query.

    Returns:
        Readiness status.
    """
    if settings.repository_backend == "sql":
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    return {"status": "ready"}
