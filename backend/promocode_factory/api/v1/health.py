"""
Health check endpoint for liveness probes.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, status

from promocode_factory.schemas.health import HealthResponse


router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Liveness probe",
    description="Basic health check to verify the service is running",
)
async def health_check() -> HealthResponse:
    """
    Basic liveness probe.

    Returns a simple "ok" status with timestamp. This endpoint returns 200
    whenever the application is running.
    """
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc)
    )
