"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up
    - No readiness probe: the service has no backing store to check
"""

from fastapi import APIRouter, status

from payment_instructions.config import get_settings

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": get_settings().service_name,
    }
