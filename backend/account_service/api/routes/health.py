"""Health Probe — liveness endpoint.

Invariants:
    - GET /api/health always returns 200 if the process is up
    - Never touches the database
"""

from fastapi import APIRouter, status

from account_service.schemas.user import HealthResponse

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", response_model=HealthResponse, status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe."""
    return {"status": "OK", "message": "API is running"}
