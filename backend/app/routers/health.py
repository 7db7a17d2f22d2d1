"""
Health check router for liveness probes.
"""
from datetime import datetime, timezone

from fastapi import APIRouter, status

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
def health_check():
    """
    Basic health check endpoint.
    Returns 200 with the server time if the API is running.
    """
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
