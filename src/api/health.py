"""Health check endpoint."""

from datetime import UTC, datetime

from fastapi import APIRouter

router = APIRouter(tags=["health"])

SERVICE_NAME = "conduit-api"
VERSION = "1.0.0"


@router.get("/health")
async def health_check():
    """Liveness probe for load balancers and monitoring."""
    return {
        "status": "ok",
        "timestamp": datetime.now(UTC).isoformat(),
        "version": VERSION,
        "service": SERVICE_NAME,
    }
