"""
Health check endpoint.
"""
import time

from fastapi import APIRouter

from senior_care.api.models import HealthResponse
from senior_care.utils.request_meta import utc_timestamp

router = APIRouter(tags=["health"])

PROCESS_STARTED_AT = time.monotonic()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint."""
    return HealthResponse(
        status="healthy",
        timestamp=utc_timestamp(),
        uptime=time.monotonic() - PROCESS_STARTED_AT,
    )
