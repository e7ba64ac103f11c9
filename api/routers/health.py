"""
Health and Status Endpoints
"""
from fastapi import APIRouter

from api.exceptions import HealthResponse
from src.utils.datetime import utc_timestamp

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Liveness probe; always healthy while the process serves requests"""
    return HealthResponse(timestamp=utc_timestamp())
