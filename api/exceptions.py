"""
API Exceptions and Error Response Models
Standardized response shapes for the backup API
"""
from typing import Optional, Dict, Any
from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel


# ============================================
# RESPONSE MODELS
# ============================================

class ErrorResponse(BaseModel):
    """Standardized error response"""
    success: bool = False
    error: str


class BackupResponse(BaseModel):
    """Successful backup run"""
    success: bool = True
    message: str = "Backup completed"
    summary: Dict[str, Any]


class HealthResponse(BaseModel):
    """Liveness probe"""
    status: str = "healthy"
    timestamp: str


class ConfigurationStatusResponse(BaseModel):
    """Which required settings are present"""
    message: str = "Agent is running"
    configured: Dict[str, bool]


# ============================================
# ERROR RESPONSE HANDLERS
# ============================================

def create_error_response(
    error: str,
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    headers: Optional[Dict[str, str]] = None
) -> JSONResponse:
    """
    Create a standardized error response

    Args:
        error: Human-readable error message
        status_code: HTTP status code
        headers: Optional extra response headers

    Returns:
        JSONResponse with ``{"success": false, "error": ...}``
    """
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error).model_dump(),
        headers=headers
    )
