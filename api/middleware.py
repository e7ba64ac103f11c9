"""
API Middleware
Request logging and last-resort error handling
"""
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from src.utils.logger import setup_logger

logger = setup_logger(__name__)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for consistent error handling

    Assigns a request ID and turns any exception a route let escape into a
    ``{"success": false, "error": ...}`` 500 response.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request with error handling"""
        from api.exceptions import create_error_response

        request_id = str(uuid.uuid4())[:8]
        request.state.request_id = request_id

        try:
            return await call_next(request)
        except Exception as e:
            logger.error(f"Unexpected error [{request_id}] in {request.url.path}: {e}", exc_info=True)
            return create_error_response(error=str(e))


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status and duration of every request

    Backup runs hold the connection for the whole run, so the duration of
    POST /backup-asana is the duration of the backup.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()
        request_id = getattr(request.state, 'request_id', 'unknown')

        response = await call_next(request)

        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code}",
            request_id=request_id,
            duration_s=round(time.perf_counter() - started, 3)
        )
        return response
