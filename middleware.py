"""
Request logging middleware.
"""
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from utils.logger import app_logger


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status and duration of every request.
    """

    EXCLUDED_PATHS = {"/health"}

    async def dispatch(self, request: Request, call_next):
        """
        Process each request and log it.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/handler in chain

        Returns:
            Response from next handler
        """
        if request.url.path in self.EXCLUDED_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        client_host = request.client.host if request.client else "unknown"
        app_logger.info(f"{request.method} {request.url.path} from {client_host}")

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - started) * 1000
        app_logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.0f} ms)"
        )
        return response
