"""Request logging middleware."""

import logging
import time
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("barprep.api")

# Health checks hit these constantly; keep them out of INFO logs
QUIET_PATHS = ("/health",)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Tags each request with a short ID, times it, and logs the outcome.

    The ID and duration are echoed back as X-Request-ID / X-Response-Time-Ms
    so a failing packing list can be traced from the dashboard.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = uuid.uuid4().hex[:8]
        request.state.request_id = request_id
        label = f"[{request_id}] {request.method} {request.url.path}"
        quiet = request.url.path.startswith(QUIET_PATHS)

        started = time.perf_counter()
        logger.log(logging.DEBUG if quiet else logging.INFO, f"{label} - Started")

        try:
            response = await call_next(request)
        except Exception as e:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.error(f"{label} - Error after {elapsed_ms:.2f}ms: {e}")
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time-Ms"] = f"{elapsed_ms:.2f}"

        if response.status_code >= 400:
            level = logging.WARNING
        elif quiet:
            level = logging.DEBUG
        else:
            level = logging.INFO
        logger.log(level, f"{label} - {response.status_code} in {elapsed_ms:.2f}ms")

        return response
