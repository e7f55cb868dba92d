"""
Error envelope and exception handlers.

Every error response has the shape:
    {"error": {"code", "message", "details"}, "request_id", "timestamp"}
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from barprep.services.assistant import CommandError

logger = logging.getLogger("barprep.api")


class APIError(Exception):
    """Base class for API errors."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        details: Dict[str, Any] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class NotFoundError(APIError):
    """Resource not found."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(
            code="NOT_FOUND",
            message=f"{resource} not found: {identifier}",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"resource": resource, "identifier": identifier}
        )


class EventNotFoundError(NotFoundError):
    """No event with this id in the working set."""

    def __init__(self, event_id: str):
        super().__init__("Event", event_id)


class ValidationError(APIError):
    """Request is well-formed but inconsistent (e.g. ids that don't match)."""

    def __init__(self, message: str, details: Dict[str, Any] = None):
        super().__init__(
            code="VALIDATION_ERROR",
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details or {}
        )


def build_error_response(
    request: Request,
    code: str,
    message: str,
    status_code: int,
    details: Dict[str, Any] = None
) -> JSONResponse:
    """Build a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "details": details or {}
            },
            "request_id": _request_id(request),
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
        }
    )


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


def _field_path(loc) -> str:
    # ("body", "event", "headcount") -> "event.headcount"
    parts = [str(part) for part in loc]
    if len(parts) > 1 and parts[0] in ("body", "query", "path"):
        parts = parts[1:]
    return ".".join(parts)


def setup_exception_handlers(app: FastAPI):
    """Register exception handlers with the FastAPI app."""

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
        logger.warning(f"[{_request_id(request)}] {exc.code}: {exc.message}")
        return build_error_response(
            request=request,
            code=exc.code,
            message=exc.message,
            status_code=exc.status_code,
            details=exc.details
        )

    @app.exception_handler(CommandError)
    async def command_error_handler(request: Request, exc: CommandError) -> JSONResponse:
        """Rejected assistant commands and duplicate recipes."""
        logger.warning(f"[{_request_id(request)}] COMMAND_ERROR: {exc}")
        return build_error_response(
            request=request,
            code="COMMAND_ERROR",
            message=str(exc),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request,
        exc: RequestValidationError
    ) -> JSONResponse:
        """Malformed events, recipes or command payloads."""
        errors = [
            {"field": _field_path(error["loc"]), "message": error["msg"], "type": error["type"]}
            for error in exc.errors()
        ]

        logger.warning(f"[{_request_id(request)}] VALIDATION_ERROR: {errors}")
        return build_error_response(
            request=request,
            code="VALIDATION_ERROR",
            message="Request validation failed",
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"errors": errors}
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"[{_request_id(request)}] Unexpected error: {exc}")
        return build_error_response(
            request=request,
            code="INTERNAL_ERROR",
            message="An unexpected error occurred",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details={"type": type(exc).__name__}
        )
