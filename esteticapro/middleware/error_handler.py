"""Global error hierarchy and FastAPI exception handlers.

All hub-specific errors extend HubError. The FastAPI exception handlers catch
these errors (plus routing HTTP errors, Pydantic's RequestValidationError and
unhandled exceptions) and return the data envelope: { data, error } with an
optional meta block.
"""

from __future__ import annotations

import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


# ---------------------------------------------------------------------------
# Error hierarchy
# ---------------------------------------------------------------------------


class HubError(Exception):
    """Base error for all hub-specific errors."""

    status_code: int = 500
    message: str = INTERNAL_ERROR_MESSAGE

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class UpstreamError(HubError):
    """An external collaborator failed or returned an unusable reply."""

    status_code = 502
    message = "Upstream service error"


class AuthProviderError(UpstreamError):
    """The authentication provider rejected or failed the sign-out."""

    message = "Authentication provider error"


class SettingsStoreError(UpstreamError):
    """The settings store could not be read."""

    message = "Settings store unavailable"


class PricingError(UpstreamError):
    """The pricing provider could not produce a price."""

    message = "Pricing provider error"


class PriceParseError(PricingError):
    """The quoted price is not a non-negative finite number."""

    message = "Price is not a valid number"


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------


def error_envelope(
    status_code: int,
    error: str,
    meta: dict | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build a data-envelope error response."""
    content: dict = {"data": None, "error": error}
    if meta:
        content["meta"] = meta
    return JSONResponse(status_code=status_code, content=content, headers=headers)


async def _hub_error_handler(_request: Request, exc: HubError) -> JSONResponse:
    """Handle HubError subclasses."""
    logger.warning(
        "%s: %s",
        exc.__class__.__name__,
        exc.message,
        extra={"error_reason": exc.message},
    )
    meta = exc.details if exc.details else None
    return error_envelope(exc.status_code, exc.message, meta=meta)


async def _http_error_handler(
    _request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle routing errors (404, 405) raised by Starlette / FastAPI."""
    return error_envelope(exc.status_code, str(exc.detail), headers=exc.headers)


async def _validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI / Pydantic RequestValidationError (422)."""
    field_errors = [
        {
            "field": " -> ".join(str(loc) for loc in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]
    return error_envelope(
        status_code=422,
        error="Validation error",
        meta={"fields": field_errors},
    )


async def _unhandled_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions: log traceback, return generic 500."""
    logger.error(
        "Unhandled exception: %s\n%s",
        exc,
        traceback.format_exc(),
    )
    return error_envelope(status_code=500, error=INTERNAL_ERROR_MESSAGE)


# ---------------------------------------------------------------------------
# Registration helper
# ---------------------------------------------------------------------------


def register_error_handlers(app: FastAPI) -> None:
    """Wire up all exception handlers on the FastAPI application."""
    app.add_exception_handler(HubError, _hub_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _unhandled_error_handler)  # type: ignore[arg-type]
