"""Request ID middleware.

Generates (or propagates) a UUID request ID for every incoming request,
stores it in ``request.state.request_id`` and in the logging context, adds an
``X-Request-ID`` response header and writes one access log line.

Unhandled exceptions are turned into the generic 500 envelope here, while the
request ID is still in the logging context.
"""

from __future__ import annotations

import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from esteticapro.logging_config import request_id_var
from esteticapro.middleware.error_handler import INTERNAL_ERROR_MESSAGE, error_envelope

logger = logging.getLogger(__name__)


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that assigns a unique request ID to each request.

    If the incoming request already carries an ``X-Request-ID`` header the
    provided value is reused; otherwise a new UUID4 is generated.

    The ID is stored in ``request.state.request_id`` and returned in the
    ``X-Request-ID`` response header.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # Reuse caller-provided ID or generate a fresh one.
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id
        token = request_id_var.set(request_id)

        started = time.perf_counter()
        try:
            try:
                response: Response = await call_next(request)
            except Exception as exc:
                logger.exception(
                    "Unhandled exception: %s",
                    exc,
                    extra={"method": request.method, "path": request.url.path},
                )
                response = error_envelope(500, INTERNAL_ERROR_MESSAGE)

            response.headers["X-Request-ID"] = request_id
            logger.info(
                "%s %s -> %d",
                request.method,
                request.url.path,
                response.status_code,
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": round((time.perf_counter() - started) * 1000, 2),
                },
            )
            return response
        finally:
            request_id_var.reset(token)
