"""Request ID middleware and utilities."""

import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.logging import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def get_request_id(request: Request) -> str:
    """Request ID set by the middleware, or a fresh one outside it."""
    return getattr(request.state, "request_id", None) or str(uuid.uuid4())


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID and log one line when it finishes.

    Client errors log at WARNING so rejected uploads stand out; the upload
    size is included when the client sent one.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        fields = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
        }
        content_length = request.headers.get("content-length", "")
        if content_length.isdigit():
            fields["content_length"] = int(content_length)

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            fields.update(status_code=500, latency_ms=_elapsed_ms(started), error=str(e))
            logger.error("Request failed", extra=fields, exc_info=True)
            raise

        response.headers[REQUEST_ID_HEADER] = request_id

        fields.update(status_code=response.status_code, latency_ms=_elapsed_ms(started))
        level = "warning" if response.status_code >= 400 else "info"
        getattr(logger, level)("Request completed", extra=fields)
        return response


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)
