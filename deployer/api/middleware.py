"""Custom middleware for the API."""

import time
from typing import Callable

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from deployer.utils.logging import get_logger

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request and tag everything logged while serving it.

    The request ID is bound to structlog's context, so inspector, builder
    and submitter events for one ``/deploy`` call share it.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        request_id = request.headers.get("X-Request-ID", str(time.time_ns()))

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=request.url.path,
        )
        logger.info("request.started", method=request.method)

        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        # Failed requests log at WARNING
        log = logger.warning if response.status_code >= 400 else logger.info
        log(
            "request.completed",
            method=request.method,
            status_code=response.status_code,
            duration_ms=round(duration_ms, 2),
        )
        structlog.contextvars.clear_contextvars()

        response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"
        response.headers["X-Request-ID"] = request_id
        return response
