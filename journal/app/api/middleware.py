"""Compression and request-tracing middleware."""

from __future__ import annotations

import time
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.gzip import GZipMiddleware

from ..infra.logging import get_logger

__all__ = ["REQUEST_ID_HEADER", "install_middleware", "trace_requests"]

logger = get_logger(__name__)

REQUEST_ID_HEADER = "x-request-id"
GZIP_MINIMUM_SIZE = 500


async def trace_requests(request: Request, call_next):
    """Log each request with its latency and echo a request id header."""

    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
    started = time.perf_counter()
    trace = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
    }
    logger.debug("http_request_started", extra=trace)
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("http_request_failed", extra=trace)
        raise
    latency_ms = round((time.perf_counter() - started) * 1000, 2)
    response.headers[REQUEST_ID_HEADER] = request_id
    logger.info(
        "http_request_completed",
        extra={**trace, "status_code": response.status_code, "latency_ms": latency_ms},
    )
    return response


def install_middleware(application: FastAPI) -> None:
    """Register compression inside tracing so traces cover the whole response."""

    application.add_middleware(GZipMiddleware, minimum_size=GZIP_MINIMUM_SIZE)
    application.middleware("http")(trace_requests)
