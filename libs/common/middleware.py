"""Request tracing for the mock's HTTP surface.

Every request gets an ``X-Request-ID`` (echoed from the caller when present)
that is bound into the logging context, so the dispatcher's classification
and error logs can be correlated with the GraphQL call that produced them.
"""
import logging
import time
from typing import Callable, Iterable

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from libs.common.logging import (
    clear_request_context,
    configure_logging,
    get_logger,
    set_request_context,
)

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
ELAPSED_HEADER = "X-Response-Time-Ms"
QUIET_PATHS = ("/health", "/docs", "/openapi.json")


def _level_for(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind request id/path/method to the log context and log each request once."""

    def __init__(self, app: ASGIApp, quiet_paths: Iterable[str] = QUIET_PATHS):
        super().__init__(app)
        self.quiet_paths = frozenset(quiet_paths)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = set_request_context(
            request_id=request.headers.get(REQUEST_ID_HEADER),
            path=request.url.path,
            method=request.method,
        )
        quiet = request.url.path in self.quiet_paths
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "Unhandled error while serving request",
                extra={"extra_fields": {"elapsed_ms": _elapsed_ms(started)}},
            )
            raise
        finally:
            clear_request_context()

        elapsed = _elapsed_ms(started)
        if not quiet:
            # Context is cleared already; carry the id explicitly
            logger.log(
                _level_for(response.status_code),
                "%s %s -> %s (%.2f ms) [%s]",
                request.method,
                request.url.path,
                response.status_code,
                elapsed,
                request_id,
                extra={"extra_fields": {
                    "status_code": response.status_code,
                    "elapsed_ms": elapsed,
                }},
            )

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers[ELAPSED_HEADER] = f"{elapsed:.2f}"
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


def add_observability_middleware(app: FastAPI) -> None:
    """Configure logging and install request tracing on ``app``."""
    configure_logging()
    app.add_middleware(RequestContextMiddleware)
    logger.debug("Request tracing installed")
