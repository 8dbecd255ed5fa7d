"""Access logging and HTTP metrics for every request."""

import time
from typing import Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from finance_tracker.core.config import settings
from finance_tracker.core.metrics import record_http_request

logger = structlog.get_logger(__name__)


def _endpoint_label(request: Request) -> str:
    """Route template (``/v1/transactions/{transaction_id}``) or the raw path."""
    route = request.scope.get("route")
    return getattr(route, "path", request.url.path)


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Emits ``request_started`` / ``request_completed`` events.

    The caller's user ID is bound into the structlog context so service
    and repository log lines of the same request carry it too. Unhandled
    errors are logged as ``request_failed`` and re-raised.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        user_id = request.headers.get("X-User-ID")
        if user_id:
            structlog.contextvars.bind_contextvars(user_id=user_id)

        log = logger.bind(method=request.method, path=request.url.path)
        log.info("request_started", query=str(request.query_params) or None)

        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        except Exception as e:
            log.error("request_failed", error=str(e), error_type=type(e).__name__)
            raise
        finally:
            elapsed = time.perf_counter() - started
            log.info(
                "request_completed",
                status_code=status_code,
                duration_ms=round(elapsed * 1000, 2),
            )
            if settings.metrics_enabled:
                record_http_request(request.method, _endpoint_label(request), status_code, elapsed)
            if user_id:
                structlog.contextvars.unbind_contextvars("user_id")
