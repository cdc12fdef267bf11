"""Per-request access log: route template, status, duration and correlation id."""
from __future__ import annotations

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from dm_service.api.middleware.correlation_id import correlation_id_ctx

logger = logging.getLogger(__name__)

QUIET_PATHS = frozenset({"/healthz", "/readyz"})
TIMING_HEADER = "X-Response-Time-Ms"


def route_template(request: Request) -> str:
    """``/api/messages/{message_id}`` rather than ``/api/messages/17``."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


class RequestTimingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        response.headers[TIMING_HEADER] = f"{elapsed_ms:.1f}"

        path = route_template(request)
        if response.status_code >= 500:
            level = logging.WARNING
        elif path in QUIET_PATHS:
            level = logging.DEBUG
        else:
            level = logging.INFO
        logger.log(
            level,
            "%s %s %s %.1fms request_id=%s",
            request.method,
            path,
            response.status_code,
            elapsed_ms,
            correlation_id_ctx.get() or "-",
        )
        return response
