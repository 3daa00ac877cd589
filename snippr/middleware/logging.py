"""
Snippr - Request Logging Middleware
=====================================

What:  One access-log line per HTTP request on the `snippr.access` logger.
How:   Times the downstream call and logs method, path, status, duration,
       request id and client address. The level follows the status class:
       5xx → ERROR, 4xx → WARNING, everything else → INFO.

Example line:
    2026-10-18T12:00:00 [INFO] snippr.access: POST /snippets 201 0.8ms [1f2e3d4c] from 127.0.0.1

/health is not logged; probes hit it every few seconds.
Request bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from snippr.middleware.request_id import request_id_var

logger = logging.getLogger("snippr.access")

SKIPPED_PATHS = {"/health"}


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request with its status code and duration."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in SKIPPED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        client_ip = request.client.host if request.client else "unknown"
        rid = getattr(request.state, "request_id", "") or request_id_var.get("")
        status = response.status_code

        logger.log(
            level_for_status(status),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response
