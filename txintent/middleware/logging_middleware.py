"""
HTTP request logging middleware.

Every request gets a request id bound into the structlog context. Calls to
``/actions/{name}`` also bind the action name and the caller's action id
(``x-action-id`` header), so handler and provider logs for one invocation
can be joined, and are summarised as an ``action_request`` event.
"""

import re
import time
import uuid
from typing import Optional

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = structlog.stdlib.get_logger("http")

_ACTION_PATH_RE = re.compile(r"^/actions/(?P<action>[^/]+)/?$")


def action_name_from_path(path: str) -> Optional[str]:
    """``/actions/mint`` -> ``mint``; None for any other path."""
    match = _ACTION_PATH_RE.match(path)
    return match.group("action") if match else None


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log requests with timing and status, tagged with the action they invoke."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("x-request-id", str(uuid.uuid4())[:8])
        action = action_name_from_path(request.url.path)
        action_id = request.headers.get("x-action-id")

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)
        if action:
            structlog.contextvars.bind_contextvars(action=action, action_id=action_id)

        start = time.perf_counter()
        status_code = 500

        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers["x-request-id"] = request_id
            return response
        finally:
            duration_ms = round((time.perf_counter() - start) * 1000, 1)

            log = logger.info if status_code < 400 else logger.warning
            if status_code >= 500:
                log = logger.error

            fields = dict(
                method=request.method,
                path=request.url.path,
                status=status_code,
                duration_ms=duration_ms,
            )
            if action:
                log("action_request", action=action, action_id=action_id, **fields)
            else:
                log("http_request", **fields)
