import re
import time
import uuid
from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars

log = structlog.get_logger()

# Incoming ids are reused only when short and made of safe characters
REQUEST_ID_PATTERN = re.compile(r"[A-Za-z0-9._-]{1,128}")

def _request_id(request: Request) -> str:
    incoming = request.headers.get("X-Request-ID", "")
    if REQUEST_ID_PATTERN.fullmatch(incoming):
        return incoming
    return str(uuid.uuid4())

class LoggingMiddleware(BaseHTTPMiddleware):
    """Bind per-request context for structlog and log one line per request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        clear_contextvars()

        request_id = _request_id(request)

        bind_contextvars(
            request_id=request_id,
            http_method=request.method,
            path=request.url.path,
            lang=request.query_params.get("lang"),
            client_ip=request.client.host if request.client else "unknown",
        )
        request.state.request_id = request_id

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            log.exception(
                "http_request_failed",
                elapsed_ms=round((time.perf_counter() - start_time) * 1000, 2),
                error=str(e)
            )
            raise

        log.info(
            "http_request",
            status_code=response.status_code,
            elapsed_ms=round((time.perf_counter() - start_time) * 1000, 2)
        )
        response.headers["X-Request-ID"] = request_id
        return response
