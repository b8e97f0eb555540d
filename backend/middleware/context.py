import uuid
import time
from contextvars import ContextVar
from typing import Optional
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from config import logger

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tags each request with an id (client-supplied X-Request-ID or a new uuid4) and times it."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        token = request_id_var.set(request_id)
        start_time = time.perf_counter()

        logger.info(
            "Request started: %s %s",
            request.method,
            request.url.path,
            extra={"request_id": request_id, "client": request.client.host if request.client else None}
        )

        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        duration = time.perf_counter() - start_time
        logger.info(
            "Request completed: %s in %.1f ms",
            response.status_code,
            duration * 1000,
            extra={"request_id": request_id}
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{duration:.3f}s"
        return response

def get_request_id() -> Optional[str]:
    return request_id_var.get()
