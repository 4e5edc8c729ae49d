"""Access logging middleware."""

import time
import logging
from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request; redirects also log their target."""

    def __init__(self, app, logger: Optional[logging.Logger] = None):
        super().__init__(app)
        self.logger = logger or logging.getLogger("link_shortener.web")

    async def dispatch(self, request: Request, call_next: Callable):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        client = request.client.host if request.client else "-"
        line = f"{client} {request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms"
        location = response.headers.get("location")
        if location:
            line = f"{line} -> {location}"

        self.logger.info(line)
        return response
