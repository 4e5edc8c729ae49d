"""Forwarded headers middleware."""

from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from shortlinks.common import normalize_path_prefix


class ForwardedHeadersMiddleware(BaseHTTPMiddleware):
    """Record where the client sees the service when it sits behind a proxy.
    
    Sets ``request.state.public_origin`` from X-Forwarded-Proto and
    X-Forwarded-Host (None unless both are present) and
    ``request.state.forwarded_prefix`` from X-Forwarded-Prefix.
    """
    
    async def dispatch(self, request: Request, call_next: Callable):
        proto = request.headers.get("x-forwarded-proto")
        host = request.headers.get("x-forwarded-host")
        
        request.state.public_origin = f"{proto}://{host}" if proto and host else None
        request.state.forwarded_prefix = normalize_path_prefix(
            request.headers.get("x-forwarded-prefix", "")
        )
        
        return await call_next(request)
