"""Links as the client sees them, from the proxy state set by ForwardedHeadersMiddleware."""

from starlette.requests import Request

from shortlinks.common import build_home_url, build_short_url, normalize_path_prefix


def path_prefix_for(request: Request) -> str:
    """Path prefix from X-Forwarded-Prefix, else the configured one."""
    prefix = getattr(request.state, "forwarded_prefix", "")
    if prefix:
        return prefix
    return normalize_path_prefix(request.app.state.config.path_prefix)


def origin_for(request: Request) -> str:
    """Origin of short links: proxy headers, then the Host header, then BASE_URL."""
    origin = getattr(request.state, "public_origin", None)
    if origin:
        return origin
    
    host = request.headers.get("host")
    if host:
        return f"{request.url.scheme}://{host}"
    
    return request.app.state.config.base_url.rstrip("/")


def short_url_for(request: Request, abbreviation: str) -> str:
    """Absolute short URL for an abbreviation."""
    return build_short_url(
        abbreviation=abbreviation,
        base_url=origin_for(request),
        path_prefix=path_prefix_for(request),
    )


def home_url_for(request: Request, query: str = "") -> str:
    """Path of the home page."""
    return build_home_url(path_prefix_for(request), query)
