"""URL building utilities for link shortener."""

from urllib.parse import quote


def normalize_path_prefix(prefix: str) -> str:
    """Return '/prefix' without a trailing slash, or '' when there is none."""
    stripped = (prefix or "").strip().strip("/")
    return f"/{stripped}" if stripped else ""


def build_short_url(
    abbreviation: str,
    base_url: str,
    path_prefix: str = "",
) -> str:
    """Build complete short URL.
    
    Args:
        abbreviation: The link abbreviation
        base_url: Origin the service is reached under (e.g., https://example.com)
        path_prefix: Optional path prefix (e.g., /s)
        
    Returns:
        Complete short URL
    """
    # Generated abbreviations may carry characters like '?' taken from path segments
    code = quote(abbreviation, safe="")
    return f"{base_url.rstrip('/')}{normalize_path_prefix(path_prefix)}/{code}"


def build_home_url(path_prefix: str = "", query: str = "") -> str:
    """Build the path of the home page, honouring a proxy path prefix."""
    home = f"{normalize_path_prefix(path_prefix)}/"
    return f"{home}?{query}" if query else home
