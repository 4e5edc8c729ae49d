"""Validation utilities for link shortener."""

import re
from urllib.parse import urlparse
from typing import Dict, Tuple

from ..database.models import Link

# Paths served by the app itself; an abbreviation with one of these names could never be resolved
RESERVED_WORDS = {
    "api", "health", "css", "js", "static", "favicon.ico", "robots.txt",
}

ABBREVIATION_PATTERN = re.compile(r'^[a-zA-Z0-9_-]+$')


def is_reserved(abbreviation: str) -> bool:
    """Whether an abbreviation collides with a route of the app (case-insensitive)."""
    return abbreviation.lower() in RESERVED_WORDS


def is_valid_url(url: str, max_length: int = 2048) -> Tuple[bool, str]:
    """Validate a URL.
    
    Args:
        url: The URL to validate
        max_length: Maximum accepted length
        
    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"
    
    if len(url) > max_length:
        return False, f"URL is too long (max {max_length} characters)"
    
    try:
        result = urlparse(url)
    except ValueError as e:
        return False, f"Invalid URL format: {str(e)}"
    
    if result.scheme not in ["http", "https"]:
        return False, "URL must use http or https protocol"
    
    if not result.netloc:
        return False, "URL must have a valid domain"
    
    return True, ""


def is_valid_abbreviation(abbreviation: str, max_length: int = 64) -> Tuple[bool, str]:
    """Validate a user-chosen abbreviation.
    
    An empty abbreviation is valid: it is filled in by the generator.
    
    Args:
        abbreviation: The abbreviation to validate
        max_length: Maximum length for the abbreviation
        
    Returns:
        Tuple of (is_valid, error_message)
    """
    if not abbreviation:
        return True, ""
    
    if len(abbreviation) > max_length:
        return False, f"Abbreviation must be at most {max_length} characters"
    
    if not ABBREVIATION_PATTERN.match(abbreviation):
        return False, "Abbreviation can only contain letters, numbers, hyphens, and underscores"
    
    if is_reserved(abbreviation):
        return False, f"'{abbreviation}' is a reserved word and cannot be used"
    
    return True, ""


def validate_link(
    link: Link,
    max_url_length: int = 2048,
    max_abbreviation_length: int = 64,
) -> Dict[str, str]:
    """Collect field errors for a submitted link, keyed by field name."""
    errors = {}
    
    valid, error = is_valid_url(link.url, max_length=max_url_length)
    if not valid:
        errors["url"] = error
    
    valid, error = is_valid_abbreviation(link.abbreviation, max_length=max_abbreviation_length)
    if not valid:
        errors["abbreviation"] = error
    
    return errors
