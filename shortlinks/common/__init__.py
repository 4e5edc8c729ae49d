"""Common utilities for link shortener."""

from .validators import is_reserved, validate_link
from .url_builder import build_short_url, build_home_url, normalize_path_prefix
from .logging_config import setup_logging

__all__ = [
    "is_reserved",
    "validate_link",
    "build_short_url",
    "build_home_url",
    "normalize_path_prefix",
    "setup_logging",
]
