"""Core business logic for link shortener."""

from .abbreviation import AbbreviationGenerator
from .service import LinkShortenerService

__all__ = ["AbbreviationGenerator", "LinkShortenerService"]
