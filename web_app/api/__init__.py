"""JSON API for link shortener."""

from .routes import router as api_router

__all__ = ["api_router"]
