"""HTML interface for link shortener."""

from .routes import router as web_router

__all__ = ["web_router"]
