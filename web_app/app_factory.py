"""FastAPI application factory."""

import os

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.middleware.cors import CORSMiddleware

from .api import api_router
from .web import web_router
from .middleware.headers import ForwardedHeadersMiddleware
from .middleware.logging import LoggingMiddleware

UX_DIR = os.path.join(os.path.dirname(__file__), "..", "ux", "web")


def create_app(
    store_instance,
    cache_instance,
    service_instance,
    config,
    lifespan=None,
) -> FastAPI:
    """Create and configure FastAPI application.
    
    Args:
        store_instance: Link store instance
        cache_instance: Cache instance
        service_instance: Service instance
        config: Configuration instance
        lifespan: Optional lifespan that fills in the instances on startup
        
    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Link Shortener",
        description="Shortens URLs into readable abbreviations",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        lifespan=lifespan,
    )
    
    # Store instances in app state for access in routes
    app.state.store = store_instance
    app.state.cache = cache_instance
    app.state.service = service_instance
    app.state.config = config
    
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    app.add_middleware(ForwardedHeadersMiddleware)
    app.add_middleware(LoggingMiddleware)
    
    css_path = os.path.join(UX_DIR, "css")
    if os.path.exists(css_path):
        app.mount("/css", StaticFiles(directory=css_path), name="css")
    
    # API first: the web router ends in a catch-all /{abbreviation}
    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, tags=["Web"])
    
    return app
