#!/usr/bin/env python3
"""
Run the link shortener as a single uvicorn process.

Settings come from the environment or a .env file, see config.py
(DATABASE_URL, CREATE_TABLES, REDIS_URL, BASE_URL, PATH_PREFIX, PORT, LOG_LEVEL).
"""

import logging
from contextlib import asynccontextmanager

import uvicorn

from config import Config, load_config
from shortlinks.database import create_link_store
from shortlinks.database.cache import RedisCache
from shortlinks.service import LinkShortenerService
from shortlinks.common import setup_logging
from web_app import create_app


async def build_service(config: Config, logger: logging.Logger) -> LinkShortenerService:
    """Open the configured store and optional cache behind one service."""
    store = create_link_store(
        config.database_url,
        create_tables=config.should_create_tables,
        logger=logger,
    )

    cache = None
    if config.redis_url:
        cache = RedisCache(
            redis_url=config.redis_url,
            ttl_seconds=config.cache_ttl_seconds,
            logger=logger,
        )
        await cache.connect()

    logger.info(f"Store: {type(store).__name__}, redirect cache: {'on' if cache else 'off'}")
    return LinkShortenerService(
        store=store,
        cache=cache,
        logger=logger,
        max_url_length=config.max_url_length,
        max_abbreviation_length=config.max_abbreviation_length,
    )


def service_lifespan(config: Config, logger: logging.Logger):
    """Lifespan that owns the service for as long as the app is served."""

    @asynccontextmanager
    async def lifespan(app):
        service = await build_service(config, logger)
        app.state.store = service.store
        app.state.cache = service.cache
        app.state.service = service
        try:
            yield
        finally:
            await service.close()
            logger.info("Link shortener stopped")

    return lifespan


def main():
    config = load_config()
    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    app = create_app(
        store_instance=None,
        cache_instance=None,
        service_instance=None,
        config=config,
        lifespan=service_lifespan(config, logger),
    )

    logger.info(f"Serving short links for {config.base_url} on {config.host}:{config.port}")
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
