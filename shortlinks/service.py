"""Business logic service for link shortener."""

import asyncio
import logging
from typing import Optional, Dict, List

from .abbreviation import AbbreviationGenerator
from .database.base import LinkStoreBase
from .database.cache import RedisCache
from .database.models import Link
from .common import is_reserved, validate_link
from .results import (
    Accepted,
    DeleteResult,
    RedirectTarget,
    RegistrationResult,
    RejectedAbbreviationTaken,
    RejectedDuplicateUrl,
    RejectedInvalid,
    ToHome,
    ToUrl,
)


class LinkShortenerService:
    """Service layer for registering, resolving and deleting links."""

    def __init__(
        self,
        store: LinkStoreBase,
        cache: Optional[RedisCache] = None,
        generator: Optional[AbbreviationGenerator] = None,
        logger: Optional[logging.Logger] = None,
        max_url_length: int = 2048,
        max_abbreviation_length: int = 64,
    ):
        """Initialize link shortener service.

        Args:
            store: Link store instance
            cache: Optional redirect cache
            generator: Optional abbreviation generator
            logger: Optional logger
            max_url_length: Maximum accepted URL length
            max_abbreviation_length: Maximum length of user-chosen abbreviations
        """
        self.store = store
        self.cache = cache
        self.generator = generator or AbbreviationGenerator()
        self.logger = logger or logging.getLogger(__name__)
        self.max_url_length = max_url_length
        self.max_abbreviation_length = max_abbreviation_length
        # Keeps the duplicate-URL scan and the insert of one registration together
        self._register_lock = asyncio.Lock()

    async def register(self, link: Link) -> RegistrationResult:
        """Validate, abbreviate and store a submitted link.

        The link is updated in place with the generated abbreviation so a
        rejected submission can be shown again.

        Args:
            link: Submitted link; an empty abbreviation is generated

        Returns:
            Accepted, RejectedInvalid, RejectedDuplicateUrl or RejectedAbbreviationTaken
        """
        errors = validate_link(
            link,
            max_url_length=self.max_url_length,
            max_abbreviation_length=self.max_abbreviation_length,
        )

        async with self._register_lock:
            existing = await self.find_abbreviation_for_url(link.url)
            if existing is not None:
                errors["url"] = f"The URL already is abbreviated with: {existing}"
            elif not link.abbreviation and "url" not in errors:
                link.abbreviation = await self.generator.generate(
                    link.url, self._abbreviation_unavailable
                )

            if existing is not None:
                self.logger.warning(f"URL already shortened as {existing}: {link.url}")
                return RejectedDuplicateUrl(link=link, existing_abbreviation=existing, field_errors=errors)

            if errors:
                self.logger.warning(f"Rejected link {link.url!r}: {errors}")
                return RejectedInvalid(link=link, field_errors=errors)

            if not await self.store.insert(link):
                self.logger.warning(f"Abbreviation already taken: {link.abbreviation}")
                return RejectedAbbreviationTaken(link=link)

        if self.cache:
            await self.cache.set(self.cache.get_cache_key(link.abbreviation), link.url)

        self.logger.info(f"Created short link: {link.abbreviation} -> {link.url}")
        return Accepted(link=link)

    async def _abbreviation_unavailable(self, candidate: str) -> bool:
        # Names routed by the app itself could never redirect
        return is_reserved(candidate) or await self.store.exists_by_abbreviation(candidate)

    async def find_abbreviation_for_url(self, url: str) -> Optional[str]:
        """Return the abbreviation an identical URL is stored under, if any.

        URLs are compared as exact strings.
        """
        if not url:
            return None
        for stored in await self.store.find_all():
            if stored.url == url:
                return stored.abbreviation
        return None

    async def resolve(self, abbreviation: str) -> RedirectTarget:
        """Find where an abbreviation redirects to.

        Args:
            abbreviation: The abbreviation from the request path

        Returns:
            ToUrl with the stored URL, or ToHome if the abbreviation is unknown
        """
        if self.cache:
            cached_url = await self.cache.get(self.cache.get_cache_key(abbreviation))
            if cached_url:
                self.logger.debug(f"Cache hit for {abbreviation}")
                return ToUrl(cached_url)

        link = await self.store.find_by_abbreviation(abbreviation)
        if link is None:
            self.logger.debug(f"Abbreviation not found: {abbreviation}")
            return ToHome()

        if self.cache:
            await self.cache.set(self.cache.get_cache_key(abbreviation), link.url)

        self.logger.debug(f"Resolved {abbreviation} -> {link.url}")
        return ToUrl(link.url)

    async def delete(self, abbreviation: str) -> DeleteResult:
        """Delete the link stored under an abbreviation.

        Args:
            abbreviation: The abbreviation to delete

        Returns:
            DeleteResult.DELETED or DeleteResult.NOT_FOUND
        """
        link = await self.store.find_by_abbreviation(abbreviation)
        if link is None:
            self.logger.warning(f"Cannot delete - abbreviation not found: {abbreviation}")
            return DeleteResult.NOT_FOUND

        await self.store.delete(link)

        if self.cache:
            await self.cache.delete(self.cache.get_cache_key(abbreviation))

        self.logger.info(f"Deleted short link: {abbreviation}")
        return DeleteResult.DELETED

    async def get_link(self, abbreviation: str) -> Optional[Link]:
        """Get a stored link by abbreviation."""
        return await self.store.find_by_abbreviation(abbreviation)

    async def list_links(self) -> List[Link]:
        """List all stored links, oldest first."""
        return await self.store.find_all()

    async def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        db_healthy = await self.store.health_check()

        cache_healthy = True
        if self.cache and self.cache.enabled:
            cache_healthy = await self.cache.ping()

        return {
            "database": db_healthy,
            "cache": cache_healthy,
            "overall": db_healthy and cache_healthy,
        }

    async def close(self) -> None:
        """Close service connections."""
        await self.store.close()
        if self.cache:
            await self.cache.close()
