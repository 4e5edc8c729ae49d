"""In-process link store."""

import asyncio
import logging
from typing import Dict, List, Optional
from datetime import datetime, timezone
from dataclasses import replace

from .base import LinkStoreBase
from .models import Link


class InMemoryLinkStore(LinkStoreBase):
    """Link store backed by a dict.
    
    Data lives only as long as the process; every running process keeps
    its own copy.
    """
    
    def __init__(
        self,
        db_config: str = "memory://",
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(db_config)
        self.logger = logger or logging.getLogger(__name__)
        self._links: Dict[str, Link] = {}
        self._lock = asyncio.Lock()
    
    async def find_all(self) -> List[Link]:
        async with self._lock:
            links = [replace(link) for link in self._links.values()]
        return sorted(links, key=lambda link: link.created_at)
    
    async def find_by_abbreviation(self, abbreviation: str) -> Optional[Link]:
        async with self._lock:
            link = self._links.get(abbreviation)
            return replace(link) if link else None
    
    async def exists_by_abbreviation(self, abbreviation: str) -> bool:
        async with self._lock:
            return abbreviation in self._links
    
    async def save(self, link: Link) -> None:
        async with self._lock:
            self._store(link)
    
    async def insert(self, link: Link) -> bool:
        async with self._lock:
            if link.abbreviation in self._links:
                self.logger.warning(f"Abbreviation already exists: {link.abbreviation}")
                return False
            self._store(link)
            return True
    
    async def delete(self, link: Link) -> None:
        async with self._lock:
            self._links.pop(link.abbreviation, None)
        self.logger.debug(f"Deleted link {link.abbreviation}")
    
    async def health_check(self) -> bool:
        return True
    
    async def close(self) -> None:
        """Nothing to release."""
    
    def _store(self, link: Link) -> None:
        # Caller holds the lock
        if link.created_at is None:
            link.created_at = datetime.now(timezone.utc)
        elif link.created_at.tzinfo is None:
            link.created_at = link.created_at.replace(tzinfo=timezone.utc)
        self._links[link.abbreviation] = replace(link)
        self.logger.debug(f"Stored link {link.abbreviation} -> {link.url}")
