"""Abstract base class for link store implementations."""

from abc import ABC, abstractmethod
from typing import Optional, List

from .models import Link


class LinkStoreBase(ABC):
    """Persistence interface for links, keyed by abbreviation."""
    
    def __init__(self, db_config: str):
        """Initialize the store.
        
        Args:
            db_config: Store connection string
        """
        self.db_config = db_config
    
    @abstractmethod
    async def find_all(self) -> List[Link]:
        """Return every stored link, oldest first."""
        pass
    
    @abstractmethod
    async def find_by_abbreviation(self, abbreviation: str) -> Optional[Link]:
        """Get the link stored under an abbreviation.
        
        Args:
            abbreviation: The abbreviation to lookup
            
        Returns:
            The link if found, None otherwise
        """
        pass
    
    @abstractmethod
    async def exists_by_abbreviation(self, abbreviation: str) -> bool:
        """Check if an abbreviation is already taken.
        
        Args:
            abbreviation: The abbreviation to check
            
        Returns:
            True if exists, False otherwise
        """
        pass
    
    @abstractmethod
    async def save(self, link: Link) -> None:
        """Store a link, replacing any link with the same abbreviation.
        
        Args:
            link: The link to store
        """
        pass
    
    @abstractmethod
    async def insert(self, link: Link) -> bool:
        """Store a link only if its abbreviation is free.
        
        The existence check and the write happen atomically.
        
        Args:
            link: The link to store
            
        Returns:
            True if created, False if the abbreviation already exists
        """
        pass
    
    @abstractmethod
    async def delete(self, link: Link) -> None:
        """Remove a link by its abbreviation.
        
        Args:
            link: The link to remove
        """
        pass
    
    @abstractmethod
    async def close(self) -> None:
        """Close store connections."""
        pass
    
    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is healthy.
        
        Returns:
            True if healthy, False otherwise
        """
        pass
