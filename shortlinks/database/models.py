"""Data models for link shortener."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Link:
    """A long URL and the abbreviation it is reachable under."""
    
    url: str = ""
    abbreviation: str = ""
    created_at: Optional[datetime] = None
    
    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "url": self.url,
            "abbreviation": self.abbreviation,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
    
    @classmethod
    def from_dict(cls, data: dict) -> "Link":
        """Create from dictionary (or a database row)."""
        created_at = data.get("created_at")
        if isinstance(created_at, str):
            created_at = datetime.fromisoformat(created_at)
        return cls(
            url=data["url"],
            abbreviation=data["abbreviation"],
            created_at=created_at,
        )
