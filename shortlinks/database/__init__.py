"""Storage layer for link shortener."""

from .base import LinkStoreBase
from .memory import InMemoryLinkStore
from .postgres import PostgresLinkStore
from .models import Link
from .factory import create_link_store

__all__ = [
    "LinkStoreBase",
    "InMemoryLinkStore",
    "PostgresLinkStore",
    "Link",
    "create_link_store",
]
