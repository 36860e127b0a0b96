"""
Link store module.

Implements the Strategy Pattern for pluggable storage of links and API keys.
"""

from .strategies import LinkStoreStrategy, SQLAlchemyLinkStore, InMemoryLinkStore
from .factory import LinkStoreFactory, LinkStoreBackend

__all__ = [
    "LinkStoreStrategy",
    "SQLAlchemyLinkStore",
    "InMemoryLinkStore",
    "LinkStoreFactory",
    "LinkStoreBackend",
]
