"""
Factory for creating link store instances.
"""

from enum import Enum
from typing import Optional

from sqlalchemy.orm import Session

from .strategies import LinkStoreStrategy, SQLAlchemyLinkStore, InMemoryLinkStore
from shortlink_app.services.short_code_factory import ShortCodeFactory


class LinkStoreBackend(Enum):
    """Available link store backends"""
    SQLALCHEMY = "sqlalchemy"
    MEMORY = "memory"


class LinkStoreFactory:
    """
    Simple factory for creating link store instances.
    
    SQLAlchemy stores wrap the request's session and are created per request.
    The in-memory store is a process-wide singleton.
    """
    
    _memory_instance: InMemoryLinkStore = None
    
    @classmethod
    def create(cls, backend: LinkStoreBackend, db: Optional[Session] = None) -> LinkStoreStrategy:
        """
        Create a link store for the backend.
        
        Args:
            backend: Type of store backend (from enum)
            db: Request-scoped session, required for the SQLAlchemy backend
            
        Returns:
            Link store instance
        """
        strategy = ShortCodeFactory.create_strategy()
        
        if backend == LinkStoreBackend.SQLALCHEMY:
            if db is None:
                raise ValueError("SQLAlchemy link store requires a database session")
            return SQLAlchemyLinkStore(db, strategy)
        
        elif backend == LinkStoreBackend.MEMORY:
            if cls._memory_instance is None:
                cls._memory_instance = InMemoryLinkStore(strategy)
            return cls._memory_instance
        
        else:
            raise ValueError(f"Unknown link store backend: {backend}")
    
    @classmethod
    def clear_instance(cls):
        """Clear cached in-memory instance (for testing)"""
        cls._memory_instance = None
