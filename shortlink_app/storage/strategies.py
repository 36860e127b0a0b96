"""
Link store strategies using Strategy Pattern.

The rest of the service talks to storage only through `LinkStoreStrategy`:
- SQLAlchemy: relational database (SQLite in development, any SQLAlchemy URL in production)
- In-memory: development and tests, no database required
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from shortlink_app.errors import LinkCreationError, StoreError
from shortlink_app.models import APIKey, Link
from shortlink_app.services.short_code_strategies import ShortCodeStrategy

logger = logging.getLogger(__name__)


class LinkStoreStrategy(ABC):
    """
    Abstract base class for link stores.
    
    Stores raise `StoreError` when the backend fails and `LinkCreationError`
    when a link cannot be created from the given data (e.g. path taken).
    """
    
    @abstractmethod
    def create_link(self, destination_url: str, path: Optional[str] = None) -> str:
        """
        Persist a new link and return its short path.
        
        Args:
            destination_url: URL the short path resolves to
            path: Caller-chosen short path; generated when None
            
        Returns:
            The stored short path
        """
        pass
    
    @abstractmethod
    def find_links_by_path(self, path: str) -> List[Link]:
        """Get all links whose path matches exactly"""
        pass
    
    @abstractmethod
    def path_exists(self, path: str) -> bool:
        """Check whether any link uses the path"""
        pass
    
    @abstractmethod
    def find_api_key(self, key: str) -> Optional[APIKey]:
        """Get the first API key record matching the key string, or None"""
        pass
    
    @abstractmethod
    def add_api_key(self, key: str, owner_email: str) -> APIKey:
        """Register an API key (provisioning only, not exposed over HTTP)"""
        pass


class SQLAlchemyLinkStore(LinkStoreStrategy):
    """
    SQLAlchemy implementation bound to one request-scoped session.
    
    Uniqueness of link paths is enforced by the `links.path` unique
    constraint; a lost race surfaces as IntegrityError on commit.
    """
    
    def __init__(self, db: Session, short_code_strategy: ShortCodeStrategy):
        self.db = db
        self.short_code_strategy = short_code_strategy
    
    def create_link(self, destination_url: str, path: Optional[str] = None) -> str:
        try:
            if path is not None and self.path_exists(path):
                raise LinkCreationError(f"Path already in use: {path}")
            
            link = Link(url=destination_url, path=path)
            self.db.add(link)
            
            if path is None:
                # Flush to get the auto-increment ID, then generate the path
                self.db.flush()
                link.path = self.short_code_strategy.generate(link.id, self.path_exists)
            
            self.db.commit()
            logger.debug("Stored link %s -> %s", link.path, destination_url)
            return link.path
        
        except LinkCreationError:
            self.db.rollback()
            raise
        except IntegrityError as e:
            self.db.rollback()
            raise LinkCreationError(f"Path already in use: {path or 'generated path'}") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(f"Could not store link: {e}") from e
    
    def find_links_by_path(self, path: str) -> List[Link]:
        try:
            return list(self.db.scalars(select(Link).where(Link.path == path)))
        except SQLAlchemyError as e:
            raise StoreError(f"Could not query links: {e}") from e
    
    def path_exists(self, path: str) -> bool:
        try:
            return self.db.scalar(select(Link.id).where(Link.path == path).limit(1)) is not None
        except SQLAlchemyError as e:
            raise StoreError(f"Could not query links: {e}") from e
    
    def find_api_key(self, key: str) -> Optional[APIKey]:
        try:
            return self.db.scalars(
                select(APIKey).where(APIKey.api_key == key).order_by(APIKey.id)
            ).first()
        except SQLAlchemyError as e:
            raise StoreError(f"Could not query API keys: {e}") from e
    
    def add_api_key(self, key: str, owner_email: str) -> APIKey:
        try:
            record = APIKey(api_key=key, owner_email=owner_email)
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
            return record
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(f"Could not store API key: {e}") from e


class InMemoryLinkStore(LinkStoreStrategy):
    """
    In-memory implementation.
    
    Records are transient (unsessioned) model instances kept in lists, so
    the same serialization works for both backends. Not shared between
    processes; contents are lost on restart.
    """
    
    def __init__(self, short_code_strategy: ShortCodeStrategy):
        self.short_code_strategy = short_code_strategy
        self.links: List[Link] = []
        self.api_keys: List[APIKey] = []
        self._next_id = 1
    
    def create_link(self, destination_url: str, path: Optional[str] = None) -> str:
        if path is not None and self.path_exists(path):
            raise LinkCreationError(f"Path already in use: {path}")
        
        link_id = self._next_id
        if path is None:
            path = self.short_code_strategy.generate(link_id, self.path_exists)
        
        self._next_id += 1
        self.links.append(
            Link(id=link_id, path=path, url=destination_url, created=datetime.now(timezone.utc))
        )
        logger.debug("Stored link %s -> %s", path, destination_url)
        return path
    
    def find_links_by_path(self, path: str) -> List[Link]:
        return [link for link in self.links if link.path == path]
    
    def path_exists(self, path: str) -> bool:
        return any(link.path == path for link in self.links)
    
    def find_api_key(self, key: str) -> Optional[APIKey]:
        return next((record for record in self.api_keys if record.api_key == key), None)
    
    def add_api_key(self, key: str, owner_email: str) -> APIKey:
        record = APIKey(
            id=len(self.api_keys) + 1,
            api_key=key,
            owner_email=owner_email,
            created=datetime.now(timezone.utc),
        )
        self.api_keys.append(record)
        return record
