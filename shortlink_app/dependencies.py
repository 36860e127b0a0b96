"""
FastAPI dependencies for dependency injection.

Routes never build stores or services themselves; tests override
`get_db` (or `get_link_store`) to swap the backend.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from shortlink_app.config import settings
from shortlink_app.database.connection import get_db
from shortlink_app.services.link_service import LinkService
from shortlink_app.storage.factory import LinkStoreFactory, LinkStoreBackend
from shortlink_app.storage.strategies import LinkStoreStrategy


def get_link_store(db: Session = Depends(get_db)) -> LinkStoreStrategy:
    """
    Get the link store configured by settings.storage_backend.
    
    SQLAlchemy stores are bound to the request's session; the in-memory
    store is shared by all requests.
    """
    backend = LinkStoreBackend(settings.storage_backend)
    return LinkStoreFactory.create(backend, db=db)


def get_link_service(store: LinkStoreStrategy = Depends(get_link_store)) -> LinkService:
    """Get LinkService with its store injected"""
    return LinkService(store=store)
