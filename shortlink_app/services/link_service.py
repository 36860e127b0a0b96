import logging
import re
from typing import Optional

from pydantic import ValidationError

from shortlink_app.config import settings
from shortlink_app.errors import LinkCreationError, StoreError
from shortlink_app.models import Link
from shortlink_app.schemas.link import LinkCreate
from shortlink_app.storage.strategies import LinkStoreStrategy

logger = logging.getLogger(__name__)

CUSTOM_PATH_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")

# Site-root routes that short paths must not shadow
RESERVED_PATHS = {"health", "docs", "redoc"}


class LinkService:
    """
    Link operations on top of an injected link store.
    
    The store is injected (not created internally), so tests can hand in
    an InMemoryLinkStore or a stub that fails on purpose.
    """
    
    def __init__(self, store: LinkStoreStrategy):
        self.store = store

    def create_short_link(self, url: Optional[str], path: Optional[str] = None) -> str:
        """Validate a submission and store it, returning the short path
        
        Every failure surfaces as an exception: LinkCreationError for bad
        input or a taken path, StoreError when the store fails. Callers
        treat both the same way.
        """
        if not url:
            raise LinkCreationError("The `url` parameter is required.")
        
        try:
            submission = LinkCreate(url=url, path=path or None)
        except ValidationError as e:
            raise LinkCreationError(f"Invalid destination URL: {url}") from e
        
        if submission.path is not None:
            self._check_custom_path(submission.path)
        
        return self.store.create_link(str(submission.url), submission.path)

    def resolve_path(self, path: str) -> Optional[Link]:
        """Get the link for a short path
        
        Returns None unless exactly one link matches. Zero matches, several
        matches and store failures are all a negative result, not an error.
        """
        try:
            links = self.store.find_links_by_path(path)
        except StoreError as e:
            logger.warning(f"Resolve of {path!r} failed: {e}")
            return None
        
        if len(links) != 1:
            if len(links) > 1:
                logger.warning(f"Path {path!r} matches {len(links)} links")
            return None
        
        return links[0]

    def _check_custom_path(self, path: str) -> None:
        if len(path) > settings.custom_path_max_length:
            raise LinkCreationError(
                f"Path exceeds max length {settings.custom_path_max_length}: {path}"
            )
        if not CUSTOM_PATH_PATTERN.match(path):
            raise LinkCreationError(
                f"Path may only contain letters, digits, '-' and '_': {path}"
            )
        # Short paths are redirected from the site root, next to /api
        if path.lower().startswith("api") or path.lower() in RESERVED_PATHS:
            raise LinkCreationError(f"Path is reserved: {path}")
