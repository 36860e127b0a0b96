from typing import Optional

from shortlink_app.models import APIKey
from shortlink_app.storage.strategies import LinkStoreStrategy


def validate_api_key(store: LinkStoreStrategy, key: str) -> Optional[APIKey]:
    """
    Look up a caller-supplied API key.

    Returns the first matching record, or None when the key is unknown.
    StoreError from the store propagates to the caller.
    """
    return store.find_api_key(key)
