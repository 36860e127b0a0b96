"""
Database models for the link store.

Both tables are plain transactional data: API keys are provisioned out of
band, links are written by the add operation and read by resolve.
"""

from .api_key import APIKey
from .link import Link

__all__ = ["APIKey", "Link"]
