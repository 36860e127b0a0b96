"""
Error types for the link API.

`AppError` is a value, not an exception: operations return it and the
request router turns it into the HTTP response. `StoreError` and
`LinkCreationError` are raised below the operations (storage and service
layers) and converted into `AppError` values where they are caught.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AppError:
    """Failure outcome of an API operation: underlying cause, message, HTTP status"""
    error: Optional[BaseException]
    message: str
    code: int

    @property
    def cause(self) -> Optional[str]:
        """Text of the underlying error, or None for plain client errors"""
        if self.error is None:
            return None
        return str(self.error)


class StoreError(Exception):
    """The link store could not complete a query or write"""


class LinkCreationError(ValueError):
    """A link could not be created from the submitted data"""
