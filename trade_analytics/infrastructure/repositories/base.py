"""Base Repository: Abstract interface for trade data access.

Repository Pattern provides:
- Abstraction over trade sources (csv, parquet, json exports)
- Caching of the loaded frame
- RepositoryError for every I/O failure
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Abstract base class for repositories.

    Implementations load their dataset once, cache it, and raise
    RepositoryError when it cannot be read.
    """

    @abstractmethod
    def get_all(self) -> T:
        """Retrieve the full dataset.

        Raises:
            RepositoryError: If data cannot be loaded
        """

    @abstractmethod
    def clear_cache(self) -> None:
        """Drop cached data so the next read hits the source."""


class RepositoryError(Exception):
    """Raised when a trade source cannot be found or read."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message + (f" (path: {path})" if path else ""))
