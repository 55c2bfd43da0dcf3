"""Exception hierarchy for the batch cache.

Defines all custom exceptions raised by cache operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import CacheKey


class BatchCacheError(Exception):
    """Base exception for all batch cache errors."""
    pass


class NotFoundError(BatchCacheError):
    """Raised when reading a key that has no staged entry."""

    def __init__(self, key: CacheKey):
        super().__init__(f"key not found in batch cache: {key}")
        self.key = key


class AlreadyDeletedError(BatchCacheError):
    """Raised when reading a key whose staged entry is a tombstone."""

    def __init__(self, key: CacheKey):
        super().__init__(f"key already deleted in batch cache: {key}")
        self.key = key


class AlreadyExistsError(BatchCacheError):
    """Raised when a conditional write hits a live entry."""

    def __init__(self, key: CacheKey):
        super().__init__(f"key already exists in batch cache: {key}")
        self.key = key


class UnexpectedKindError(BatchCacheError, TypeError):
    """Raised when appending a cache of a different implementation."""

    def __init__(self, other: object):
        super().__init__(
            f"cannot append cache of unexpected kind: {type(other).__name__}"
        )
        self.other = other
