"""Protocol definition for the batch cache."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..core.types import CacheKey, Payload


class KVStoreCache(Protocol):
    """Local cache of batched key/value writes for fast read-back."""

    def read(self, key: CacheKey) -> Payload:
        """Return the staged payload for key.

        Raises NotFoundError if nothing is staged and AlreadyDeletedError
        if a delete is staged.
        """
        ...

    def write(self, key: CacheKey, payload: Payload) -> None:
        """Stage payload for key, replacing any staged value or delete."""
        ...

    def write_if_not_exist(self, key: CacheKey, payload: Payload) -> None:
        """Stage payload unless a live value is staged (AlreadyExistsError)."""
        ...

    def evict(self, key: CacheKey) -> None:
        """Stage a delete for key."""
        ...

    def clear(self) -> None:
        """Drop everything staged."""
        ...

    def append(self, *caches: KVStoreCache) -> None:
        """Merge other caches in order; later caches win."""
        ...
