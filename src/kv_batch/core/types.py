"""Common type definitions for the batch cache.

Defines the composite key and the per-key entry stored in the cache.
"""

from __future__ import annotations

from dataclasses import dataclass

# Core primitive types
Bucket = str
Item = str
Payload = bytes


@dataclass(frozen=True, order=True)
class CacheKey:
    """Two-part key: a bucket (namespace) and an item inside it."""

    bucket: Bucket
    item: Item

    def __str__(self) -> str:
        return f"{self.bucket}/{self.item}"


@dataclass(frozen=True)
class Entry:
    """Staged state for one key.

    A tombstone has deleted=True and no payload.
    """

    payload: Payload | None
    deleted: bool = False


TOMBSTONE = Entry(payload=None, deleted=True)

Record = tuple[CacheKey, Payload | None]
