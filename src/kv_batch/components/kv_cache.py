"""In-memory two-level batch cache implementation.

Stages writes and deletes per (bucket, item) key ahead of a commit to the
backing store. Uses sortedcontainers.SortedDict at both levels so staged
records drain in key order.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sortedcontainers import SortedDict

from ..core.config import BatchCacheConfig
from ..core.errors import (
    AlreadyDeletedError,
    AlreadyExistsError,
    NotFoundError,
    UnexpectedKindError,
)
from ..core.types import TOMBSTONE, CacheKey, Entry

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..core.types import Bucket, Payload, Record
    from ..interfaces.cache import KVStoreCache

logger = logging.getLogger(__name__)


class SimpleKVCache:
    """Local cache of batched <key, value> pairs for fast query.

    Args:
        config: Optional cache configuration

    Invariants:
        - A bucket touched by a write or evict stays present until clear()
        - Evicted keys keep a tombstone, so "deleted" and "never staged"
          remain distinguishable
        - Entries are immutable and may be shared between caches
    """

    def __init__(self, config: BatchCacheConfig | None = None):
        self.config = config or BatchCacheConfig()
        self._cache: SortedDict = SortedDict()

    def _bucket(self, bucket: Bucket) -> SortedDict:
        """Return the item map for bucket, creating it on first use."""
        ns = self._cache.get(bucket)
        if ns is None:
            ns = SortedDict()
            self._cache[bucket] = ns
        return ns

    def _freeze(self, payload: Payload) -> Payload:
        """Check payload is bytes-like and copy it if configured to."""
        if not isinstance(payload, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"payload must be bytes-like, not {type(payload).__name__}"
            )
        if self.config.copy_payloads:
            return bytes(payload)
        return payload

    def _merge(self, other: SimpleKVCache) -> None:
        """Copy every entry of other over this cache's entries."""
        for bucket, ns in other._cache.items():
            target = self._bucket(bucket)
            if not self.config.copy_payloads:
                target.update(ns)
                continue
            for item, entry in ns.items():
                if not entry.deleted and not isinstance(entry.payload, bytes):
                    entry = Entry(bytes(entry.payload))
                target[item] = entry

    def read(self, key: CacheKey) -> Payload:
        """Retrieve a staged record."""
        ns = self._cache.get(key.bucket)
        if ns is not None:
            entry = ns.get(key.item)
            if entry is not None:
                if entry.deleted:
                    raise AlreadyDeletedError(key)
                return entry.payload
        raise NotFoundError(key)

    def write(self, key: CacheKey, payload: Payload) -> None:
        """Stage a record, overwriting whatever is staged for key."""
        payload = self._freeze(payload)
        self._bucket(key.bucket)[key.item] = Entry(payload)

    def write_if_not_exist(self, key: CacheKey, payload: Payload) -> None:
        """Stage a record only if no live record is staged for key."""
        payload = self._freeze(payload)
        ns = self._bucket(key.bucket)
        entry = ns.get(key.item)
        if entry is not None and not entry.deleted:
            raise AlreadyExistsError(key)
        ns[key.item] = Entry(payload)

    def evict(self, key: CacheKey) -> None:
        """Stage a delete for key, whether or not it was written here."""
        self._bucket(key.bucket)[key.item] = TOMBSTONE

    def clear(self) -> None:
        """Clear the cache."""
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Clearing batch cache ({len(self)} entries)")
        self._cache = SortedDict()

    def append(self, *caches: KVStoreCache) -> None:
        """Merge caches into this one in the order given.

        Entries from a later cache overwrite entries from earlier caches and
        from this cache.

        Raises:
            UnexpectedKindError: If a cache is not a SimpleKVCache. With
                atomic_append set nothing is merged; otherwise caches before
                the offending one remain merged.
        """
        atomic = self.config.atomic_append
        if atomic:
            for cc in caches:
                if not isinstance(cc, SimpleKVCache):
                    raise UnexpectedKindError(cc)

        # written in order
        for cc in caches:
            if not atomic and not isinstance(cc, SimpleKVCache):
                raise UnexpectedKindError(cc)
            self._merge(cc)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Appended {len(caches)} caches, {len(self)} entries staged")

    def items(self) -> Iterator[Record]:
        """Yield (key, payload) for every staged entry in key order.

        A payload of None is a staged delete.
        """
        for bucket, ns in self._cache.items():
            for item, entry in ns.items():
                yield (CacheKey(bucket, item), entry.payload)

    def buckets(self) -> list[Bucket]:
        """Return every touched bucket, including ones with no entries left."""
        return list(self._cache.keys())

    def size_bytes(self) -> int:
        """Return approximate size of staged keys and payloads."""
        total = 0
        for bucket, ns in self._cache.items():
            total += len(bucket)
            for item, entry in ns.items():
                total += len(item) + (len(entry.payload) if entry.payload else 0) + 1
        return total

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, CacheKey):
            return False
        ns = self._cache.get(key.bucket)
        return ns is not None and key.item in ns

    def __len__(self) -> int:
        return sum(len(ns) for ns in self._cache.values())
