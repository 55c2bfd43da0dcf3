"""kv_batch - in-memory staging cache for batched key/value writes."""

from .components.kv_cache import SimpleKVCache
from .components.positions import SimpleWritePositions
from .core.config import BatchCacheConfig
from .core.errors import (
    AlreadyDeletedError,
    AlreadyExistsError,
    BatchCacheError,
    NotFoundError,
    UnexpectedKindError,
)
from .core.types import CacheKey, Entry, Payload, Record

__all__ = [
    "SimpleKVCache",
    "SimpleWritePositions",
    "BatchCacheConfig",
    "BatchCacheError",
    "NotFoundError",
    "AlreadyDeletedError",
    "AlreadyExistsError",
    "UnexpectedKindError",
    "CacheKey",
    "Entry",
    "Payload",
    "Record",
]
