"""Batch cache core types, errors and configuration."""

from .config import BatchCacheConfig
from .types import CacheKey, Entry

__all__ = ["BatchCacheConfig", "CacheKey", "Entry"]
