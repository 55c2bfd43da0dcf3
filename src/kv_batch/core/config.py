"""Configuration for the batch cache."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BatchCacheConfig:
    """Tunable behaviour of a batch cache.

    Attributes:
        atomic_append: Check every append argument before merging any of them
        copy_payloads: Freeze payloads to bytes when they are written
    """

    atomic_append: bool = True
    copy_payloads: bool = True
