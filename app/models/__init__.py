"""Models package - entities shared across domains."""

from app.models.common import (
    BaseEntity,
    CacheEntry,
    CacheStats,
    CacheTableMetadata,
    hit_rate,
)

__all__ = [
    "BaseEntity",
    "CacheEntry",
    "CacheStats",
    "CacheTableMetadata",
    "hit_rate",
]
