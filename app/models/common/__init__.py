"""Common models - base classes and cache bookkeeping."""

from app.models.common.base import BaseEntity
from app.models.common.cache import CacheEntry, CacheStats, CacheTableMetadata, hit_rate

__all__ = [
    "BaseEntity",
    "CacheEntry",
    "CacheStats",
    "CacheTableMetadata",
    "hit_rate",
]
