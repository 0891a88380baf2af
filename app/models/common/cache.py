"""Cache entry and counter models - shared by every cache store."""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from app.models.common.base import BaseEntity

V = TypeVar("V")


def hit_rate(hits: int, misses: int) -> float:
    """Hit rate in percent, 0 when nothing was looked up yet."""
    total = hits + misses
    return hits / total * 100 if total else 0.0


@dataclass
class CacheEntry(BaseEntity, Generic[V]):
    """One cached result with its freshness and access bookkeeping."""

    key: str
    value: V
    created_at: float
    expires_at: float
    access_count: int = 0
    last_accessed: float = 0.0
    filters: dict[str, Any] = field(default_factory=dict)
    sort_by: str = ""
    order: str = ""

    def is_expired(self, now: float) -> bool:
        """Entries are valid only while now < expires_at."""
        return now >= self.expires_at


@dataclass
class CacheStats(BaseEntity):
    """Lookup and removal counters. Survive clears."""

    hits: int = 0
    misses: int = 0
    expired: int = 0
    evicted: int = 0

    @property
    def hit_rate(self) -> float:
        return hit_rate(self.hits, self.misses)


@dataclass
class CacheTableMetadata(BaseEntity):
    """Per-table bookkeeping kept across clears."""

    created_at: str
    last_updated: str
    access_count: int = 0
    last_access: float = 0.0
