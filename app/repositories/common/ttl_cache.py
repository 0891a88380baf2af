"""Generic in-memory TTL cache used by both the table manager and the processor."""

import base64
import copy
import json
import threading
import time
from collections.abc import Callable, Hashable
from dataclasses import replace
from enum import Enum
from typing import Any, Generic, TypeVar

from loguru import logger

from app.models.common.cache import CacheEntry, CacheStats

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class EvictionPolicy(str, Enum):
    """What happens when a bounded cache grows past max_size."""

    TTL = "ttl"  # purge expired entries only
    TTL_LRU = "ttl_lru"  # purge expired, then trim least recently used


def serialize_filters(filters: dict | None) -> str:
    """Stable JSON for a filter mapping (key order normalized)."""
    return json.dumps(filters or {}, sort_keys=True, separators=(",", ":"), default=str)


def make_cache_key(operation: str, filters: dict | None = None, sort_by: str = "", order: str = "") -> str:
    """Composite key: operation prefix plus an encoded (filters, sort_by, order) token.

    The token is URL-safe base64 and never contains ':', so splitting on the
    last ':' recovers both parts and distinct tuples never share a key.
    """
    payload = json.dumps(
        [json.loads(serialize_filters(filters)), sort_by or "", order or ""],
        sort_keys=True,
        separators=(",", ":"),
    )
    token = base64.urlsafe_b64encode(payload.encode()).decode()
    return f"{operation}:{token}"


class TTLCache(Generic[K, V]):
    """Thread-safe TTL cache with an optional LRU capacity bound.

    The cache owns its entries: values are deep-copied on the way in and on the
    way out, so nested records in a returned value are never the stored ones.
    entries() hands back snapshots with deep-copied values.
    """

    def __init__(
        self,
        ttl_seconds: float,
        max_size: int | None = None,
        policy: EvictionPolicy = EvictionPolicy.TTL,
        clock: Callable[[], float] = time.time,
    ):
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")
        if max_size is not None and max_size <= 0:
            raise ValueError(f"max_size must be positive, got {max_size}")
        if policy is EvictionPolicy.TTL_LRU and max_size is None:
            raise ValueError("TTL_LRU policy requires max_size")

        self.ttl_seconds = ttl_seconds
        self.max_size = max_size
        self.policy = policy
        self._clock = clock
        self._entries: dict[K, CacheEntry[V]] = {}
        self._lock = threading.RLock()
        self.stats = CacheStats()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: K) -> bool:
        return self.is_valid(key)

    def now(self) -> float:
        return self._clock()

    def set(
        self,
        key: K,
        value: V,
        filters: dict[str, Any] | None = None,
        sort_by: str = "",
        order: str = "",
    ) -> None:
        """Insert or overwrite an entry with a fresh expiry."""
        with self._lock:
            now = self.now()
            self._entries[key] = CacheEntry(
                key=str(key),
                value=copy.deepcopy(value),
                created_at=now,
                expires_at=now + self.ttl_seconds,
                last_accessed=now,
                filters=dict(filters or {}),
                sort_by=sort_by,
                order=order,
            )

            if self.max_size is not None and len(self._entries) > self.max_size:
                self._shrink()

    def _shrink(self) -> None:
        removed = self.purge_expired()
        overflow = len(self._entries) - self.max_size
        if overflow > 0 and self.policy is EvictionPolicy.TTL_LRU:
            removed += self.evict_lru(overflow)
        logger.debug("Cache over capacity ({}), removed {} entries", self.max_size, removed)

    def get(self, key: K, default: V | None = None) -> V | None:
        """Return a fresh value; expired entries are dropped and count as misses."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self.stats.misses += 1
                return default

            now = self.now()
            if entry.is_expired(now):
                del self._entries[key]
                self.stats.expired += 1
                self.stats.misses += 1
                return default

            entry.access_count += 1
            entry.last_accessed = now
            self.stats.hits += 1
            return copy.deepcopy(entry.value)

    def is_valid(self, key: K) -> bool:
        """True if a non-expired entry exists. Does not touch counters."""
        with self._lock:
            entry = self._entries.get(key)
            return entry is not None and not entry.is_expired(self.now())

    def delete(self, key: K) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def purge_expired(self) -> int:
        """Remove every expired entry. Returns removed count."""
        with self._lock:
            now = self.now()
            expired = [k for k, e in self._entries.items() if e.is_expired(now)]
            for k in expired:
                del self._entries[k]
            self.stats.expired += len(expired)
            return len(expired)

    def evict_lru(self, count: int) -> int:
        """Remove the `count` least recently accessed entries, expired or not."""
        if count <= 0:
            return 0
        with self._lock:
            oldest = sorted(self._entries.items(), key=lambda item: item[1].last_accessed)[:count]
            for k, _ in oldest:
                del self._entries[k]
            self.stats.evicted += len(oldest)
            return len(oldest)

    def clear(self) -> None:
        """Drop all entries. Counters are kept."""
        with self._lock:
            self._entries.clear()

    def keys(self) -> list[K]:
        with self._lock:
            return list(self._entries)

    def entries(self) -> list[CacheEntry[V]]:
        """Snapshot copies of the stored entries."""
        with self._lock:
            return [replace(e, value=copy.deepcopy(e.value), filters=dict(e.filters)) for e in self._entries.values()]
