"""Common repositories - in-memory cache stores."""

from app.repositories.common.cache import CacheTable, CacheTableManager
from app.repositories.common.monitor import CacheMonitor
from app.repositories.common.ttl_cache import EvictionPolicy, TTLCache, make_cache_key

__all__ = [
    "CacheMonitor",
    "CacheTable",
    "CacheTableManager",
    "EvictionPolicy",
    "TTLCache",
    "make_cache_key",
]
