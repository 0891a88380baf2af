"""Repositories package - data access and in-memory cache stores."""

from app.repositories.common import (
    CacheMonitor,
    CacheTable,
    CacheTableManager,
    EvictionPolicy,
    TTLCache,
    make_cache_key,
)
from app.repositories.datasets import DatasetRepository
from app.repositories.mock_data import MOCK_DATA

__all__ = [
    # Datasets
    "DatasetRepository",
    "MOCK_DATA",
    # Cache
    "CacheMonitor",
    "CacheTable",
    "CacheTableManager",
    "EvictionPolicy",
    "TTLCache",
    "make_cache_key",
]
