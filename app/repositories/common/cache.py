"""Cache repository - named in-memory cache tables for processed datasets."""

import json
import threading
import time
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from loguru import logger

from app.models.common.cache import CacheTableMetadata
from app.repositories.common.monitor import CacheMonitor
from app.repositories.common.ttl_cache import EvictionPolicy, TTLCache, make_cache_key
from settings import CACHE_MONITOR_INTERVAL, CACHE_TTL_SECONDS, MAX_CACHE_SIZE

if TYPE_CHECKING:
    from app.services.processing import DataProcessor


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


# (table name, data type, description)
DEFAULT_TABLES = [
    # Directory
    ("users_cache", "users", "Filtered and sorted user data"),
    ("organizations_cache", "organizations", "Organization data with metrics"),
    ("teams_cache", "teams", "Team data with member counts"),
    # Course builder
    ("courses_cache", "courses", "Course data with completion rates"),
    ("enrollments_cache", "enrollments", "User enrollment data"),
    ("lessons_cache", "lessons", "Lesson completion data"),
    # Assessment
    ("tests_cache", "tests", "Test data with scores and attempts"),
    ("attempts_cache", "attempts", "User test attempts"),
    ("feedback_cache", "feedback", "Assessment feedback data"),
    # Learner AI
    ("skills_cache", "skills", "Acquired skills data"),
    ("skill_progress_cache", "skill_progress", "Skill progression tracking"),
    # Devlab
    ("exercises_cache", "exercises", "Exercise participation data"),
    ("participations_cache", "participations", "User exercise participations"),
    # Learning analytics
    ("performance_trends_cache", "performance_trends", "Performance trend data"),
    ("skill_gaps_cache", "skill_gaps", "Identified skill gaps"),
    ("course_effectiveness_cache", "course_effectiveness", "Course effectiveness metrics"),
    ("forecasts_cache", "forecasts", "Strategic forecasts and predictions"),
    # Aggregated
    ("admin_dashboard_cache", "admin_dashboard", "Cross-organizational dashboard data"),
    ("hr_dashboard_cache", "hr_dashboard", "Organization-specific HR dashboard data"),
]


@dataclass(frozen=True)
class WarmUpQuery:
    """A common query precomputed at startup."""

    table: str
    operation: str
    data_type: str
    filters: dict = field(default_factory=dict)
    sort_by: str = ""
    order: str = "asc"


WARM_UP_QUERIES = [
    WarmUpQuery("users_cache", "active_users", "users", {"status": "active"}),
    WarmUpQuery("users_cache", "users_by_org", "users", sort_by="lastName"),
    WarmUpQuery("courses_cache", "active_courses", "courses", {"status": "active"}),
    WarmUpQuery("courses_cache", "courses_by_completion", "courses", sort_by="completionRate", order="desc"),
    WarmUpQuery("skills_cache", "recent_skills", "skills", sort_by="acquiredAt", order="desc"),
    WarmUpQuery("exercises_cache", "popular_exercises", "exercises", sort_by="participationCount", order="desc"),
    WarmUpQuery("performance_trends_cache", "increasing_trends", "performanceTrends", {"trend": "increasing"}),
]


@dataclass
class CacheTable:
    """A named cache namespace for one logical dataset."""

    name: str
    data_type: str
    description: str
    cache: TTLCache[str, Any]
    metadata: CacheTableMetadata

    @property
    def size(self) -> int:
        return len(self.cache)

    @property
    def total_hits(self) -> int:
        return self.cache.stats.hits

    @property
    def total_misses(self) -> int:
        return self.cache.stats.misses

    @property
    def hit_rate(self) -> float:
        return self.cache.stats.hit_rate


class CacheTableManager:
    """Named cache tables with TTL expiry, LRU capacity bound and hit-rate stats.

    Every operation on an unknown table logs and returns a neutral value
    (False / None / 0) instead of raising.
    """

    def __init__(
        self,
        ttl_seconds: float = CACHE_TTL_SECONDS,
        max_size: int = MAX_CACHE_SIZE,
        clock: Callable[[], float] = time.time,
    ):
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")
        if max_size <= 0:
            raise ValueError(f"max_size must be positive, got {max_size}")

        self.ttl_seconds = ttl_seconds
        self.max_size = max_size
        self._clock = clock
        self._tables: dict[str, CacheTable] = {}
        self._lock = threading.RLock()  # table registry and metadata counters
        self._sweep_lock = threading.Lock()
        self._monitor: CacheMonitor | None = None
        logger.debug("CacheTableManager initialized (ttl={}s, max_size={})", ttl_seconds, max_size)

    # Table management

    def create_cache_table(self, name: str, data_type: str, description: str = "") -> CacheTable:
        """Register a table. Re-creating an existing name replaces it."""
        now = _utcnow()
        table = CacheTable(
            name=name,
            data_type=data_type,
            description=description,
            cache=TTLCache(
                self.ttl_seconds,
                max_size=self.max_size,
                policy=EvictionPolicy.TTL_LRU,
                clock=self._clock,
            ),
            metadata=CacheTableMetadata(created_at=now, last_updated=now, last_access=self._clock()),
        )
        with self._lock:
            if name in self._tables:
                logger.warning("Cache table '{}' already exists, replacing it", name)
            self._tables[name] = table
        logger.debug("Cache table '{}' created for {}", name, data_type)
        return table

    def get_cache_table(self, name: str) -> CacheTable | None:
        """Get a table and record the access."""
        with self._lock:
            table = self._tables.get(name)
            if table:
                table.metadata.access_count += 1
                table.metadata.last_updated = _utcnow()
                table.metadata.last_access = self._clock()
            return table

    def _table_items(self) -> list[tuple[str, CacheTable]]:
        with self._lock:
            return list(self._tables.items())

    def _touch(self, table: CacheTable) -> None:
        with self._lock:
            table.metadata.last_updated = _utcnow()

    def initialize_cache_tables(self) -> int:
        """Create the default table set."""
        logger.info("Initializing cache tables...")
        for name, data_type, description in DEFAULT_TABLES:
            self.create_cache_table(name, data_type, description)
        count = len(self._table_items())
        logger.info("Initialized {} cache tables", count)
        return count

    def get_cache_table_names(self) -> list[str]:
        return [name for name, _ in self._table_items()]

    def has_cache_table(self, name: str) -> bool:
        with self._lock:
            return name in self._tables

    # Entries

    def store_in_cache_table(
        self,
        name: str,
        key: str,
        data: Any,
        filters: dict | None = None,
        sort_by: str = "",
        order: str = "",
    ) -> bool:
        """Insert or overwrite an entry with a fresh expiry."""
        table = self.get_cache_table(name)
        if not table:
            logger.error("Cache table '{}' not found", name)
            return False

        table.cache.set(key, data, filters=filters, sort_by=sort_by, order=order)
        self._touch(table)
        return True

    def get_from_cache_table(self, name: str, key: str) -> Any | None:
        """Fresh payload or None. Expired entries are removed and count as misses."""
        table = self.get_cache_table(name)
        if not table:
            return None
        return table.cache.get(key)

    @staticmethod
    def generate_cache_key(operation: str, filters: dict | None = None, sort_by: str = "", order: str = "") -> str:
        return make_cache_key(operation, filters, sort_by, order)

    def store_data(
        self,
        name: str,
        operation: str,
        data: Any,
        filters: dict | None = None,
        sort_by: str = "",
        order: str = "",
    ) -> bool:
        key = self.generate_cache_key(operation, filters, sort_by, order)
        return self.store_in_cache_table(name, key, data, filters, sort_by, order)

    def get_data(
        self,
        name: str,
        operation: str,
        filters: dict | None = None,
        sort_by: str = "",
        order: str = "",
    ) -> Any | None:
        key = self.generate_cache_key(operation, filters, sort_by, order)
        return self.get_from_cache_table(name, key)

    # Maintenance

    def cleanup_cache_table(self, name: str) -> int:
        """Remove expired entries from one table."""
        table = self._tables.get(name)
        if not table:
            return 0

        removed = table.cache.purge_expired()
        if removed:
            logger.info("Cleaned up {} expired entries from cache table '{}'", removed, name)
        return removed

    def cleanup_all_cache_tables(self) -> int:
        total = sum(self.cleanup_cache_table(name) for name, _ in self._table_items())
        if total:
            logger.info("Total expired entries removed: {}", total)
        return total

    def remove_lru_entries(self, name: str, count: int = 10) -> int:
        """Evict the `count` least recently accessed entries regardless of expiry."""
        table = self._tables.get(name)
        if not table:
            return 0

        removed = table.cache.evict_lru(count)
        logger.info("Removed {} LRU entries from '{}'", removed, name)
        return removed

    def clear_cache_table(self, name: str) -> bool:
        table = self._tables.get(name)
        if not table:
            logger.warning("Cache table '{}' not found", name)
            return False

        table.cache.clear()
        self._touch(table)
        logger.info("Cleared cache table '{}'", name)
        return True

    def clear_all_cache_tables(self) -> None:
        for name, _ in self._table_items():
            self.clear_cache_table(name)
        logger.info("Cleared all cache tables")

    # Statistics

    @staticmethod
    def estimate_memory_usage(table: CacheTable) -> int:
        """Approximate footprint in bytes from the serialized keys and entries."""
        size = 0
        for entry in table.cache.entries():
            size += len(json.dumps(entry.key))
            size += len(json.dumps(entry.to_dict(), default=str))
        return size

    def get_cache_stats(self) -> dict:
        tables = self._table_items()
        stats = {
            "total_tables": len(tables),
            "total_entries": 0,
            "tables": {},
        }

        for name, table in tables:
            stats["total_entries"] += table.size
            memory_bytes = self.estimate_memory_usage(table)
            stats["tables"][name] = {
                "data_type": table.data_type,
                "description": table.description,
                "entries": table.size,
                "hit_rate": round(table.hit_rate, 2),
                "total_hits": table.total_hits,
                "total_misses": table.total_misses,
                "access_count": table.metadata.access_count,
                "created_at": table.metadata.created_at,
                "last_updated": table.metadata.last_updated,
                "memory_bytes": memory_bytes,
                "memory_usage": f"{(memory_bytes + 512) // 1024} KB",
            }

        return stats

    def log_cache_stats(self) -> None:
        stats = self.get_cache_stats()
        logger.info("Cache stats: {} tables, {} entries", stats["total_tables"], stats["total_entries"])
        for name, table_stats in stats["tables"].items():
            if table_stats["entries"] > 0:
                logger.info(
                    "   {}: {} entries, {:.2f}% hit rate",
                    name,
                    table_stats["entries"],
                    table_stats["hit_rate"],
                )

    # Warm-up and monitoring

    def warm_up_cache(self, processor: "DataProcessor", datasets: Mapping[str, Sequence[dict]]) -> int:
        """Precompute common queries through the processor. Returns stored count."""
        logger.info("Warming up cache with common queries...")
        stored = 0

        for query in WARM_UP_QUERIES:
            data = datasets.get(query.data_type)
            if data is None:
                logger.debug("No '{}' dataset for warm-up query '{}'", query.data_type, query.operation)
                continue

            result = processor.process_data(query.data_type, data, query.filters, query.sort_by, query.order)
            if self.store_data(query.table, query.operation, result):
                stored += 1

        logger.info("Cache warming completed ({} queries)", stored)
        return stored

    def run_maintenance(self) -> bool:
        """Sweep expired entries and log stats. Skips if a sweep is already running."""
        if not self._sweep_lock.acquire(blocking=False):
            logger.warning("Previous cache sweep still running, skipping")
            return False
        try:
            self.cleanup_all_cache_tables()
            self.log_cache_stats()
        finally:
            self._sweep_lock.release()
        return True

    def start_cache_monitoring(self, interval_seconds: float = CACHE_MONITOR_INTERVAL) -> CacheMonitor:
        if self._monitor and self._monitor.running:
            logger.warning("Cache monitoring already running")
            return self._monitor

        self._monitor = CacheMonitor(self.run_maintenance, interval_seconds).start()
        return self._monitor

    def stop_cache_monitoring(self) -> None:
        if self._monitor:
            self._monitor.stop()
            self._monitor = None
