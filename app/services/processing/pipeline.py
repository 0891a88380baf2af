"""Data processor - type-dispatched filter -> sort -> cache pipeline."""

import json
import time
from collections.abc import Callable, Iterable, Mapping, Sequence
from datetime import datetime, timezone
from typing import Any

from loguru import logger

from app.repositories.common.ttl_cache import EvictionPolicy, TTLCache, serialize_filters
from app.services.processing.assessment import AssessmentProcessor
from app.services.processing.base import EntityProcessor, Record
from app.services.processing.course_builder import CourseProcessor
from app.services.processing.devlab import ExerciseProcessor
from app.services.processing.directory import UserProcessor
from app.services.processing.learner_ai import SkillProcessor
from app.services.processing.learning_analytics import PerformanceTrendProcessor
from settings import CACHE_TTL_SECONDS


def default_processors() -> list[EntityProcessor]:
    return [
        UserProcessor(),
        CourseProcessor(),
        AssessmentProcessor(),
        SkillProcessor(),
        ExerciseProcessor(),
        PerformanceTrendProcessor(),
    ]


class DataProcessor:
    """Filter/sort pipeline over the registered entity types, with its own TTL cache.

    The cache has no size bound; entries leave only by expiry-on-read,
    clear_expired_cache() or clear_cache().
    """

    def __init__(
        self,
        processors: Iterable[EntityProcessor] | None = None,
        ttl_seconds: float = CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        self._cache: TTLCache[str, list[Record]] = TTLCache(ttl_seconds, policy=EvictionPolicy.TTL, clock=clock)
        self._processors: dict[str, EntityProcessor] = {}
        for processor in default_processors() if processors is None else processors:
            self.register(processor)
        logger.debug("DataProcessor initialized with types: {}", ", ".join(self._processors))

    def register(self, processor: EntityProcessor) -> None:
        """Add or replace the strategy for processor.data_type."""
        self._processors[processor.data_type] = processor

    def get_processor(self, data_type: str) -> EntityProcessor | None:
        return self._processors.get(data_type)

    def supported_types(self) -> list[str]:
        return list(self._processors)

    def sort_fields(self, data_type: str) -> list[str]:
        processor = self._processors.get(data_type)
        return list(processor.sort_fields) if processor else []

    # Cache

    @staticmethod
    def generate_cache_key(operation: str, filters: Mapping | None = None, sort_by: str = "", order: str = "") -> str:
        return json.dumps([operation, json.loads(serialize_filters(filters)), sort_by or "", order or ""])

    def is_cache_valid(self, key: str) -> bool:
        return self._cache.is_valid(key)

    def get_from_cache(self, key: str) -> list[Record] | None:
        return self._cache.get(key)

    def set_cache(self, key: str, data: list[Record]) -> None:
        self._cache.set(key, data)

    def clear_cache(self) -> None:
        self._cache.clear()
        logger.debug("Processor cache cleared")

    def clear_expired_cache(self) -> int:
        removed = self._cache.purge_expired()
        if removed:
            logger.debug("Removed {} expired processor cache entries", removed)
        return removed

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    # Pipeline

    def process_data(
        self,
        data_type: str,
        data: Sequence[Record],
        filters: Mapping[str, Any] | None = None,
        sort_by: str = "",
        order: str = "asc",
    ) -> list[Record]:
        """Filter, optionally sort, and cache a collection. The input is never mutated."""
        if data is None:
            raise TypeError(f"process_data('{data_type}') requires a sequence of records, got None")

        key = self.generate_cache_key(data_type, filters, sort_by, order)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Processor cache hit: {}", data_type)
            return cached

        processor = self._processors.get(data_type)
        if processor is None:
            logger.warning("Unknown data type: {}", data_type)
            result = list(data)
        else:
            result = processor.filter(data, filters)
            if sort_by:
                result = processor.sort(result, sort_by, order)

        self._cache.set(key, result)
        return result

    # Stats

    def get_data_stats(self, data_type: str, data: Sequence[Record]) -> dict[str, Any]:
        """Total, timestamp and the type's group counts / averages."""
        stats: dict[str, Any] = {
            "total": len(data),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        processor = self._processors.get(data_type)
        if processor:
            stats.update(processor.stats(list(data)))
        return stats
