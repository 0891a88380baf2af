"""Cache API views - thin layer over the cache stores."""

from app.container import container
from web.api.errors import validate_table_name

from .schemas import CacheStatsResponse, CleanupResponse, ClearResponse, TableStats


def get_stats() -> CacheStatsResponse:
    """Get statistics for every cache table."""
    stats = container.cache.get_cache_stats()

    return CacheStatsResponse(
        total_tables=stats["total_tables"],
        total_entries=stats["total_entries"],
        processor_entries=container.processor.cache_size,
        tables={name: TableStats(**t) for name, t in stats["tables"].items()},
    )


def clear_table(name: str) -> ClearResponse:
    """Clear one cache table."""
    validate_table_name(name, container.cache.get_cache_table_names())
    container.cache.clear_cache_table(name)
    return ClearResponse(cleared=[name])


def clear_all() -> ClearResponse:
    """Clear every cache table and the processor cache."""
    container.cache.clear_all_cache_tables()
    container.processor.clear_cache()
    return ClearResponse(cleared=container.cache.get_cache_table_names())


def cleanup() -> CleanupResponse:
    """Remove expired entries from both cache stores."""
    return CleanupResponse(
        tables_removed=container.cache.cleanup_all_cache_tables(),
        processor_removed=container.processor.clear_expired_cache(),
    )
