"""Cache API response schemas."""

from pydantic import BaseModel


class TableStats(BaseModel):
    """Statistics for one cache table."""

    data_type: str
    description: str
    entries: int
    hit_rate: float
    total_hits: int
    total_misses: int
    access_count: int
    created_at: str
    last_updated: str
    memory_bytes: int
    memory_usage: str


class CacheStatsResponse(BaseModel):
    """Cache statistics response."""

    total_tables: int
    total_entries: int
    processor_entries: int
    tables: dict[str, TableStats]


class ClearResponse(BaseModel):
    """Cache clear result."""

    cleared: list[str]


class CleanupResponse(BaseModel):
    """Expired entry sweep result."""

    tables_removed: int
    processor_removed: int
