"""Cache API."""

from web.api.cache.views import cleanup, clear_all, clear_table, get_stats

__all__ = [
    "get_stats",
    "clear_table",
    "clear_all",
    "cleanup",
]
