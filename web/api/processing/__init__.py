"""Processing API."""

from web.api.processing.views import get_data_types, process

__all__ = [
    "get_data_types",
    "process",
]
