"""Processing API response schemas."""

from typing import Any

from pydantic import BaseModel


class DataTypeItem(BaseModel):
    """A processable data type."""

    data_type: str
    sort_fields: list[str]


class DataTypesResponse(BaseModel):
    """Processable data types response."""

    items: list[DataTypeItem]


class ProcessResponse(BaseModel):
    """Filtered and sorted collection."""

    data_type: str
    count: int
    data: list[dict[str, Any]]
    stats: dict[str, Any]
    filters: dict[str, Any]
    sort_by: str
    order: str
