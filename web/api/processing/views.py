"""Processing API views - thin layer over services."""

from typing import Any

import pydantic

from app.container import container
from web.api.errors import NotFoundError, ValidationError, validate_data_type, validate_order, validate_sort_by

from .schemas import DataTypeItem, DataTypesResponse, ProcessResponse


def get_data_types() -> DataTypesResponse:
    """Get processable data types with their sort fields."""
    processor = container.processor
    items = [DataTypeItem(data_type=t, sort_fields=processor.sort_fields(t)) for t in processor.supported_types()]
    return DataTypesResponse(items=items)


def process(
    data_type: str,
    filters: dict[str, Any] | None = None,
    sort_by: str = "",
    order: str = "asc",
) -> ProcessResponse:
    """Filter and sort one collection."""
    validate_data_type(data_type, container.processor.supported_types())
    validate_sort_by(sort_by, container.processor.sort_fields(data_type))
    validate_order(order)

    try:
        result = container.dashboard.process(data_type, filters, sort_by, order)
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid filters for {data_type}: {e.errors()[0]['msg']}") from e

    if result is None:
        raise NotFoundError(f"No data for type: {data_type}")

    return ProcessResponse(
        data_type=data_type,
        count=len(result["data"]),
        data=result["data"],
        stats=result["stats"],
        filters=filters or {},
        sort_by=sort_by,
        order=order,
    )
