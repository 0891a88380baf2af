"""API errors and validation helpers."""

from collections.abc import Collection


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


SORT_ORDERS = ("asc", "desc")


def validate_data_type(data_type: str, supported: Collection[str]) -> None:
    """Validate data_type is one the processor handles."""
    if data_type not in supported:
        raise NotFoundError(f"Unknown data type: {data_type}. Supported: {', '.join(supported)}")


def validate_sort_by(sort_by: str, allowed: Collection[str]) -> None:
    """Validate sort_by is empty or a known sort field."""
    if sort_by and sort_by not in allowed:
        raise ValidationError(f"Invalid sort_by: {sort_by}. Must be one of: {', '.join(allowed)}")


def validate_order(order: str) -> None:
    if order not in SORT_ORDERS:
        raise ValidationError(f"Invalid order: {order}. Must be 'asc' or 'desc'")


def validate_table_name(name: str, tables: Collection[str]) -> None:
    if name not in tables:
        raise NotFoundError(f"Cache table not found: {name}")
