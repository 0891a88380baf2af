"""Entity processor base - filter and sort strategy for one record type."""

from collections.abc import Callable, Mapping, Sequence
from datetime import date, datetime
from typing import Annotated, Any, ClassVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

from helpers.parsing import parse_date

Record = dict[str, Any]


def _coerce_date(value: Any) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, (str, date)):
        parsed = parse_date(value)
        if parsed is None:
            raise ValueError(f"invalid date: {value!r}")
        return parsed
    return value


DateFilter = Annotated[datetime | None, BeforeValidator(_coerce_date)]


class FilterModel(BaseModel):
    """Filter parameters. camelCase keys as sent by clients, None = no constraint."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_empty(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return {k: v for k, v in data.items() if v is not None and v != "" and v != []}
        return data


# Predicates. Each returns True when the filter is omitted.


def exact(value: Any, expected: Any) -> bool:
    return expected is None or value == expected


def within(value: Any, low: float | None = None, high: float | None = None) -> bool:
    """Inclusive bounds; a missing value fails any provided bound."""
    if low is None and high is None:
        return True
    if value is None:
        return False
    if low is not None and value < low:
        return False
    return high is None or value <= high


def on_or_after(value: Any, bound: datetime | None) -> bool:
    if bound is None:
        return True
    dt = parse_date(value)
    return dt is not None and dt >= bound


def contains(text: Any, needle: str | None) -> bool:
    """Case-insensitive substring match."""
    if needle is None:
        return True
    return needle.lower() in str(text or "").lower()


def sort_key(value: Any) -> tuple:
    """Total ordering across missing and mixed-type values."""
    if value is None:
        return (0, 0)
    if isinstance(value, (bool, int, float)):
        return (1, value)
    if isinstance(value, str):
        return (2, value)
    if isinstance(value, datetime):
        return (3, value)
    return (4, str(value))


class EntityProcessor:
    """Filter/sort strategy for one data type. Subclasses register in the pipeline by `data_type`."""

    data_type: ClassVar[str]
    filters_model: ClassVar[type[FilterModel]] = FilterModel
    sort_fields: ClassVar[dict[str, Callable[[Record], Any]]] = {}

    def parse_filters(self, filters: Mapping[str, Any] | FilterModel | None) -> FilterModel:
        if isinstance(filters, self.filters_model):
            return filters
        return self.filters_model.model_validate(dict(filters or {}))

    def matches(self, record: Record, filters: FilterModel) -> bool:
        raise NotImplementedError

    def filter(self, records: Sequence[Record], filters: Mapping[str, Any] | FilterModel | None) -> list[Record]:
        """Records satisfying every provided filter."""
        parsed = self.parse_filters(filters)
        return [r for r in records if self.matches(r, parsed)]

    def sort(self, records: Sequence[Record], sort_by: str, order: str = "asc") -> list[Record]:
        """Sorted copy. Unknown sort keys fall back to the raw field."""
        extract = self.sort_fields.get(sort_by) or (lambda r: r.get(sort_by))
        return sorted(records, key=lambda r: sort_key(extract(r)), reverse=order == "desc")

    def stats(self, records: Sequence[Record]) -> dict[str, Any]:
        return {}
