"""Learning analytics performance trends - filter and sort strategy."""

from app.services.processing.base import EntityProcessor, FilterModel, Record, exact, within
from helpers import formulas

TREND_DIRECTIONS = {"decreasing": 1, "stable": 2, "increasing": 3}


def _abs_change(trend: Record) -> float | None:
    change = trend.get("changePercentage")
    return abs(change) if change is not None else None


class TrendFilters(FilterModel):
    organization_id: str | None = None
    metric: str | None = None
    trend: str | None = None
    period: str | None = None
    min_value: float | None = None
    max_value: float | None = None
    min_change_percentage: float | None = None


class PerformanceTrendProcessor(EntityProcessor):
    data_type = "performanceTrends"
    filters_model = TrendFilters
    sort_fields = {
        "value": lambda t: t.get("value"),
        "changePercentage": _abs_change,
        "metric": lambda t: t.get("metric"),
        "trend": lambda t: TREND_DIRECTIONS.get(t.get("trend"), 0),
    }

    def matches(self, trend: Record, f: TrendFilters) -> bool:
        return (
            exact(trend.get("organizationId"), f.organization_id)
            and exact(trend.get("metric"), f.metric)
            and exact(trend.get("trend"), f.trend)
            and exact(trend.get("period"), f.period)
            and within(trend.get("value"), f.min_value, f.max_value)
            and within(_abs_change(trend), f.min_change_percentage)
        )

    def stats(self, trends: list[Record]) -> dict:
        return {
            "by_trend": formulas.count_by(trends, "trend"),
            "by_metric": formulas.count_by(trends, "metric"),
            "average_value": formulas.average_field(trends, "value"),
        }
