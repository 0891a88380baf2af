"""Course builder courses - filter and sort strategy."""

from app.services.processing.base import (
    DateFilter,
    EntityProcessor,
    FilterModel,
    Record,
    contains,
    exact,
    on_or_after,
    within,
)
from helpers import formulas
from helpers.parsing import parse_date

# Records without a creation date are treated as created on this day
DEFAULT_CREATED_AT = "2024-01-01"


def _lessons(course: Record) -> list:
    return course.get("lessons") or []


class CourseFilters(FilterModel):
    organization_id: str | None = None
    instructor_id: str | None = None
    status: str | None = None
    min_enrollment: float | None = None
    max_enrollment: float | None = None
    min_completion_rate: float | None = None
    max_completion_rate: float | None = None
    min_active_users: float | None = None
    search: str | None = None
    created_after: DateFilter = None


class CourseProcessor(EntityProcessor):
    data_type = "courses"
    filters_model = CourseFilters
    sort_fields = {
        "title": lambda c: c.get("title"),
        "enrollmentCount": lambda c: c.get("enrollmentCount"),
        "activeUsers": lambda c: c.get("activeUsers"),
        "completionRate": lambda c: c.get("completionRate"),
        "lessonCount": lambda c: len(_lessons(c)),
        "totalDuration": lambda c: sum(lesson.get("duration") or 0 for lesson in _lessons(c)),
        "createdAt": lambda c: parse_date(c.get("createdAt") or DEFAULT_CREATED_AT),
    }

    def matches(self, course: Record, f: CourseFilters) -> bool:
        return (
            exact(course.get("organizationId"), f.organization_id)
            and exact(course.get("instructorId"), f.instructor_id)
            and exact(course.get("status"), f.status)
            and within(course.get("enrollmentCount"), f.min_enrollment, f.max_enrollment)
            and within(course.get("completionRate"), f.min_completion_rate, f.max_completion_rate)
            and within(course.get("activeUsers"), f.min_active_users)
            and contains(course.get("title"), f.search)
            and on_or_after(course.get("createdAt") or DEFAULT_CREATED_AT, f.created_after)
        )

    def stats(self, courses: list[Record]) -> dict:
        return {
            "by_status": formulas.count_by(courses, "status"),
            "average_completion_rate": formulas.average_field(courses, "completionRate"),
            "average_enrollment": formulas.average_field(courses, "enrollmentCount"),
        }
