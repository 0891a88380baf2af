"""Assessment tests - filter and sort strategy."""

from app.services.processing.base import EntityProcessor, FilterModel, Record, contains, exact, within
from helpers import formulas


def _question_count(test: Record) -> int:
    return len(test.get("questions") or [])


class AssessmentFilters(FilterModel):
    course_id: str | None = None
    difficulty: str | None = None
    min_questions: float | None = None
    max_questions: float | None = None
    min_pass_rate: float | None = None
    min_average_score: float | None = None
    min_attempts: float | None = None
    search: str | None = None


class AssessmentProcessor(EntityProcessor):
    data_type = "tests"
    filters_model = AssessmentFilters
    sort_fields = {
        "title": lambda t: t.get("title"),
        "averageScore": lambda t: t.get("averageScore"),
        "passRate": lambda t: t.get("passRate"),
        "totalAttempts": lambda t: t.get("totalAttempts"),
        "questionCount": _question_count,
    }

    def matches(self, test: Record, f: AssessmentFilters) -> bool:
        return (
            exact(test.get("courseId"), f.course_id)
            and exact(test.get("difficulty"), f.difficulty)
            and within(_question_count(test), f.min_questions, f.max_questions)
            and within(test.get("passRate"), f.min_pass_rate)
            and within(test.get("averageScore"), f.min_average_score)
            and within(test.get("totalAttempts"), f.min_attempts)
            and contains(test.get("title"), f.search)
        )

    def stats(self, tests: list[Record]) -> dict:
        return {
            "by_difficulty": formulas.count_by(tests, "difficulty"),
            "average_score": formulas.average_field(tests, "averageScore"),
            "average_pass_rate": formulas.average_field(tests, "passRate"),
        }
