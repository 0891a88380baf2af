"""Devlab exercises - filter and sort strategy."""

from app.services.processing.base import EntityProcessor, FilterModel, Record, contains, exact, within
from helpers import formulas

DIFFICULTY_LEVELS = {"beginner": 1, "intermediate": 2, "advanced": 3}


def exercise_completion_rate(exercise: Record) -> float:
    return formulas.completion_rate(exercise.get("completionCount") or 0, exercise.get("participationCount") or 0)


class ExerciseFilters(FilterModel):
    organization_id: str | None = None
    difficulty: str | None = None
    language: str | None = None
    min_participation: float | None = None
    min_completion: float | None = None
    max_average_time: float | None = None
    search: str | None = None


class ExerciseProcessor(EntityProcessor):
    data_type = "exercises"
    filters_model = ExerciseFilters
    sort_fields = {
        "title": lambda e: e.get("title"),
        "difficulty": lambda e: DIFFICULTY_LEVELS.get(e.get("difficulty"), 0),
        "participationCount": lambda e: e.get("participationCount"),
        "completionCount": lambda e: e.get("completionCount"),
        "averageTime": lambda e: e.get("averageTime"),
        "completionRate": exercise_completion_rate,
    }

    def matches(self, exercise: Record, f: ExerciseFilters) -> bool:
        return (
            exact(exercise.get("organizationId"), f.organization_id)
            and exact(exercise.get("difficulty"), f.difficulty)
            and exact(exercise.get("language"), f.language)
            and within(exercise.get("participationCount"), f.min_participation)
            and within(exercise.get("completionCount"), f.min_completion)
            and within(exercise.get("averageTime"), high=f.max_average_time)
            and contains(exercise.get("title"), f.search)
        )

    def stats(self, exercises: list[Record]) -> dict:
        return {
            "by_difficulty": formulas.count_by(exercises, "difficulty"),
            "by_language": formulas.count_by(exercises, "language"),
            "average_completion_rate": formulas.round_to(
                formulas.mean(exercise_completion_rate(e) for e in exercises)
            ),
        }
