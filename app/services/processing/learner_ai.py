"""Learner AI acquired skills - filter and sort strategy."""

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

SKILL_LEVELS = {"beginner": 1, "intermediate": 2, "advanced": 3, "expert": 4}


class SkillFilters(FilterModel):
    user_id: str | None = None
    course_id: str | None = None
    skill_level: str | None = None
    min_confidence_score: float | None = None
    acquired_after: DateFilter = None
    search: str | None = None


class SkillProcessor(EntityProcessor):
    data_type = "skills"
    filters_model = SkillFilters
    sort_fields = {
        "skillName": lambda s: s.get("skillName"),
        "skillLevel": lambda s: SKILL_LEVELS.get(s.get("skillLevel"), 0),
        "confidenceScore": lambda s: s.get("confidenceScore"),
        "acquiredAt": lambda s: parse_date(s.get("acquiredAt")),
    }

    def matches(self, skill: Record, f: SkillFilters) -> bool:
        return (
            exact(skill.get("userId"), f.user_id)
            and exact(skill.get("courseId"), f.course_id)
            and exact(skill.get("skillLevel"), f.skill_level)
            and within(skill.get("confidenceScore"), f.min_confidence_score)
            and on_or_after(skill.get("acquiredAt"), f.acquired_after)
            and contains(skill.get("skillName"), f.search)
        )

    def stats(self, skills: list[Record]) -> dict:
        return {
            "by_level": formulas.count_by(skills, "skillLevel"),
            "average_confidence": formulas.average_field(skills, "confidenceScore"),
        }
