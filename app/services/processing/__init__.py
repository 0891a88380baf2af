"""Processing package - per-type filter/sort strategies and the cached pipeline."""

from app.services.processing.assessment import AssessmentFilters, AssessmentProcessor
from app.services.processing.base import EntityProcessor, FilterModel, Record
from app.services.processing.course_builder import CourseFilters, CourseProcessor
from app.services.processing.devlab import ExerciseFilters, ExerciseProcessor
from app.services.processing.directory import UserFilters, UserProcessor
from app.services.processing.learner_ai import SkillFilters, SkillProcessor
from app.services.processing.learning_analytics import PerformanceTrendProcessor, TrendFilters
from app.services.processing.pipeline import DataProcessor, default_processors

__all__ = [
    "DataProcessor",
    "default_processors",
    "EntityProcessor",
    "FilterModel",
    "Record",
    # Strategies
    "UserProcessor",
    "UserFilters",
    "CourseProcessor",
    "CourseFilters",
    "AssessmentProcessor",
    "AssessmentFilters",
    "SkillProcessor",
    "SkillFilters",
    "ExerciseProcessor",
    "ExerciseFilters",
    "PerformanceTrendProcessor",
    "TrendFilters",
]
