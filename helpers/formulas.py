"""Pure math formulas - no dependencies, easily testable."""

import math
from collections import defaultdict
from collections.abc import Iterable, Mapping, Sequence
from datetime import datetime
from typing import Any

UNKNOWN = "Unknown"

TRAINING_HOURS = {
    "JavaScript": 40,
    "Python": 35,
    "React": 30,
    "Node.js": 25,
    "Data Analysis": 45,
    "Leadership": 20,
}
DEFAULT_TRAINING_HOURS = 30

DIFFICULTY_SCORES = {"beginner": 1, "intermediate": 2, "advanced": 3}


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positives (2.5 -> 3), unlike round()."""
    return math.floor(value + 0.5)


def round_to(value: float, digits: int = 2) -> float:
    """Half-up rounding to a number of decimal places."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def safe_ratio(numerator: float, denominator: float) -> float:
    """numerator / denominator, 0 when the denominator is 0."""
    return numerator / denominator if denominator else 0.0


def mean(values: Iterable[float]) -> float:
    values = list(values)
    return sum(values) / len(values) if values else 0.0


def average_field(records: Sequence[Mapping], field: str) -> float:
    """Mean of a field over records (missing counts as 0), rounded to 2 places."""
    return round_to(mean(r.get(field) or 0 for r in records))


def group_key(value: Any) -> str:
    return UNKNOWN if value is None or value == "" else str(value)


def group_by(records: Iterable[Mapping], field: str) -> dict[str, list]:
    """{value: [records]}; missing values land in 'Unknown'."""
    groups: dict[str, list] = defaultdict(list)
    for r in records:
        groups[group_key(r.get(field))].append(r)
    return dict(groups)


def count_by(records: Iterable[Mapping], field: str) -> dict[str, int]:
    return {k: len(v) for k, v in group_by(records, field).items()}


def completion_rate(completed: float, participants: float) -> float:
    """Completion percentage, 0 with no participants."""
    return safe_ratio(completed, participants) * 100


def month_label(dt: datetime | None) -> str | None:
    return dt.strftime("%Y-%m") if dt else None


def quarter_label(dt: datetime | None) -> str | None:
    return f"Q{(dt.month - 1) // 3 + 1} {dt.year}" if dt else None


# Course analytics


def engagement_level(active: float, total: float) -> str:
    ratio = safe_ratio(active, total)
    if ratio >= 0.8:
        return "High"
    if ratio >= 0.6:
        return "Medium"
    if ratio >= 0.4:
        return "Low"
    return "Very Low"


def performance_category(rate: float) -> str:
    if rate >= 90:
        return "Excellent"
    if rate >= 80:
        return "Good"
    if rate >= 70:
        return "Average"
    if rate >= 60:
        return "Below Average"
    return "Poor"


def completions(rate: float, enrollment: int) -> int:
    """Estimated completed enrollments from a completion percentage."""
    return round_half_up(rate / 100 * enrollment)


# Skill gaps


def impact_level(gap_percentage: float) -> str:
    if gap_percentage >= 50:
        return "Critical"
    if gap_percentage >= 30:
        return "High"
    if gap_percentage >= 15:
        return "Medium"
    return "Low"


def urgency_score(gap_percentage: float, affected_users: int) -> int:
    return round_half_up(gap_percentage * affected_users / 100)


def training_hours(skill_name: str, users: int) -> int:
    return TRAINING_HOURS.get(skill_name, DEFAULT_TRAINING_HOURS) * users


# User engagement


def activity_level(days_since_login: int | None) -> str:
    if days_since_login is None:
        return "Inactive"
    if days_since_login <= 1:
        return "Very Active"
    if days_since_login <= 7:
        return "Active"
    if days_since_login <= 30:
        return "Moderate"
    if days_since_login <= 90:
        return "Low"
    return "Inactive"


def engagement_score(skill_count: int, experience_years: int, days_since_login: int | None) -> int:
    """Skills*10 + years*5 + recency bonus, clamped to 0..100."""
    recency = max(0, 30 - days_since_login) if days_since_login is not None else 0
    score = skill_count * 10 + experience_years * 5 + recency
    return min(100, max(0, score))


def learning_velocity(skill_count: int) -> int:
    return min(10, skill_count)


# Organizations


def org_performance_score(avg_completion: float, avg_skill_count: float, avg_trend_value: float) -> int:
    return round_half_up((avg_completion + avg_skill_count * 10 + avg_trend_value) / 3)


def growth_trend(directions: Sequence[str]) -> str:
    if not directions:
        return UNKNOWN
    share = sum(1 for d in directions if d == "increasing") / len(directions)
    if share >= 0.7:
        return "Growing"
    if share >= 0.4:
        return "Stable"
    return "Declining"


def learning_efficiency(total_completions: int, user_count: int) -> int:
    return round_half_up(safe_ratio(total_completions, user_count))


# Exercises


def difficulty_score(difficulty: str | None) -> int:
    return DIFFICULTY_SCORES.get(difficulty, 1)


def efficiency_score(average_time: float, rate: float) -> int:
    """Lower time and higher completion both push toward 100."""
    time_score = max(0, 60 - average_time) / 60 * 50
    completion_score = rate / 100 * 50
    return round_half_up(time_score + completion_score)


def exercise_performance_category(rate: float, average_time: float) -> str:
    if rate >= 80 and average_time <= 45:
        return "Excellent"
    if rate >= 70 and average_time <= 60:
        return "Good"
    if rate >= 60:
        return "Average"
    return "Needs Improvement"


# Predictions


def predicted_completion_rate(rate: float, enrollment: int, active: int) -> int:
    enrollment_factor = min(1.2, enrollment / 20)
    activity_factor = safe_ratio(active, enrollment)
    return min(100, round_half_up(rate * enrollment_factor * activity_factor))


def prediction_confidence(sample_size: int) -> str:
    if sample_size >= 50:
        return "High"
    if sample_size >= 20:
        return "Medium"
    return "Low"


def risk_factors(rate: float, enrollment: int, active: int) -> list[str]:
    risks = []
    if rate < 60:
        risks.append("Low completion rate")
    if safe_ratio(active, enrollment) < 0.5:
        risks.append("Low engagement")
    if enrollment < 10:
        risks.append("Small sample size")
    return risks


def course_recommendations(rate: float, enrollment: int, active: int) -> list[str]:
    recommendations = []
    if rate < 70:
        recommendations.append("Consider additional support materials")
    if safe_ratio(active, enrollment) < 0.6:
        recommendations.append("Implement engagement strategies")
    if enrollment > 50:
        recommendations.append("Consider breaking into smaller groups")
    return recommendations
