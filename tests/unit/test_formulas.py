"""Tests for formulas module."""

from datetime import datetime, timezone

from helpers import formulas


class TestRounding:
    def test_half_up(self):
        assert formulas.round_half_up(2.5) == 3
        assert formulas.round_half_up(76.8) == 77
        assert formulas.round_half_up(4.4) == 4

    def test_round_to(self):
        assert formulas.round_to(0.125) == 0.13
        assert formulas.round_to(1.0) == 1.0


class TestRatios:
    def test_zero_denominator(self):
        assert formulas.safe_ratio(5, 0) == 0

    def test_completion_rate_no_participants(self):
        assert formulas.completion_rate(0, 0) == 0

    def test_completion_rate(self):
        assert formulas.completion_rate(3, 4) == 75

    def test_mean_empty(self):
        assert formulas.mean([]) == 0


class TestGrouping:
    def test_missing_goes_to_unknown(self):
        records = [{"org": "a"}, {"org": None}, {}, {"org": "a"}]
        groups = formulas.group_by(records, "org")
        assert len(groups["a"]) == 2
        assert len(groups["Unknown"]) == 2

    def test_count_by(self):
        assert formulas.count_by([{"x": 1}, {"x": 1}, {"x": 2}], "x") == {"1": 2, "2": 1}

    def test_period_labels(self):
        dt = datetime(2024, 5, 3, tzinfo=timezone.utc)
        assert formulas.month_label(dt) == "2024-05"
        assert formulas.quarter_label(dt) == "Q2 2024"
        assert formulas.month_label(None) is None


class TestCourseFormulas:
    def test_engagement_level(self):
        assert formulas.engagement_level(18, 25) == "Medium"
        assert formulas.engagement_level(15, 18) == "High"
        assert formulas.engagement_level(1, 10) == "Very Low"
        assert formulas.engagement_level(0, 0) == "Very Low"

    def test_performance_category(self):
        assert formulas.performance_category(90) == "Excellent"
        assert formulas.performance_category(83) == "Good"
        assert formulas.performance_category(72) == "Average"
        assert formulas.performance_category(60) == "Below Average"
        assert formulas.performance_category(59) == "Poor"

    def test_completions(self):
        assert formulas.completions(72, 25) == 18


class TestSkillGapFormulas:
    def test_urgency_score(self):
        assert formulas.urgency_score(50, 10) == 5

    def test_impact_level(self):
        assert formulas.impact_level(50) == "Critical"
        assert formulas.impact_level(35) == "High"
        assert formulas.impact_level(15) == "Medium"
        assert formulas.impact_level(10) == "Low"

    def test_training_hours(self):
        assert formulas.training_hours("Python", 2) == 70
        assert formulas.training_hours("Advanced JavaScript", 2) == 60


class TestEngagement:
    def test_score_clamped(self):
        # 20 skills, 30 years, logged in today: 200 + 150 + 30 = 380
        assert formulas.engagement_score(20, 30, 0) == 100

    def test_score(self):
        assert formulas.engagement_score(3, 5, 10) == 75

    def test_no_login(self):
        assert formulas.engagement_score(1, 1, None) == 15

    def test_activity_level(self):
        assert formulas.activity_level(0) == "Very Active"
        assert formulas.activity_level(7) == "Active"
        assert formulas.activity_level(30) == "Moderate"
        assert formulas.activity_level(90) == "Low"
        assert formulas.activity_level(91) == "Inactive"
        assert formulas.activity_level(None) == "Inactive"

    def test_learning_velocity_capped(self):
        assert formulas.learning_velocity(25) == 10


class TestOrganizations:
    def test_performance_score(self):
        assert formulas.org_performance_score(72, 3, 78) == 60

    def test_growth_trend(self):
        assert formulas.growth_trend(["increasing"]) == "Growing"
        assert formulas.growth_trend(["increasing", "stable"]) == "Stable"
        assert formulas.growth_trend(["stable"]) == "Declining"
        assert formulas.growth_trend([]) == "Unknown"

    def test_learning_efficiency_no_users(self):
        assert formulas.learning_efficiency(10, 0) == 0


class TestExercises:
    def test_efficiency_score(self):
        # time 45 -> 12.5, completion 80% -> 40
        assert formulas.efficiency_score(45, 80) == 53

    def test_slow_exercise_has_no_time_credit(self):
        assert formulas.efficiency_score(90, 0) == 0

    def test_difficulty_score(self):
        assert formulas.difficulty_score("advanced") == 3
        assert formulas.difficulty_score(None) == 1

    def test_performance_category(self):
        assert formulas.exercise_performance_category(80, 45) == "Excellent"
        assert formulas.exercise_performance_category(75, 90) == "Average"
        assert formulas.exercise_performance_category(10, 10) == "Needs Improvement"


class TestPredictions:
    def test_predicted_completion_rate(self):
        # 80 * min(1.2, 25/20) * (20/25) = 76.8
        assert formulas.predicted_completion_rate(80, 25, 20) == 77

    def test_predicted_completion_rate_capped(self):
        assert formulas.predicted_completion_rate(100, 100, 100) == 100

    def test_predicted_completion_rate_no_enrollment(self):
        assert formulas.predicted_completion_rate(80, 0, 0) == 0

    def test_confidence(self):
        assert formulas.prediction_confidence(50) == "High"
        assert formulas.prediction_confidence(25) == "Medium"
        assert formulas.prediction_confidence(5) == "Low"

    def test_risk_factors(self):
        assert formulas.risk_factors(50, 5, 1) == ["Low completion rate", "Low engagement", "Small sample size"]
        assert formulas.risk_factors(90, 100, 90) == []

    def test_recommendations(self):
        assert formulas.course_recommendations(72, 25, 18) == []
        assert "Consider breaking into smaller groups" in formulas.course_recommendations(90, 60, 50)
