"""Tests for insights reports."""

from datetime import datetime, timezone

import pytest

from app.repositories.datasets import DatasetRepository
from app.services.insights import DataInsightsService

NOW = datetime(2024, 1, 20, tzinfo=timezone.utc)


@pytest.fixture
def repo():
    return DatasetRepository()


@pytest.fixture
def service():
    return DataInsightsService(now=lambda: NOW)


class TestCourses:
    def test_active_vs_registered(self, service, repo):
        result = service.generate_active_vs_registered_insights(repo.get_courses())

        js = result[0]
        assert js["inactive_users"] == 7
        assert js["activity_rate"] == 72
        assert js["engagement_level"] == "Medium"
        assert result[1]["engagement_level"] == "High"

    def test_zero_enrollment(self, service):
        result = service.generate_active_vs_registered_insights([{"id": "c", "enrollmentCount": 0, "activeUsers": 0}])
        assert result[0]["activity_rate"] == 0
        assert result[0]["engagement_level"] == "Very Low"

    def test_completion_trends(self, service, repo):
        result = service.generate_completion_trends(repo.get_courses())

        assert [c["completion_count"] for c in result["courses"]] == [18, 15]
        assert [c["performance_category"] for c in result["courses"]] == ["Average", "Good"]
        assert result["summary"] == {
            "average_completion_rate": 78,
            "high_performers": 1,
            "low_performers": 0,
            "total_enrollments": 43,
            "total_completions": 33,
        }

    def test_empty_courses(self, service):
        assert service.generate_completion_trends([])["summary"]["average_completion_rate"] == 0


class TestSkills:
    def test_acquisition_breakdowns(self, service, repo):
        result = service.generate_skill_acquisition_insights(repo.get_skills())

        assert [t["month"] for t in result["timeline"]] == ["2024-01", "2024-01"]
        monthly = result["monthly_breakdown"]
        assert len(monthly) == 1
        assert monthly[0]["period"] == "2024-01"
        assert monthly[0]["skills_acquired"] == 2
        assert monthly[0]["skill_levels"] == {"intermediate": 1, "advanced": 1}
        assert result["quarterly_breakdown"][0]["period"] == "Q1 2024"
        assert result["yearly_breakdown"][0]["period"] == "2024"

    def test_missing_date_groups_as_unknown(self, service):
        skills = [
            {"id": "s1", "acquiredAt": "2024-03-01T00:00:00Z", "confidenceScore": 0.5},
            {"id": "s2", "acquiredAt": None, "confidenceScore": 0.5},
        ]
        result = service.generate_skill_acquisition_insights(skills)

        assert {m["period"] for m in result["monthly_breakdown"]} == {"2024-03", "Unknown"}
        assert {y["period"] for y in result["yearly_breakdown"]} == {"2024", "Unknown"}

    def test_skill_gaps(self, service, repo):
        result = service.generate_skill_gap_insights(repo.get_skill_gaps())

        assert [g["impact_level"] for g in result] == ["High", "High"]
        assert [g["urgency_score"] for g in result] == [4, 3]
        assert [g["estimated_training_hours"] for g in result] == [360, 240]


class TestUsers:
    def test_activity(self, service, repo):
        result = service.generate_user_activity_insights(repo.get_users())

        assert [u["days_since_last_login"] for u in result] == [4, 4, 5]
        assert [u["activity_level"] for u in result] == ["Active", "Active", "Active"]
        assert [u["engagement_score"] for u in result] == [81, 96, 70]
        assert result[0]["user_name"] == "John Doe"
        assert result[1]["experience_years"] == 8

    def test_never_logged_in(self, service):
        result = service.generate_user_activity_insights([{"id": "u"}])
        assert result[0]["days_since_last_login"] is None
        assert result[0]["activity_level"] == "Inactive"
        assert result[0]["engagement_score"] == 0

    def test_null_first_name(self, service):
        result = service.generate_user_activity_insights([{"id": "u", "firstName": None, "lastName": "Smith"}])
        assert result[0]["user_name"] == "Smith"

    def test_days_since_last_login(self, service):
        assert service.days_since_last_login({"lastLogin": "2024-01-10T00:00:00Z"}) == 10


class TestOrganizations:
    def test_cross_org(self, service, repo):
        result = service.generate_cross_org_insights(
            repo.get_organizations(), repo.get_courses(), repo.get_users(), repo.get_performance_trends()
        )
        by_id = {o["organization_id"]: o for o in result}

        assert by_id["org-1"]["performance_score"] == 60
        assert by_id["org-1"]["growth_trend"] == "Growing"
        assert by_id["org-1"]["learning_efficiency"] == 18
        assert by_id["org-1"]["skill_diversity"] == 3
        assert by_id["org-2"]["performance_score"] == 66
        assert by_id["org-2"]["growth_trend"] == "Declining"

    def test_org_without_courses_or_trends(self, service, repo):
        result = service.generate_cross_org_insights(
            repo.get_organizations(), repo.get_courses(), repo.get_users(), repo.get_performance_trends()
        )
        org3 = next(o for o in result if o["organization_id"] == "org-3")

        assert org3["course_count"] == 0
        assert org3["average_completion_rate"] == 0
        assert org3["performance_score"] == 10
        assert org3["growth_trend"] == "Unknown"
        assert org3["learning_efficiency"] == 0


class TestExercises:
    def test_ranked_by_participation(self, service, repo):
        exercises = list(reversed(repo.get_exercises()))
        result = service.generate_exercise_insights(exercises, repo.get_participations())

        assert [e["exercise_id"] for e in result] == ["exercise-1", "exercise-2"]
        assert [e["popularity_rank"] for e in result] == [1, 2]
        assert [e["recorded_participations"] for e in result] == [1, 1]

    def test_scores(self, service, repo):
        result = service.generate_exercise_insights(repo.get_exercises(), [])

        assert [e["completion_rate"] for e in result] == [80, 75]
        assert [e["efficiency_score"] for e in result] == [53, 38]
        assert [e["performance_category"] for e in result] == ["Excellent", "Average"]

    def test_no_participants(self, service):
        result = service.generate_exercise_insights([{"id": "e", "participationCount": 0, "completionCount": 0}], [])
        assert result[0]["completion_rate"] == 0


class TestPredictions:
    def test_predictive(self, service, repo):
        result = service.generate_predictive_insights(
            repo.get_courses(), repo.get_skills(), repo.get_performance_trends()
        )

        courses = result["course_success_predictions"]
        assert [c["predicted_completion_rate"] for c in courses] == [62, 62]
        assert [c["confidence_level"] for c in courses] == ["Medium", "Low"]
        assert courses[0]["risk_factors"] == []

        assert len(result["skill_demand_forecast"]) == 2
        assert result["skill_demand_forecast"][0]["predicted_demand"] == 1
        assert [p["organization_id"] for p in result["organizational_growth_projections"]] == ["org-1", "org-2"]

    def test_skill_demand_growth(self, service):
        skills = [{"skillName": "Python"}] * 5
        forecast = service.generate_skill_demand_forecast(skills)
        assert forecast == [
            {
                "skill_name": "Python",
                "current_demand": 5,
                "predicted_demand": 6,
                "growth_rate": 20,
                "trend": "increasing",
            }
        ]


class TestPurity:
    def test_inputs_not_mutated(self, service, repo):
        courses = repo.get_courses()
        snapshot = [dict(c) for c in courses]

        service.generate_completion_trends(courses)
        service.generate_predictive_insights(courses, [], [])

        assert courses == snapshot
