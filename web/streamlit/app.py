"""HR Reporting Dashboard."""

import sys
from pathlib import Path

# Add project root to path (for streamlit which runs this file directly)
_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(_root))

import plotly.graph_objects as go  # noqa: E402
import polars as pl  # noqa: E402
import streamlit as st  # noqa: E402
from loguru import logger  # noqa: E402

from app.container import container  # noqa: E402
from settings.logging import setup_logging  # noqa: E402
from web.api import cache, dashboard, insights, processing  # noqa: E402
from web.api.errors import NotFoundError, ValidationError  # noqa: E402

setup_logging()

# Ensure container is initialized
container.init(start_monitoring=True)

st.set_page_config(page_title="HR Reporting", page_icon="📊", layout="wide")

COLORS = {
    "Excellent": "#16A34A",
    "Good": "#84CC16",
    "Average": "#EAB308",
    "Below Average": "#F97316",
    "Poor": "#DC2626",
    "Needs Improvement": "#DC2626",
    "Critical": "#991B1B",
    "High": "#DC2626",
    "Medium": "#F97316",
    "Low": "#EAB308",
    "Very Active": "#16A34A",
    "Active": "#84CC16",
    "Moderate": "#EAB308",
    "Inactive": "#9CA3AF",
}


def color(name: str) -> str:
    return COLORS.get(name, "#6B7280")


@st.cache_data(ttl=300, show_spinner=False)
def get_insights(family: str) -> dict:
    """Get one insights family via views."""
    logger.info("Loading {} insights", family)
    views = {
        "courses": insights.get_course_insights,
        "skills": insights.get_skill_insights,
        "users": insights.get_user_insights,
        "exercises": insights.get_exercise_insights,
        "organizations": insights.get_organization_insights,
        "predictions": insights.get_predictive_insights,
    }
    return views[family]().model_dump()


def bar_chart(data: list, x_key: str, y_key: str, title: str = "", color_key: str | None = None) -> go.Figure:
    return go.Figure(
        go.Bar(
            x=[d[x_key] for d in data],
            y=[d[y_key] for d in data],
            marker_color=[color(d[color_key]) for d in data] if color_key else None,
            text=[f"{d[y_key]:.1f}" if isinstance(d[y_key], float) else d[y_key] for d in data],
            textposition="outside",
        )
    ).update_layout(
        title=title,
        xaxis_title="",
        yaxis_title="",
        margin=dict(t=40, b=40, l=40, r=20),
        height=350,
    )


def grouped_bar_chart(data: list, x_key: str, series: dict[str, str], title: str = "") -> go.Figure:
    x = [d[x_key] for d in data]
    fig = go.Figure(data=[go.Bar(name=label, x=x, y=[d[key] for d in data]) for key, label in series.items()])
    fig.update_layout(title=title, barmode="group", height=350, margin=dict(t=40, b=40, l=40, r=20))
    return fig


def pie_chart(counts: dict[str, int]) -> go.Figure:
    return go.Figure(
        go.Pie(
            labels=list(counts),
            values=list(counts.values()),
            hole=0.4,
            textposition="inside",
            textinfo="label+percent",
        )
    ).update_layout(showlegend=False, margin=dict(t=20, b=20, l=20, r=20), height=350)


def overview_tab():
    """Cross-organizational overview tab."""
    use_cache = st.toggle("Use cache", value=True)
    data = dashboard.get_admin_overview(use_cache=use_cache)

    st.subheader("🏢 Overview")
    cols = st.columns(5)
    cols[0].metric("Organizations", data.total_organizations)
    cols[1].metric("Active Users", data.total_users)
    cols[2].metric("Active Courses", data.total_courses)
    cols[3].metric("Avg Completion", f"{data.average_completion_rate}%")
    cols[4].metric("Avg Skill Progress", f"{data.average_skill_progress}%")
    st.caption("Served from cache" if data.cached else "Freshly computed")

    if data.top_trends:
        st.subheader("📈 Top Performance Trends")
        trends = [{"label": f"{t['organizationId']} · {t['metric']}", "value": t["value"]} for t in data.top_trends]
        st.plotly_chart(bar_chart(trends, "label", "value"), width="stretch")

    st.subheader("🏢 Organizations")
    for org in data.organizations:
        with st.expander(f"**{org.name}** — {len(org.users)} users, {len(org.courses)} courses"):
            for gap in org.skill_gaps:
                st.write(f"Skill gap: **{gap['skillName']}** ({gap['gapPercentage']}%, {gap['priority']} priority)")
            if not org.skill_gaps:
                st.write("No skill gaps recorded.")


def courses_tab():
    """Course analytics tab."""
    data = get_insights("courses")
    summary = data["summary"]

    cols = st.columns(4)
    cols[0].metric("Courses", summary["total_courses"])
    cols[1].metric("Avg Completion", f"{summary['average_completion_rate']}%")
    cols[2].metric("Enrollments", summary["total_enrollments"])
    cols[3].metric("Active Learners", summary["total_active_users"])

    col1, col2 = st.columns(2)
    with col1:
        st.plotly_chart(
            grouped_bar_chart(
                data["active_vs_registered"],
                "course_title",
                {"registered_users": "Registered", "active_users": "Active"},
                "Active vs Registered",
            ),
            width="stretch",
        )
    with col2:
        st.plotly_chart(
            bar_chart(
                data["completion_trends"]["courses"],
                "course_title",
                "completion_rate",
                "Completion Rate (%)",
                color_key="performance_category",
            ),
            width="stretch",
        )


def skills_tab():
    """Skill development tab."""
    data = get_insights("skills")
    summary = data["summary"]

    cols = st.columns(3)
    cols[0].metric("Skills Acquired", summary["total_skills"])
    cols[1].metric("Avg Confidence", f"{summary['average_confidence']:.2f}")
    cols[2].metric("Skill Gaps", summary["total_gaps"])

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("🎯 Skill Levels")
        st.plotly_chart(pie_chart(summary["skill_levels"]), width="stretch")
    with col2:
        st.subheader("📅 Monthly Acquisition")
        st.plotly_chart(
            bar_chart(data["acquisition"]["monthly_breakdown"], "period", "skills_acquired"), width="stretch"
        )

    if data["gaps"]:
        st.subheader("⚠️ Skill Gaps")
        st.plotly_chart(
            bar_chart(data["gaps"], "skill_name", "urgency_score", "Urgency Score", color_key="impact_level"),
            width="stretch",
        )


def users_tab():
    """User engagement tab."""
    data = get_insights("users")
    summary = data["summary"]

    cols = st.columns(4)
    cols[0].metric("Users", summary["total_users"])
    cols[1].metric("Active (7 days)", summary["active_users"])
    cols[2].metric("Avg Engagement", summary["average_engagement_score"])
    cols[3].metric("Avg Skills", summary["average_skill_count"])

    st.plotly_chart(
        bar_chart(data["activity"], "user_name", "engagement_score", "Engagement Score", color_key="activity_level"),
        width="stretch",
    )


def organizations_tab():
    """Organizational comparison tab."""
    data = get_insights("organizations")
    summary = data["summary"]

    cols = st.columns(4)
    cols[0].metric("Organizations", summary["total_organizations"])
    cols[1].metric("Avg Performance", summary["average_performance_score"])
    cols[2].metric("Growing", summary["growth_trends"]["growing"])
    cols[3].metric("Declining", summary["growth_trends"]["declining"])

    st.plotly_chart(
        bar_chart(data["organizations"], "organization_name", "performance_score", "Performance Score"),
        width="stretch",
    )


def exercises_tab():
    """Exercise performance tab."""
    data = get_insights("exercises")
    summary = data["summary"]

    cols = st.columns(3)
    cols[0].metric("Exercises", summary["total_exercises"])
    cols[1].metric("Avg Completion", f"{summary['average_completion_rate']}%")
    cols[2].metric("Participations", summary["total_participations"])

    st.plotly_chart(
        bar_chart(
            data["exercises"],
            "exercise_title",
            "efficiency_score",
            "Efficiency Score",
            color_key="performance_category",
        ),
        width="stretch",
    )


def predictions_tab():
    """Predictions tab."""
    data = get_insights("predictions")
    predictions = data["predictions"]

    st.plotly_chart(
        grouped_bar_chart(
            predictions["course_success_predictions"],
            "course_title",
            {"current_completion_rate": "Current", "predicted_completion_rate": "Predicted"},
            "Course Completion Forecast (%)",
        ),
        width="stretch",
    )

    for p in predictions["course_success_predictions"]:
        with st.expander(f"**{p['course_title']}** — {p['confidence_level']} confidence"):
            st.write("**Risks:** " + (", ".join(p["risk_factors"]) or "None"))
            st.write("**Recommendations:** " + (", ".join(p["recommendations"]) or "None"))

    if predictions["skill_demand_forecast"]:
        st.subheader("🔮 Skill Demand")
        st.plotly_chart(
            grouped_bar_chart(
                predictions["skill_demand_forecast"],
                "skill_name",
                {"current_demand": "Current", "predicted_demand": "Predicted"},
            ),
            width="stretch",
        )


def explorer_tab():
    """Filter and sort any collection."""
    types = processing.get_data_types().items
    selected = st.selectbox("Data type", [t.data_type for t in types])
    fields = next(t.sort_fields for t in types if t.data_type == selected)

    col1, col2, col3 = st.columns(3)
    sort_by = col1.selectbox("Sort by", ["", *fields])
    order = col2.selectbox("Order", ["asc", "desc"])
    status = col3.text_input("Status filter")

    try:
        result = processing.process(selected, {"status": status}, sort_by, order)
    except (NotFoundError, ValidationError) as e:
        st.error(e.message)
        return

    st.caption(f"{result.count} records")
    st.dataframe(result.data, width="stretch")
    st.json(result.stats, expanded=False)


def cache_tab():
    """Cache statistics tab."""
    stats = cache.get_stats()

    cols = st.columns(3)
    cols[0].metric("Tables", stats.total_tables)
    cols[1].metric("Table Entries", stats.total_entries)
    cols[2].metric("Processor Entries", stats.processor_entries)

    rows = [{"table": name, **t.model_dump()} for name, t in stats.tables.items() if t.entries or t.total_hits]
    if rows:
        st.plotly_chart(bar_chart(rows, "table", "hit_rate", "Hit Rate (%)"), width="stretch")
        st.dataframe(pl.DataFrame(rows).sort("hit_rate", descending=True), width="stretch")

    col1, col2 = st.columns(2)
    if col1.button("Remove expired entries"):
        result = cache.cleanup()
        st.success(f"Removed {result.tables_removed + result.processor_removed} expired entries")
    if col2.button("Clear all caches"):
        cache.clear_all()
        st.cache_data.clear()
        st.success("Caches cleared")


def main():
    st.title("📊 HR Reporting")
    st.markdown("*Learning analytics across directory, courses, assessments, skills and exercises*")

    tabs = st.tabs(
        [
            "🏢 Overview",
            "📚 Courses",
            "🎯 Skills",
            "👥 Users",
            "🏛️ Organizations",
            "💻 Exercises",
            "🔮 Predictions",
            "🔎 Explorer",
            "🗄️ Cache",
        ]
    )

    with tabs[0]:
        overview_tab()
    with tabs[1]:
        courses_tab()
    with tabs[2]:
        skills_tab()
    with tabs[3]:
        users_tab()
    with tabs[4]:
        organizations_tab()
    with tabs[5]:
        exercises_tab()
    with tabs[6]:
        predictions_tab()
    with tabs[7]:
        explorer_tab()
    with tabs[8]:
        cache_tab()


if __name__ == "__main__":
    main()
