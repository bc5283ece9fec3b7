"""Issues page: project issue list with a severity breakdown."""

from __future__ import annotations

import logging

import streamlit as st

from sonar_app.app import register_page
from sonar_app.core.config import SETTINGS, STATUS_DISPLAY_ORDER
from sonar_app.core.service import IssueService
from sonar_app.visual.charts import severity_breakdown
from sonar_app.visual.tables import render_issue_table

logger = logging.getLogger(__name__)


@register_page("Issues")
def issues_page():
    st.title("Issues")
    service: IssueService | None = st.session_state.get("issue_service")
    if service is None:
        st.warning("Initialize connection on Setup page first.")
        return
    project = st.text_input("Project key", value=st.session_state.get("project_key", ""))
    statuses = st.multiselect("Statuses", list(STATUS_DISPLAY_ORDER), default=["OPEN", "CONFIRMED", "REOPENED"])
    if st.button("Fetch Issues", type="primary") and project:
        st.session_state["project_key"] = project
        try:
            with st.spinner(f"Fetching issues for {project}"):
                issues = service.fetch_issues(project, statuses=statuses)
            st.session_state["issues"] = issues
        except Exception as exc:
            logger.error("SonarQube API error fetching issues: %s", exc)
            st.error(f"Failed to fetch issues: {exc}")
            return

    issues = st.session_state.get("issues") or []
    if not issues:
        st.info("No issues loaded yet.")
        return
    df = service.issues_frame(issues)
    chart = severity_breakdown(df)
    if chart is not None:
        st.altair_chart(chart, use_container_width=True)
    render_issue_table(df, st.session_state.get("sonar_server", ""), limit=SETTINGS.max_table_rows)
    csv = df.to_csv(index=False).encode(SETTINGS.download_encoding)
    st.download_button(
        "Download Issues CSV",
        data=csv,
        file_name=f"sonar_issues_{st.session_state.get('project_key', 'project')}.csv",
        mime="text/csv",
    )
