"""Issue detail page: highlighted locations and assign/plan/severity actions."""

from __future__ import annotations

import logging

import streamlit as st

from sonar_app.app import register_page
from sonar_app.core.config import SEVERITY_DISPLAY_ORDER
from sonar_app.core.issue import Issue
from sonar_app.core.service import IssueService
from sonar_app.visual.tables import render_locations

logger = logging.getLogger(__name__)


def _run_action(label: str, action) -> None:
    try:
        action()
        st.success(f"{label} done.")
    except Exception as exc:
        logger.error("%s failed: %s", label, exc)
        st.error(f"{label} failed: {exc}")


@register_page("Issue Detail")
def issue_detail_page():
    st.title("Issue Detail")
    service: IssueService | None = st.session_state.get("issue_service")
    if service is None:
        st.warning("Initialize connection on Setup page first.")
        return
    key = st.text_input("Issue key", value=st.session_state.get("issue_key", ""))
    if st.button("Load Issue", type="primary") and key:
        try:
            st.session_state["issue"] = service.fetch_issue(key)
            st.session_state["issue_key"] = key
        except Exception as exc:
            logger.error("SonarQube API error fetching %s: %s", key, exc)
            st.error(f"Failed to load issue {key}: {exc}")
            return

    issue: Issue | None = st.session_state.get("issue")
    if issue is None:
        st.info("No issue loaded yet.")
        return

    st.subheader(issue.get("message") or issue.key)
    cols = st.columns(4)
    cols[0].metric("Severity", issue.get("severity") or "-")
    cols[1].metric("Status", issue.status or "-")
    cols[2].metric("Assignee", issue.get("assignee") or "Unassigned")
    cols[3].metric("Flows", len(issue.flows))
    st.caption(issue.get("component") or "")
    render_locations(issue.get_linear_locations())

    st.markdown("---")
    with st.form("assign_form"):
        assignee = st.text_input("Assignee login (empty to unassign)", value=issue.get("assignee") or "")
        if st.form_submit_button("Assign"):
            _run_action("Assign", lambda: service.assign(issue, assignee or None))
    with st.form("plan_form"):
        plan = st.text_input("Action plan key (empty to unplan)", value=issue.get("actionPlan") or "")
        if st.form_submit_button("Plan"):
            _run_action("Plan", lambda: service.plan(issue, plan or None))
    with st.form("severity_form"):
        current = issue.get("severity")
        options = list(SEVERITY_DISPLAY_ORDER)
        severity = st.selectbox("Severity", options, index=options.index(current) if current in options else 0)
        if st.form_submit_button("Set Severity"):
            _run_action("Set severity", lambda: service.set_severity(issue, severity))
