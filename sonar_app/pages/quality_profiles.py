"""Quality profiles page: profile picker and profile header."""

from __future__ import annotations

import logging

import streamlit as st

from sonar_app.app import register_page
from sonar_app.core.profiles import QualityProfile, build_header, layout_visibility
from sonar_app.core.service import IssueService

logger = logging.getLogger(__name__)


def render_profile_header(profile: QualityProfile, server: str) -> None:
    ctx = build_header(profile)
    base = server.rstrip("/") + "/profiles"
    st.caption(f"[Quality Profiles]({base}) / [{ctx.language_name}]({base}{ctx.language_url})")
    st.header(ctx.title)
    cols = st.columns(3)
    updated = cols[0].warning if ctx.update_warning else cols[0].write
    updated(f"Updated: {ctx.updated_label}")
    used = cols[1].warning if ctx.usage_warning else cols[1].write
    used(f"Used: {ctx.used_label}")
    cols[2].link_button("Changelog", f"{base}{ctx.changelog_url}")


@register_page("Quality Profiles")
def quality_profiles_page():
    st.title("Quality Profiles")
    service: IssueService | None = st.session_state.get("issue_service")
    if service is None:
        st.warning("Initialize connection on Setup page first.")
        return
    language = st.text_input("Language (optional)", value="")
    if st.button("Fetch Profiles", type="primary"):
        try:
            st.session_state["profiles"] = service.fetch_profiles(language or None)
        except Exception as exc:
            logger.error("SonarQube API error fetching profiles: %s", exc)
            st.error(f"Failed to fetch profiles: {exc}")
            return

    profiles: list[QualityProfile] = st.session_state.get("profiles") or []
    visible = layout_visibility(profiles)
    if not visible["header"]:
        st.info("No quality profiles loaded.")
        return
    labels = [f"{p.name} ({p.language_name})" for p in profiles]
    choice = st.selectbox("Profile", labels)
    profile = profiles[labels.index(choice)]
    render_profile_header(profile, st.session_state.get("sonar_server", ""))
    if visible["details"]:
        st.metric("Active rules", profile.active_rule_count)
