"""Connection setup page: collect SonarQube credentials and initialize IssueService."""

from __future__ import annotations

import logging

import streamlit as st

from sonar_app.app import register_page
from sonar_app.core.config import SONAR_DEFAULT_SERVER
from sonar_app.core.service import IssueService
from sonar_app.core.sonar_client import SonarAPI

logger = logging.getLogger(__name__)


def sonar_secrets() -> tuple[str | None, str | None]:
    """Server URL and token from a ``[sonar]`` section or top-level secrets."""
    section = st.secrets.get("sonar", {})
    server = section.get("SONAR_URL") or st.secrets.get("SONAR_URL")
    token = section.get("SONAR_TOKEN") or st.secrets.get("SONAR_TOKEN")
    return server, token


@register_page("Setup / Connection")
def setup_page():
    st.title("SonarQube Connection Setup")
    st.caption("Enter a user token (use secrets manager in production).")

    secret_server, secret_token = sonar_secrets()
    server = st.text_input(
        "SonarQube Server URL",
        value=st.session_state.get("sonar_server") or secret_server or SONAR_DEFAULT_SERVER,
    )
    token = st.text_input("User Token", type="password", value=secret_token or "")
    ttl = st.number_input("Client cache TTL (seconds)", min_value=60, max_value=3600, value=300)
    init_btn = st.button("Initialize Connection", type="primary")

    if init_btn:
        if not (server and token):
            st.error("Server and token are required.")
            return
        try:
            api = SonarAPI(server, token=token)
            api._cache_ttl = float(ttl)
            st.session_state["sonar_server"] = server
            st.session_state["issue_service"] = IssueService(api)
            st.success("Connection initialized.")
        except Exception as e:  # pragma: no cover
            logger.error("Failed to initialize SonarQube client: %s", e)
            st.error(f"Failed to initialize SonarQube client: {e}")

    if "issue_service" in st.session_state:
        st.info("IssueService ready.")
