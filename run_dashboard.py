"""Convenience launcher for the Streamlit app.

Usage:
  streamlit run run_dashboard.py

Automatically imports every module in ``sonar_app/pages`` so each page
decorated with ``@register_page`` registers itself without manual edits here.
"""

import logging
from importlib import import_module
from pathlib import Path

import streamlit as st

from sonar_app.app import main

logger = logging.getLogger(__name__)

st.set_page_config(layout="wide")


def _auto_init_issue_service():
    """Initialize the SonarQube service from Streamlit secrets if available."""
    if "issue_service" in st.session_state:
        return

    from sonar_app.pages.setup import sonar_secrets

    server, token = sonar_secrets()
    if server and token:
        try:
            from sonar_app.core.service import IssueService
            from sonar_app.core.sonar_client import SonarAPI

            st.session_state["sonar_server"] = server
            st.session_state["issue_service"] = IssueService(SonarAPI(server, token=token))
            st.sidebar.success("SonarQube connection ready.")
        except Exception as e:
            logger.error("SonarQube connection failed: %s", e)
            st.sidebar.error(f"SonarQube connection failed: {e}")
            st.session_state.pop("issue_service", None)
    else:
        st.sidebar.warning("SonarQube secrets not found. Please use the Setup page.")


PAGES_DIR = Path(__file__).parent / "sonar_app" / "pages"
for py in sorted(PAGES_DIR.glob("[!_]*.py")):
    mod_name = f"sonar_app.pages.{py.stem}"
    try:
        import_module(mod_name)
    except Exception as e:  # pragma: no cover - defensive
        logger.error("Failed importing page %s: %s", mod_name, e)

_auto_init_issue_service()

if __name__ == "__main__":
    main()
