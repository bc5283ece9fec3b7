"""Application entry point: page registry and router."""

from __future__ import annotations

import streamlit as st

PAGES = {}

PREFERRED_ORDER = [
    "Issues",
    "Issue Detail",
    "Quality Profiles",
    "Component Cloud",
    "Setup / Connection",
]


def register_page(label):
    def decorator(func):
        PAGES[label] = func
        return func

    return decorator


def ordered_pages(labels) -> list[str]:
    """Preferred pages first, then any others alphabetically."""
    ordered = [name for name in PREFERRED_ORDER if name in labels]
    trailing = sorted(name for name in labels if name not in PREFERRED_ORDER)
    return ordered + trailing


def main():
    st.sidebar.title("Sonar Issues Dashboard")
    pages = ordered_pages(list(PAGES.keys()))
    if not pages:
        st.write("No pages registered yet.")
        return
    # If setup exists and no issue_service yet, default to setup page
    if "Setup / Connection" in pages and "issue_service" not in st.session_state:
        default = pages.index("Setup / Connection")
    else:
        default = 0
    page = st.sidebar.selectbox("Page", pages, index=default)
    PAGES[page]()


if __name__ == "__main__":
    main()
