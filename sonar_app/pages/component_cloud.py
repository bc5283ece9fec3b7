"""Component cloud page: word cloud of a project's child components."""

from __future__ import annotations

import logging

import streamlit as st

from sonar_app.app import register_page
from sonar_app.core.config import CLOUD_MAX_ITEMS
from sonar_app.core.service import IssueService
from sonar_app.visual.wordcloud import cloud_words, wordcloud_png

logger = logging.getLogger(__name__)


@register_page("Component Cloud")
def component_cloud_page():
    st.title("Component Cloud")
    service: IssueService | None = st.session_state.get("issue_service")
    if service is None:
        st.warning("Initialize connection on Setup page first.")
        return
    component = st.text_input("Project or directory key", value=st.session_state.get("project_key", ""))
    size_metric = st.text_input("Size metric", value="ncloc")
    color_metric = st.text_input("Color metric", value="coverage")
    higher_is_better = st.checkbox("Higher color metric is better", value=True)
    if not (st.button("Build Cloud", type="primary") and component):
        return
    try:
        tree = service.api.component_tree(component, [size_metric, color_metric])
    except Exception as exc:
        logger.error("SonarQube API error fetching measures: %s", exc)
        st.error(f"Failed to fetch measures: {exc}")
        return

    components = (tree.get("components") or [])[:CLOUD_MAX_ITEMS]
    words = cloud_words(components, size_metric, color_metric, color_direction=1 if higher_is_better else -1)
    if words.empty:
        st.info("No components found.")
        return
    total = (tree.get("paging") or {}).get("total", len(components))
    if total > len(components):
        st.caption(f"Only the first {len(components)} of {total} components are shown.")
    png = wordcloud_png(tuple(zip(words["label"], words["font_size"], words["color"], strict=True)))
    if png:
        st.image(png)
    st.dataframe(words[["label", "size_value", "color_value", "href"]], hide_index=True)
