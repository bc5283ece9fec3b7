"""Reusable table helpers for Streamlit rendering."""

from __future__ import annotations

from urllib.parse import quote

import pandas as pd
import streamlit as st

from sonar_app.core.column_config import get_columns
from sonar_app.core.locations import segments_frame
from sonar_app.core.models import LineSegment


def add_issue_link(df: pd.DataFrame, server: str, key_col: str = "key", label: str = "Issue"):
    if df.empty or key_col not in df.columns:
        return df, {}
    out = df.copy()
    base = server.rstrip("/")
    out[label] = (
        out[key_col]
        .astype(str)
        .apply(lambda k: f"{base}/project/issues?issues={quote(k, safe='')}" if k and k != "nan" else "")
    )
    cfg = {
        label: st.column_config.LinkColumn(
            label,
            display_text=r"issues=(.*)$",
            help="Open in SonarQube",
            width="medium",
        )
    }
    return out, cfg


def prepare_issue_table(df: pd.DataFrame, server: str, *, set_name: str = "issue_list"):
    if df.empty:
        return df, [], {}
    table, cfg = add_issue_link(df, server)
    display_cols = [col for col in get_columns(set_name) if col in table.columns]
    if not display_cols:
        display_cols = [col for col in table.columns if col != "key"]
    return table, display_cols, cfg


def render_issue_table(df: pd.DataFrame, server: str, limit: int = 1000):
    table, cols, cfg = prepare_issue_table(df, server)
    if not cols:
        st.info("No issues to display.")
        return
    st.dataframe(table[cols].head(limit), hide_index=True, column_config=cfg)


def render_locations(segments: list[LineSegment]):
    if not segments:
        st.caption("No location (closed issue or file-level issue).")
        return
    cols = get_columns("locations")
    st.dataframe(segments_frame(segments)[cols], hide_index=True)
