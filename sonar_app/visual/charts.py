"""Chart builders (Altair) for issue breakdowns."""

from __future__ import annotations

import altair as alt
import pandas as pd

from sonar_app.core.config import SEVERITY_DISPLAY_ORDER

SEVERITY_COLORS = ["#d02f3a", "#ee5c41", "#f4a340", "#7ab2d4", "#b4b4b4"]


def _format_issue_list(group: pd.DataFrame, limit: int = 10) -> str:
    keys = [str(k) for k in group["key"].dropna().unique()[:limit]]
    more = group["key"].nunique() - len(keys)
    return "\n".join(keys) + (f"\n(+{more} more)" if more > 0 else "")


def severity_breakdown(df: pd.DataFrame):
    if df.empty or "severity" not in df.columns:
        return None
    agg = (
        df.groupby("severity")
        .apply(
            lambda g: pd.Series({"count": int(len(g)), "issues": _format_issue_list(g)}),
            include_groups=False,
        )
        .reset_index()
    )
    order = [s for s in SEVERITY_DISPLAY_ORDER if s in set(agg["severity"])]
    order += sorted(s for s in agg["severity"] if s not in order)
    chart = (
        alt.Chart(agg)
        .mark_bar()
        .encode(
            x=alt.X("severity:N", title="Severity", sort=order),
            y=alt.Y("count:Q", title="Issues"),
            color=alt.Color(
                "severity:N",
                scale=alt.Scale(domain=list(SEVERITY_DISPLAY_ORDER), range=SEVERITY_COLORS),
                legend=None,
            ),
            tooltip=[
                alt.Tooltip("severity:N", title="Severity"),
                alt.Tooltip("count:Q", title="Count"),
                alt.Tooltip("issues:N", title="Issues"),
            ],
        )
        .properties(height=220)
    )
    return chart
