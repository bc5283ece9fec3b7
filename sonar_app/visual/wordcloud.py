"""Component word cloud: label/size/colour per component, plus a cached PNG."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from io import BytesIO
from typing import Any
from urllib.parse import quote

import numpy as np
import pandas as pd
import streamlit as st
from wordcloud import WordCloud

from sonar_app.core.config import (
    CLOUD_COLOR_DOMAIN,
    CLOUD_COLOR_UNKNOWN,
    CLOUD_COLORS,
    CLOUD_SIZE_HIGH,
    CLOUD_SIZE_LOW,
)

CLOUD_COLUMNS = ["key", "name", "label", "href", "tooltip", "size_value", "color_value", "font_size", "color"]


def format_directory(path: str) -> str:
    dirs = path.split("/")
    if len(dirs) > 2:
        return ".../" + dirs[-1]
    return path


def measure_value(component: dict[str, Any], metric: str) -> float | None:
    """Numeric measure of ``metric`` on a component_tree entry, if any."""
    measures = component.get("measures") or []
    if isinstance(measures, dict):
        raw = (measures.get(metric) or {}).get("value")
    else:
        raw = next((m.get("value") for m in measures if m.get("metric") == metric), None)
    if raw is None:
        return None
    try:
        return float(raw)
    except (TypeError, ValueError):
        return None


def _hex_to_rgb(color: str) -> tuple[int, int, int]:
    color = color.lstrip("#")
    if len(color) == 3:
        color = "".join(ch * 2 for ch in color)
    return int(color[0:2], 16), int(color[2:4], 16), int(color[4:6], 16)


def scale_color(value: float | None, colors: Sequence[str]) -> str:
    if value is None or pd.isna(value):
        return CLOUD_COLOR_UNKNOWN
    channels = np.array([_hex_to_rgb(c) for c in colors], dtype=float)
    rgb = [int(round(np.interp(value, CLOUD_COLOR_DOMAIN, channels[:, i]))) for i in range(3)]
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def scale_size(values: pd.Series) -> pd.Series:
    """Linear map of the value extent onto [CLOUD_SIZE_LOW, CLOUD_SIZE_HIGH]."""
    numeric = pd.to_numeric(values, errors="coerce")
    low, high = numeric.min(), numeric.max()
    if pd.isna(low) or high == low:
        return pd.Series(float(CLOUD_SIZE_LOW), index=values.index)
    ratio = (numeric - low) / (high - low)
    return (CLOUD_SIZE_LOW + ratio * (CLOUD_SIZE_HIGH - CLOUD_SIZE_LOW)).fillna(CLOUD_SIZE_LOW)


def cloud_words(
    components: Iterable[dict[str, Any]],
    size_metric: str,
    color_metric: str,
    *,
    color_direction: int = 1,
    base_url: str = "/dashboard/index",
) -> pd.DataFrame:
    """One row per component, sorted case-insensitively by name.

    ``color_direction`` follows the metric's direction: ``1`` means higher is
    better so low values are drawn red; anything else reverses the palette.
    """
    colors = list(CLOUD_COLORS) if color_direction == 1 else list(reversed(CLOUD_COLORS))
    rows = []
    for comp in components:
        name = comp.get("name") or comp.get("key") or ""
        size_value = measure_value(comp, size_metric)
        color_value = measure_value(comp, color_metric)
        rows.append(
            {
                "key": comp.get("key"),
                "name": name,
                "label": format_directory(name) if comp.get("qualifier") == "DIR" else name,
                "href": f"{base_url}?id={quote(str(comp.get('key') or ''), safe='')}",
                "tooltip": f"{name}\n{color_metric}: {color_value}\n{size_metric}: {size_value}",
                "size_value": size_value,
                "color_value": color_value,
                "color": scale_color(color_value, colors),
            }
        )
    if not rows:
        return pd.DataFrame(columns=CLOUD_COLUMNS)
    df = pd.DataFrame(rows)
    df["font_size"] = scale_size(df["size_value"])
    df = df.assign(_sort=df["name"].str.lower()).sort_values("_sort", kind="stable").drop(columns="_sort")
    return df[CLOUD_COLUMNS].reset_index(drop=True)


@st.cache_data(show_spinner=False)
def wordcloud_png(
    words: tuple[tuple[str, float, str], ...], width: int = 600, height: int = 260, bg: str = "white"
) -> bytes | None:
    """Render ``(label, font_size, color)`` triples to PNG bytes."""
    if not words:
        return None
    sizes: dict[str, float] = {}
    colors: dict[str, str] = {}
    for label, size, color in words:
        if label and size > sizes.get(label, 0):
            sizes[label] = float(size)
            colors[label] = color
    if not sizes:
        return None

    def _color(word, **kwargs):
        return colors.get(word, CLOUD_COLOR_UNKNOWN)

    wc = WordCloud(
        width=width,
        height=height,
        background_color=bg,
        prefer_horizontal=1.0,
        relative_scaling=1.0,
        color_func=_color,
    ).generate_from_frequencies(sizes)
    bio = BytesIO()
    wc.to_image().save(bio, format="PNG")
    return bio.getvalue()
