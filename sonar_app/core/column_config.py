"""Load and expose column configuration from YAML (with fallbacks)."""

from __future__ import annotations

from pathlib import Path

import yaml

from .config import DISPLAY_ORDER_DETAIL, DISPLAY_ORDER_ISSUE_LIST, DISPLAY_ORDER_LOCATIONS, ISSUE_CORE_COLUMNS

_CACHE: dict[str, list[str]] | None = None


def _defaults() -> dict[str, list[str]]:
    return {
        "detail": list(DISPLAY_ORDER_DETAIL),
        "core": list(ISSUE_CORE_COLUMNS),
        "issue_list": list(DISPLAY_ORDER_ISSUE_LIST),
        "locations": list(DISPLAY_ORDER_LOCATIONS),
    }


def load_column_sets(base_path: str | Path | None = None, *, reload: bool = False):
    global _CACHE
    if _CACHE is not None and not reload:
        return _CACHE
    base = Path(base_path or Path(__file__).resolve().parent.parent)
    yaml_path = base / "columns.yaml"
    sets = _defaults()
    if yaml_path.exists():
        try:
            data = yaml.safe_load(yaml_path.read_text()) or {}
        except yaml.YAMLError:
            data = {}
        column_sets = data.get("sets") if isinstance(data, dict) else None
        if not isinstance(column_sets, dict):
            column_sets = {}
        for name, cols in column_sets.items():
            if isinstance(cols, list) and cols:
                sets[name] = [str(c) for c in cols]
    _CACHE = sets
    return _CACHE


def get_columns(set_name: str) -> list[str]:
    sets = load_column_sets()
    return sets.get(set_name, [])
