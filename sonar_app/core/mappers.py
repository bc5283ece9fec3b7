"""Mapping raw SonarQube issue JSON into Issue models and DataFrames."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import pandas as pd

from .config import ISSUE_CORE_COLUMNS, SEVERITY_RANK
from .issue import ActionExecutor, Issue

logger = logging.getLogger(__name__)


def map_severity(severity: str | None) -> int:
    if not severity:
        return -99
    return SEVERITY_RANK.get(str(severity).strip().upper(), -99)


def map_issue(raw: dict[str, Any], executor: ActionExecutor | None = None) -> Issue:
    issue = Issue(executor=executor)
    issue.reset(issue.parse(raw))
    return issue


def _location_lines(issue: Issue) -> int:
    try:
        return len(issue.get_linear_locations())
    except ValueError as exc:
        logger.warning("Ignoring text range of issue %s: %s", issue.key, exc)
        return 0


def _parse_dt(val):
    if not val:
        return None
    ts = pd.to_datetime(val, utc=True, errors="coerce")
    if ts is None or pd.isna(ts):
        return None
    return ts.to_pydatetime()


def issues_to_dataframe(issues: Iterable[Issue]) -> pd.DataFrame:
    rows = []
    for i in issues:
        rows.append(
            {
                "key": i.key,
                "rule": i.get("rule"),
                "severity": i.get("severity"),
                "severity_value": map_severity(i.get("severity")),
                "status": i.status,
                "component": i.get("component"),
                "line": i.get("line"),
                "assignee": i.get("assignee") or "Unassigned",
                "plan": i.get("actionPlan") or i.get("plan"),
                "message": i.get("message"),
                "location_lines": _location_lines(i),
                "has_flows": bool(i.flows),
                "creation_date": _parse_dt(i.get("creationDate")),
                "update_date": _parse_dt(i.get("updateDate")),
            }
        )
    if not rows:
        return pd.DataFrame(columns=list(ISSUE_CORE_COLUMNS))
    df = pd.DataFrame(rows)
    return df.sort_values(by=["severity_value", "key"], ascending=[False, True], kind="stable").reset_index(
        drop=True
    )
