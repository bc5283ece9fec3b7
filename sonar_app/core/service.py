"""IssueService: orchestrates fetching, parsing, actions and refresh."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

import pandas as pd

from .config import ISSUE_ROOT_KEY
from .issue import Issue
from .mappers import issues_to_dataframe, map_issue
from .profiles import QualityProfile
from .sonar_client import SonarAPI

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int | None, int | None], None]


class IssueService:
    def __init__(self, api: SonarAPI):
        self.api = api

    # ------------------ Fetch Methods ------------------
    def fetch_issues(
        self,
        project_key: str,
        *,
        statuses: Sequence[str] | None = None,
        progress: ProgressCallback | None = None,
    ) -> list[Issue]:
        if progress:
            progress(f"Querying issues for {project_key}", None, None)
        raw = self.api.search_issues([project_key], statuses=list(statuses) if statuses else None)
        if progress:
            progress("Building issue models", 0, len(raw))
        issues = [map_issue(r, executor=self.api) for r in raw]
        logger.debug("Fetched %s issues for %s", len(issues), project_key)
        return issues

    def fetch_issue(self, issue_key: str) -> Issue:
        return map_issue(self.api.fetch_issue_raw(issue_key), executor=self.api)

    def fetch_profiles(self, language: str | None = None) -> list[QualityProfile]:
        return [QualityProfile.from_raw(p) for p in self.api.search_profiles(language)]

    def issues_frame(self, issues: Sequence[Issue]) -> pd.DataFrame:
        return issues_to_dataframe(issues)

    # ------------------ Actions ------------------
    def assign(self, issue: Issue, assignee: str | None = None) -> Issue:
        logger.info("Assigning %s to %s", issue.key, assignee or "(nobody)")
        return self._refresh(issue, issue.assign(assignee))

    def plan(self, issue: Issue, plan: str | None = None) -> Issue:
        logger.info("Planning %s in %s", issue.key, plan or "(no plan)")
        return self._refresh(issue, issue.plan(plan))

    def set_severity(self, issue: Issue, severity: str | None = None) -> Issue:
        logger.info("Setting severity of %s to %s", issue.key, severity)
        return self._refresh(issue, issue.set_severity(severity))

    def _refresh(self, issue: Issue, response: Any) -> Issue:
        """Reload the model from the action response, or re-fetch it."""
        if isinstance(response, dict) and isinstance(response.get(ISSUE_ROOT_KEY), dict):
            issue.reset(issue.parse(response))
            return issue
        logger.debug("Action response for %s carried no issue; re-fetching", issue.key)
        if hasattr(self.api, "clear_cache"):
            self.api.clear_cache()
        issue.reset(issue.parse(self.api.fetch_issue_raw(issue.key)))
        return issue
