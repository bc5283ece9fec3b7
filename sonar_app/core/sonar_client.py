"""SonarQube web service client (issues, quality profiles, measures)."""

from __future__ import annotations

import hashlib
import json
import logging
import time
from typing import Any

import requests

from .config import (
    COMPONENT_TREE_URL,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_READ_TIMEOUT,
    ISSUE_ROOT_KEY,
    ISSUES_SEARCH_URL,
    MAX_PAGE_SIZE,
    PROFILES_SEARCH_URL,
    SEARCH_CACHE_TTL,
    USER_AGENT,
)
from .models import ActionRequest

logger = logging.getLogger(__name__)


class SonarAPI:
    """Thin ``requests`` wrapper; also the ``ActionExecutor`` used by issues.

    A user token is sent as the basic-auth login with an empty password.
    """

    def __init__(
        self,
        server: str,
        token: str | None = None,
        login: str | None = None,
        password: str | None = None,
        *,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        read_timeout: float = DEFAULT_READ_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.server = server.rstrip("/")
        self.timeout = (connect_timeout, read_timeout)
        self.session = session or requests.Session()
        if token:
            self.session.auth = (token, "")
        elif login:
            self.session.auth = (login, password or "")
        self.session.headers.update(
            {
                "Accept": "application/json",
                "Accept-Charset": "UTF-8",
                "User-Agent": USER_AGENT,
            }
        )
        # Simple in-memory cache: {(hash): (timestamp, data)}
        self._cache: dict[str, tuple[float, list]] = {}
        self._cache_ttl = SEARCH_CACHE_TTL

    def base_url(self) -> str:
        return f"{self.server}/"

    def clear_cache(self) -> None:
        """Reset the in-memory search cache."""
        self._cache.clear()

    def _cache_key(self, url: str, params: dict[str, Any]) -> str:
        payload = {"url": url, "params": params}
        return hashlib.sha256(json.dumps(payload, sort_keys=True).encode()).hexdigest()

    def _check(self, resp: requests.Response, what: str) -> None:
        if resp.status_code >= 400:
            raise RuntimeError(f"{what} failed {resp.status_code}: {resp.text[:200]}")

    def _get(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        resp = self.session.get(f"{self.server}{path}", params=params, timeout=self.timeout)
        self._check(resp, f"GET {path}")
        return resp.json()

    # ------------------ Actions ------------------
    def execute(self, request: ActionRequest) -> dict[str, Any]:
        """POST an issue action; ``None`` values go out as empty form fields."""
        form = {k: "" if v is None else v for k, v in request.data.items()}
        logger.debug("POST %s %s", request.url, form)
        resp = self.session.post(f"{self.server}{request.url}", data=form, timeout=self.timeout)
        self._check(resp, f"POST {request.url}")
        if not resp.content:
            return {}
        return resp.json()

    # ------------------ Queries ------------------
    def search_issues(
        self,
        component_keys: list[str] | None = None,
        *,
        statuses: list[str] | None = None,
        page_size: int = MAX_PAGE_SIZE,
    ) -> list[dict[str, Any]]:
        params: dict[str, Any] = {"ps": min(page_size, MAX_PAGE_SIZE)}
        if component_keys:
            params["componentKeys"] = ",".join(component_keys)
        if statuses:
            params["statuses"] = ",".join(statuses)
        key = self._cache_key(ISSUES_SEARCH_URL, params)
        now = time.time()
        cached = self._cache.get(key)
        if cached and (now - cached[0]) < self._cache_ttl:
            return cached[1]

        out: list[dict[str, Any]] = []
        page = 1
        while True:
            data = self._get(ISSUES_SEARCH_URL, {**params, "p": page})
            issues = data.get("issues") or []
            out.extend(issues)
            paging = data.get("paging") or {}
            total = paging.get("total", data.get("total", len(out)))
            if not issues or page * params["ps"] >= total:
                break
            page += 1
        self._cache[key] = (now, out)
        return out

    def fetch_issue_raw(self, issue_key: str) -> dict[str, Any]:
        """Fetch a single issue, returned in the ``{"issue": {...}}`` shape."""
        data = self._get(ISSUES_SEARCH_URL, {"issues": issue_key, "additionalFields": "_all"})
        for issue in data.get("issues") or []:
            if issue.get("key") == issue_key:
                return {ISSUE_ROOT_KEY: issue}
        raise RuntimeError(f"Issue {issue_key} not found")

    def search_profiles(self, language: str | None = None) -> list[dict[str, Any]]:
        params = {"language": language} if language else {}
        return self._get(PROFILES_SEARCH_URL, params).get("profiles") or []

    def component_tree(self, base_component: str, metric_keys: list[str]) -> dict[str, Any]:
        """Child components with their measures, plus the paging block."""
        params = {
            "component": base_component,
            "metricKeys": ",".join(metric_keys),
            "ps": MAX_PAGE_SIZE,
        }
        return self._get(COMPONENT_TREE_URL, params)
