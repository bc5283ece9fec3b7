"""Central configuration, constants, and shared column definitions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

# =============================================================================
# SonarQube Connection Settings
# =============================================================================
SONAR_DEFAULT_SERVER = "http://localhost:9000"
TIMEZONE = "America/Santiago"
USER_AGENT = "sonar-issues-dashboard"

# HTTP timeouts (seconds), same defaults as the SonarQube web service connector
DEFAULT_CONNECT_TIMEOUT: float = 30.0
DEFAULT_READ_TIMEOUT: float = 60.0

# In-memory search cache lifetime (seconds)
SEARCH_CACHE_TTL: float = 300.0

# Largest page size accepted by api/issues/search
MAX_PAGE_SIZE: int = 500

# =============================================================================
# Issue Web Service Endpoints
# =============================================================================
ISSUES_URL_ROOT = "/api/issues"

# action name -> (endpoint path, form field carrying the new value)
ACTION_ENDPOINTS: dict[str, tuple[str, str]] = {
    "assign": (f"{ISSUES_URL_ROOT}/assign", "assignee"),
    "plan": (f"{ISSUES_URL_ROOT}/plan", "plan"),
    "set_severity": (f"{ISSUES_URL_ROOT}/set_severity", "severity"),
}

ISSUES_SEARCH_URL = f"{ISSUES_URL_ROOT}/search"
PROFILES_SEARCH_URL = "/api/qualityprofiles/search"
COMPONENT_TREE_URL = "/api/measures/component_tree"

# =============================================================================
# Issue Lifecycle
# =============================================================================
# Only this exact status hides text ranges and flows; other resolved-looking
# statuses keep them.
CLOSED_STATUS = "CLOSED"

# Root key wrapping the attributes in single-issue responses
ISSUE_ROOT_KEY = "issue"

# Column value meaning "until the end of the line"
LINE_END: int = 999999

# =============================================================================
# Severity Configuration
# =============================================================================
SEVERITY_DISPLAY_ORDER: Sequence[str] = ("BLOCKER", "CRITICAL", "MAJOR", "MINOR", "INFO")

SEVERITY_RANK = {
    "BLOCKER": 5,
    "CRITICAL": 4,
    "MAJOR": 3,
    "MINOR": 2,
    "INFO": 1,
}

STATUS_DISPLAY_ORDER: Sequence[str] = ("OPEN", "CONFIRMED", "REOPENED", "RESOLVED", "CLOSED")

# =============================================================================
# Quality Profiles
# =============================================================================
# A profile not touched by a user for this many whole years is stagnant
STAGNANT_PROFILE_YEARS: int = 1

# =============================================================================
# Component Word Cloud
# =============================================================================
CLOUD_SIZE_LOW: int = 10
CLOUD_SIZE_HIGH: int = 24
CLOUD_COLOR_DOMAIN: Sequence[float] = (0, 33, 67, 100)
CLOUD_COLORS: Sequence[str] = ("#ee0000", "#f77700", "#80cc00", "#00aa00")
CLOUD_COLOR_UNKNOWN = "#777"
CLOUD_MAX_ITEMS: int = 100

# =============================================================================
# Column Sets
# =============================================================================
ISSUE_CORE_COLUMNS: Sequence[str] = (
    "key",
    "rule",
    "severity",
    "severity_value",
    "status",
    "component",
    "line",
    "assignee",
    "plan",
    "message",
    "location_lines",
    "has_flows",
    "creation_date",
    "update_date",
)

DISPLAY_ORDER_DETAIL: Sequence[str] = (
    "Issue",
    "severity",
    "status",
    "message",
    "component",
    "line",
    "assignee",
    "plan",
    "rule",
    "location_lines",
    "has_flows",
    "creation_date",
    "update_date",
)

DISPLAY_ORDER_ISSUE_LIST: Sequence[str] = (
    "Issue",
    "severity",
    "message",
    "assignee",
    "status",
    "component",
    "line",
    "update_date",
)

DISPLAY_ORDER_LOCATIONS: Sequence[str] = ("line", "from", "to")


@dataclass(slots=True)
class AppSettings:
    max_table_rows: int = 1000
    download_encoding: str = "utf-8"


SETTINGS = AppSettings()
