"""Issue model: payload normalization, closed-issue suppression and actions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from .config import ACTION_ENDPOINTS, CLOSED_STATUS, ISSUE_ROOT_KEY, ISSUES_URL_ROOT
from .locations import decompose
from .models import ActionRequest, LineSegment, TextRange


class ActionExecutor(Protocol):
    """Anything able to run a remote issue action (see ``SonarAPI``)."""

    def execute(self, request: ActionRequest) -> Any: ...


def unwrap_payload(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Return the attribute mapping of a bare or ``{"issue": {...}}`` payload."""
    wrapped = payload.get(ISSUE_ROOT_KEY)
    if isinstance(wrapped, Mapping):
        return dict(wrapped)
    return dict(payload)


def suppress_closed(attributes: dict[str, Any]) -> dict[str, Any]:
    """Drop location data from closed issues (in place, returns the mapping)."""
    if attributes.get("status") == CLOSED_STATUS:
        attributes["textRange"] = None
        attributes["flows"] = []
    return attributes


class Issue:
    """Attribute bag for one SonarQube issue.

    Attributes are kept exactly as the server sent them (camelCase keys, extra
    keys included). Closed issues never hold a text range or flows, however the
    attributes arrive. State only changes through ``reset``/``set``; the action
    methods hand a request to the executor and leave the attributes alone.
    """

    def __init__(self, attributes: Mapping[str, Any] | None = None, executor: ActionExecutor | None = None):
        self._attributes: dict[str, Any] = suppress_closed(dict(attributes or {}))
        self.executor = executor

    def __repr__(self) -> str:
        return f"Issue(key={self.key!r}, status={self.status!r})"

    @staticmethod
    def url_root() -> str:
        return ISSUES_URL_ROOT

    # ------------------ Attributes ------------------
    def parse(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        return suppress_closed(unwrap_payload(payload))

    def reset(self, attributes: Mapping[str, Any]) -> None:
        self._attributes = suppress_closed(dict(attributes))

    def set(self, **attributes: Any) -> None:
        self._attributes.update(attributes)
        suppress_closed(self._attributes)

    def get(self, name: str, default: Any = None) -> Any:
        return self._attributes.get(name, default)

    def to_json(self) -> dict[str, Any]:
        return dict(self._attributes)

    @property
    def key(self) -> str | None:
        return self._attributes.get("key")

    @property
    def status(self) -> str | None:
        return self._attributes.get("status")

    @property
    def text_range(self) -> TextRange | None:
        raw = self._attributes.get("textRange")
        if not raw:
            return None
        return TextRange.from_dict(raw)

    @property
    def flows(self) -> list[Any]:
        return list(self._attributes.get("flows") or [])

    def get_linear_locations(self) -> list[LineSegment]:
        return decompose(self.text_range)

    # ------------------ Actions ------------------
    def assign(self, assignee: str | None = None) -> Any:
        return self._dispatch("assign", assignee)

    def plan(self, plan: str | None = None) -> Any:
        return self._dispatch("plan", plan)

    def set_severity(self, severity: str | None = None) -> Any:
        return self._dispatch("set_severity", severity)

    def _dispatch(self, action: str, value: Any) -> Any:
        url, field = ACTION_ENDPOINTS[action]
        return self._action(ActionRequest(url=url, data={"issue": self.key, field: value}))

    def _action(self, request: ActionRequest) -> Any:
        if self.executor is None:
            raise RuntimeError(f"No action executor bound to issue {self.key}")
        return self.executor.execute(request)
