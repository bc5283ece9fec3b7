"""Value types shared by the issue model, the range decomposer and the client."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class TextRange:
    """Span of source text: start/end line (1-based) and start/end column."""

    start_line: int
    end_line: int
    start_offset: int
    end_offset: int

    def __post_init__(self) -> None:
        if self.start_line < 1:
            raise ValueError(f"start_line must be >= 1, got {self.start_line}")
        if self.start_line > self.end_line:
            raise ValueError(f"start_line {self.start_line} is after end_line {self.end_line}")
        if self.start_offset < 0 or self.end_offset < 0:
            raise ValueError(f"offsets must be non-negative, got {self.start_offset}/{self.end_offset}")

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> TextRange:
        """Build from the server's camelCase ``textRange`` object."""
        try:
            return cls(
                start_line=int(raw["startLine"]),
                end_line=int(raw["endLine"]),
                start_offset=int(raw["startOffset"]),
                end_offset=int(raw["endOffset"]),
            )
        except KeyError as exc:
            raise ValueError(f"textRange is missing {exc.args[0]!r}") from exc

    def to_dict(self) -> dict[str, int]:
        return {
            "startLine": self.start_line,
            "endLine": self.end_line,
            "startOffset": self.start_offset,
            "endOffset": self.end_offset,
        }


@dataclass(frozen=True, slots=True)
class LineSegment:
    line: int
    from_: int
    to: int

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "from": self.from_, "to": self.to}


@dataclass(frozen=True, slots=True)
class ActionRequest:
    """One remote issue action: endpoint path plus form payload."""

    url: str
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"url": self.url, "data": dict(self.data)}
