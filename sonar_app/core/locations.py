"""Split a text range into one highlight segment per covered line.

The renderer draws a single line at a time and knows the real line lengths; this
module does not. Partial first/last lines keep the range's own columns, every
other column bound is either ``0`` or ``LINE_END``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import pandas as pd

from .config import DISPLAY_ORDER_LOCATIONS, LINE_END
from .models import LineSegment, TextRange


def decompose(text_range: TextRange | Mapping[str, Any] | None) -> list[LineSegment]:
    """Return the ordered per-line segments covered by ``text_range``.

    Parameters
    ----------
    text_range : TextRange, mapping or None
        Range to split. Raw ``textRange`` mappings are converted with
        :meth:`TextRange.from_dict`. ``None`` yields no segments.

    Returns
    -------
    list[LineSegment]
        One segment per line from ``start_line`` to ``end_line``.

    Examples
    --------
    >>> [s.to_dict() for s in decompose(TextRange(4, 6, 5, 10))]
    [{'line': 4, 'from': 5, 'to': 999999}, {'line': 5, 'from': 0, 'to': 999999}, {'line': 6, 'from': 0, 'to': 10}]
    """
    if text_range is None:
        return []
    if not isinstance(text_range, TextRange):
        text_range = TextRange.from_dict(text_range)

    start, end = text_range.start_line, text_range.end_line
    if start == end:
        return [LineSegment(start, text_range.start_offset, text_range.end_offset)]

    segments = [LineSegment(start, text_range.start_offset, LINE_END)]
    segments.extend(LineSegment(line, 0, LINE_END) for line in range(start + 1, end))
    segments.append(LineSegment(end, 0, text_range.end_offset))
    return segments


def segments_frame(segments: Iterable[LineSegment]) -> pd.DataFrame:
    rows = [s.to_dict() for s in segments]
    return pd.DataFrame(rows, columns=list(DISPLAY_ORDER_LOCATIONS))
