"""Marker normalization and span deletion shared by the transforms."""

from __future__ import annotations

from collections.abc import Iterable

_HORIZONTAL_WS = " \t"


def active_markers(markers: Iterable[str] | None) -> list[str]:
    """Trim markers and drop blank ones, keeping configured order."""
    if not markers:
        return []
    return [m.strip() for m in markers if m and m.strip()]


def find_earliest(text: str, markers: list[str], start: int = 0) -> tuple[int, str] | None:
    """Return ``(offset, marker)`` of the earliest marker occurrence at or after ``start``.

    On equal offsets the marker checked last wins.
    """
    best: tuple[int, str] | None = None
    for marker in markers:
        idx = text.find(marker, start)
        if idx == -1:
            continue
        if best is None or idx <= best[0]:
            best = (idx, marker)
    return best


def delete_span(text: str, start: int, end: int) -> tuple[str, int]:
    """Delete ``text[start:end]`` and return the new text and the join offset.

    Spaces and tabs directly before the span go with it when the span is
    followed by whitespace or the end of the text, so deleting a marker
    between two words leaves a single separator and never a trailing blank.
    """
    before = text[:start]
    after = text[end:]
    if not after or after[0].isspace():
        before = before.rstrip(_HORIZONTAL_WS)
    return before + after, len(before)
