"""Line-level filters: marked lines, empty list items, finished tasks."""

from __future__ import annotations

import re
from collections.abc import Callable

from linecleaner.config.schema import CleanerConfig
from linecleaner.pipeline.registry import register_stage
from linecleaner.transforms.markers import active_markers
from linecleaner.types import StageResult

# "-", "- ", "- [ ]", "- [x]" with nothing after the bracket. The bracket group is
# greedy, so any line that opens with "[" and ends with "]" also counts as empty:
# "- [[My Note]]" and "- [x] text [y]" are removed.
_EMPTY_LIST_ITEM_RE = re.compile(r"^-\s*(\[.*\])?$")
# "- [x] ..." / "- [X] ..."
_FINISHED_TASK_RE = re.compile(r"^-\s*\[x\]", re.IGNORECASE)


def _drop_lines(text: str, predicate: Callable[[str], bool]) -> StageResult:
    """Drop every line for which ``predicate`` is true."""
    kept: list[str] = []
    removals = 0
    for line in text.split("\n"):
        if predicate(line):
            removals += 1
        else:
            kept.append(line)
    return StageResult(content="\n".join(kept), removals=removals)


def remove_marked_lines(text: str, markers: list[str] | None) -> StageResult:
    """Remove lines containing a marker, one pass per marker.

    Removals are summed over the passes.
    """
    content = text
    removals = 0
    for marker in active_markers(markers):
        result = _drop_lines(content, lambda line, m=marker: m in line)
        content = result.content
        removals += result.removals
    return StageResult(content=content, removals=removals)


def remove_empty_list_items(text: str) -> StageResult:
    """Remove bullets with no text, such as ``- `` or ``- [ ]``."""
    return _drop_lines(text, lambda line: _EMPTY_LIST_ITEM_RE.match(line.strip()) is not None)


def remove_finished_tasks(text: str) -> StageResult:
    """Remove checked tasks (``- [x]``), whatever follows the checkbox."""
    return _drop_lines(text, lambda line: _FINISHED_TASK_RE.match(line.strip()) is not None)


@register_stage("single_line_removal")
def single_line_removal_stage(text: str, config: CleanerConfig) -> StageResult:
    return remove_marked_lines(text, config.removal_strings)


@register_stage("empty_list_items")
def empty_list_items_stage(text: str, config: CleanerConfig) -> StageResult:
    return remove_empty_list_items(text)


@register_stage("finished_tasks")
def finished_tasks_stage(text: str, config: CleanerConfig) -> StageResult:
    return remove_finished_tasks(text)
