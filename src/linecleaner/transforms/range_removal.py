"""Range removal: delete everything between a start and an end marker."""

from __future__ import annotations

from linecleaner.config.schema import CleanerConfig
from linecleaner.pipeline.registry import register_stage
from linecleaner.transforms.markers import active_markers, delete_span, find_earliest
from linecleaner.types import StageResult


def remove_ranges(
    text: str,
    start_markers: list[str] | None,
    end_markers: list[str] | None,
) -> StageResult:
    """Remove every span from a start marker through the next end marker.

    Ranges are found left to right: the earliest start marker wins, then the
    earliest end marker at or after its end. Both markers are removed with
    the enclosed text; partial lines around them are kept. A start marker
    with no end marker after it removes the rest of the document. Without
    both start and end markers configured the text is returned unchanged.
    """
    starts = active_markers(start_markers)
    ends = active_markers(end_markers)
    if not starts or not ends:
        return StageResult(content=text)

    content = text
    removals = 0
    while True:
        start = find_earliest(content, starts)
        if start is None:
            break
        start_idx, start_marker = start

        end = find_earliest(content, ends, start_idx + len(start_marker))
        if end is None:
            content, _ = delete_span(content, start_idx, len(content))
            removals += 1
            break

        end_idx, end_marker = end
        content, _ = delete_span(content, start_idx, end_idx + len(end_marker))
        removals += 1

    return StageResult(content=content, removals=removals)


@register_stage("range_removal")
def range_removal_stage(text: str, config: CleanerConfig) -> StageResult:
    return remove_ranges(text, config.range_start_strings, config.range_end_strings)
