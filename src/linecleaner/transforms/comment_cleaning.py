"""Comment cleaning: delete ``%% ... %%`` comments that contain a marker."""

from __future__ import annotations

from linecleaner.config.schema import CleanerConfig
from linecleaner.pipeline.registry import register_stage
from linecleaner.transforms.markers import active_markers, delete_span
from linecleaner.types import StageResult

COMMENT_DELIMITER = "%%"


def clean_comments(text: str, markers: list[str] | None) -> StageResult:
    """Remove each comment whose inner text contains any of ``markers``.

    Delimiters pair up in order of appearance. Comments without a marker are
    left intact; an unterminated opening delimiter ends the scan.
    """
    active = active_markers(markers)
    if not active:
        return StageResult(content=text)

    content = text
    removals = 0
    delim_len = len(COMMENT_DELIMITER)
    search_start = 0

    while search_start < len(content):
        start_idx = content.find(COMMENT_DELIMITER, search_start)
        if start_idx == -1:
            break
        end_idx = content.find(COMMENT_DELIMITER, start_idx + delim_len)
        if end_idx == -1:
            break

        inner = content[start_idx + delim_len:end_idx]
        if any(marker in inner for marker in active):
            content, search_start = delete_span(content, start_idx, end_idx + delim_len)
            removals += 1
        else:
            search_start = end_idx + delim_len

    return StageResult(content=content, removals=removals)


@register_stage("comment_cleaning")
def comment_cleaning_stage(text: str, config: CleanerConfig) -> StageResult:
    return clean_comments(text, config.comment_cleaner_strings)
