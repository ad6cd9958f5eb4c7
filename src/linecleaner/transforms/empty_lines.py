"""Empty line limiting: cap runs of consecutive blank lines."""

from __future__ import annotations

from linecleaner.config.schema import CleanerConfig
from linecleaner.pipeline.registry import register_stage
from linecleaner.types import StageResult


def limit_empty_lines(text: str, max_consecutive: int) -> StageResult:
    """Keep at most ``max_consecutive`` blank lines in a row.

    A line is blank when it is empty after stripping whitespace. 0 removes
    every blank line.
    """
    max_consecutive = max(0, max_consecutive)
    kept: list[str] = []
    consecutive = 0
    removals = 0

    for line in text.split("\n"):
        if line.strip():
            consecutive = 0
            kept.append(line)
            continue
        consecutive += 1
        if consecutive <= max_consecutive:
            kept.append(line)
        else:
            removals += 1

    return StageResult(content="\n".join(kept), removals=removals)


@register_stage("empty_line_limiting")
def empty_line_limiting_stage(text: str, config: CleanerConfig) -> StageResult:
    return limit_empty_lines(text, config.max_consecutive_empty_lines)
