"""Link cleaning: turn links on marked lines into backticked plain text."""

from __future__ import annotations

import re

from linecleaner.config.schema import CleanerConfig
from linecleaner.pipeline.registry import register_stage
from linecleaner.transforms.markers import active_markers, delete_span
from linecleaner.types import StageResult

# [[target]] or [[target|display]]
_WIKI_LINK_RE = re.compile(r"\[\[([^\]|]+)(?:\|([^\]]+))?\]\]")
# [text](url)
_MARKDOWN_LINK_RE = re.compile(r"\[([^\]]+)\]\([^)]+\)")


def convert_links(line: str) -> str:
    """Replace wiki links and markdown links in ``line`` with backticked text."""
    line = _WIKI_LINK_RE.sub(lambda m: f"`{m.group(2) or m.group(1)}`", line)
    return _MARKDOWN_LINK_RE.sub(lambda m: f"`{m.group(1)}`", line)


def strip_markers(line: str, patterns: list[re.Pattern[str]]) -> str:
    """Delete every occurrence of every marker pattern from ``line``."""
    for pattern in patterns:
        pos = 0
        while True:
            match = pattern.search(line, pos)
            if match is None:
                break
            line, pos = delete_span(line, match.start(), match.end())
    return line


def clean_links(text: str, markers: list[str] | None) -> StageResult:
    """Convert links to backticked text on lines containing a marker.

    The markers themselves are removed from those lines afterwards. Lines
    without a marker are returned untouched. One removal is counted per
    line that changed.
    """
    active = active_markers(markers)
    if not active:
        return StageResult(content=text)

    patterns = [re.compile(re.escape(marker)) for marker in active]
    lines = text.split("\n")
    result: list[str] = []
    removals = 0

    for line in lines:
        if not any(marker in line for marker in active):
            result.append(line)
            continue
        cleaned = strip_markers(convert_links(line), patterns)
        if cleaned != line:
            removals += 1
        result.append(cleaned)

    return StageResult(content="\n".join(result), removals=removals)


@register_stage("link_cleaning")
def link_cleaning_stage(text: str, config: CleanerConfig) -> StageResult:
    return clean_links(text, config.clean_links_strings)
