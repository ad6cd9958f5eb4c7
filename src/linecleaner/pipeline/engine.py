"""Pipeline orchestration: run the enabled stages in their fixed order."""

from __future__ import annotations

import logging

# Auto-register built-in transforms on import
import linecleaner.transforms  # noqa: F401
from linecleaner.config.schema import CleanerConfig
from linecleaner.pipeline.registry import get_stage
from linecleaner.types import CleanResult, StageReport

logger = logging.getLogger(__name__)

# Stage name -> config flag that enables it, in execution order
STAGE_ORDER: list[tuple[str, str]] = [
    ("range_removal", "enable_range_removal"),
    ("comment_cleaning", "enable_comment_cleaning"),
    ("link_cleaning", "enable_link_cleaning"),
    ("single_line_removal", "enable_single_line_removal"),
    ("empty_list_items", "remove_empty_list_items"),
    ("finished_tasks", "remove_finished_tasks"),
    ("empty_line_limiting", "enable_empty_line_limiting"),
]

STAGE_NAMES: list[str] = [name for name, _ in STAGE_ORDER]


def iter_stages(config: CleanerConfig) -> list[tuple[str, bool]]:
    """Return ``(stage_name, enabled)`` pairs in execution order."""
    return [(name, bool(getattr(config, flag))) for name, flag in STAGE_ORDER]


def clean_text(text: str, config: CleanerConfig | None = None) -> CleanResult:
    """Run every enabled stage over ``text``.

    Each stage receives the previous stage's output. Removal counts are
    summed; ``changed`` tells whether the final text differs from the input.
    """
    if config is None:
        config = CleanerConfig()

    content = text
    total = 0
    reports: list[StageReport] = []

    for name, enabled in iter_stages(config):
        if not enabled:
            logger.debug("Skipping stage '%s': disabled", name)
            continue
        stage = get_stage(name)
        if stage is None:
            raise RuntimeError(f"Stage '{name}' is not registered")

        result = stage(content, config)
        logger.debug("Stage '%s' made %d removal(s)", name, result.removals)
        content = result.content
        total += result.removals
        reports.append(StageReport(name=name, removals=result.removals))

    return CleanResult(
        content=content,
        removals=total,
        changed=content != text,
        stages=reports,
    )
