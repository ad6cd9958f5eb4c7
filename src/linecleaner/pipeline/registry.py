"""Registry of pipeline stages, keyed by stage name."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from linecleaner.config.schema import CleanerConfig
    from linecleaner.types import StageResult

StageFn = Callable[[str, "CleanerConfig"], "StageResult"]

# Registry of stage functions
_STAGE_REGISTRY: dict[str, StageFn] = {}


def register_stage(name: str) -> Callable[[StageFn], StageFn]:
    """Decorator to register a ``(text, config) -> StageResult`` stage."""

    def decorator(fn: StageFn) -> StageFn:
        _STAGE_REGISTRY[name] = fn
        return fn

    return decorator


def get_stage(name: str) -> StageFn | None:
    return _STAGE_REGISTRY.get(name)


def registered_stages() -> list[str]:
    return list(_STAGE_REGISTRY)
