"""Shared Pydantic models for linecleaner."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class StageResult(BaseModel):
    """Output of one transform: the new text and how many operations it made."""

    content: str
    removals: int = Field(default=0, ge=0)


class StageReport(BaseModel):
    name: str
    removals: int = 0


class CleanResult(BaseModel):
    """Result of a full pipeline run over one document."""

    content: str
    removals: int = 0
    changed: bool = False
    stages: list[StageReport] = Field(default_factory=list)

    def removals_for(self, stage: str) -> int:
        """Removals made by ``stage``, 0 if it did not run."""
        return sum(s.removals for s in self.stages if s.name == stage)


class FileCleanResult(BaseModel):
    """Outcome of cleaning one document on disk."""

    path: Path
    removals: int = 0
    changed: bool = False
    written: bool = False
    backup_path: Path | None = None
