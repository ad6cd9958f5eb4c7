"""Custom exception hierarchy for linecleaner."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class LineCleanerError(Exception):
    """Base exception for all linecleaner errors."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message


class ConfigError(LineCleanerError):
    """Invalid or unreadable configuration.

    Examples: malformed YAML, a non-mapping document, a value out of range.
    """

    def __init__(self, message: str = "", path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class DocumentError(LineCleanerError):
    """Error at the document store boundary for a single file."""

    operation = "process"

    def __init__(
        self,
        message: str = "",
        path: str | Path | None = None,
        original: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None
        self.original = original


class DocumentReadError(DocumentError):
    """The document could not be read."""

    operation = "read"


class DocumentWriteError(DocumentError):
    """The cleaned document could not be written. The original is left in place."""

    operation = "write"


class BackupError(DocumentError):
    """The backup copy could not be created, so the document was not modified."""

    operation = "backup"
