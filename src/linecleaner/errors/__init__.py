"""Error handling: exception hierarchy for config and document failures."""

from linecleaner.errors.exceptions import (
    BackupError,
    ConfigError,
    DocumentError,
    DocumentReadError,
    DocumentWriteError,
    LineCleanerError,
)

__all__ = [
    "LineCleanerError",
    "ConfigError",
    "DocumentError",
    "DocumentReadError",
    "DocumentWriteError",
    "BackupError",
]
