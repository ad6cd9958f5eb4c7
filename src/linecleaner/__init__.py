"""linecleaner: marker-driven cleanup of markdown notes."""

from linecleaner.config.schema import CleanerConfig
from linecleaner.pipeline.engine import clean_text
from linecleaner.types import CleanResult, StageResult

__version__ = "0.1.0"

__all__ = ["clean_text", "CleanerConfig", "CleanResult", "StageResult", "__version__"]
