"""Pydantic model for cleaner configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from linecleaner.config import defaults


class CleanerConfig(BaseModel):
    """Feature toggles, marker sets and options for one cleaning run.

    Instances are frozen: the pipeline only reads them. Use ``model_copy``
    with ``update=`` to derive a variant.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    schema_version: int = defaults.SCHEMA_VERSION

    # Feature toggles
    enable_range_removal: bool = True
    enable_comment_cleaning: bool = True
    enable_link_cleaning: bool = True
    enable_single_line_removal: bool = True
    enable_empty_line_limiting: bool = True
    remove_empty_list_items: bool = False
    remove_finished_tasks: bool = False

    # Marker sets
    removal_strings: list[str] = Field(
        default_factory=lambda: list(defaults.DEFAULT_REMOVAL_STRINGS)
    )
    range_start_strings: list[str] = Field(
        default_factory=lambda: list(defaults.DEFAULT_RANGE_START_STRINGS)
    )
    range_end_strings: list[str] = Field(
        default_factory=lambda: list(defaults.DEFAULT_RANGE_END_STRINGS)
    )
    clean_links_strings: list[str] = Field(
        default_factory=lambda: list(defaults.DEFAULT_CLEAN_LINKS_STRINGS)
    )
    comment_cleaner_strings: list[str] = Field(
        default_factory=lambda: list(defaults.DEFAULT_COMMENT_CLEANER_STRINGS)
    )

    max_consecutive_empty_lines: int = Field(
        default=defaults.DEFAULT_MAX_CONSECUTIVE_EMPTY_LINES,
        ge=defaults.MIN_CONSECUTIVE_EMPTY_LINES,
        le=defaults.MAX_CONSECUTIVE_EMPTY_LINES,
    )

    # Used by the document adapter only
    create_backup: bool = defaults.DEFAULT_CREATE_BACKUP
    backup_file_name_format: str = defaults.DEFAULT_BACKUP_FILE_NAME_FORMAT

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = defaults.DEFAULT_LOG_LEVEL

    @field_validator(
        "removal_strings",
        "range_start_strings",
        "range_end_strings",
        "clean_links_strings",
        "comment_cleaner_strings",
        mode="before",
    )
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        # An empty YAML key (``removal_strings:``) loads as None
        return [] if value is None else value

    @field_validator("backup_file_name_format")
    @classmethod
    def _require_backup_format(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("backup_file_name_format cannot be empty")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value
