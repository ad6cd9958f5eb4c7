"""Package-level default configuration values."""

from __future__ import annotations

from typing import Any

# Current settings layout (list-valued marker fields)
SCHEMA_VERSION = 2

# Default markers
DEFAULT_REMOVAL_STRINGS = ["%% remove line %%", "rem-ln"]
DEFAULT_RANGE_START_STRINGS = ["%% remove from here %%", "rm-from-here"]
DEFAULT_RANGE_END_STRINGS = ["%% remove till here %%", "rm-till-here"]
DEFAULT_CLEAN_LINKS_STRINGS = ["%% clean me %%", "clean-ln"]
DEFAULT_COMMENT_CLEANER_STRINGS = ["remove this comment", "rm-cmt"]

# Empty line limiting
DEFAULT_MAX_CONSECUTIVE_EMPTY_LINES = 1
MIN_CONSECUTIVE_EMPTY_LINES = 0
MAX_CONSECUTIVE_EMPTY_LINES = 10

# Backups
DEFAULT_CREATE_BACKUP = True
DEFAULT_BACKUP_FILE_NAME_FORMAT = "_YYYY-MM-DD HHmmss"

# Log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "schema_version": SCHEMA_VERSION,
        "removal_strings": list(DEFAULT_REMOVAL_STRINGS),
        "range_start_strings": list(DEFAULT_RANGE_START_STRINGS),
        "range_end_strings": list(DEFAULT_RANGE_END_STRINGS),
        "clean_links_strings": list(DEFAULT_CLEAN_LINKS_STRINGS),
        "comment_cleaner_strings": list(DEFAULT_COMMENT_CLEANER_STRINGS),
        "create_backup": DEFAULT_CREATE_BACKUP,
        "backup_file_name_format": DEFAULT_BACKUP_FILE_NAME_FORMAT,
        "max_consecutive_empty_lines": DEFAULT_MAX_CONSECUTIVE_EMPTY_LINES,
        "remove_empty_list_items": False,
        "remove_finished_tasks": False,
        "enable_range_removal": True,
        "enable_comment_cleaning": True,
        "enable_link_cleaning": True,
        "enable_single_line_removal": True,
        "enable_empty_line_limiting": True,
        "log_level": DEFAULT_LOG_LEVEL,
    }
