"""Versioned migrations for persisted settings.

Settings written before marker lists existed (version 1) store one marker per
feature as a plain string. Each migration upgrades a raw settings mapping by
exactly one version; ``migrate_settings`` applies them in order once, at load
time.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable
from typing import Any

from linecleaner.config.defaults import SCHEMA_VERSION

logger = logging.getLogger(__name__)

# Legacy single-string key -> current list key. The camelCase spellings come
# from settings files exported by the editor plugin.
_LEGACY_MARKER_KEYS: dict[str, tuple[str, ...]] = {
    "removal_strings": ("removal_string", "removalString"),
    "range_start_strings": ("range_start_string", "rangeStartString"),
    "range_end_strings": ("range_end_string", "rangeEndString"),
    "clean_links_strings": ("clean_links_string", "cleanLinksString"),
    "comment_cleaner_strings": ("comment_cleaner_string", "commentCleanerString"),
}

_LEGACY_CAMEL_KEYS: dict[str, str] = {
    "removalStrings": "removal_strings",
    "rangeStartStrings": "range_start_strings",
    "rangeEndStrings": "range_end_strings",
    "cleanLinksStrings": "clean_links_strings",
    "commentCleanerStrings": "comment_cleaner_strings",
    "createBackup": "create_backup",
    "backupFileNameFormat": "backup_file_name_format",
    "maxConsecutiveEmptyLines": "max_consecutive_empty_lines",
    "removeEmptyListItems": "remove_empty_list_items",
    "removeFinishedTasks": "remove_finished_tasks",
    "enableRangeRemoval": "enable_range_removal",
    "enableCommentCleaning": "enable_comment_cleaning",
    "enableLinkCleaning": "enable_link_cleaning",
    "enableSingleLineRemoval": "enable_single_line_removal",
    "enableEmptyLineLimiting": "enable_empty_line_limiting",
}

Migration = Callable[[dict[str, Any]], dict[str, Any]]

_MIGRATIONS: dict[int, Migration] = {}


def _migration(from_version: int) -> Callable[[Migration], Migration]:
    """Decorator to register the migration that upgrades ``from_version``."""
    def decorator(fn: Migration) -> Migration:
        _MIGRATIONS[from_version] = fn
        return fn
    return decorator


def detect_version(data: dict[str, Any]) -> int:
    """Return the settings version, inferring 1 for unversioned legacy data."""
    version = data.get("schema_version")
    if isinstance(version, int):
        return version
    legacy_keys = {key for keys in _LEGACY_MARKER_KEYS.values() for key in keys}
    if legacy_keys & data.keys() or _LEGACY_CAMEL_KEYS.keys() & data.keys():
        return 1
    return SCHEMA_VERSION


@_migration(1)
def _marker_strings_to_lists(data: dict[str, Any]) -> dict[str, Any]:
    """Wrap legacy single-string markers into one-element marker lists."""
    for camel, snake in _LEGACY_CAMEL_KEYS.items():
        if camel in data:
            value = data.pop(camel)
            data.setdefault(snake, value)

    for list_key, legacy_keys in _LEGACY_MARKER_KEYS.items():
        for legacy_key in legacy_keys:
            if legacy_key not in data:
                continue
            legacy_value = data.pop(legacy_key)
            if list_key not in data and isinstance(legacy_value, str):
                data[list_key] = [legacy_value]
                logger.info("Migrated '%s' into '%s'", legacy_key, list_key)
    return data


def migrate_settings(data: dict[str, Any]) -> tuple[dict[str, Any], bool]:
    """Upgrade raw settings to the current version.

    Returns the migrated mapping and a dirty flag telling the caller to
    persist it once. The input mapping is not modified.
    """
    version = detect_version(data)
    if version >= SCHEMA_VERSION:
        return data, False

    migrated = copy.deepcopy(data)
    while version < SCHEMA_VERSION:
        step = _MIGRATIONS.get(version)
        if step is None:
            raise ValueError(f"No settings migration from version {version}")
        migrated = step(migrated)
        version += 1

    migrated["schema_version"] = SCHEMA_VERSION
    logger.info("Settings migrated to version %d", SCHEMA_VERSION)
    return migrated, True
