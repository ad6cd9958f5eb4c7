"""Configuration hierarchy: merges sources in priority order.

Precedence (later overrides earlier):
  1. Package defaults
  2. Global config   (~/.linecleaner/config.yaml)
  3. Project config  (./linecleaner.yaml, searched upward)
  4. Environment variables (LINECLEANER_*)
  5. Runtime arguments
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from linecleaner.config.defaults import get_defaults
from linecleaner.config.loader import build_config, load_settings
from linecleaner.config.schema import CleanerConfig
from linecleaner.errors.exceptions import ConfigError

logger = logging.getLogger(__name__)

_GLOBAL_CONFIG_PATH = Path.home() / ".linecleaner" / "config.yaml"
_PROJECT_CONFIG_NAME = "linecleaner.yaml"

# Map of environment variables to config keys
_ENV_MAP: dict[str, str] = {
    "LINECLEANER_MAX_EMPTY_LINES": "max_consecutive_empty_lines",
    "LINECLEANER_CREATE_BACKUP": "create_backup",
    "LINECLEANER_BACKUP_FORMAT": "backup_file_name_format",
    "LINECLEANER_REMOVE_EMPTY_LIST_ITEMS": "remove_empty_list_items",
    "LINECLEANER_REMOVE_FINISHED_TASKS": "remove_finished_tasks",
    "LINECLEANER_LOG_LEVEL": "log_level",
}

# Keys that should be parsed as specific types
_TYPE_MAP: dict[str, type] = {
    "max_consecutive_empty_lines": int,
}

# Boolean env var values
_TRUTHY = {"1", "true", "yes", "on"}


def load_config_hierarchy(
    config_path: str | Path | None = None, **runtime_overrides: Any
) -> CleanerConfig:
    """Load and merge configuration from all sources.

    ``config_path`` replaces the global/project lookup with one explicit file.
    """
    config = get_defaults()

    if config_path is not None:
        config.update(load_settings(config_path))
    else:
        # Layer 2: Global config
        global_cfg = _load_yaml_config(_GLOBAL_CONFIG_PATH)
        if global_cfg:
            config.update(global_cfg)

        # Layer 3: Project config (search from cwd upward)
        project_path = _find_project_config()
        if project_path:
            project_cfg = _load_yaml_config(project_path)
            if project_cfg:
                config.update(project_cfg)

    # Layer 4: Environment variables
    config.update(_load_env_vars())

    # Layer 5: Runtime arguments (highest priority)
    # Filter out None values: only override when explicitly set
    for key, value in runtime_overrides.items():
        if value is not None:
            config[key] = value

    return build_config(config, source=config_path)


def _load_yaml_config(path: Path) -> dict[str, Any] | None:
    """Load an implicit config file if it exists, warning instead of failing."""
    if not path.exists() or not path.is_file():
        return None
    try:
        return load_settings(path)
    except (ConfigError, OSError) as e:
        logger.warning("Failed to load config %s: %s", path, e)
    return None


def _find_project_config() -> Path | None:
    """Search for linecleaner.yaml from cwd upward."""
    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        candidate = parent / _PROJECT_CONFIG_NAME
        if candidate.exists():
            return candidate
    return None


def _load_env_vars() -> dict[str, Any]:
    """Read LINECLEANER_* environment variables."""
    result: dict[str, Any] = {}
    for env_key, config_key in _ENV_MAP.items():
        value = os.environ.get(env_key)
        if value is None:
            continue
        result[config_key] = _coerce_env_value(config_key, value)
    return result


def _coerce_env_value(key: str, value: str) -> Any:
    """Coerce an environment variable string to the appropriate type."""
    if key.startswith(("create_", "remove_", "enable_")):
        return value.strip().lower() in _TRUTHY

    target_type = _TYPE_MAP.get(key)
    if target_type:
        try:
            return target_type(value)
        except (ValueError, TypeError):
            logger.warning(
                "Cannot convert env var for '%s' to %s: %s", key, target_type.__name__, value
            )
            return value

    return value
