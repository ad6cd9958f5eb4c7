"""YAML settings loading, validation and persistence."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from linecleaner.config.migrations import migrate_settings
from linecleaner.config.schema import CleanerConfig
from linecleaner.errors.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_yaml(path: str | Path) -> dict[str, Any]:
    """Load any YAML file safely. An empty file loads as an empty mapping."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}", path=path) from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(
            f"Expected YAML mapping, got {type(raw).__name__} in {path}", path=path
        )
    return raw


def load_settings(path: str | Path, persist_migration: bool = True) -> dict[str, Any]:
    """Load raw settings and apply pending migrations.

    When a migration ran and ``persist_migration`` is set, the upgraded
    mapping is written back once so the legacy layout is not seen again.
    A failed write is logged and the migrated mapping is still returned.
    """
    path = Path(path)
    raw = load_yaml(path)
    data, dirty = migrate_settings(raw)
    if dirty and persist_migration:
        try:
            save_settings(data, path)
        except OSError as e:
            logger.warning("Could not save migrated settings to %s: %s", path, e)
        else:
            logger.info("Saved migrated settings to %s", path)
    return data


def load_config_file(path: str | Path, persist_migration: bool = True) -> CleanerConfig:
    """Load a settings file and return a validated CleanerConfig."""
    data = load_settings(path, persist_migration=persist_migration)
    return build_config(data, source=path)


def build_config(data: dict[str, Any], source: str | Path | None = None) -> CleanerConfig:
    """Validate a raw settings mapping."""
    try:
        return CleanerConfig(**data)
    except ValidationError as e:
        where = f" in {source}" if source else ""
        raise ConfigError(f"Invalid config{where}: {e}", path=source) from e


def save_config(config: CleanerConfig, path: str | Path) -> Path:
    """Write a config to YAML and return the path written."""
    return save_settings(config.model_dump(mode="json"), path)


def save_settings(data: dict[str, Any], path: str | Path) -> Path:
    """Write a raw settings mapping to YAML."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)
    return path
