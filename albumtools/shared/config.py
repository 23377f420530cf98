"""Configuration loading for album-tools."""

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_PATH = Path.home() / ".album-tools" / "config.yaml"

OUTPUT_FORMATS = ('json', 'yaml')
DEFAULT_OUTPUT_FORMAT = 'json'
DEFAULT_LOG_FILE = "~/.album-tools/logs/debug.log"
DEFAULT_BASE_URL = "http://localhost"

logger = logging.getLogger(__name__)


def load_config(
    required: bool = False,
    fallback: Optional[Dict[str, Any]] = None
) -> Optional[Dict[str, Any]]:
    """Load ~/.album-tools/config.yaml.

    Args:
        required: If True, exit with error when config is missing or unreadable.
        fallback: Default dict to return when config is missing and not required.

    Returns:
        Parsed config dict, fallback dict, or None if missing/invalid.
    """
    if not CONFIG_PATH.exists():
        if required:
            logger.error("Config file not found at %s", CONFIG_PATH)
            sys.exit(1)
        return fallback

    try:
        with open(CONFIG_PATH, encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError) as e:
        logger.error("Error reading config: %s", e)
        if required:
            sys.exit(1)
        return fallback

    if not isinstance(data, dict):
        logger.error("Config is not a mapping (got %s)", type(data).__name__)
        if required:
            sys.exit(1)
        return fallback
    return data


def get_output_format(config: Optional[Dict[str, Any]]) -> str:
    """Return the batch_import.output_format setting, defaulting to json."""
    if not config:
        return DEFAULT_OUTPUT_FORMAT

    section = config.get('batch_import') or {}
    value = str(section.get('output_format', DEFAULT_OUTPUT_FORMAT)).strip().lower()
    if value not in OUTPUT_FORMATS:
        logger.warning(
            "Unknown batch_import.output_format '%s', using %s",
            value, DEFAULT_OUTPUT_FORMAT,
        )
        return DEFAULT_OUTPUT_FORMAT
    return value


@dataclass(frozen=True)
class LogSettings:
    """Validated ``logging`` section of the config."""

    file: str
    level: int
    level_name: str
    max_bytes: int
    backup_count: int


def _positive_number(value, key, default):
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        logger.warning("Invalid logging.%s %r, using %s", key, value, default)
        return default
    return value


def get_log_settings(config: Optional[Dict[str, Any]]) -> Optional[LogSettings]:
    """Return file logging settings, or None when file logging is off.

    Bad values in the section are replaced by defaults with a warning, so a
    typo in config.yaml never stops the batch import from running.
    """
    if not config:
        return None

    section = config.get('logging')
    if section is None:
        return None
    if not isinstance(section, dict):
        logger.warning("Config 'logging' is not a mapping (got %s), file logging off",
                       type(section).__name__)
        return None
    if not section.get('enabled', False):
        return None

    level_name = str(section.get('level', 'debug')).strip().upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        logger.warning("Unknown logging.level '%s', using DEBUG", level_name)
        level_name, level = 'DEBUG', logging.DEBUG

    log_file = section.get('file', DEFAULT_LOG_FILE)
    if not isinstance(log_file, str) or not log_file.strip():
        logger.warning("Invalid logging.file %r, using %s", log_file, DEFAULT_LOG_FILE)
        log_file = DEFAULT_LOG_FILE

    max_size_mb = _positive_number(section.get('max_size_mb', 5), 'max_size_mb', 5)
    backup_count = section.get('backup_count', 3)
    if isinstance(backup_count, bool) or not isinstance(backup_count, int) or backup_count < 0:
        logger.warning("Invalid logging.backup_count %r, using 3", backup_count)
        backup_count = 3

    return LogSettings(
        file=os.path.expanduser(log_file),
        level=level,
        level_name=level_name,
        max_bytes=int(max_size_mb * 1024 * 1024),
        backup_count=backup_count,
    )


def get_base_url(config: Optional[Dict[str, Any]]) -> str:
    """Return site.base_url, the origin that server asset paths resolve against."""
    section = (config or {}).get('site') or {}
    value = section.get('base_url') if isinstance(section, dict) else None
    if not isinstance(value, str) or not value.strip():
        return DEFAULT_BASE_URL
    return value.strip()
