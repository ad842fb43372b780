"""Repository settings helpers."""

from dataclasses import dataclass
from pathlib import Path
import logging

import yaml

from .constants import SETTINGS_FILE, VCS_DIR

logger = logging.getLogger(__name__)


@dataclass
class VcsSettings:
    """Tool settings read from vcs/settings.yaml."""

    hash_chunk_size: int = 8192
    log_level: str = "WARNING"


def _chunk_size(value, default: int) -> int:
    """Validate hash_chunk_size; anything but a positive integer falls back."""
    if value is None:
        return default
    try:
        size = int(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring hash_chunk_size %r: not an integer", value)
        return default
    if size < 1:
        logger.warning("Ignoring hash_chunk_size %r: must be at least 1", value)
        return default
    return size


def load_settings(root: Path) -> VcsSettings:
    """Load settings from vcs/settings.yaml if present."""

    cfg_path = root / VCS_DIR / SETTINGS_FILE
    if not cfg_path.exists():
        return VcsSettings()

    try:
        data = yaml.safe_load(cfg_path.read_text()) or {}
    except yaml.YAMLError as e:
        logger.warning("Ignoring unreadable settings file %s: %s", cfg_path, e)
        return VcsSettings()

    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: expected a mapping", cfg_path)
        return VcsSettings()

    defaults = VcsSettings()
    return VcsSettings(
        hash_chunk_size=_chunk_size(data.get("hash_chunk_size"), defaults.hash_chunk_size),
        log_level=str(data.get("log_level", defaults.log_level)).upper(),
    )
