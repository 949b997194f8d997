"""Settings loading for fuzzyrank."""

from __future__ import annotations

import copy
import functools
from typing import Any

import yaml

from fuzzyrank.exceptions import ConfigurationError
from fuzzyrank.similarity.scoring import Scorer, WeightedRatioSettings
from fuzzyrank.utils.logging_utils import DEFAULT_FORMAT, get_logger

logger = get_logger(__name__)

DEFAULTS: dict[str, Any] = {
    "extractor": {
        "cutoff": 0,
        "scorer": Scorer.WEIGHTED_RATIO.value,
        "limit": 5,
    },
    "weighted_ratio": {
        "unbase_scale": 0.95,
        "partial_scale": 0.90,
        "long_partial_scale": 0.60,
        "partial_threshold": 1.5,
        "long_threshold": 8.0,
    },
    "logging": {
        "level": "WARNING",
        "format": DEFAULT_FORMAT,
        "file": None,
    },
}


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Merge ``update`` into ``base`` recursively, returning ``base``."""
    for key, value in update.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def get_section(settings: dict[str, Any], name: str) -> dict[str, Any]:
    """Return one settings section, treating a missing or null section as empty.

    Raises:
        ConfigurationError: If the section is present but not a mapping

    """
    section = settings.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"Settings section '{name}' must be a mapping, got {type(section).__name__}",
        )
    return section


@functools.lru_cache(maxsize=8)
def _load_settings_cached(path: str) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            user_config = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning(f"Settings file not found: {path}. Using defaults.")
        return copy.deepcopy(DEFAULTS)

    if not isinstance(user_config, dict):
        raise ConfigurationError(f"Settings file {path} must contain a mapping")

    # A bare `section:` key keeps that section's defaults
    user_config = {key: value for key, value in user_config.items() if value is not None}
    for name in DEFAULTS:
        if name in user_config and not isinstance(user_config[name], dict):
            raise ConfigurationError(
                f"Settings section '{name}' in {path} must be a mapping, "
                f"got {type(user_config[name]).__name__}",
            )

    logger.debug(f"Settings loaded from {path}")
    return deep_merge(copy.deepcopy(DEFAULTS), user_config)


def load_settings(path: str) -> dict[str, Any]:
    """Load settings from a YAML file merged over the built-in defaults.

    Parsed files are cached; use :func:`reload_settings` to force a fresh
    read. Each call returns an independent copy.

    Args:
        path: Path to settings YAML file

    Returns:
        Dictionary with settings (user config merged over defaults)

    Raises:
        ConfigurationError: If the file does not hold a mapping
        yaml.YAMLError: If the file is not valid YAML

    """
    return copy.deepcopy(_load_settings_cached(str(path)))


def reload_settings(path: str) -> dict[str, Any]:
    """Force reload settings from file (clears cache)."""
    _load_settings_cached.cache_clear()
    return load_settings(path)


def validate_settings(settings: dict[str, Any]) -> list[str]:
    """Return a list of validation warnings (empty when settings are sane)."""
    warnings = []

    try:
        extractor = get_section(settings, "extractor")
    except ConfigurationError as exc:
        warnings.append(str(exc))
        extractor = {}
    cutoff = extractor.get("cutoff", 0)
    if not isinstance(cutoff, int) or isinstance(cutoff, bool) or not 0 <= cutoff <= 100:
        warnings.append(f"extractor.cutoff must be int 0-100, got {cutoff!r}")

    limit = extractor.get("limit", 5)
    if not isinstance(limit, int) or isinstance(limit, bool) or limit < 0:
        warnings.append(f"extractor.limit must be int >= 0, got {limit!r}")

    try:
        Scorer.resolve(extractor.get("scorer", Scorer.WEIGHTED_RATIO.value))
    except ConfigurationError as exc:
        warnings.append(f"extractor.scorer: {exc}")

    try:
        weights = WeightedRatioSettings.from_settings(settings)
    except ConfigurationError as exc:
        warnings.append(str(exc))
    else:
        for name in ("unbase_scale", "partial_scale", "long_partial_scale"):
            value = getattr(weights, name)
            if not 0 < value <= 1:
                warnings.append(f"weighted_ratio.{name} must be in (0, 1], got {value}")
        if weights.partial_threshold < 1:
            warnings.append(
                f"weighted_ratio.partial_threshold must be >= 1, got {weights.partial_threshold}",
            )
        if weights.long_threshold < weights.partial_threshold:
            warnings.append("weighted_ratio.long_threshold must be >= partial_threshold")

    try:
        level = get_section(settings, "logging").get("level", "WARNING")
    except ConfigurationError as exc:
        warnings.append(str(exc))
        level = "WARNING"
    if not isinstance(level, str) or level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        warnings.append(f"logging.level must be a standard level name, got {level!r}")

    return warnings
