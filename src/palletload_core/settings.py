from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Dict

import yaml

from .units import CM

logger = logging.getLogger(__name__)

SETTINGS_ENV = "PALLETLOAD_SETTINGS"

DEFAULT_PALLET_BASE_ID = "PAL-EU"

DEFAULTS: Dict[str, Any] = {
    "max_length": 285.0,
    "max_width": 180.0,
    "max_height": 160.0,
    "pallet_base_id": DEFAULT_PALLET_BASE_ID,
    "gap_factor": 1.5,
    "scale_factor": 100.0,
}


@dataclass(frozen=True)
class PackingLimits:
    """Maximum extents of one loaded transport unit, pallet included."""

    max_length: CM = DEFAULTS["max_length"]
    max_width: CM = DEFAULTS["max_width"]
    max_height: CM = DEFAULTS["max_height"]

    def __post_init__(self) -> None:
        for name in ("max_length", "max_width", "max_height"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be positive, got {value!r}")


@dataclass(frozen=True)
class Settings:
    limits: PackingLimits = field(default_factory=PackingLimits)
    pallet_base_id: str = DEFAULT_PALLET_BASE_ID
    # Horizontal gap between drawn pallets, in multiples of the base length.
    gap_factor: float = DEFAULTS["gap_factor"]
    # Centimetres per drawing unit.
    scale_factor: float = DEFAULTS["scale_factor"]


def settings_path() -> str:
    env_path = os.getenv(SETTINGS_ENV)
    if env_path:
        return os.path.expanduser(env_path)
    return os.path.join(os.path.dirname(__file__), "settings.yaml")


def _read_settings_file(path: str) -> Dict[str, Any]:
    if not os.path.exists(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        logger.warning("Could not read settings from %s, using defaults", path, exc_info=True)
        return {}
    if not isinstance(loaded, dict):
        logger.warning("Settings file %s is not a mapping, using defaults", path)
        return {}
    return loaded


def _coerce_positive(data: Dict[str, Any], key: str) -> float:
    default = DEFAULTS[key]
    if key not in data:
        return default
    try:
        value = float(data[key])
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid %s=%r in settings", key, data[key])
        return default
    if not math.isfinite(value) or value <= 0:
        logger.warning("Ignoring non-positive %s=%r in settings", key, data[key])
        return default
    return value


@lru_cache(maxsize=None)
def load_settings() -> Settings:
    """Load settings from ``settings.yaml`` (or ``$PALLETLOAD_SETTINGS``)."""

    data = _read_settings_file(settings_path())
    limits = PackingLimits(
        max_length=_coerce_positive(data, "max_length"),
        max_width=_coerce_positive(data, "max_width"),
        max_height=_coerce_positive(data, "max_height"),
    )
    base_id = data.get("pallet_base_id", DEFAULT_PALLET_BASE_ID)
    if not isinstance(base_id, str) or not base_id.strip():
        base_id = DEFAULT_PALLET_BASE_ID
    return Settings(
        limits=limits,
        pallet_base_id=base_id.strip(),
        gap_factor=_coerce_positive(data, "gap_factor"),
        scale_factor=_coerce_positive(data, "scale_factor"),
    )


def load_limits() -> PackingLimits:
    return load_settings().limits
