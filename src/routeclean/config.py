"""Configuration for the route filter.

Defaults reproduce the reference tool. Any value can be overridden through
environment variables (see `FilterConfig.from_env`) or by the CLI flags.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from routeclean.errors import ConfigurationError

# Interior angle (degrees) at the middle point below which a turn counts as tight.
TIGHT_ANGLE_DEG = 10.0
# Speed (km/h) above which a tight turn is treated as a GPS error.
SPEED_LIMIT_KMPH = 50.0
# Mean radius of the Earth used by the haversine distance.
EARTH_RADIUS_KM = 6372.797

ENV_PREFIX = "ROUTECLEAN_"


def _env_float(key: str, default: float) -> float:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _env_bool(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default


@dataclass(frozen=True)
class FilterConfig:
    """Thresholds and constants consumed by `RouteFilter`.

    Attributes:
        tight_angle_deg: Angle at the middle point below which it may be rejected.
        speed_limit_kmph: Speed above which a tight angle is rejected.
        earth_radius_km: Sphere radius for the haversine distance.
        exact_haversine: Convert latitudes to radians inside the cosine term.
            False reproduces the reference tool's distances.
    """

    tight_angle_deg: float = TIGHT_ANGLE_DEG
    speed_limit_kmph: float = SPEED_LIMIT_KMPH
    earth_radius_km: float = EARTH_RADIUS_KM
    exact_haversine: bool = False

    def validate(self) -> None:
        if self.earth_radius_km <= 0:
            raise ConfigurationError(f"Earth radius must be positive, got {self.earth_radius_km}")
        if self.tight_angle_deg < 0:
            raise ConfigurationError(f"Tight angle must not be negative, got {self.tight_angle_deg}")
        if self.speed_limit_kmph < 0:
            raise ConfigurationError(f"Speed limit must not be negative, got {self.speed_limit_kmph}")

    @classmethod
    def from_env(cls) -> "FilterConfig":
        """Build a config from ROUTECLEAN_* environment variables, falling back to defaults."""
        return cls(
            tight_angle_deg=_env_float(f"{ENV_PREFIX}TIGHT_ANGLE_DEG", TIGHT_ANGLE_DEG),
            speed_limit_kmph=_env_float(f"{ENV_PREFIX}SPEED_LIMIT_KMPH", SPEED_LIMIT_KMPH),
            earth_radius_km=_env_float(f"{ENV_PREFIX}EARTH_RADIUS_KM", EARTH_RADIUS_KM),
            exact_haversine=_env_bool(f"{ENV_PREFIX}EXACT_HAVERSINE", False),
        )


__all__ = [
    "EARTH_RADIUS_KM",
    "SPEED_LIMIT_KMPH",
    "TIGHT_ANGLE_DEG",
    "FilterConfig",
]
