from __future__ import annotations

import math
from typing import Any, Optional

import numpy as np

from .types import SPEED_OF_LIGHT
from .exceptions import (
    IllegalMinimalRadiusError,
    IllegalPositionError,
    IllegalRadiusError,
    IllegalVelocityError,
)


def _as_float(value: Any) -> float:
    if isinstance(value, (str, bytes)):
        return math.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def as_vector2(candidate: Any) -> Optional[np.ndarray]:
    """Return candidate as a fresh float64 array of shape (2,), or None if it is not one."""
    try:
        raw = np.asarray(candidate)
    except (TypeError, ValueError):
        return None
    if raw.shape != (2,) or raw.dtype.kind not in "iuf":
        return None
    return np.array(raw, dtype=np.float64)


def is_finite_vector2(candidate: Any) -> bool:
    arr = as_vector2(candidate)
    return arr is not None and bool(np.all(np.isfinite(arr)))


def is_valid_position(position: Any) -> bool:
    return is_finite_vector2(position)


def is_valid_orientation(orientation: Any) -> bool:
    value = _as_float(orientation)
    return 0.0 <= value <= 2.0 * math.pi


def is_valid_minimal_radius(minimal_radius: Any) -> bool:
    return _as_float(minimal_radius) > 0.0


def is_valid_radius(radius: Any, minimal_radius: float) -> bool:
    return _as_float(radius) >= minimal_radius


def can_have_as_speed_limit(speed_limit: Any) -> bool:
    value = _as_float(speed_limit)
    return 0.0 < value <= SPEED_OF_LIGHT


def speed_of(velocity: np.ndarray) -> float:
    return math.hypot(float(velocity[0]), float(velocity[1]))


def is_valid_velocity(velocity: Any, speed_limit: float) -> bool:
    arr = as_vector2(velocity)
    if arr is None or not np.all(np.isfinite(arr)):
        return False
    return speed_of(arr) <= speed_limit


def check_position(position: Any) -> np.ndarray:
    arr = as_vector2(position)
    if arr is None or not np.all(np.isfinite(arr)):
        raise IllegalPositionError(
            "Position must be two finite coordinates",
            position=position if isinstance(position, (list, tuple, np.ndarray)) else None,
        )
    return arr


def check_velocity(velocity: Any) -> np.ndarray:
    arr = as_vector2(velocity)
    if arr is None or not np.all(np.isfinite(arr)):
        raise IllegalVelocityError(
            "Velocity must be two finite components",
            velocity=velocity if isinstance(velocity, (list, tuple, np.ndarray)) else None,
        )
    return arr


def check_radius(radius: Any, minimal_radius: float) -> float:
    if not is_valid_radius(radius, minimal_radius):
        raise IllegalRadiusError(
            f"Radius must be >= {minimal_radius}",
            radius=radius,
            minimal_radius=minimal_radius,
        )
    return float(radius)


def check_minimal_radius(minimal_radius: Any) -> float:
    if not is_valid_minimal_radius(minimal_radius):
        raise IllegalMinimalRadiusError(
            "Minimal radius must be > 0",
            minimal_radius=minimal_radius,
        )
    return float(minimal_radius)


def clamp_to_speed_limit(velocity: np.ndarray, speed_limit: float) -> np.ndarray:
    """Scale velocity down to speed_limit keeping its direction; returns a new array."""
    speed = speed_of(velocity)
    if speed <= speed_limit:
        return velocity.copy()
    largest = float(np.max(np.abs(velocity)))
    if largest == 0.0:
        return np.zeros(2, dtype=np.float64)
    # Normalize first so the norm of huge finite components cannot overflow
    unit = velocity / largest
    scaled = unit * (speed_limit / speed_of(unit))
    # Rounding can leave the norm one ulp above the limit
    while speed_of(scaled) > speed_limit:
        scaled = np.nextafter(scaled, 0.0)
    return scaled
