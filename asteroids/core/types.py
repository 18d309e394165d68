from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional

SPEED_OF_LIGHT = 300000.0       # [km/s]
DEFAULT_MINIMAL_RADIUS = 10.0   # [km]

Vector2 = tuple[float, float]


@dataclass(frozen=True)
class ShipState:
    """Point-in-time copy of a ship; angles in radians."""
    position: Vector2
    orientation: float  # [rad], CCW from +x
    radius: float
    velocity: Vector2
    speed_limit: float

    @property
    def speed(self) -> float:
        return math.hypot(self.velocity[0], self.velocity[1])

    def to_dict(self) -> dict[str, Any]:
        return {
            "position": list(self.position),
            "orientation": self.orientation,
            "radius": self.radius,
            "velocity": list(self.velocity),
            "speed": self.speed,
            "speed_limit": self.speed_limit,
        }


@dataclass(frozen=True)
class ShipDefinition:
    """Constructor arguments for a ship, normalized to radians by the JSON loader."""
    radius: Optional[float] = None  # None => current minimal radius
    position: Vector2 = (0.0, 0.0)
    orientation: float = 0.0
    velocity: Vector2 = (0.0, 0.0)
    speed_limit: float = SPEED_OF_LIGHT
    metadata: Optional[Mapping[str, Any]] = None
