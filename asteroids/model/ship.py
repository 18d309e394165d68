from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

import numpy as np

from ..core.config import ShipConfig, default_config
from ..core.types import SPEED_OF_LIGHT, ShipState
from ..core import validation
from ..core.validation import (
    check_position,
    check_radius,
    check_velocity,
    clamp_to_speed_limit,
    speed_of,
)

_LOG = logging.getLogger(__name__)


class Ship:
    """
    A circular space ship with a position, orientation, radius and velocity.

    Invariants:
      - position is a 2-vector of finite coordinates
      - orientation lies in [0, 2*pi]
      - radius was >= the config's minimal radius when the ship was built
      - the norm of velocity never exceeds speed_limit

    Vectors are numpy float64 arrays. They are copied on the way in and on the
    way out, so callers never alias the ship's state.

    Radius and speed limit are fixed at construction. Invalid positions,
    radii and velocities raise; an out-of-range orientation is a caller bug
    and fails an assertion.
    """

    def __init__(
        self,
        radius: Optional[float] = None,
        *,
        position: Sequence[float] = (0.0, 0.0),
        orientation: float = 0.0,
        velocity: Sequence[float] = (0.0, 0.0),
        speed_limit: float = SPEED_OF_LIGHT,
        config: Optional[ShipConfig] = None,
    ) -> None:
        """
        Initialize a ship.

        Args:
            radius: Radius of the ship; defaults to the current minimal radius
            position: Initial position [x, y]
            orientation: Initial orientation [rad], must be in [0, 2*pi]
            velocity: Initial velocity [vx, vy]; clamped to speed_limit
            speed_limit: Upper bound on speed; falls back to SPEED_OF_LIGHT
                when not in (0, SPEED_OF_LIGHT]
            config: Config holding the minimal radius; defaults to the
                process-wide config

        Raises:
            IllegalRadiusError: radius is below the minimal radius
            IllegalPositionError: position is not two finite coordinates
            IllegalVelocityError: velocity is not two finite components
        """
        self._config = config if config is not None else default_config()
        minimal_radius = self._config.minimal_radius
        self._radius = check_radius(
            minimal_radius if radius is None else radius, minimal_radius
        )
        self._position = check_position(position)
        self.orientation = orientation
        if not validation.can_have_as_speed_limit(speed_limit):
            _LOG.warning(
                "Speed limit %r not in (0, %s]; using the speed of light",
                speed_limit,
                SPEED_OF_LIGHT,
            )
            speed_limit = SPEED_OF_LIGHT
        self._speed_limit = float(speed_limit)
        self._velocity = np.zeros(2, dtype=np.float64)
        self.velocity = velocity

    @classmethod
    def from_position(
        cls,
        position: Sequence[float],
        radius: float,
        config: Optional[ShipConfig] = None,
    ) -> "Ship":
        return cls(radius, position=position, config=config)

    @classmethod
    def from_orientation(
        cls,
        orientation: float,
        radius: float,
        config: Optional[ShipConfig] = None,
    ) -> "Ship":
        return cls(radius, orientation=orientation, config=config)

    @classmethod
    def from_motion(
        cls,
        position: Sequence[float],
        velocity: Sequence[float],
        config: Optional[ShipConfig] = None,
    ) -> "Ship":
        """Ship at position moving with velocity, with the minimal radius and the speed of light as limit."""
        return cls(
            position=position,
            velocity=velocity,
            speed_limit=SPEED_OF_LIGHT,
            config=config,
        )

    @classmethod
    def at_rest(
        cls, position: Sequence[float], config: Optional[ShipConfig] = None
    ) -> "Ship":
        return cls.from_motion(position, (0.0, 0.0), config=config)

    # Position

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, position: Sequence[float]) -> None:
        self._position = check_position(position)

    @staticmethod
    def is_valid_position(position: Any) -> bool:
        return validation.is_valid_position(position)

    # Orientation

    @property
    def orientation(self) -> float:
        return self._orientation

    @orientation.setter
    def orientation(self, orientation: float) -> None:
        assert Ship.is_valid_orientation(orientation), (
            f"orientation {orientation!r} not in [0, 2*pi]"
        )
        self._orientation = float(orientation)

    @staticmethod
    def is_valid_orientation(orientation: Any) -> bool:
        return validation.is_valid_orientation(orientation)

    # Radius

    @property
    def radius(self) -> float:
        return self._radius

    def is_valid_radius(self, radius: Any) -> bool:
        return self._config.is_valid_radius(radius)

    @property
    def config(self) -> ShipConfig:
        return self._config

    @property
    def minimal_radius(self) -> float:
        return self._config.minimal_radius

    @staticmethod
    def is_valid_minimal_radius(minimal_radius: Any) -> bool:
        return validation.is_valid_minimal_radius(minimal_radius)

    # Velocity

    @property
    def velocity(self) -> np.ndarray:
        return self._velocity.copy()

    @velocity.setter
    def velocity(self, velocity: Sequence[float]) -> None:
        arr = check_velocity(velocity)
        if not self.is_valid_velocity(arr):
            _LOG.debug(
                "Velocity %s exceeds speed limit %s; rescaling",
                arr.tolist(),
                self._speed_limit,
            )
        self._velocity = clamp_to_speed_limit(arr, self._speed_limit)

    def is_valid_velocity(self, velocity: Any) -> bool:
        return validation.is_valid_velocity(velocity, self._speed_limit)

    @property
    def speed(self) -> float:
        return speed_of(self._velocity)

    @property
    def speed_limit(self) -> float:
        return self._speed_limit

    @staticmethod
    def can_have_as_speed_limit(speed_limit: Any) -> bool:
        return validation.can_have_as_speed_limit(speed_limit)

    def snapshot(self) -> ShipState:
        return ShipState(
            position=(float(self._position[0]), float(self._position[1])),
            orientation=self._orientation,
            radius=self._radius,
            velocity=(float(self._velocity[0]), float(self._velocity[1])),
            speed_limit=self._speed_limit,
        )

    def __repr__(self) -> str:
        return (
            f"Ship(radius={self._radius!r}, position={self._position.tolist()!r}, "
            f"orientation={self._orientation!r}, velocity={self._velocity.tolist()!r}, "
            f"speed_limit={self._speed_limit!r})"
        )
