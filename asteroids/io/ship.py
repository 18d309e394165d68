from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any, Optional

from ..core.config import ShipConfig
from ..core.exceptions import ConfigError
from ..core.types import SPEED_OF_LIGHT, ShipDefinition, Vector2
from ..core.validation import is_valid_orientation
from ..model.ship import Ship
from ._json import SCHEMA_DIR, load_json, load_schema, validate

_LOG = logging.getLogger(__name__)


def _angle_to_rad(val: float, units: str | None) -> float:
    if units == "deg":
        return val * math.pi / 180.0
    return val


def _vector2(values: Any) -> Vector2:
    return (float(values[0]), float(values[1]))


def load(
    path: str | Path, schema_path: str | Path = SCHEMA_DIR / "ship.schema.json"
) -> ShipDefinition:
    """Load Ship Definition JSON, validate, and normalize angles to radians."""
    path = Path(path)
    schema_path = Path(schema_path)

    data = load_json(path)
    schema = load_schema(schema_path)
    validate(data, schema, "Ship")

    angles_unit = (data.get("units_policy", {}) or {}).get("angles", "rad")
    orientation = _angle_to_rad(float(data.get("orientation", 0.0)), angles_unit)
    # File input is checked here; the ship only asserts its orientation
    if not is_valid_orientation(orientation):
        raise ConfigError(
            "Orientation must be in [0, 2*pi]",
            config_path=path,
            field_name="orientation",
            field_value=data.get("orientation"),
        )

    definition = ShipDefinition(
        radius=float(data["radius"]),
        position=_vector2(data.get("position", (0.0, 0.0))),
        orientation=orientation,
        velocity=_vector2(data.get("velocity", (0.0, 0.0))),
        speed_limit=float(data.get("speed_limit", SPEED_OF_LIGHT)),
        metadata={
            "source": str(path),
            "schema_version": data.get("schema_version"),
            "name": data.get("name"),
        },
    )
    _LOG.debug("Loaded ship definition from %s", path)
    return definition


def build(definition: ShipDefinition, config: Optional[ShipConfig] = None) -> Ship:
    """Build a ship from a definition; ship invariants are checked here, not by the schema."""
    return Ship(
        definition.radius,
        position=definition.position,
        orientation=definition.orientation,
        velocity=definition.velocity,
        speed_limit=definition.speed_limit,
        config=config,
    )


def load_ship(
    path: str | Path,
    config: Optional[ShipConfig] = None,
    schema_path: str | Path = SCHEMA_DIR / "ship.schema.json",
) -> Ship:
    return build(load(path, schema_path=schema_path), config=config)
