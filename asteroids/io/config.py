from __future__ import annotations

from pathlib import Path

from ..core.config import ShipConfig
from ._json import SCHEMA_DIR, load_json, load_schema, validate


def load(
    path: str | Path, schema_path: str | Path = SCHEMA_DIR / "config.schema.json"
) -> ShipConfig:
    """Load a ShipConfig from JSON. A non-positive minimal radius raises IllegalMinimalRadiusError."""
    path = Path(path)
    data = load_json(path)
    schema = load_schema(Path(schema_path))
    validate(data, schema, "ShipConfig")
    return ShipConfig(minimal_radius=float(data["minimal_radius"]))
