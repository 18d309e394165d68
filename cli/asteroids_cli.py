from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from asteroids.core.config import ShipConfig
from asteroids.core.exceptions import (
    ConfigError,
    IllegalMinimalRadiusError,
    IllegalPositionError,
    IllegalRadiusError,
    IllegalVelocityError,
    SchemaError,
)
from asteroids.io.config import load as load_config
from asteroids.io.ship import build, load as load_definition

_LOG = logging.getLogger("asteroids.cli")

_SHIP_ERRORS = (
    ConfigError,
    SchemaError,
    IllegalPositionError,
    IllegalRadiusError,
    IllegalMinimalRadiusError,
    IllegalVelocityError,
)


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="asteroids-ship", description="Load a ship definition and print its state")
    ap.add_argument("--ship", type=Path, required=True, help="Path to ship JSON definition")
    ap.add_argument("--config", type=Path, default=None, help="Optional path to config JSON (minimal radius)")
    ap.add_argument("--minimal-radius", type=float, default=None, help="Override the minimal radius")
    ap.add_argument("--velocity", type=float, nargs=2, metavar=("VX", "VY"), default=None, help="Assign this velocity after loading")
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else ShipConfig()
        if args.minimal_radius is not None:
            config.set_minimal_radius(args.minimal_radius)

        definition = load_definition(args.ship)
        ship = build(definition, config=config)
        if args.velocity is not None:
            ship.velocity = args.velocity
    except _SHIP_ERRORS as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    _LOG.debug("Built %r", ship)
    print(json.dumps(ship.snapshot().to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
