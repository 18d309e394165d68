from .core.types import (
    ShipState,
    ShipDefinition,
    SPEED_OF_LIGHT,
    DEFAULT_MINIMAL_RADIUS,
)
from .core.exceptions import (
    SchemaError,
    ConfigError,
    IllegalPositionError,
    IllegalRadiusError,
    IllegalMinimalRadiusError,
    IllegalVelocityError,
)
from .core.config import (
    ShipConfig,
    default_config,
    get_minimal_radius,
    set_minimal_radius,
)
from .model.ship import Ship
