from __future__ import annotations

import logging
import threading
from typing import Any

from .types import DEFAULT_MINIMAL_RADIUS
from .validation import check_minimal_radius, is_valid_radius

_LOG = logging.getLogger(__name__)


class ShipConfig:
    """
    Holder of the minimal radius shared by every ship built against it.

    Ships keep a reference to their config rather than a copy, so a change is
    seen by all later validity checks. Radii already stored are not re-checked.
    """

    def __init__(self, minimal_radius: float = DEFAULT_MINIMAL_RADIUS) -> None:
        self._minimal_radius = check_minimal_radius(minimal_radius)
        self._lock = threading.Lock()

    @property
    def minimal_radius(self) -> float:
        with self._lock:
            return self._minimal_radius

    def set_minimal_radius(self, minimal_radius: float) -> None:
        value = check_minimal_radius(minimal_radius)
        with self._lock:
            previous = self._minimal_radius
            self._minimal_radius = value
        _LOG.info("Minimal radius changed from %s to %s", previous, value)

    def is_valid_radius(self, radius: Any) -> bool:
        return is_valid_radius(radius, self.minimal_radius)

    def __repr__(self) -> str:
        return f"ShipConfig(minimal_radius={self.minimal_radius!r})"


_DEFAULT_CONFIG = ShipConfig()


def default_config() -> ShipConfig:
    """Return the process-wide config used by ships built without an explicit one."""
    return _DEFAULT_CONFIG


def get_minimal_radius() -> float:
    return _DEFAULT_CONFIG.minimal_radius


def set_minimal_radius(minimal_radius: float) -> None:
    _DEFAULT_CONFIG.set_minimal_radius(minimal_radius)
