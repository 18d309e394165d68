"""Pytest configuration and fixtures."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Callable, Mapping

import pytest

# Ensure project root is on path so the root-level cli package is importable
_project_root = Path(__file__).resolve().parents[1]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from asteroids.core.config import default_config
from asteroids.core.types import DEFAULT_MINIMAL_RADIUS


@pytest.fixture(autouse=True)
def reset_minimal_radius():
    """Restore the process-wide minimal radius after every test."""
    yield
    default_config().set_minimal_radius(DEFAULT_MINIMAL_RADIUS)


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Mapping[str, Any]], Path]:
    """Write a mapping to a JSON file under tmp_path and return its path."""

    def _write(name: str, payload: Mapping[str, Any]) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
