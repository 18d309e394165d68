"""Tests for the validation helpers, config holder and error types."""

from __future__ import annotations

import math
import threading

import numpy as np
import pytest

from asteroids.core.config import ShipConfig
from asteroids.core.exceptions import (
    ConfigError,
    IllegalMinimalRadiusError,
    IllegalPositionError,
    IllegalRadiusError,
    IllegalVelocityError,
    SchemaError,
)
from asteroids.core.validation import (
    as_vector2,
    check_minimal_radius,
    check_position,
    check_radius,
    check_velocity,
    clamp_to_speed_limit,
    is_valid_radius,
    is_valid_velocity,
    speed_of,
)


class TestVectorHelpers:
    def test_as_vector2_copies(self):
        source = np.array([1.0, 2.0])
        arr = as_vector2(source)
        source[0] = 5.0
        assert arr[0] == 1.0
        assert arr.dtype == np.float64

    def test_as_vector2_rejects_other_shapes(self):
        assert as_vector2([1.0, 2.0, 3.0]) is None
        assert as_vector2(3.0) is None
        assert as_vector2({"x": 1.0}) is None

    def test_check_position_returns_array(self):
        arr = check_position((1, 2))
        assert isinstance(arr, np.ndarray)
        assert np.array_equal(arr, [1.0, 2.0])

    def test_check_position_error_carries_candidate(self):
        with pytest.raises(IllegalPositionError) as exc_info:
            check_position([float("nan"), 1.0])
        assert "Position:" in str(exc_info.value)

    def test_check_velocity_rejects_infinite(self):
        with pytest.raises(IllegalVelocityError):
            check_velocity([0.0, float("-inf")])

    def test_is_valid_velocity_boundary(self):
        assert is_valid_velocity((3.0, 4.0), 5.0)
        assert not is_valid_velocity((3.0, 4.0), 4.999)


class TestClamp:
    def test_within_limit_returns_copy(self):
        v = np.array([1.0, 1.0])
        out = clamp_to_speed_limit(v, 10.0)
        assert out is not v
        assert np.array_equal(out, v)

    def test_huge_finite_components_keep_direction(self):
        out = clamp_to_speed_limit(np.array([1.7e308, -1.7e308]), 300000.0)
        assert speed_of(out) <= 300000.0
        assert math.isclose(speed_of(out), 300000.0, rel_tol=1e-12)
        assert out[0] > 0.0
        assert math.isclose(out[0], -out[1])

    def test_scales_to_limit(self):
        out = clamp_to_speed_limit(np.array([6.0, 8.0]), 5.0)
        assert np.allclose(out, [3.0, 4.0])
        assert speed_of(out) <= 5.0

    @pytest.mark.parametrize("limit", [1.0, 7.0, 0.1, 299999.99, 3.0e5])
    def test_never_exceeds_limit(self, limit):
        rng = np.random.default_rng(1234)
        for _ in range(200):
            angle = rng.uniform(0.0, 2.0 * math.pi)
            magnitude = limit * (1.0 + rng.uniform(1e-6, 1e3))
            v = np.array([math.cos(angle), math.sin(angle)]) * magnitude
            out = clamp_to_speed_limit(v, limit)
            assert speed_of(out) <= limit
            assert math.isclose(speed_of(out), limit, rel_tol=1e-12)


class TestRadiusChecks:
    def test_is_valid_radius(self):
        assert is_valid_radius(10, 10.0)
        assert not is_valid_radius(9, 10.0)
        assert not is_valid_radius("big", 10.0)

    def test_check_radius_returns_float(self):
        assert check_radius(12, 10.0) == 12.0

    def test_check_radius_error_payload(self):
        with pytest.raises(IllegalRadiusError) as exc_info:
            check_radius(5.0, 10.0)
        err = exc_info.value
        assert err.radius == 5.0
        assert err.minimal_radius == 10.0

    def test_check_minimal_radius(self):
        assert check_minimal_radius(0.5) == 0.5
        with pytest.raises(IllegalMinimalRadiusError):
            check_minimal_radius(0)


class TestShipConfig:
    def test_default_value(self):
        assert ShipConfig().minimal_radius == 10.0

    def test_rejects_non_positive_at_construction(self):
        with pytest.raises(IllegalMinimalRadiusError):
            ShipConfig(minimal_radius=-2.0)

    def test_is_valid_radius(self):
        config = ShipConfig(minimal_radius=3.0)
        assert config.is_valid_radius(3.0)
        assert not config.is_valid_radius(2.9)

    def test_concurrent_updates_leave_a_written_value(self):
        config = ShipConfig()
        values = [float(i) for i in range(1, 51)]

        def worker(value: float) -> None:
            for _ in range(100):
                config.set_minimal_radius(value)
                assert config.minimal_radius > 0

        threads = [threading.Thread(target=worker, args=(v,)) for v in values]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert config.minimal_radius in values

    def test_repr(self):
        assert repr(ShipConfig(4.0)) == "ShipConfig(minimal_radius=4.0)"


class TestErrors:
    @pytest.mark.parametrize(
        "exc_type, text",
        [
            (IllegalPositionError, "Illegal position"),
            (IllegalRadiusError, "Illegal radius"),
            (IllegalMinimalRadiusError, "Illegal minimal radius"),
            (IllegalVelocityError, "Illegal velocity"),
        ],
    )
    def test_raise_without_payload(self, exc_type, text):
        with pytest.raises(exc_type) as exc_info:
            raise exc_type()
        assert str(exc_info.value) == text
        assert isinstance(exc_info.value, ValueError)

    def test_radius_error_str(self):
        err = IllegalRadiusError("too small", radius=5.0, minimal_radius=10.0)
        assert str(err) == "too small | Radius: 5.0 | Minimal radius: 10.0"

    def test_config_error_str(self):
        err = ConfigError("bad", config_path="ship.json", field_name="radius", field_value=1)
        assert str(err) == "bad | Field: radius | Value: 1 | Path: ship.json"

    def test_schema_error_str(self):
        err = SchemaError("invalid", schema_name="Ship")
        assert str(err) == "invalid | Schema: Ship"
