from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Sequence


class SchemaError(Exception):
    """Raised when JSON schema validation fails or a schema cannot be read."""

    def __init__(
        self,
        message: str,
        schema_path: Optional[str | Path] = None,
        schema_name: Optional[str] = None,
        validation_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.schema_path = str(schema_path) if schema_path else None
        self.schema_name = schema_name
        self.validation_error = validation_error

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.schema_name:
            parts.append(f"Schema: {self.schema_name}")
        if self.schema_path:
            parts.append(f"Path: {self.schema_path}")
        return " | ".join(parts)


class ConfigError(Exception):
    """Raised when a ship definition or config file cannot be read or is inconsistent."""

    def __init__(
        self,
        message: str,
        config_path: Optional[str | Path] = None,
        field_name: Optional[str] = None,
        field_value: Optional[Any] = None,
    ):
        super().__init__(message)
        self.config_path = str(config_path) if config_path else None
        self.field_name = field_name
        self.field_value = field_value

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.field_name:
            parts.append(f"Field: {self.field_name}")
            if self.field_value is not None:
                parts.append(f"Value: {self.field_value}")
        if self.config_path:
            parts.append(f"Path: {self.config_path}")
        return " | ".join(parts)


class IllegalPositionError(ValueError):
    """Raised when a position is not a 2-vector of finite coordinates."""

    def __init__(
        self,
        message: str = "Illegal position",
        position: Optional[Sequence[Any]] = None,
    ):
        super().__init__(message)
        self.position = position

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.position is not None:
            parts.append(f"Position: {list(self.position)}")
        return " | ".join(parts)


class IllegalRadiusError(ValueError):
    """Raised when a radius is below the minimal radius."""

    def __init__(
        self,
        message: str = "Illegal radius",
        radius: Optional[float] = None,
        minimal_radius: Optional[float] = None,
    ):
        super().__init__(message)
        self.radius = radius
        self.minimal_radius = minimal_radius

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.radius is not None:
            parts.append(f"Radius: {self.radius}")
        if self.minimal_radius is not None:
            parts.append(f"Minimal radius: {self.minimal_radius}")
        return " | ".join(parts)


class IllegalMinimalRadiusError(ValueError):
    """Raised when a minimal radius is not strictly positive."""

    def __init__(
        self,
        message: str = "Illegal minimal radius",
        minimal_radius: Optional[float] = None,
    ):
        super().__init__(message)
        self.minimal_radius = minimal_radius

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.minimal_radius is not None:
            parts.append(f"Value: {self.minimal_radius}")
        return " | ".join(parts)


class IllegalVelocityError(ValueError):
    """Raised when a velocity is not a 2-vector of finite components."""

    def __init__(
        self,
        message: str = "Illegal velocity",
        velocity: Optional[Sequence[Any]] = None,
    ):
        super().__init__(message)
        self.velocity = velocity

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.velocity is not None:
            parts.append(f"Velocity: {list(self.velocity)}")
        return " | ".join(parts)
