from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from jsonschema import Draft202012Validator

from ..core.exceptions import ConfigError, SchemaError

SCHEMA_DIR = Path(__file__).with_name("schemas")

_LOG = logging.getLogger(__name__)


def load_json(path: Path) -> Mapping[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except Exception as e:
        raise ConfigError(
            f"Failed to read JSON {path}: {e}",
            config_path=path,
        ) from e
    if not isinstance(data, dict):
        raise ConfigError("Top-level JSON value must be an object", config_path=path)
    return data


def load_schema(schema_path: Path) -> Mapping[str, Any]:
    try:
        return json.loads(schema_path.read_text(encoding="utf-8"))
    except Exception as e:
        raise SchemaError(
            f"Failed to read schema {schema_path}: {e}",
            schema_path=schema_path,
        ) from e


def validate(
    data: Mapping[str, Any], schema: Mapping[str, Any], schema_name: str
) -> None:
    try:
        Draft202012Validator(schema).validate(data)
    except Exception as e:
        raise SchemaError(
            f"{schema_name} validation failed: {e}",
            schema_name=schema_name,
            validation_error=e,
        ) from e
    _LOG.debug("%s document passed schema validation", schema_name)
