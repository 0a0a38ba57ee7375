"""
Schema Validation Utilities

Structural validation of the JSON payloads that cross the package boundary.

- Partial configs arrive as nested mappings (usually decoded JSON from the
  config-file layer). Before they are merged onto defaults, the structure is
  checked against ``layout_config.schema.json``: unknown keys, wrong value
  types and unknown paper sizes are reported with their path. Numeric
  compact bounds are NOT checked here; see engine.validation.
- Distribution payloads handed to (or read back from) the renderer are
  checked against ``distribution.schema.json``.
"""

from __future__ import annotations

import json
from enum import Enum
from functools import lru_cache
from importlib import resources
from typing import Any, Mapping

import jsonschema


LAYOUT_CONFIG_SCHEMA = "layout_config"
DISTRIBUTION_SCHEMA = "distribution"

# Bump when the renderer payload layout changes
DISTRIBUTION_SCHEMA_VERSION = 1


@lru_cache(maxsize=None)
def _validator(name: str) -> jsonschema.Draft7Validator:
    """Draft 7 validator for a schema bundled with this package."""
    text = resources.files(__package__).joinpath(f"{name}.schema.json").read_text(encoding="utf-8")
    return jsonschema.Draft7Validator(json.loads(text))


def _plain(value: Any) -> Any:
    """Replace enum members with their values so the JSON schema sees plain data."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def _schema_errors(name: str, data: Any) -> list[str]:
    errors = sorted(
        _validator(name).iter_errors(_plain(data)),
        key=lambda e: [str(p) for p in e.absolute_path],
    )
    return [
        f"{'.'.join(str(p) for p in error.absolute_path) or '<root>'}: {error.message}"
        for error in errors
    ]


def config_schema_errors(data: Any) -> list[str]:
    """
    Check a partial layout config against the schema.

    Args:
        data: Partial configuration mapping

    Returns:
        One message per violation, formatted "<path>: <message>", in a
        stable order. Empty if the payload is structurally valid.
    """
    return _schema_errors(LAYOUT_CONFIG_SCHEMA, data)


def distribution_schema_errors(data: Any) -> list[str]:
    """Check a serialized distribution payload; same message format as config_schema_errors()."""
    return _schema_errors(DISTRIBUTION_SCHEMA, data)
