"""
Schemas Package

JSON Schema definitions and structural validation for config and
distribution payloads.
"""

from .validator import (
    config_schema_errors,
    distribution_schema_errors,
    LAYOUT_CONFIG_SCHEMA,
    DISTRIBUTION_SCHEMA,
    DISTRIBUTION_SCHEMA_VERSION,
)

__all__ = [
    "config_schema_errors",
    "distribution_schema_errors",
    "LAYOUT_CONFIG_SCHEMA",
    "DISTRIBUTION_SCHEMA",
    "DISTRIBUTION_SCHEMA_VERSION",
]
