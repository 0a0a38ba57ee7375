"""
Utils Package

Serialization helpers for configs and distribution payloads.
"""

from .serialization import (
    deserialize_config,
    serialize_distribution,
    deserialize_distribution,
    distribution_to_json,
    save_distribution_json,
    load_distribution_json,
)

__all__ = [
    "deserialize_config",
    "serialize_distribution",
    "deserialize_distribution",
    "distribution_to_json",
    "save_distribution_json",
    "load_distribution_json",
]
