"""
Serialization Utilities

Conversion between layout models and the JSON payloads exchanged with the
config-file layer and the external renderer.

- ``deserialize_config`` validates through merge_and_validate(), so a
  config read from disk can never bypass the compact bounds
- ``serialize_distribution`` wraps a distribution (and optionally the
  geometry it was laid out for) in a versioned renderer payload;
  ``deserialize_distribution`` checks such a payload against
  ``distribution.schema.json`` and rebuilds the models
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Optional

from ..errors import LayoutError, LayoutErrorCode
from ..models.blocks import ContentBlock, ContentType
from ..models.config import LayoutConfig
from ..models.distribution import Column, ColumnDistribution
from ..models.geometry import LayoutGeometry
from ..schemas.validator import DISTRIBUTION_SCHEMA_VERSION, distribution_schema_errors


# ─────────────────────────────────────────────────────────────────────────────
# Configuration
# ─────────────────────────────────────────────────────────────────────────────

def deserialize_config(data: Mapping[str, Any]) -> LayoutConfig:
    """
    Deserialize and validate a (partial) config dict.

    Raises:
        LayoutError: INVALID_CONFIG for structural or bound violations
    """
    from compact_layout.engine.validation import merge_and_validate

    return merge_and_validate(data)


# ─────────────────────────────────────────────────────────────────────────────
# Distribution payloads
# ─────────────────────────────────────────────────────────────────────────────

def serialize_distribution(
    distribution: ColumnDistribution,
    geometry: Optional[LayoutGeometry] = None,
) -> dict[str, Any]:
    """
    Serialize a distribution to a renderer payload.

    Args:
        distribution: Result of distribute()
        geometry: Geometry the distribution was computed for; included so
            the renderer can size columns without recomputing it

    Returns:
        Dictionary suitable for JSON serialization. Columns are emitted
        left to right with blocks in render order.
    """
    payload: dict[str, Any] = {"schema_version": DISTRIBUTION_SCHEMA_VERSION}
    if geometry is not None:
        payload["geometry"] = geometry.to_dict()
    payload.update(distribution.to_dict())
    return payload


def _deserialize_block(data: Mapping[str, Any]) -> ContentBlock:
    return ContentBlock(
        id=data["id"],
        type=ContentType(data["type"]),
        content=data["content"],
        estimated_height=data["estimated_height"],
        breakable=data["breakable"],
        priority=data["priority"],
        source_id=data["source_id"],
        part=data["part"],
    )


def deserialize_distribution(
    data: Mapping[str, Any],
    *,
    validate: bool = True,
) -> ColumnDistribution:
    """
    Rebuild a ColumnDistribution from a renderer payload.

    Args:
        data: Dictionary from JSON
        validate: Whether to check the payload against the schema first

    Raises:
        LayoutError: INVALID_CONTENT_BLOCK if validate=True and the payload
            is malformed (all schema messages on ``error.errors``)
    """
    if validate:
        errors = distribution_schema_errors(data)
        if errors:
            raise LayoutError(
                f"Invalid distribution payload: {errors[0]}",
                LayoutErrorCode.INVALID_CONTENT_BLOCK,
                suggestion="Pass a payload produced by serialize_distribution()",
                section="distribution",
                errors=errors,
            )

    columns = tuple(
        Column(
            index=column["index"],
            content=tuple(_deserialize_block(block) for block in column["content"]),
            estimated_height=column["estimated_height"],
            capacity=column["capacity"],
        )
        for column in data["columns"]
    )
    return ColumnDistribution(
        columns=columns,
        total_height=data["total_height"],
        balance_score=data["balance_score"],
        overflow_risk=data["overflow_risk"],
        overflow_block_ids=tuple(data.get("overflow_block_ids", [])),
        warnings=list(data.get("warnings", [])),
    )


def distribution_to_json(
    distribution: ColumnDistribution,
    geometry: Optional[LayoutGeometry] = None,
    *,
    indent: int | None = 2,
) -> str:
    """Serialize a distribution payload to a JSON string."""
    return json.dumps(serialize_distribution(distribution, geometry), indent=indent, ensure_ascii=False)


# ─────────────────────────────────────────────────────────────────────────────
# Files
# ─────────────────────────────────────────────────────────────────────────────

def save_distribution_json(
    path: Path,
    distribution: ColumnDistribution,
    geometry: Optional[LayoutGeometry] = None,
) -> None:
    """Write a distribution payload to a JSON file, creating parent folders."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(distribution_to_json(distribution, geometry))


def load_distribution_json(path: Path, *, validate: bool = True) -> ColumnDistribution:
    """
    Load a distribution payload from a JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        LayoutError: If validate=True and the payload is malformed
    """
    if not path.exists():
        raise FileNotFoundError(f"Distribution file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return deserialize_distribution(data, validate=validate)
