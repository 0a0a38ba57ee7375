"""
Module: engine.presets

Purpose:
    Named margin presets and layout profiles, expressed as partial config
    mappings that go through the normal merge_and_validate() path.

Key Functions:
    - preset_config(): Build a partial config from preset names

Used By:
    - Callers translating user-facing options ("narrow", "compact") into
      engine configuration
"""

from __future__ import annotations

from typing import Any, Optional

from compact_layout.core.errors import LayoutError, LayoutErrorCode

MARGIN_PRESETS: dict[str, dict[str, float]] = {
    "narrow": {"top": 0.5, "bottom": 0.5, "left": 0.5, "right": 0.5, "column_gap": 0.25},
    "normal": {"top": 1.0, "bottom": 1.0, "left": 1.0, "right": 1.0, "column_gap": 0.5},
    "wide": {"top": 1.5, "bottom": 1.5, "left": 1.5, "right": 1.5, "column_gap": 0.75},
}

PROFILES: dict[str, dict[str, Any]] = {
    "compact": {
        "typography": {"line_height": 1.15},
        "spacing": {
            "paragraph_spacing": 0.25,
            "list_spacing": 0.15,
            "section_spacing": 0.5,
            "heading_margins": {"top": 0.5, "bottom": 0.25},
        },
    },
    "standard": {
        "typography": {"line_height": 1.25},
        "spacing": {
            "paragraph_spacing": 0.35,
            "list_spacing": 0.25,
            "section_spacing": 0.75,
            "heading_margins": {"top": 0.75, "bottom": 0.5},
        },
    },
}


def _lookup(table: dict[str, Any], name: str, kind: str) -> Any:
    if name not in table:
        raise LayoutError(
            f"Unknown {kind} preset: {name!r}",
            LayoutErrorCode.INVALID_CONFIG,
            suggestion=f"Use one of: {', '.join(table)}",
            section="presets",
        )
    return table[name]


def preset_config(
    profile: str = "compact",
    margins: str = "narrow",
    columns: Optional[int] = None,
    font_size: Optional[float] = None,
) -> dict[str, Any]:
    """
    Build a partial config from preset names.

    Args:
        profile: "compact" or "standard"
        margins: "narrow", "normal" or "wide"
        columns: Optional column count
        font_size: Optional body font size in points

    Returns:
        Partial config mapping for LayoutEngine / merge_and_validate()

    Raises:
        LayoutError: INVALID_CONFIG for unknown preset names

    Example:
        >>> preset_config("standard", "wide")["margins"]["left"]
        1.5
    """
    chosen = _lookup(PROFILES, profile, "profile")
    config: dict[str, Any] = {
        "typography": dict(chosen["typography"]),
        "spacing": {
            **chosen["spacing"],
            "heading_margins": dict(chosen["spacing"]["heading_margins"]),
        },
        "margins": dict(_lookup(MARGIN_PRESETS, margins, "margin")),
    }
    if columns is not None:
        config["columns"] = columns
    if font_size is not None:
        config["typography"]["font_size"] = font_size
    return config
