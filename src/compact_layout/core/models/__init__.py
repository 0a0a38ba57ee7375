"""
Models Package

Immutable data models shared by the engine: configuration, geometry,
content blocks and column distributions.
"""

from .config import (
    PaperSize,
    PAPER_DIMENSIONS_IN,
    FontFamilyConfig,
    TypographyConfig,
    HeadingMargins,
    SpacingConfig,
    MarginConfig,
    DisplayEquationConfig,
    InlineEquationConfig,
    MathRenderingConfig,
    LayoutConfig,
)
from .geometry import LayoutGeometry, POINTS_PER_INCH
from .blocks import ContentType, ContentBlock
from .distribution import Column, ColumnDistribution

__all__ = [
    "PaperSize",
    "PAPER_DIMENSIONS_IN",
    "FontFamilyConfig",
    "TypographyConfig",
    "HeadingMargins",
    "SpacingConfig",
    "MarginConfig",
    "DisplayEquationConfig",
    "InlineEquationConfig",
    "MathRenderingConfig",
    "LayoutConfig",
    "LayoutGeometry",
    "POINTS_PER_INCH",
    "ContentType",
    "ContentBlock",
    "Column",
    "ColumnDistribution",
]
