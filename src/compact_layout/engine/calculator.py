"""
Module: engine.calculator

Purpose:
    Derive page and column geometry from a layout configuration.
    Pure function; no state, no I/O.

Key Functions:
    - calculate_layout(): LayoutConfig -> LayoutGeometry

Algorithm:
    content area = paper - margins
    column width = (content width - gaps) / columns
    line height (pt) = font_size * line_height
    lines per column = floor(content height / line height in inches)
    characters per line = floor(column width in pt / average char width)

Used By:
    - engine.validation: Geometry sanity check
    - engine.engine.LayoutEngine.calculate_layout()
"""

from __future__ import annotations

import math

from compact_layout.core.models.config import LayoutConfig, PaperSize
from compact_layout.core.models.geometry import LayoutGeometry, POINTS_PER_INCH

# Average glyph width as a fraction of the font size (monospace-equivalent)
AVERAGE_CHAR_WIDTH_EM = 0.6


def calculate_layout(config: LayoutConfig) -> LayoutGeometry:
    """
    Calculate layout geometry for a configuration.

    Args:
        config: Layout configuration (assumed already validated)

    Returns:
        LayoutGeometry for the configured paper and columns

    Example:
        >>> geometry = calculate_layout(LayoutConfig())
        >>> geometry.page_width, geometry.column_count
        (8.27, 2)
    """
    page_width, page_height = PaperSize(config.paper_size).dimensions
    margins = config.margins
    typography = config.typography
    columns = config.columns

    content_width = page_width - margins.left - margins.right
    content_height = page_height - margins.top - margins.bottom
    column_width = (content_width - (columns - 1) * margins.column_gap) / columns

    effective_line_height = typography.font_size * typography.line_height
    lines_per_column = math.floor(content_height / (effective_line_height / POINTS_PER_INCH))

    avg_char_width = typography.font_size * AVERAGE_CHAR_WIDTH_EM
    characters_per_line = math.floor(column_width * POINTS_PER_INCH / avg_char_width)

    total_characters = characters_per_line * lines_per_column * columns
    estimated_content_density = total_characters / (page_width * page_height)

    return LayoutGeometry(
        page_width=page_width,
        page_height=page_height,
        content_width=content_width,
        content_height=content_height,
        column_width=column_width,
        column_count=columns,
        font_size=typography.font_size,
        effective_line_height=effective_line_height,
        characters_per_line=characters_per_line,
        lines_per_column=lines_per_column,
        estimated_content_density=estimated_content_density,
    )
