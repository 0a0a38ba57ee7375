"""
Module: core.models.geometry

Purpose:
    Page and column geometry derived from a LayoutConfig. A pure view of
    the configuration with no lifecycle of its own; recomputed on demand
    by engine.calculator.calculate_layout().

Key Classes:
    - LayoutGeometry: Dimensions, typography metrics and capacity

Used By:
    - engine.estimation: Line metrics for height estimates
    - engine.distributor: Column capacity
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

POINTS_PER_INCH = 72


@dataclass(frozen=True)
class LayoutGeometry:
    """
    Derived layout geometry (immutable).

    Lengths are in inches except font_size and effective_line_height,
    which are in points.

    Attributes:
        page_width: Paper width
        page_height: Paper height
        content_width: Width inside left/right margins
        content_height: Height inside top/bottom margins
        column_width: Width of one column
        column_count: Number of columns
        font_size: Body font size (pt)
        effective_line_height: font_size * line_height (pt)
        characters_per_line: Estimated characters that fit in one column line
        lines_per_column: Whole lines that fit in one column
        estimated_content_density: Characters per square inch of paper (relative)

    Example:
        >>> geometry.line_height_inches
        0.175  # 10.5pt * 1.2 / 72
    """

    page_width: float
    page_height: float
    content_width: float
    content_height: float
    column_width: float
    column_count: int
    font_size: float
    effective_line_height: float
    characters_per_line: int
    lines_per_column: int
    estimated_content_density: float

    @property
    def line_height_inches(self) -> float:
        """Height of one line in inches."""
        return self.effective_line_height / POINTS_PER_INCH

    @property
    def em_inches(self) -> float:
        """One em (the font size) in inches."""
        return self.font_size / POINTS_PER_INCH

    @property
    def column_capacity(self) -> float:
        """Usable height of one column in inches (whole lines only)."""
        return self.lines_per_column * self.line_height_inches

    @property
    def total_capacity(self) -> float:
        """Usable height across all columns in inches."""
        return self.column_capacity * self.column_count

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["column_capacity"] = self.column_capacity
        return data
