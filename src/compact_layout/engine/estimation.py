"""
Module: engine.estimation

Purpose:
    Estimate the rendered height of a content block before it is rendered.
    True height depends on font metrics and line wrapping done downstream,
    so estimates are heuristics from character counts and line metrics.
    The strategy is pluggable so a measuring estimator can replace the
    heuristic without touching the distributor.

Key Classes:
    - HeightEstimator: Protocol for estimation strategies
    - HeuristicHeightEstimator: Default character-count heuristic

Used By:
    - engine.factory.ContentBlockFactory
"""

from __future__ import annotations

import math
import re
from typing import Protocol, runtime_checkable

from compact_layout.core.models.blocks import ContentType
from compact_layout.core.models.config import MathRenderingConfig, SpacingConfig
from compact_layout.core.models.geometry import LayoutGeometry

# Space above and below a display equation, in em
DISPLAY_EQUATION_PADDING_EM = 0.5

# Minimum lines for a display environment (align, cases, ...) and a worked example
MIN_DISPLAY_ENV_LINES = 2
MIN_EXAMPLE_LINES = 3

_BULLET_RE = re.compile(r"^\s*(?:[-*+•]|\d+[.)])\s+")
# Splits "- a - b" style single-line lists on inline bullet markers
_INLINE_BULLET_RE = re.compile(r"\s+(?=[-*+•]\s)")
_LATEX_ROW_BREAK = "\\\\"


@runtime_checkable
class HeightEstimator(Protocol):
    """Strategy estimating a block's rendered height in inches."""

    def estimate_height(
        self,
        content: str,
        content_type: ContentType,
        geometry: LayoutGeometry,
    ) -> float:
        ...


def wrapped_lines(text: str, characters_per_line: int) -> int:
    """Lines needed for text wrapped at characters_per_line (0 for blank text)."""
    text = text.strip()
    if not text:
        return 0
    return math.ceil(len(text) / max(1, characters_per_line))


def split_items(content: str) -> list[str]:
    """
    Split list or table content into items.

    Items are separated by line breaks; a single line containing several
    bullet markers is split on the markers.

    Example:
        >>> split_items("- a\\n- b\\n- c")
        ['- a', '- b', '- c']
    """
    lines = [line for line in content.splitlines() if line.strip()]
    if len(lines) == 1 and _BULLET_RE.match(lines[0]):
        return [part for part in _INLINE_BULLET_RE.split(lines[0].strip()) if part.strip()]
    return lines


class HeuristicHeightEstimator:
    """
    Character-count height heuristic.

    base = ceil(len(content) / characters_per_line) * line height, then:
    - text, definition, theorem: + paragraph spacing
    - heading: + heading top and bottom margins
    - formula: at least one line per LaTeX row, display environments at
      least two lines, + display-equation padding above and below;
      full-width display equations wrap at the content width
    - example: at least three lines + paragraph spacing
    - list, table: lines counted per item/row + list spacing between items

    Args:
        spacing: Spacing section of the active config (em values)
        math_rendering: Math section of the active config
    """

    def __init__(self, spacing: SpacingConfig, math_rendering: MathRenderingConfig | None = None):
        self.spacing = spacing
        self.math_rendering = math_rendering or MathRenderingConfig()

    def estimate_height(
        self,
        content: str,
        content_type: ContentType,
        geometry: LayoutGeometry,
    ) -> float:
        content_type = ContentType(content_type)
        line = geometry.line_height_inches
        em = geometry.em_inches
        cpl = geometry.characters_per_line

        if content_type in (ContentType.LIST, ContentType.TABLE):
            items = split_items(content)
            lines = sum(max(1, wrapped_lines(item, cpl)) for item in items)
            gaps = max(0, len(items) - 1) * self.spacing.list_spacing
            return lines * line + gaps * em + self.spacing.paragraph_spacing * em

        if content_type == ContentType.FORMULA:
            if self.math_rendering.display_equations.full_width and geometry.column_width > 0:
                # Full-width display equations wrap at the page content width
                cpl = math.floor(cpl * geometry.content_width / geometry.column_width)
            lines = max(1, wrapped_lines(content, cpl))
            rows = content.count(_LATEX_ROW_BREAK) + 1
            lines = max(lines, rows)
            if "\\begin{" in content:
                lines = max(lines, MIN_DISPLAY_ENV_LINES)
            return lines * line + 2 * DISPLAY_EQUATION_PADDING_EM * em

        lines = max(1, wrapped_lines(content, cpl))

        if content_type == ContentType.HEADING:
            margins = self.spacing.heading_margins
            return lines * line + (margins.top + margins.bottom) * em

        if content_type == ContentType.EXAMPLE:
            lines = max(lines, MIN_EXAMPLE_LINES)

        return lines * line + self.spacing.paragraph_spacing * em
