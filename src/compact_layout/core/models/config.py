"""
Module: core.models.config

Purpose:
    Layout configuration dataclasses. A LayoutConfig is a fully populated,
    immutable description of paper, columns, typography, spacing, margins
    and math rendering. Construction does NOT check compact bounds; the
    engine only ever holds configs returned by
    engine.validation.merge_and_validate().

Key Classes:
    - PaperSize: Supported paper sizes with their dimensions in inches
    - TypographyConfig, SpacingConfig, MarginConfig, MathRenderingConfig
    - LayoutConfig: Root configuration

Dependencies:
    - dataclasses (std)

Used By:
    - engine.validation: Merge + bound checks
    - engine.calculator: Geometry
    - engine.estimation: Spacing and math padding
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Mapping


class PaperSize(str, Enum):
    """Supported paper sizes."""
    A4 = "a4"
    LETTER = "letter"
    LEGAL = "legal"

    def __str__(self) -> str:
        return self.value

    @property
    def dimensions(self) -> tuple[float, float]:
        """(width, height) in inches."""
        return PAPER_DIMENSIONS_IN[self]


PAPER_DIMENSIONS_IN: dict[PaperSize, tuple[float, float]] = {
    PaperSize.A4: (8.27, 11.69),
    PaperSize.LETTER: (8.5, 11.0),
    PaperSize.LEGAL: (8.5, 14.0),
}


@dataclass(frozen=True)
class FontFamilyConfig:
    """CSS font stacks handed through to the renderer."""
    body: str = 'Times, "Times New Roman", serif'
    heading: str = 'Arial, "Helvetica Neue", sans-serif'
    math: str = 'Computer Modern, "Latin Modern Math", serif'
    code: str = 'Consolas, "Courier New", monospace'


@dataclass(frozen=True)
class TypographyConfig:
    """
    Typography settings.

    Attributes:
        font_size: Body font size in points (compact range 10-11)
        line_height: Line-height multiplier (compact range 1.15-1.25)
        font_family: Font stacks per role
    """
    font_size: float = 10.5
    line_height: float = 1.2
    font_family: FontFamilyConfig = field(default_factory=FontFamilyConfig)


@dataclass(frozen=True)
class HeadingMargins:
    """Space above and below headings (em)."""
    top: float = 0.5
    bottom: float = 0.3


@dataclass(frozen=True)
class SpacingConfig:
    """
    Vertical spacing, all in em.

    Attributes:
        paragraph_spacing: Gap after paragraphs (compact: <= 0.35)
        list_spacing: Gap between list items (compact: <= 0.25, < paragraph_spacing)
        section_spacing: Gap between sections
        heading_margins: Space around headings
    """
    paragraph_spacing: float = 0.3
    list_spacing: float = 0.2
    section_spacing: float = 0.8
    heading_margins: HeadingMargins = field(default_factory=HeadingMargins)


@dataclass(frozen=True)
class MarginConfig:
    """Page margins and the gap between columns, in inches."""
    top: float = 0.75
    bottom: float = 0.75
    left: float = 0.75
    right: float = 0.75
    column_gap: float = 0.25


@dataclass(frozen=True)
class DisplayEquationConfig:
    centered: bool = True
    numbered: bool = True
    full_width: bool = True  # Allow spanning the full page width when a column is too narrow


@dataclass(frozen=True)
class InlineEquationConfig:
    preserve_inline: bool = True
    max_height: float = 1.5  # em


@dataclass(frozen=True)
class MathRenderingConfig:
    """Flags passed through to the math renderer."""
    display_equations: DisplayEquationConfig = field(default_factory=DisplayEquationConfig)
    inline_equations: InlineEquationConfig = field(default_factory=InlineEquationConfig)


@dataclass(frozen=True)
class LayoutConfig:
    """
    Complete layout configuration (immutable).

    Defaults are the compact defaults: A4, two columns, 10.5pt type at
    1.2 line height, tight paragraph and list spacing.

    Example:
        >>> config = LayoutConfig()
        >>> config.paper_size
        <PaperSize.A4: 'a4'>
        >>> config.columns
        2
    """
    paper_size: PaperSize = PaperSize.A4
    columns: int = 2
    typography: TypographyConfig = field(default_factory=TypographyConfig)
    spacing: SpacingConfig = field(default_factory=SpacingConfig)
    margins: MarginConfig = field(default_factory=MarginConfig)
    math_rendering: MathRenderingConfig = field(default_factory=MathRenderingConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a nested plain dict (paper_size as its string value)."""
        data = asdict(self)
        data["paper_size"] = PaperSize(self.paper_size).value
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LayoutConfig:
        """
        Build a config from a (possibly partial) nested mapping.

        Missing keys take their defaults. Values are not bound-checked.

        Raises:
            ValueError: If paper_size is not a known PaperSize
        """
        typography = data.get("typography", {})
        spacing = data.get("spacing", {})
        math = data.get("math_rendering", {})
        return cls(
            paper_size=PaperSize(data.get("paper_size", PaperSize.A4.value)),
            columns=data.get("columns", 2),
            typography=TypographyConfig(
                font_size=typography.get("font_size", 10.5),
                line_height=typography.get("line_height", 1.2),
                font_family=FontFamilyConfig(**typography.get("font_family", {})),
            ),
            spacing=SpacingConfig(
                paragraph_spacing=spacing.get("paragraph_spacing", 0.3),
                list_spacing=spacing.get("list_spacing", 0.2),
                section_spacing=spacing.get("section_spacing", 0.8),
                heading_margins=HeadingMargins(**spacing.get("heading_margins", {})),
            ),
            margins=MarginConfig(**data.get("margins", {})),
            math_rendering=MathRenderingConfig(
                display_equations=DisplayEquationConfig(**math.get("display_equations", {})),
                inline_equations=InlineEquationConfig(**math.get("inline_equations", {})),
            ),
        )
