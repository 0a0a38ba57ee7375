"""
Module: engine.validation

Purpose:
    Merge partial layout configuration onto compact defaults and enforce
    the numeric bounds that define a compact layout. Out-of-bound values
    are hard errors; nothing is clamped.

Key Functions:
    - apply_defaults(): Partial mapping -> full LayoutConfig (structure checked)
    - validate(): Report every violation and warning without raising
    - merge_and_validate(): Merge + validate, raising LayoutError on violation

Bounds:
    font_size in [10, 11] pt, line_height in [1.15, 1.25],
    paragraph_spacing <= 0.35 em, list_spacing <= 0.25 em and
    < paragraph_spacing, columns in {1, 2, 3}, margins >= 0.

Dependencies:
    - core.schemas: Structural check of partial payloads (jsonschema)
    - engine.calculator: Geometry sanity once bounds pass

Used By:
    - engine.engine.LayoutEngine: Construction and update_config()
    - engine.presets: Preset configs
    - core.utils.serialization: deserialize_config()
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Mapping, NamedTuple, Optional, Union

from compact_layout.core.errors import LayoutError, LayoutErrorCode
from compact_layout.core.models.config import LayoutConfig, PaperSize
from compact_layout.core.schemas import config_schema_errors

from .calculator import calculate_layout

logger = logging.getLogger(__name__)

FONT_SIZE_RANGE = (10.0, 11.0)
LINE_HEIGHT_RANGE = (1.15, 1.25)
MAX_PARAGRAPH_SPACING = 0.35
MAX_LIST_SPACING = 0.25
ALLOWED_COLUMNS = (1, 2, 3)

# Margins wider than this start to cost noticeable density
WIDE_MARGIN_IN = 1.0

PartialConfig = Union[Mapping[str, Any], LayoutConfig, None]


class _Violation(NamedTuple):
    section: str
    message: str
    suggestion: str


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validate().

    Attributes:
        valid: True when there are no errors
        errors: Bound or structure violations
        warnings: Non-fatal compactness concerns
        config: The merged config, when the payload was structurally valid
    """
    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    config: Optional[LayoutConfig] = None


def _deep_merge(base: dict[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Merge override onto base, recursing into nested sections."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _as_mapping(partial: PartialConfig) -> Mapping[str, Any]:
    if partial is None:
        return {}
    if isinstance(partial, LayoutConfig):
        return partial.to_dict()
    return partial


def apply_defaults(partial: PartialConfig = None, base: Optional[LayoutConfig] = None) -> LayoutConfig:
    """
    Merge a partial configuration onto a base config.

    Nested sections are merged key by key, so ``{"typography": {"font_size": 10}}``
    keeps the base line height and font families.

    Args:
        partial: Partial nested mapping (or a full LayoutConfig)
        base: Config to merge onto; compact defaults when omitted

    Returns:
        Merged LayoutConfig. Compact bounds are NOT checked.

    Raises:
        LayoutError: INVALID_CONFIG if the payload has unknown keys or wrong types
    """
    overrides = _as_mapping(partial)
    if not isinstance(overrides, Mapping):
        raise LayoutError(
            f"Layout configuration must be a mapping, got {type(overrides).__name__}",
            LayoutErrorCode.INVALID_CONFIG,
            suggestion="Pass a dict such as {'columns': 2}",
        )
    schema_errors = config_schema_errors(overrides)
    if schema_errors:
        raise LayoutError(
            f"Invalid layout configuration: {schema_errors[0]}",
            LayoutErrorCode.INVALID_CONFIG,
            suggestion="Remove unknown keys and use numbers for sizes, e.g. {'typography': {'font_size': 10.5}}",
            errors=schema_errors,
        )
    base_dict = (base or LayoutConfig()).to_dict()
    return LayoutConfig.from_dict(_deep_merge(base_dict, overrides))


_NUMERIC_FIELDS = (
    ("typography", ("typography", "font_size")),
    ("typography", ("typography", "line_height")),
    ("spacing", ("spacing", "paragraph_spacing")),
    ("spacing", ("spacing", "list_spacing")),
    ("spacing", ("spacing", "section_spacing")),
    ("spacing", ("spacing", "heading_margins", "top")),
    ("spacing", ("spacing", "heading_margins", "bottom")),
    ("margins", ("margins", "top")),
    ("margins", ("margins", "bottom")),
    ("margins", ("margins", "left")),
    ("margins", ("margins", "right")),
    ("margins", ("margins", "column_gap")),
    ("math_rendering", ("math_rendering", "inline_equations", "max_height")),
)


def _check_finite(config: LayoutConfig) -> list[_Violation]:
    """Reject NaN and infinity in numeric fields."""
    violations = []
    for section, path in _NUMERIC_FIELDS:
        value: Any = config
        for name in path:
            value = getattr(value, name)
        if isinstance(value, (int, float)) and not math.isfinite(value):
            violations.append(_Violation(
                section,
                f"{'.'.join(path)} must be a finite number, got {value}",
                "Use a finite number (NaN and Infinity are not valid sizes)",
            ))
    return violations


def _check_bounds(config: LayoutConfig) -> list[_Violation]:
    """Collect every compact-bound violation in config order."""
    non_finite = _check_finite(config)
    if non_finite:
        return non_finite

    violations: list[_Violation] = []
    typography, spacing, margins = config.typography, config.spacing, config.margins

    try:
        PaperSize(config.paper_size)
    except ValueError:
        violations.append(_Violation(
            "layout",
            f"Paper size {config.paper_size!r} is not supported",
            "Use one of a4, letter, legal (e.g. a4)",
        ))

    if type(config.columns) is not int or config.columns not in ALLOWED_COLUMNS:
        violations.append(_Violation(
            "layout",
            f"Column count {config.columns} is outside supported range (1-3)",
            "Use 1-3 columns for compact layout (e.g. 2)",
        ))

    low, high = FONT_SIZE_RANGE
    if not low <= typography.font_size <= high:
        violations.append(_Violation(
            "typography",
            f"Font size {typography.font_size}pt is outside compact range (10-11pt)",
            "Use a font size between 10-11pt for compact layout (e.g. 10.5pt)",
        ))

    low, high = LINE_HEIGHT_RANGE
    if not low <= typography.line_height <= high:
        violations.append(_Violation(
            "typography",
            f"Line height {typography.line_height} is outside compact range (1.15-1.25)",
            "Use a line height between 1.15-1.25 for compact layout (e.g. 1.2)",
        ))

    if spacing.paragraph_spacing > MAX_PARAGRAPH_SPACING:
        violations.append(_Violation(
            "spacing",
            f"Paragraph spacing {spacing.paragraph_spacing}em exceeds compact limit (≤0.35em)",
            "Reduce paragraph spacing to ≤0.35em for compact layout (e.g. 0.3em)",
        ))

    if spacing.list_spacing > MAX_LIST_SPACING:
        violations.append(_Violation(
            "spacing",
            f"List spacing {spacing.list_spacing}em exceeds compact limit (≤0.25em)",
            "Reduce list spacing to ≤0.25em for compact layout (e.g. 0.2em)",
        ))
    elif spacing.list_spacing >= spacing.paragraph_spacing:
        violations.append(_Violation(
            "spacing",
            f"List spacing {spacing.list_spacing}em must be less than paragraph spacing "
            f"{spacing.paragraph_spacing}em",
            "Keep list spacing below paragraph spacing for compact layout "
            "(e.g. list 0.2em with paragraph 0.3em)",
        ))

    for name in ("paragraph_spacing", "list_spacing", "section_spacing"):
        value = getattr(spacing, name)
        if value < 0:
            violations.append(_Violation(
                "spacing",
                f"{name.replace('_', ' ').capitalize()} {value}em cannot be negative",
                f"Use a non-negative {name.replace('_', ' ')} for compact layout (e.g. 0.2em)",
            ))
    for name in ("top", "bottom"):
        value = getattr(spacing.heading_margins, name)
        if value < 0:
            violations.append(_Violation(
                "spacing",
                f"Heading {name} margin {value}em cannot be negative",
                f"Use a non-negative heading {name} margin (e.g. 0.3em)",
            ))

    for name in ("top", "bottom", "left", "right", "column_gap"):
        value = getattr(margins, name)
        if value < 0:
            label = "Column gap" if name == "column_gap" else f"{name.capitalize()} margin"
            violations.append(_Violation(
                "margins",
                f"{label} {value}in cannot be negative",
                f"Use a non-negative {label.lower()} for compact layout (e.g. 0.5in)",
            ))

    if not violations:
        violations.extend(_check_geometry(config))
    return violations


def _check_geometry(config: LayoutConfig) -> list[_Violation]:
    """Margins must leave room for at least one line in each column."""
    page_width, page_height = PaperSize(config.paper_size).dimensions
    margins = config.margins
    if page_width - margins.left - margins.right <= 0:
        return [_Violation(
            "margins",
            f"Left/right margins ({margins.left}in + {margins.right}in) exceed page width {page_width}in",
            "Use narrower margins for compact layout (e.g. 0.75in)",
        )]
    if page_height - margins.top - margins.bottom <= 0:
        return [_Violation(
            "margins",
            f"Top/bottom margins ({margins.top}in + {margins.bottom}in) exceed page height {page_height}in",
            "Use narrower margins for compact layout (e.g. 0.75in)",
        )]
    geometry = calculate_layout(config)
    if geometry.column_width <= 0:
        return [_Violation(
            "margins",
            f"Column gap {margins.column_gap}in leaves no room for {config.columns} columns",
            "Reduce the column gap for compact layout (e.g. 0.25in)",
        )]
    if geometry.lines_per_column < 1 or geometry.characters_per_line < 1:
        return [_Violation(
            "margins",
            "Margins leave no room for a single line of text per column",
            "Use narrower margins for compact layout (e.g. 0.75in)",
        )]
    return []


def _collect_warnings(config: LayoutConfig) -> list[str]:
    warnings = []
    if config.columns == 1:
        warnings.append(
            "Single column layout may not provide optimal compactness. Consider using 2 columns."
        )
    margins = config.margins
    if max(margins.top, margins.bottom, margins.left, margins.right) > WIDE_MARGIN_IN:
        warnings.append(
            f"Margins wider than {WIDE_MARGIN_IN}in reduce content density. "
            "Consider the 'narrow' margin preset."
        )
    display = config.math_rendering.display_equations
    if config.columns == 3 and display.numbered and not display.full_width:
        warnings.append(
            "Numbered display equations in 3 narrow columns may be cramped. "
            "Consider enabling full_width display equations."
        )
    return warnings


def validate(config: PartialConfig, base: Optional[LayoutConfig] = None) -> ValidationResult:
    """
    Check a configuration without raising for violations.

    Args:
        config: Full LayoutConfig, or a partial mapping merged onto base
        base: Config partial mappings are merged onto; compact defaults when omitted

    Returns:
        ValidationResult listing every error and warning

    Example:
        >>> validate({"typography": {"font_size": 12}}).valid
        False
    """
    if isinstance(config, LayoutConfig):
        merged = config
    else:
        overrides = _as_mapping(config)
        schema_errors = config_schema_errors(overrides)
        if schema_errors:
            return ValidationResult(valid=False, errors=schema_errors)
        merged = apply_defaults(overrides, base)

    errors = [v.message for v in _check_bounds(merged)]
    return ValidationResult(
        valid=not errors,
        errors=errors,
        warnings=_collect_warnings(merged),
        config=merged,
    )


def merge_and_validate(partial: PartialConfig = None, base: Optional[LayoutConfig] = None) -> LayoutConfig:
    """
    Merge a partial configuration onto base (or defaults) and enforce bounds.

    Args:
        partial: Partial nested mapping, full LayoutConfig, or None
        base: Config to merge onto; compact defaults when omitted

    Returns:
        A LayoutConfig satisfying every compact bound

    Raises:
        LayoutError: INVALID_CONFIG on the first violation; all violations
            are available on ``error.errors``

    Example:
        >>> merge_and_validate({"columns": 3}).columns
        3
    """
    config = apply_defaults(partial, base)
    violations = _check_bounds(config)
    if violations:
        first = violations[0]
        raise LayoutError(
            first.message,
            LayoutErrorCode.INVALID_CONFIG,
            suggestion=first.suggestion,
            section=first.section,
            errors=[v.message for v in violations],
        )
    for warning in _collect_warnings(config):
        logger.warning(warning)
    return config
