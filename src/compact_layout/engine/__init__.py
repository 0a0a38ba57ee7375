"""
Module: engine

Purpose:
    Compact layout engine: configuration validation, geometry, content
    block creation and column distribution.

Key Functions:
    - merge_and_validate(): Partial config -> validated LayoutConfig
    - calculate_layout(): LayoutConfig -> LayoutGeometry
    - distribute(): Blocks + geometry -> ColumnDistribution

Key Classes:
    - LayoutEngine: Facade owning the current configuration
    - ContentBlockFactory: Raw content units -> ContentBlocks
    - HeightEstimator / HeuristicHeightEstimator: Pluggable height estimates
    - OverflowPolicy: Lenient placement vs strict failure

Dependencies:
    - numpy: Distribution metrics
    - jsonschema: Partial config structure (via core.schemas)
"""

from .calculator import calculate_layout
from .validation import (
    ValidationResult,
    apply_defaults,
    validate,
    merge_and_validate,
)
from .estimation import HeightEstimator, HeuristicHeightEstimator
from .factory import ContentBlockFactory, DEFAULT_PRIORITY, DEFAULT_BREAKABLE
from .distributor import OverflowPolicy, distribute
from .presets import MARGIN_PRESETS, PROFILES, preset_config
from .engine import LayoutEngine

__all__ = [
    # Config
    "ValidationResult",
    "apply_defaults",
    "validate",
    "merge_and_validate",
    "preset_config",
    "MARGIN_PRESETS",
    "PROFILES",
    # Geometry
    "calculate_layout",
    # Blocks
    "HeightEstimator",
    "HeuristicHeightEstimator",
    "ContentBlockFactory",
    "DEFAULT_PRIORITY",
    "DEFAULT_BREAKABLE",
    # Distribution
    "OverflowPolicy",
    "distribute",
    # Facade
    "LayoutEngine",
]
