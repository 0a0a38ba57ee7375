"""
Module: engine.engine

Purpose:
    LayoutEngine facade. Owns the current (always valid) configuration and
    delegates to the validator, calculator, block factory and distributor.

Key Classes:
    - LayoutEngine: Main entry point for callers

Concurrency:
    The only mutable state is the configuration, replaced as a whole by
    update_config(). Reads are not synchronized; share an engine across
    threads only with external locking, or use one engine per request.

Used By:
    - External content pipeline and renderer
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

from compact_layout.core.models.blocks import ContentBlock, ContentType
from compact_layout.core.models.config import LayoutConfig
from compact_layout.core.models.distribution import ColumnDistribution
from compact_layout.core.models.geometry import LayoutGeometry

from .calculator import calculate_layout
from .distributor import OverflowPolicy, distribute
from .estimation import HeightEstimator, HeuristicHeightEstimator
from .factory import ContentBlockFactory, parse_content_type
from .validation import PartialConfig, ValidationResult, merge_and_validate, validate

logger = logging.getLogger(__name__)


class LayoutEngine:
    """
    Compact multi-column layout engine.

    Args:
        config: Partial config mapping (or full LayoutConfig) merged onto
            the compact defaults
        overflow_policy: How the distributor treats unplaceable blocks
        estimator: Height estimation strategy; defaults to a
            HeuristicHeightEstimator built from the current config

    Raises:
        LayoutError: INVALID_CONFIG if the config violates a compact bound

    Example:
        >>> engine = LayoutEngine({"paper_size": "letter"})
        >>> block = engine.create_content_block("p1", "Some text", "text")
        >>> engine.distribute_content([block]).column_count
        2
    """

    def __init__(
        self,
        config: PartialConfig = None,
        *,
        overflow_policy: OverflowPolicy = OverflowPolicy.PLACE,
        estimator: Optional[HeightEstimator] = None,
    ):
        self._config = merge_and_validate(config)
        self.overflow_policy = OverflowPolicy(overflow_policy)
        self._estimator = estimator

    def get_config(self) -> LayoutConfig:
        """Return the current configuration (immutable)."""
        return self._config

    def update_config(self, partial: PartialConfig) -> LayoutConfig:
        """
        Merge a partial config onto the current one.

        The new config is validated before it replaces the current one; on
        failure the previous config stays in place.

        Raises:
            LayoutError: INVALID_CONFIG on any bound violation
        """
        config = merge_and_validate(partial, base=self._config)
        self._config = config
        logger.info(
            f"Layout config updated: {config.paper_size.value}, {config.columns} columns, "
            f"{config.typography.font_size}pt"
        )
        return config

    def validate_config(self, partial: PartialConfig) -> ValidationResult:
        """Check a partial config against the current one without committing it."""
        return validate(partial, base=self._config)

    def calculate_layout(self) -> LayoutGeometry:
        """Geometry for the current configuration."""
        return calculate_layout(self._config)

    @property
    def estimator(self) -> HeightEstimator:
        if self._estimator is not None:
            return self._estimator
        return HeuristicHeightEstimator(self._config.spacing, self._config.math_rendering)

    def estimate_content_height(self, content: str, type: Union[str, ContentType]) -> float:
        """Estimated height in inches of content of the given type."""
        return self.estimator.estimate_height(content, parse_content_type(type), self.calculate_layout())

    def _factory(self) -> ContentBlockFactory:
        return ContentBlockFactory(self.calculate_layout(), self.estimator)

    def create_content_block(
        self,
        id: str,
        content: str,
        type: Union[str, ContentType],
        *,
        breakable: Optional[bool] = None,
        priority: Optional[int] = None,
        estimated_height: Optional[float] = None,
    ) -> ContentBlock:
        """
        Create a content block sized for the current layout.

        See ContentBlockFactory.create() for argument semantics.

        Raises:
            LayoutError: INVALID_CONTENT_BLOCK for invalid input
        """
        return self._factory().create(
            id,
            content,
            type,
            breakable=breakable,
            priority=priority,
            estimated_height=estimated_height,
        )

    def create_content_blocks(self, units: Iterable[Mapping[str, Any]]) -> List[ContentBlock]:
        """Create blocks from raw ``{id, content, type, options?}`` units, in order."""
        return self._factory().create_many(units)

    def distribute_content(self, blocks: Sequence[ContentBlock]) -> ColumnDistribution:
        """
        Distribute blocks across the configured columns.

        Raises:
            LayoutError: INVALID_CONTENT_BLOCK for duplicate ids;
                COLUMN_OVERFLOW under OverflowPolicy.STRICT
        """
        return distribute(list(blocks), self.calculate_layout(), policy=self.overflow_policy)
