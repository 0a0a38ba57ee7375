"""
Module: engine.factory

Purpose:
    Turn raw content units (id, text, type, optional overrides) into typed,
    sized, prioritized ContentBlocks ready for distribution.

Key Classes:
    - ContentBlockFactory: Validates units and applies type defaults

Key Constants:
    - DEFAULT_PRIORITY / DEFAULT_BREAKABLE: Per-type defaults

Dependencies:
    - engine.estimation: HeightEstimator strategy

Used By:
    - engine.engine.LayoutEngine.create_content_block()
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional, Union

from compact_layout.core.errors import LayoutError, LayoutErrorCode
from compact_layout.core.models.blocks import ContentBlock, ContentType
from compact_layout.core.models.geometry import LayoutGeometry

from .estimation import HeightEstimator

logger = logging.getLogger(__name__)

MIN_PRIORITY = 1
MAX_PRIORITY = 10

DEFAULT_PRIORITY: dict[ContentType, int] = {
    ContentType.HEADING: 10,
    ContentType.FORMULA: 9,
    ContentType.EXAMPLE: 8,
    ContentType.DEFINITION: 7,
    ContentType.THEOREM: 7,
    ContentType.LIST: 6,
    ContentType.TABLE: 6,
    ContentType.TEXT: 5,
}

DEFAULT_BREAKABLE: dict[ContentType, bool] = {
    ContentType.HEADING: False,
    ContentType.FORMULA: False,
    ContentType.EXAMPLE: False,
    ContentType.DEFINITION: False,
    ContentType.THEOREM: False,
    ContentType.LIST: True,
    ContentType.TABLE: True,
    ContentType.TEXT: True,
}

_OPTION_KEYS = {"breakable", "priority", "estimated_height"}


def _invalid_block(message: str, suggestion: str, **context: Any) -> LayoutError:
    return LayoutError(
        message,
        LayoutErrorCode.INVALID_CONTENT_BLOCK,
        suggestion=suggestion,
        section="content",
        **context,
    )


def parse_content_type(value: Union[str, ContentType]) -> ContentType:
    """
    Resolve a content type name.

    Raises:
        LayoutError: INVALID_CONTENT_BLOCK for unknown types
    """
    try:
        return ContentType(value)
    except ValueError:
        allowed = ", ".join(t.value for t in ContentType)
        raise _invalid_block(
            f"Invalid content type: {value!r}",
            f"Use one of: {allowed}",
            content_type=str(value),
        ) from None


class ContentBlockFactory:
    """
    Creates ContentBlocks for one layout geometry.

    Args:
        geometry: Geometry the heights are estimated against
        estimator: Height estimation strategy

    Example:
        >>> factory = ContentBlockFactory(geometry, HeuristicHeightEstimator(config.spacing))
        >>> block = factory.create("h1", "Limits", "heading")
        >>> block.priority, block.breakable
        (10, False)
    """

    def __init__(self, geometry: LayoutGeometry, estimator: HeightEstimator):
        self.geometry = geometry
        self.estimator = estimator

    def create(
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
        Create a content block.

        Args:
            id: Unique, non-empty identifier
            content: Non-empty raw content
            type: Content type name or ContentType
            breakable: Override the type's default breakability
            priority: Override the type's default priority (1-10)
            estimated_height: Height in inches, used verbatim instead of
                the estimator

        Returns:
            New ContentBlock

        Raises:
            LayoutError: INVALID_CONTENT_BLOCK for empty id/content, unknown
                type, out-of-range priority or negative height
        """
        if not isinstance(id, str) or not id.strip():
            raise _invalid_block(
                "Content block ID cannot be empty",
                "Give every content block a unique, non-empty id",
            )
        if not isinstance(content, str) or not content.strip():
            raise _invalid_block(
                "Content cannot be empty",
                "Drop empty content units before creating blocks",
                block_id=id,
            )
        content_type = parse_content_type(type)

        if priority is None:
            priority = DEFAULT_PRIORITY[content_type]
        elif isinstance(priority, bool) or not isinstance(priority, int) or not MIN_PRIORITY <= priority <= MAX_PRIORITY:
            raise _invalid_block(
                f"Priority {priority!r} for block {id!r} is outside range (1-10)",
                f"Use an integer priority between 1 and 10 (default for {content_type.value} is "
                f"{DEFAULT_PRIORITY[content_type]})",
                block_id=id,
                content_type=content_type.value,
            )

        if breakable is None:
            breakable = DEFAULT_BREAKABLE[content_type]

        if estimated_height is None:
            estimated_height = self.estimator.estimate_height(content, content_type, self.geometry)
        elif isinstance(estimated_height, bool) or not isinstance(estimated_height, (int, float)) or estimated_height < 0:
            raise _invalid_block(
                f"Estimated height {estimated_height!r} for block {id!r} must be a non-negative number",
                "Pass the height in inches, e.g. estimated_height=0.5",
                block_id=id,
                content_type=content_type.value,
            )

        return ContentBlock(
            id=id,
            type=content_type,
            content=content,
            estimated_height=estimated_height,
            breakable=bool(breakable),
            priority=priority,
        )

    def create_many(self, units: Iterable[Mapping[str, Any]]) -> List[ContentBlock]:
        """
        Create blocks from raw content units, preserving order.

        Each unit is ``{"id", "content", "type", "options"?}`` where options
        may hold breakable, priority and estimated_height.

        Raises:
            LayoutError: INVALID_CONTENT_BLOCK for the first invalid unit
        """
        blocks = []
        for index, unit in enumerate(units):
            options = dict(unit.get("options") or {})
            unknown = set(options) - _OPTION_KEYS
            if unknown:
                raise _invalid_block(
                    f"Unknown options {sorted(unknown)} for content unit {index}",
                    f"Use only: {', '.join(sorted(_OPTION_KEYS))}",
                    block_id=unit.get("id"),
                )
            blocks.append(self.create(
                unit.get("id", ""),
                unit.get("content", ""),
                unit.get("type", ""),
                **options,
            ))
        logger.debug(f"Created {len(blocks)} content blocks")
        return blocks
