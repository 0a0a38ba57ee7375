"""
Module: core.models.distribution

Purpose:
    Output of column distribution. Immutable dataclasses describing which
    blocks landed in which column, plus balance and overflow diagnostics
    for the external renderer.

Key Classes:
    - Column: Ordered blocks assigned to one column
    - ColumnDistribution: All columns plus aggregate metrics

Used By:
    - engine.distributor: Creates ColumnDistribution
    - core.utils.serialization: Renderer payloads
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .blocks import ContentBlock


@dataclass(frozen=True)
class Column:
    """
    Blocks assigned to one column, in render order.

    Attributes:
        index: Column position (0 = leftmost)
        content: Blocks in render order
        estimated_height: Sum of block heights in inches
        capacity: Usable column height in inches

    Example:
        >>> column = Column(index=0, content=(b1, b2), estimated_height=1.4, capacity=10.15)
        >>> column.overflows
        False
    """

    index: int
    content: tuple[ContentBlock, ...]
    estimated_height: float
    capacity: float

    @property
    def block_count(self) -> int:
        return len(self.content)

    @property
    def is_empty(self) -> bool:
        return len(self.content) == 0

    @property
    def overflows(self) -> bool:
        """True if the column holds more than its capacity."""
        return self.estimated_height > self.capacity

    @property
    def fill_ratio(self) -> float:
        if self.capacity <= 0:
            return 0.0
        return self.estimated_height / self.capacity

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "estimated_height": self.estimated_height,
            "capacity": self.capacity,
            "content": [block.to_dict() for block in self.content],
        }


@dataclass(frozen=True)
class ColumnDistribution:
    """
    Final distribution with diagnostics.

    Attributes:
        columns: One Column per configured column, left to right
        total_height: Height of the tallest column (inches)
        balance_score: 1.0 = perfectly even column heights, 0.0 = worst
        overflow_risk: 0.0 = fits, 1.0 = all content is excess
        overflow_block_ids: Blocks placed past a column's capacity
        warnings: Human-readable diagnostics

    Example:
        >>> result.column_count
        2
        >>> result.block_count
        14
    """

    columns: tuple[Column, ...]
    total_height: float
    balance_score: float
    overflow_risk: float
    overflow_block_ids: tuple[str, ...] = ()
    warnings: list[str] = field(default_factory=list)

    @property
    def column_count(self) -> int:
        return len(self.columns)

    @property
    def block_count(self) -> int:
        """Total blocks placed across all columns."""
        return sum(c.block_count for c in self.columns)

    @property
    def total_content_height(self) -> float:
        """Sum of all column heights in inches."""
        return sum(c.estimated_height for c in self.columns)

    @property
    def has_overflow(self) -> bool:
        return bool(self.overflow_block_ids) or any(c.overflows for c in self.columns)

    def iter_blocks(self):
        """Yield every placed block, column by column."""
        for column in self.columns:
            yield from column.content

    def to_dict(self) -> dict[str, Any]:
        return {
            "columns": [c.to_dict() for c in self.columns],
            "total_height": self.total_height,
            "balance_score": self.balance_score,
            "overflow_risk": self.overflow_risk,
            "overflow_block_ids": list(self.overflow_block_ids),
            "warnings": list(self.warnings),
        }
