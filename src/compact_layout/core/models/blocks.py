"""
Module: core.models.blocks

Purpose:
    Typed content blocks: the atomic, sized units placed into columns.
    Blocks are immutable; splitting during distribution creates new
    derived blocks via ContentBlock.split_part().

Key Classes:
    - ContentType: Closed set of academic content kinds
    - ContentBlock: Sized, prioritized, breakability-tagged unit

Used By:
    - engine.factory: Creates ContentBlocks
    - engine.distributor: Places and splits ContentBlocks
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional


class ContentType(str, Enum):
    """Kind of academic content."""
    HEADING = "heading"
    TEXT = "text"
    FORMULA = "formula"
    EXAMPLE = "example"
    DEFINITION = "definition"
    THEOREM = "theorem"
    LIST = "list"
    TABLE = "table"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ContentBlock:
    """
    A content unit ready for placement (immutable).

    Attributes:
        id: Unique identifier ("<source_id>_part<n>" for split parts)
        type: Content kind
        content: Raw content string
        estimated_height: Estimated rendered height in inches
        breakable: Whether the block may be split across columns
        priority: 1-10, higher is placed first
        source_id: Id of the unit this block came from (defaults to id)
        part: 0 for whole blocks, 1..n for split parts

    Example:
        >>> block = ContentBlock("p1", ContentType.TEXT, "Lorem", 0.35, True, 5)
        >>> block.is_split
        False
    """

    id: str
    type: ContentType
    content: str
    estimated_height: float
    breakable: bool
    priority: int
    source_id: Optional[str] = None
    part: int = 0

    def __post_init__(self) -> None:
        if self.source_id is None:
            object.__setattr__(self, "source_id", self.id)

    @property
    def is_split(self) -> bool:
        """True if this block is one part of a split unit."""
        return self.part > 0

    def split_part(self, part: int, content: str, estimated_height: float) -> ContentBlock:
        """Create a derived block for one part of this block's source unit."""
        return replace(
            self,
            id=f"{self.source_id}_part{part}",
            content=content,
            estimated_height=estimated_height,
            part=part,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value,
            "content": self.content,
            "estimated_height": self.estimated_height,
            "breakable": self.breakable,
            "priority": self.priority,
            "source_id": self.source_id,
            "part": self.part,
        }
