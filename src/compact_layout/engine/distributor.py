"""
Module: engine.distributor

Purpose:
    Pack content blocks into the configured number of columns, balancing
    column heights and reporting overflow risk. Breakable blocks that do
    not fit are split on line boundaries; the remainder flows into the
    next column.

Key Functions:
    - distribute(): Main distribution function

Algorithm:
    1. Stable sort by descending priority (headings, formulas and
       examples ahead of filler text; equal priorities keep input order)
    2. For each block, target the least-loaded column (lowest index on ties);
       a split remainder only considers columns right of its previous part
    3. If it fits the column capacity, place it
    4. Else if breakable, keep the whole lines that fit and re-queue the
       remainder at the front of the queue
    5. Else place it in the least-loaded allowed column (a remainder may
       stay in its previous part's column) and record the overflow
       (OverflowPolicy.PLACE) or raise COLUMN_OVERFLOW (OverflowPolicy.STRICT)
    6. balance_score = clamp(1 - (max - min) / mean, 0, 1)
       overflow_risk = clamp((total - capacity) / total, 0, 1)

Dependencies:
    - numpy: Column height bookkeeping and metrics

Used By:
    - engine.engine.LayoutEngine.distribute_content()
"""

from __future__ import annotations

import logging
import math
from collections import deque
from enum import Enum
from typing import Deque, List, Optional, Sequence, Set, Tuple

import numpy as np

from compact_layout.core.errors import LayoutError, LayoutErrorCode
from compact_layout.core.models.blocks import ContentBlock
from compact_layout.core.models.distribution import Column, ColumnDistribution
from compact_layout.core.models.geometry import LayoutGeometry

logger = logging.getLogger(__name__)

# Tolerance for float comparisons of heights in inches
_EPSILON = 1e-9


class OverflowPolicy(str, Enum):
    """What to do with a block that cannot be placed within capacity."""
    PLACE = "place"    # Place in the least-loaded column and report overflow
    STRICT = "strict"  # Raise LayoutError(COLUMN_OVERFLOW)

    def __str__(self) -> str:
        return self.value


def distribute(
    blocks: Sequence[ContentBlock],
    geometry: LayoutGeometry,
    *,
    policy: OverflowPolicy = OverflowPolicy.PLACE,
) -> ColumnDistribution:
    """
    Distribute blocks across columns.

    Pure function of its inputs: identical blocks and geometry always give
    an identical distribution.

    Args:
        blocks: Blocks to place (ids must be unique)
        geometry: Layout geometry providing column count and capacity
        policy: Overflow handling for unplaceable blocks

    Returns:
        ColumnDistribution with one Column per configured column

    Raises:
        LayoutError: INVALID_CONTENT_BLOCK for duplicate ids;
            COLUMN_OVERFLOW under OverflowPolicy.STRICT

    Example:
        >>> result = distribute(blocks, calculate_layout(LayoutConfig()))
        >>> result.column_count
        2
    """
    policy = OverflowPolicy(policy)
    _check_unique_ids(blocks)

    column_count = geometry.column_count
    capacity = geometry.column_capacity
    placed: List[List[ContentBlock]] = [[] for _ in range(column_count)]
    heights = np.zeros(column_count, dtype=float)
    overflow_ids: List[str] = []
    warnings: List[str] = []

    used_ids = {block.id for block in blocks}

    # Queue entries are (block, index of the column holding the previous part or -1)
    queue: Deque[Tuple[ContentBlock, int]] = deque(
        (block, -1) for block in sorted(blocks, key=lambda b: -b.priority)
    )

    while queue:
        block, previous_column = queue.popleft()
        first = previous_column + 1

        if first < column_count:
            target = first + int(np.argmin(heights[first:]))
            remaining = capacity - heights[target]

            if block.estimated_height <= remaining + _EPSILON:
                placed[target].append(block)
                heights[target] += block.estimated_height
                continue

            if block.breakable:
                parts = _split_block(block, remaining, geometry)
                if parts is not None:
                    head, tail = parts
                    _claim_part_ids(block, parts, used_ids)
                    placed[target].append(head)
                    heights[target] += head.estimated_height
                    queue.appendleft((tail, target))
                    logger.debug(
                        f"Split {block.id} in column {target}: kept {head.estimated_height:.3f}in, "
                        f"deferred {tail.estimated_height:.3f}in as {tail.id}"
                    )
                    continue

        # Split remainders never move left of the column holding their previous part
        floor = max(previous_column, 0)
        target = floor + int(np.argmin(heights[floor:]))
        remaining = capacity - heights[target]
        message = (
            f"Content block {block.id!r} ({block.estimated_height:.2f}in) cannot fit in "
            f"column {target} ({max(0.0, remaining):.2f}in of {capacity:.2f}in left)"
        )
        if policy is OverflowPolicy.STRICT:
            raise LayoutError(
                message,
                LayoutErrorCode.COLUMN_OVERFLOW,
                suggestion="Consider reducing content, adding a column or using a larger paper size",
                section="layout",
                content_type=block.type.value,
                block_id=block.id,
            )
        logger.warning(message)
        placed[target].append(block)
        heights[target] += block.estimated_height
        overflow_ids.append(block.id)
        warnings.append(message)

    columns = tuple(
        Column(
            index=i,
            content=tuple(placed[i]),
            estimated_height=float(heights[i]),
            capacity=capacity,
        )
        for i in range(column_count)
    )
    balance_score, overflow_risk = _score(heights, geometry.total_capacity)
    total_height = float(heights.max()) if column_count else 0.0

    logger.info(
        f"Distributed {len(blocks)} blocks into {column_count} columns "
        f"(balance={balance_score:.2f}, overflow_risk={overflow_risk:.2f})"
    )

    return ColumnDistribution(
        columns=columns,
        total_height=total_height,
        balance_score=balance_score,
        overflow_risk=overflow_risk,
        overflow_block_ids=tuple(overflow_ids),
        warnings=warnings,
    )


def _check_unique_ids(blocks: Sequence[ContentBlock]) -> None:
    seen = set()
    for block in blocks:
        if block.id in seen:
            raise LayoutError(
                f"Duplicate content block ID: {block.id!r}",
                LayoutErrorCode.INVALID_CONTENT_BLOCK,
                suggestion="Give every content block a unique id",
                section="content",
                content_type=block.type.value,
                block_id=block.id,
            )
        seen.add(block.id)


def _claim_part_ids(
    block: ContentBlock,
    parts: Tuple[ContentBlock, ContentBlock],
    used_ids: Set[str],
) -> None:
    """Reserve the ids of newly derived split parts, rejecting collisions."""
    for part in parts:
        if part.id == block.id:
            continue
        if part.id in used_ids:
            raise LayoutError(
                f"Split part ID {part.id!r} of block {block.id!r} collides with an existing "
                f"content block ID",
                LayoutErrorCode.INVALID_CONTENT_BLOCK,
                suggestion=f"Rename {part.id!r}; ids ending in _part<n> are used for split parts",
                section="content",
                content_type=block.type.value,
                block_id=part.id,
            )
        used_ids.add(part.id)


def _score(heights: np.ndarray, total_capacity: float) -> Tuple[float, float]:
    """Return (balance_score, overflow_risk) for the final column heights."""
    if heights.size == 0:
        return 1.0, 0.0

    mean = float(heights.mean())
    if mean <= 0:
        balance = 1.0
    else:
        balance = float(np.clip(1 - (heights.max() - heights.min()) / mean, 0.0, 1.0))

    total = float(heights.sum())
    if total <= 0:
        risk = 0.0
    else:
        risk = float(np.clip((total - total_capacity) / total, 0.0, 1.0))
    return balance, risk


def _split_block(
    block: ContentBlock,
    available: float,
    geometry: LayoutGeometry,
) -> Optional[Tuple[ContentBlock, ContentBlock]]:
    """
    Split a breakable block so its head fills ``available`` inches.

    The head keeps whole lines only and the content is cut at the closest
    line break or whitespace before the proportional cut point.

    Returns:
        (head, tail), or None if not even one line fits or the content
        cannot be cut
    """
    line = geometry.line_height_inches
    fit_lines = math.floor((available + _EPSILON) / line) if line > 0 else 0
    if fit_lines < 1:
        return None

    head_height = fit_lines * line
    if head_height >= block.estimated_height:
        return None

    cut = _find_cut(block.content, head_height / block.estimated_height)
    if cut is None:
        return None
    head_content = block.content[:cut].rstrip()
    tail_content = block.content[cut:].lstrip()
    if not head_content or not tail_content:
        return None

    head_part = block.part or 1
    head = block.split_part(head_part, head_content, head_height)
    tail = block.split_part(head_part + 1, tail_content, block.estimated_height - head_height)
    return head, tail


def _find_cut(content: str, ratio: float) -> Optional[int]:
    """Index to cut content at, preferring line breaks, then whitespace."""
    target = math.floor(len(content) * ratio)
    if target <= 0:
        return None
    newline = content.rfind("\n", 0, target + 1)
    if newline > 0:
        return newline
    space = max(content.rfind(" ", 0, target + 1), content.rfind("\t", 0, target + 1))
    if space > 0:
        return space
    if target < len(content):
        return target
    return None
