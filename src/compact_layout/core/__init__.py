"""
Compact Layout Core Package

Shared data models, errors, schemas and serialization used by the engine.

**DESIGN NOTES:**

1. **Immutable Data Models**
   - Frozen dataclasses; splitting a block or updating a config creates
     new instances

2. **Derived Values Never Stored**
   - Geometry is recomputed from the config on demand
   - Column capacity and totals are properties

3. **One Error Type**
   - Every failure is a LayoutError with a code discriminator
"""

from .errors import LayoutError, LayoutErrorCode
from .models import (
    LayoutConfig,
    PaperSize,
    LayoutGeometry,
    ContentType,
    ContentBlock,
    Column,
    ColumnDistribution,
)

__all__ = [
    "LayoutError",
    "LayoutErrorCode",
    "LayoutConfig",
    "PaperSize",
    "LayoutGeometry",
    "ContentType",
    "ContentBlock",
    "Column",
    "ColumnDistribution",
]
