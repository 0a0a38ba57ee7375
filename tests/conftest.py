import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import compact_layout
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from compact_layout.core.models import ContentBlock, ContentType, LayoutConfig
from compact_layout.engine import calculate_layout


# Common test fixtures
@pytest.fixture
def default_config():
    """Compact defaults: A4, 2 columns, 10.5pt at 1.2."""
    return LayoutConfig()


@pytest.fixture
def default_geometry(default_config):
    """Geometry for the compact defaults (capacity 58 lines of 0.175in)."""
    return calculate_layout(default_config)


@pytest.fixture
def make_block():
    """Factory to create blocks with explicit heights."""
    def _create(
        block_id: str,
        height: float,
        priority: int = 5,
        breakable: bool = False,
        content_type: ContentType = ContentType.TEXT,
        content: str = "content",
    ):
        return ContentBlock(
            id=block_id,
            type=content_type,
            content=content,
            estimated_height=height,
            breakable=breakable,
            priority=priority,
        )
    return _create
