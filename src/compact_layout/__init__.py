"""Top-level package for the Compact Layout Engine.

Provides subpackages:
- compact_layout.core – immutable models, errors, schemas and serialization
- compact_layout.engine – config validation, geometry, block factory,
  column distribution and the LayoutEngine facade
"""

def _get_version() -> str:
    """Installed distribution version, else the version in a source checkout's pyproject.toml."""
    import re
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    from pathlib import Path

    try:
        return pkg_version("compact_layout")
    except PackageNotFoundError:
        pass

    pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    if pyproject.exists():
        match = re.search(r'^version\s*=\s*"([^"]+)"', pyproject.read_text(encoding="utf-8"), re.MULTILINE)
        if match:
            return match.group(1)
    return "0.0.0"


__version__ = _get_version()

from .core.errors import LayoutError, LayoutErrorCode
from .engine import LayoutEngine, OverflowPolicy

__all__: list[str] = [
    "__version__",
    "LayoutEngine",
    "LayoutError",
    "LayoutErrorCode",
    "OverflowPolicy",
]
