"""
Tests for package metadata.
"""

import re
from pathlib import Path

import compact_layout

PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


class TestVersion:
    """Tests for __version__."""

    def test_version_when_imported_then_matches_pyproject(self):
        declared = re.search(r'^version\s*=\s*"([^"]+)"', PYPROJECT.read_text(encoding="utf-8"), re.MULTILINE)

        assert compact_layout.__version__ == declared.group(1)
