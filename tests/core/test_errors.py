"""
Unit tests for LayoutError.
"""

import pytest

from compact_layout.core.errors import LayoutError, LayoutErrorCode


class TestLayoutError:
    """Tests for LayoutError fields and payload."""

    def test_init_when_code_string_then_coerced_to_enum(self):
        err = LayoutError("bad config", "INVALID_CONFIG", suggestion="fix it")

        assert err.code is LayoutErrorCode.INVALID_CONFIG
        assert str(err) == "bad config"
        assert err.errors == ["bad config"]

    def test_init_when_unknown_code_then_raises_value_error(self):
        with pytest.raises(ValueError):
            LayoutError("bad", "NOT_A_CODE")

    def test_to_dict_when_called_then_includes_context(self):
        err = LayoutError(
            "Block 'f1' cannot fit",
            LayoutErrorCode.COLUMN_OVERFLOW,
            suggestion="Add a column",
            section="layout",
            content_type="formula",
            block_id="f1",
        )

        payload = err.to_dict()

        assert payload["code"] == "COLUMN_OVERFLOW"
        assert payload["block_id"] == "f1"
        assert payload["content_type"] == "formula"
        assert payload["suggestion"] == "Add a column"

    def test_raise_when_caught_as_exception_then_is_layout_error(self):
        with pytest.raises(LayoutError) as exc_info:
            raise LayoutError("x", LayoutErrorCode.INVALID_CONTENT_BLOCK, errors=["x", "y"])

        assert exc_info.value.errors == ["x", "y"]
