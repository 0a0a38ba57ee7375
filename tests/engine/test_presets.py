"""
Unit tests for margin presets and layout profiles.
"""

import pytest

from compact_layout.core.errors import LayoutError, LayoutErrorCode
from compact_layout.engine import MARGIN_PRESETS, PROFILES, merge_and_validate, preset_config, validate


class TestPresetConfig:
    """Tests for preset_config()."""

    @pytest.mark.parametrize("profile", sorted(PROFILES))
    @pytest.mark.parametrize("margins", sorted(MARGIN_PRESETS))
    def test_preset_when_any_combination_then_valid_config(self, profile, margins):
        result = validate(preset_config(profile, margins))

        assert result.valid is True, result.errors

    def test_preset_when_defaults_then_compact_narrow(self):
        config = merge_and_validate(preset_config())

        assert config.typography.line_height == 1.15
        assert config.spacing.list_spacing == 0.15
        assert config.margins.left == 0.5

    def test_preset_when_wide_margins_then_warns(self):
        result = validate(preset_config("standard", "wide"))

        assert any("Margins wider" in w for w in result.warnings)

    def test_preset_when_overrides_then_applied(self):
        config = merge_and_validate(preset_config(columns=3, font_size=10))

        assert config.columns == 3
        assert config.typography.font_size == 10

    def test_preset_when_modified_then_tables_unchanged(self):
        config = preset_config()
        config["margins"]["left"] = 9
        config["spacing"]["heading_margins"]["top"] = 9

        assert MARGIN_PRESETS["narrow"]["left"] == 0.5
        assert PROFILES["compact"]["spacing"]["heading_margins"]["top"] == 0.5

    @pytest.mark.parametrize("kwargs", [{"profile": "loose"}, {"margins": "huge"}])
    def test_preset_when_unknown_name_then_raises(self, kwargs):
        with pytest.raises(LayoutError, match="Unknown") as exc_info:
            preset_config(**kwargs)

        assert exc_info.value.code is LayoutErrorCode.INVALID_CONFIG
