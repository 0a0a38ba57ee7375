"""
Unit tests for layout geometry calculation.
"""

import math

import pytest

from compact_layout.core.models import LayoutConfig, MarginConfig, PaperSize, TypographyConfig
from compact_layout.engine import calculate_layout


class TestCalculateLayout:
    """Tests for calculate_layout()."""

    def test_calculate_when_default_config_then_a4_two_columns(self, default_config):
        # Act
        geometry = calculate_layout(default_config)

        # Assert
        assert geometry.page_width == pytest.approx(8.27)
        assert geometry.page_height == pytest.approx(11.69)
        assert geometry.column_count == 2

    def test_calculate_when_default_config_then_derived_dimensions(self, default_geometry):
        assert default_geometry.content_width == pytest.approx(6.77)
        assert default_geometry.content_height == pytest.approx(10.19)
        # (6.77 - 0.25) / 2
        assert default_geometry.column_width == pytest.approx(3.26)
        assert default_geometry.effective_line_height == pytest.approx(12.6)
        assert default_geometry.line_height_inches == pytest.approx(0.175)

    def test_calculate_when_default_config_then_line_metrics(self, default_geometry):
        # floor(10.19 / 0.175) = 58
        assert default_geometry.lines_per_column == 58
        # floor(3.26 * 72 / (10.5 * 0.6)) = floor(37.26) = 37
        assert default_geometry.characters_per_line == 37
        assert default_geometry.column_capacity == pytest.approx(58 * 0.175)
        assert default_geometry.total_capacity == pytest.approx(2 * 58 * 0.175)

    def test_calculate_when_default_config_then_density_from_totals(self, default_geometry):
        expected = 37 * 58 * 2 / (8.27 * 11.69)

        assert default_geometry.estimated_content_density == pytest.approx(expected)

    def test_calculate_when_letter_then_letter_dimensions(self):
        geometry = calculate_layout(LayoutConfig(paper_size=PaperSize.LETTER))

        assert (geometry.page_width, geometry.page_height) == (8.5, 11.0)
        # (7.0 - 0.25) / 2 = 3.375in -> floor(243 / 6.3) = 38
        assert geometry.characters_per_line == 38
        # floor(9.5 / 0.175) = 54
        assert geometry.lines_per_column == 54

    def test_calculate_when_legal_then_more_lines(self):
        letter = calculate_layout(LayoutConfig(paper_size=PaperSize.LETTER))
        legal = calculate_layout(LayoutConfig(paper_size=PaperSize.LEGAL))

        assert legal.page_height == 14.0
        assert legal.lines_per_column > letter.lines_per_column

    def test_calculate_when_single_column_then_full_content_width(self):
        geometry = calculate_layout(LayoutConfig(columns=1))

        assert geometry.column_width == pytest.approx(geometry.content_width)
        assert geometry.characters_per_line == math.floor(6.77 * 72 / 6.3)

    def test_calculate_when_three_columns_then_two_gaps(self):
        config = LayoutConfig(columns=3, margins=MarginConfig(column_gap=0.3))

        geometry = calculate_layout(config)

        assert geometry.column_width == pytest.approx((6.77 - 2 * 0.3) / 3)

    def test_calculate_when_smaller_font_then_denser(self):
        dense = calculate_layout(LayoutConfig(typography=TypographyConfig(font_size=10, line_height=1.15)))
        loose = calculate_layout(LayoutConfig(typography=TypographyConfig(font_size=11, line_height=1.25)))

        assert dense.estimated_content_density > loose.estimated_content_density

    def test_calculate_when_called_twice_then_identical(self, default_config):
        assert calculate_layout(default_config) == calculate_layout(default_config)
