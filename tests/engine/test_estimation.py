"""
Unit tests for heuristic height estimation.

Default geometry: 37 characters per line, 0.175in lines, 1em = 10.5/72in.
"""

import pytest

from compact_layout.core.models import (
    ContentType,
    DisplayEquationConfig,
    MathRenderingConfig,
    SpacingConfig,
)
from compact_layout.engine import HeightEstimator, HeuristicHeightEstimator
from compact_layout.engine.estimation import split_items, wrapped_lines

LINE = 0.175
EM = 10.5 / 72


@pytest.fixture
def estimator():
    return HeuristicHeightEstimator(SpacingConfig())


class TestHelpers:
    """Tests for wrapped_lines() and split_items()."""

    @pytest.mark.parametrize("text,expected", [
        ("", 0),
        ("   ", 0),
        ("a", 1),
        ("x" * 37, 1),
        ("x" * 38, 2),
    ])
    def test_wrapped_lines_when_text_then_ceil_of_length(self, text, expected):
        assert wrapped_lines(text, 37) == expected

    def test_split_items_when_newlines_then_one_item_per_line(self):
        assert split_items("- a\n\n- b\n- c") == ["- a", "- b", "- c"]

    def test_split_items_when_inline_bullets_then_split_on_markers(self):
        assert split_items("- a - b • c") == ["- a", "- b", "• c"]

    def test_split_items_when_plain_line_then_single_item(self):
        assert split_items("well-known - not a list") == ["well-known - not a list"]


class TestHeuristicHeightEstimator:
    """Tests for HeuristicHeightEstimator.estimate_height()."""

    def test_estimator_when_checked_then_satisfies_protocol(self, estimator):
        assert isinstance(estimator, HeightEstimator)

    def test_estimate_when_text_then_lines_plus_paragraph_spacing(self, estimator, default_geometry):
        height = estimator.estimate_height("x" * 74, ContentType.TEXT, default_geometry)

        assert height == pytest.approx(2 * LINE + 0.3 * EM)

    @pytest.mark.parametrize("content_type", [ContentType.DEFINITION, ContentType.THEOREM])
    def test_estimate_when_definition_or_theorem_then_like_text(self, estimator, default_geometry, content_type):
        text = "Every bounded monotone sequence converges."

        expected = estimator.estimate_height(text, ContentType.TEXT, default_geometry)

        assert estimator.estimate_height(text, content_type, default_geometry) == pytest.approx(expected)

    def test_estimate_when_heading_then_adds_heading_margins(self, estimator, default_geometry):
        height = estimator.estimate_height("Limits", ContentType.HEADING, default_geometry)

        assert height == pytest.approx(LINE + (0.5 + 0.3) * EM)

    def test_estimate_when_simple_formula_then_one_line_plus_display_padding(self, estimator, default_geometry):
        height = estimator.estimate_height("a^2 + b^2 = c^2", ContentType.FORMULA, default_geometry)

        assert height == pytest.approx(LINE + 1.0 * EM)

    def test_estimate_when_formula_rows_then_one_line_per_row(self, estimator, default_geometry):
        content = "\\begin{aligned} a &= b \\\\ c &= d \\\\ e &= f \\end{aligned}"

        height = estimator.estimate_height(content, ContentType.FORMULA, default_geometry)

        assert height == pytest.approx(3 * LINE + 1.0 * EM)

    def test_estimate_when_display_environment_then_at_least_two_lines(self, estimator, default_geometry):
        height = estimator.estimate_height("\\begin{cases} x \\end{cases}", ContentType.FORMULA, default_geometry)

        assert height == pytest.approx(2 * LINE + 1.0 * EM)

    def test_estimate_when_formula_not_full_width_then_wraps_at_column(self, default_geometry):
        math = MathRenderingConfig(display_equations=DisplayEquationConfig(full_width=False))
        column_only = HeuristicHeightEstimator(SpacingConfig(), math)
        full_width = HeuristicHeightEstimator(SpacingConfig())
        long_formula = "x" * 70  # 2 column lines, 1 full-width line

        assert column_only.estimate_height(long_formula, ContentType.FORMULA, default_geometry) == pytest.approx(2 * LINE + EM)
        assert full_width.estimate_height(long_formula, ContentType.FORMULA, default_geometry) == pytest.approx(LINE + EM)

    def test_estimate_when_short_example_then_at_least_three_lines(self, estimator, default_geometry):
        height = estimator.estimate_height("Find P(X=4).", ContentType.EXAMPLE, default_geometry)

        assert height == pytest.approx(3 * LINE + 0.3 * EM)

    def test_estimate_when_list_then_counts_items_and_gaps(self, estimator, default_geometry):
        height = estimator.estimate_height("- mean\n- variance\n- mode", ContentType.LIST, default_geometry)

        assert height == pytest.approx(3 * LINE + 2 * 0.2 * EM + 0.3 * EM)

    def test_estimate_when_long_list_item_then_item_wraps(self, estimator, default_geometry):
        content = "- short\n- " + "y" * 60

        height = estimator.estimate_height(content, ContentType.LIST, default_geometry)

        assert height == pytest.approx(3 * LINE + 0.2 * EM + 0.3 * EM)

    def test_estimate_when_table_then_one_row_per_line(self, estimator, default_geometry):
        height = estimator.estimate_height("k | p\n0 | 0.1\n1 | 0.9", ContentType.TABLE, default_geometry)

        assert height == pytest.approx(3 * LINE + 2 * 0.2 * EM + 0.3 * EM)

    def test_estimate_when_list_spacing_smaller_then_list_shorter(self, default_geometry):
        content = "- a\n- b\n- c\n- d"
        tight = HeuristicHeightEstimator(SpacingConfig(list_spacing=0.1))
        loose = HeuristicHeightEstimator(SpacingConfig(list_spacing=0.25))

        assert tight.estimate_height(content, "list", default_geometry) < loose.estimate_height(content, "list", default_geometry)

    def test_estimate_when_longer_text_then_taller(self, estimator, default_geometry):
        short = estimator.estimate_height("word " * 10, ContentType.TEXT, default_geometry)
        long = estimator.estimate_height("word " * 100, ContentType.TEXT, default_geometry)

        assert long > short
