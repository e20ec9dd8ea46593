"""
Tests for padding and spread derivation.
"""

import math

import pytest

from shadowstag import ShadowParameters, SpreadCalculator, Expansion


def compute(**params):
    return SpreadCalculator.compute(ShadowParameters(**params))


class TestSpreadExtents:
    """Zero-offset coupling between an offset axis and the other axis' spread."""

    def test_both_offsets_nonzero(self):
        result = compute(radius=5, offset_x=10, offset_y=10, spread=4)
        assert result.spread_extents == (8, 8)

    def test_zero_offset_x_collapses_height(self):
        """offset_x == 0 halves the HEIGHT extent, not the width."""
        result = compute(radius=5, offset_x=0, offset_y=10, spread=4)
        assert result.height_spread == 4
        assert result.width_spread == 8

    def test_zero_offset_y_collapses_width(self):
        result = compute(radius=5, offset_x=10, offset_y=0, spread=4)
        assert result.width_spread == 4
        assert result.height_spread == 8

    def test_both_offsets_zero(self):
        result = compute(radius=5, offset_x=0, offset_y=0, spread=4)
        assert result.spread_extents == (4, 4)

    def test_zero_spread(self):
        assert compute(offset_x=3, offset_y=0, spread=0).spread_extents == (0, 0)

    def test_negative_spread_is_kept_unclamped(self):
        result = compute(radius=5, offset_x=10, offset_y=10, spread=-3)
        assert result.spread_extents == (-6, -6)

    @pytest.mark.parametrize("spread,expected", [
        (1.5, 3),
        (1.25, 2),
        (-1.25, -2),
        (-1.5, -3),
    ])
    def test_truncates_toward_zero(self, spread, expected):
        result = compute(offset_x=5, offset_y=5, spread=spread)
        assert result.spread_extents == (expected, expected)

    def test_collapsed_extent_truncates(self):
        result = compute(offset_x=0, offset_y=5, spread=2.7)
        assert result.height_spread == 2
        assert result.width_spread == 5


class TestPadding:
    """Reserved space around the content."""

    def test_padding_values(self):
        result = compute(radius=5, offset_x=10, offset_y=10, spread=4)
        assert result.padding == Expansion(left=19, top=19, right=19, bottom=19)

    def test_padding_is_symmetric_per_axis(self):
        result = compute(radius=5, offset_x=-7, offset_y=3, spread=0)
        assert result.padding.left == result.padding.right == 12
        assert result.padding.top == result.padding.bottom == 8

    def test_padding_with_zero_offset_x(self):
        result = compute(radius=5, offset_x=0, offset_y=10, spread=4)
        assert result.padding.left == 13  # 0 + 5 + 8
        assert result.padding.top == 19   # 10 + 5 + 4

    def test_negative_spread_does_not_shrink_padding(self):
        shrunk = compute(radius=5, offset_x=10, offset_y=10, spread=-3)
        baseline = compute(radius=5, offset_x=10, offset_y=10, spread=0)
        assert shrunk.padding == baseline.padding

    def test_default_parameters(self):
        result = SpreadCalculator.compute(ShadowParameters())
        assert result.padding.as_tuple() == (45, 45, 45, 45)

    @pytest.mark.parametrize("radius", [0.0, 0.1, 2.5, 30.0])
    @pytest.mark.parametrize("offset", [-12.75, -1.0, 0.0, 3.5, 15.0])
    @pytest.mark.parametrize("spread", [-6.0, 0.0, 2.5])
    def test_padding_never_under_reserves(self, radius, offset, spread):
        params = ShadowParameters(radius=radius, offset_x=offset, offset_y=-offset, spread=spread)
        padding = SpreadCalculator.compute(params).padding
        assert padding.left >= abs(offset) + params.radius
        assert padding.right >= abs(offset) + params.radius
        assert padding.top >= abs(offset) + params.radius
        assert padding.bottom >= abs(offset) + params.radius

    def test_fractional_values_round_up(self):
        result = compute(radius=0.1, offset_x=3.5, offset_y=2, spread=0)
        assert result.padding.left == math.ceil(3.6)
        assert result.padding.top == 3

    def test_is_deterministic(self):
        params = ShadowParameters(radius=4.2, offset_x=1.5, offset_y=0, spread=3)
        assert SpreadCalculator.compute(params) == SpreadCalculator.compute(params)
