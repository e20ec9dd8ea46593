"""
Tests for RGBA8 color helpers.
"""

import pytest

from shadowstag.color import DKGRAY, color_alpha, color_to_hex, parse_color


class TestParseColor:

    @pytest.mark.parametrize("value,expected", [
        ((1, 2, 3), (1, 2, 3, 255)),
        ([1, 2, 3, 4], (1, 2, 3, 4)),
        ('#102030', (0x10, 0x20, 0x30, 255)),
        ('102030', (0x10, 0x20, 0x30, 255)),
        ('#10203040', (0x10, 0x20, 0x30, 0x40)),
        (0xFF444444, DKGRAY),
        (0x80102030, (0x10, 0x20, 0x30, 0x80)),
        (0x00102030, (0x10, 0x20, 0x30, 0)),
    ])
    def test_formats(self, value, expected):
        assert parse_color(value) == expected

    def test_clamps_components(self):
        assert parse_color((300, -5, 12.7, 999)) == (255, 0, 12, 255)

    def test_negative_packed_int(self):
        """Signed 32-bit ARGB values (as produced by Java/Android) still parse."""
        assert parse_color(-1) == (255, 255, 255, 255)

    @pytest.mark.parametrize("value", ['#12345', '#GG0000', (1, 2), None, True, 3.5])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_color(value)


class TestColorAlpha:

    def test_alpha_channel(self):
        assert color_alpha((0, 0, 0, 128)) == 128

    def test_rgb_is_opaque(self):
        assert color_alpha((0, 0, 0)) == 255

    def test_zero_alpha_packed(self):
        assert color_alpha(0x00444444) == 0

    @pytest.mark.parametrize("value", [None, 'nope', ('a', 'b', 'c'), object()])
    def test_never_raises(self, value):
        assert color_alpha(value) == 0


def test_color_to_hex():
    assert color_to_hex((0x44, 0x44, 0x44, 0xFF)) == '#444444FF'
    assert color_to_hex((0, 0, 0, 128)) == '#00000080'
