"""
Tests for off-screen content capture.
"""

import numpy as np
import pytest

from shadowstag import Bounds, OffscreenCapture, ShadowAllocationError


class TestCapture:

    def test_buffer_matches_bounds(self, host):
        capture = OffscreenCapture()
        buffer = capture.capture(Bounds(200, 100), host.render_content_into)

        assert buffer.shape == (100, 200, 4)
        assert buffer.dtype == np.uint8
        assert host.render_calls == 1
        assert (buffer == [255, 0, 0, 255]).all()

    def test_buffer_is_reused_and_cleared(self, host):
        capture = OffscreenCapture()
        first = capture.capture(Bounds(20, 10), host.render_content_into)
        second = capture.capture(Bounds(20, 10), lambda buffer: None)

        assert second is first
        assert not second.any()

    def test_resize_reallocates(self, host):
        capture = OffscreenCapture()
        first = capture.capture(Bounds(20, 10), host.render_content_into)
        second = capture.capture(Bounds(30, 10), host.render_content_into)

        assert second is not first
        assert second.shape == (10, 30, 4)


class TestPlaceholder:

    @pytest.mark.parametrize("width,height", [(0, 0), (0, 50), (50, 0)])
    def test_zero_area_installs_placeholder(self, host, width, height):
        capture = OffscreenCapture()
        buffer = capture.capture(Bounds(width, height), host.render_content_into)

        assert buffer.shape == (1, 1, 4)
        assert capture.is_placeholder
        assert host.render_calls == 0

    def test_placeholder_replaced_on_real_size(self, host):
        capture = OffscreenCapture()
        capture.capture(Bounds(0, 0), host.render_content_into)
        buffer = capture.capture(Bounds(4, 3), host.render_content_into)

        assert not capture.is_placeholder
        assert buffer.shape == (3, 4, 4)
        assert host.render_calls == 1

    def test_negative_bounds_are_empty(self):
        assert Bounds.of(-5, 10) == Bounds(0, 10)
        assert Bounds.of(-5, 10).is_empty


class TestAllocation:

    def test_oversized_buffer_raises(self, host):
        capture = OffscreenCapture(max_pixels=100)
        with pytest.raises(ShadowAllocationError):
            capture.capture(Bounds(20, 20), host.render_content_into)

        assert host.render_calls == 0
        assert capture.buffer is None

    def test_release(self, host):
        capture = OffscreenCapture()
        capture.capture(Bounds(4, 4), host.render_content_into)
        capture.release()

        assert capture.buffer is None
        assert not capture.is_placeholder
