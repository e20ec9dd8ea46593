"""
Tests for the headless PIL shadow host.
"""

import numpy as np
import pytest
from PIL import Image as PILImage

from shadowstag import ShadowParameters
from shadowstag.components.pil import ShadowViewPil


@pytest.fixture
def red_card():
    return PILImage.new('RGBA', (100, 60), (255, 0, 0, 255))


@pytest.fixture
def view(red_card):
    view = ShadowViewPil(
        100, 60,
        content=red_card,
        params=ShadowParameters(radius=4, offset_x=6, offset_y=8, color='#00000080'),
    )
    yield view
    view.close()


class TestRender:

    def test_size_includes_padding(self, view):
        frame = view.render()
        assert frame.mode == 'RGBA'
        assert frame.size == (100 + 2 * 10, 60 + 2 * 12)

    def test_content_and_shadow(self, view):
        pixels = view.render_to_array()
        left, top = 10, 12

        assert tuple(pixels[top + 30, left + 50]) == (255, 0, 0, 255)
        # Right of the content, inside the offset shadow
        assert pixels[top + 30, left + 103, 0] < 230
        # Background where no shadow reaches
        assert tuple(pixels[1, 1]) == (255, 255, 255, 255)

    def test_shadow_computed_once(self, view):
        for _ in range(3):
            view.render()
        assert view.compositor.pipeline_runs == 1

    def test_set_content_invalidates(self, view):
        view.render()
        view.set_content(PILImage.new('RGBA', (10, 10), (0, 0, 255, 255)))
        pixels = view.render_to_array()

        assert view.compositor.pipeline_runs == 2
        assert tuple(pixels[12 + 30, 10 + 50]) == (0, 0, 255, 255)

    def test_draw_callback(self, view):
        def draw(ctx, width, height):
            ctx.rectangle((0, 0, width // 2 - 1, height - 1), fill=(0, 255, 0, 255))

        view.set_content(draw=draw)
        pixels = view.render_to_array()

        assert tuple(pixels[12 + 30, 10 + 10]) == (0, 255, 0, 255)
        # Transparent right half shows the background, not a shadow of it
        assert tuple(pixels[12 + 5, 10 + 90]) == (255, 255, 255, 255)

    def test_empty_content(self):
        view = ShadowViewPil(20, 20, params=ShadowParameters(radius=2))
        pixels = view.render_to_array()
        assert (pixels == 255).all()


class TestLayout:

    def test_parameter_change_triggers_relayout(self, view):
        view.render()
        passes = view.layout_passes

        view.compositor.offset_x = 20
        assert view.needs_layout

        frame = view.render()
        assert not view.needs_layout
        assert view.layout_passes == passes + 1
        assert frame.size == (100 + 2 * 24, 60 + 2 * 12)

    def test_resize(self, view):
        view.render()
        view.layout(50, 40)
        frame = view.render()

        assert frame.size == (50 + 20, 40 + 24)
        assert view.compositor.pipeline_runs == 2

    def test_zero_size(self, view):
        view.layout(0, 0)
        pixels = view.render_to_array()

        assert pixels.shape == (24, 20, 4)
        assert view.compositor.has_placeholder
        assert view.compositor.is_dirty


def test_close_releases(view):
    view.render()
    view.close()
    assert view.compositor.cached_raster is None
