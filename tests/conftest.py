"""
Pytest fixtures for ShadowStag tests
"""

import numpy as np
import pytest

from shadowstag import ShadowCompositor, ShadowParameters, ShadowSettings, Surface


class RecordingHost:
    """Host stand-in that fills the content buffer and counts capability calls."""

    def __init__(self, fill=(255, 0, 0, 255), rect=None):
        self.fill = fill
        self.rect = rect  # (x0, y0, x1, y1) or None for the whole buffer
        self.render_calls = 0
        self.relayout_calls = 0

    def render_content_into(self, buffer: np.ndarray) -> None:
        self.render_calls += 1
        if self.rect is None:
            buffer[:, :] = self.fill
        else:
            x0, y0, x1, y1 = self.rect
            buffer[y0:y1, x0:x1] = self.fill

    def request_relayout(self) -> None:
        self.relayout_calls += 1


@pytest.fixture
def host():
    """Host rendering an opaque red block over the whole content."""
    return RecordingHost()


@pytest.fixture
def make_compositor(host):
    """Factory for compositors wired to the recording host."""

    def factory(settings: ShadowSettings | None = None, **params) -> ShadowCompositor:
        return ShadowCompositor(
            host.render_content_into,
            request_relayout=host.request_relayout,
            params=ShadowParameters(**params) if params else None,
            settings=settings,
        )

    return factory


@pytest.fixture
def draw_frame():
    """Draw one frame onto a fresh transparent surface sized content + padding."""

    def draw(compositor: ShadowCompositor) -> Surface:
        surface = Surface.for_content(compositor.bounds, compositor.padding_request)
        compositor.draw(surface)
        return surface

    return draw


@pytest.fixture
def square_rgba():
    """100x100 RGBA image with an opaque red square in the center."""
    img = np.zeros((100, 100, 4), dtype=np.uint8)
    img[25:75, 25:75] = [255, 0, 0, 255]
    return img
