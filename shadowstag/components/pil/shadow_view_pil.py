"""PIL-based headless shadow host.

Wraps a PIL image (or a drawing callback) and renders it with a drop shadow
to PIL images. No display or GUI framework required.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

import numpy as np
from PIL import Image as PILImage, ImageDraw

from shadowstag.layer_effects import ShadowParameters
from ..shared.compositor import ShadowCompositor
from ..shared.host import Surface

DrawCallback = Callable[[ImageDraw.ImageDraw, int, int], None]


@dataclass
class ShadowViewPil:
    """Headless host that renders shadowed content to PIL images.

    Useful for batch processing, testing, server-side rendering and CLI tools.

    Example:
        from PIL import Image
        from shadowstag.components.pil import ShadowViewPil

        view = ShadowViewPil(240, 160, content=Image.open('card.png'))
        view.compositor.radius = 12
        view.compositor.color = '#00000080'

        view.render().save('card_shadow.png')
        view.close()

    Attributes:
        width: Content width in pixels
        height: Content height in pixels
        content: RGBA content image, resized to the content bounds
        draw: Drawing callback ``draw(ctx, width, height)``, takes precedence
            over ``content``
        background: RGBA color behind content and shadow
        params: Initial shadow parameters (configured defaults if None)
    """

    width: int = 200
    height: int = 120
    content: PILImage.Image | None = None
    draw: DrawCallback | None = None
    background: tuple[int, int, int, int] = (255, 255, 255, 255)
    params: ShadowParameters | None = None
    layout_passes: int = field(default=0, init=False)
    _needs_layout: bool = field(default=True, init=False, repr=False)
    _compositor: ShadowCompositor = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._compositor = ShadowCompositor(
            self._render_content_into,
            request_relayout=self._request_relayout,
            params=self.params,
        )
        self.layout(self.width, self.height)

    @property
    def compositor(self) -> ShadowCompositor:
        """Shadow compositor, exposes the shadow parameter setters."""
        return self._compositor

    @property
    def needs_layout(self) -> bool:
        return self._needs_layout

    def layout(self, width: int, height: int) -> None:
        """Run a layout pass with new content dimensions.

        :param width: Content width in pixels
        :param height: Content height in pixels
        """
        self.width = width
        self.height = height
        self._compositor.on_bounds_changed(width, height)
        self._needs_layout = False
        self.layout_passes += 1

    def set_content(
        self,
        content: PILImage.Image | None = None,
        draw: DrawCallback | None = None,
    ) -> None:
        """Replace the wrapped content and invalidate the shadow.

        :param content: RGBA content image
        :param draw: Drawing callback ``draw(ctx, width, height)``
        """
        self.content = content
        self.draw = draw
        self._compositor.request_layout()

    def _request_relayout(self) -> None:
        self._needs_layout = True

    def _render_content_into(self, buffer: np.ndarray) -> None:
        height, width = buffer.shape[:2]
        if self.draw is not None:
            image = PILImage.new('RGBA', (width, height), (0, 0, 0, 0))
            self.draw(ImageDraw.Draw(image), width, height)
        elif self.content is not None:
            image = self.content.convert('RGBA')
            if image.size != (width, height):
                image = image.resize((width, height), PILImage.Resampling.BILINEAR)
        else:
            return
        buffer[:, :] = np.asarray(image, dtype=np.uint8)

    def render_to_array(self) -> np.ndarray:
        """Render one frame as an RGBA8 array of content plus padding."""
        if self._needs_layout:
            self.layout(self.width, self.height)
        compositor = self._compositor
        surface = Surface.for_content(compositor.bounds, compositor.padding_request, self.background)
        compositor.draw(surface)
        return surface.pixels

    def render(self) -> PILImage.Image:
        """Render one frame.

        :return: RGBA PIL Image of content plus padding
        """
        return PILImage.fromarray(self.render_to_array())

    def close(self) -> None:
        """Release the off-screen buffers."""
        self._compositor.release()
