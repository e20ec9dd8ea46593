"""Host-facing types for the shadow compositor.

The compositor does not know any UI framework. A host hands it two
capabilities and a destination surface:

- ``render_content_into(buffer)``: rasterize the wrapped content into an
  RGBA8 numpy buffer of shape (height, width, 4), origin at (0, 0)
- ``request_relayout()``: schedule a new layout pass because the padding
  the shadow needs has changed
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np

from shadowstag.layer_effects.base import Expansion

RenderContentInto = Callable[[np.ndarray], None]
RequestRelayout = Callable[[], None]


@dataclass(frozen=True)
class Bounds:
    """Content rectangle with origin (0, 0).

    Zero-area bounds are a valid transient state (before the first layout).
    """
    width: int = 0
    height: int = 0

    @classmethod
    def of(cls, width: int, height: int) -> "Bounds":
        """Create bounds, treating negative sizes as zero."""
        return cls(max(0, int(width)), max(0, int(height)))

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)


@dataclass
class Surface:
    """Destination canvas for one frame.

    Attributes:
        pixels: RGBA8 canvas of shape (H, W, 4), drawn into in place
        origin_x: X position of the content origin inside the canvas
        origin_y: Y position of the content origin inside the canvas
    """
    pixels: np.ndarray
    origin_x: int = 0
    origin_y: int = 0

    def __post_init__(self) -> None:
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 4 or self.pixels.dtype != np.uint8:
            raise ValueError(f"Surface needs an RGBA8 (H, W, 4) uint8 canvas, got {self.pixels.shape} {self.pixels.dtype}")

    @classmethod
    def for_content(
        cls,
        bounds: Bounds,
        padding: Expansion,
        background: tuple[int, int, int, int] = (0, 0, 0, 0),
    ) -> "Surface":
        """Allocate a canvas holding the content plus the shadow padding.

        :param bounds: Content bounds
        :param padding: Padding reserved around the content
        :param background: RGBA fill color (transparent by default)
        """
        width = bounds.width + padding.horizontal
        height = bounds.height + padding.vertical
        pixels = np.empty((height, width, 4), dtype=np.uint8)
        pixels[:, :] = background
        return cls(pixels=pixels, origin_x=padding.left, origin_y=padding.top)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]
