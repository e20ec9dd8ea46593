"""Off-screen capture of the host's content.

Owns one RGBA8 buffer sized to the content bounds. The buffer is reused
while the size stays the same and replaced wholesale when it changes; it is
never handed out beyond the pipeline call that filled it.
"""

from __future__ import annotations

import logging

import numpy as np

from shadowstag.exceptions import ShadowAllocationError
from .host import Bounds, RenderContentInto

logger = logging.getLogger(__name__)

PLACEHOLDER_SIZE = (1, 1)


class OffscreenCapture:
    """Renders content into a private pixel buffer.

    :param max_pixels: Largest buffer (width * height) that may be allocated,
        None for no limit
    """

    def __init__(self, max_pixels: int | None = None):
        self.max_pixels = max_pixels
        self._buffer: np.ndarray | None = None
        self._is_placeholder = False

    @property
    def buffer(self) -> np.ndarray | None:
        return self._buffer

    @property
    def is_placeholder(self) -> bool:
        """True while the 1x1 stand-in for zero-area bounds is installed."""
        return self._is_placeholder

    def install_placeholder(self) -> np.ndarray:
        """Replace the buffer by a transparent 1x1 stand-in."""
        height, width = PLACEHOLDER_SIZE
        self._buffer = np.zeros((height, width, 4), dtype=np.uint8)
        self._is_placeholder = True
        logger.debug("Installed 1x1 placeholder buffer for zero-area bounds")
        return self._buffer

    def _allocate(self, bounds: Bounds) -> np.ndarray:
        pixels = bounds.width * bounds.height
        if self.max_pixels is not None and pixels > self.max_pixels:
            raise ShadowAllocationError(
                f"Off-screen buffer of {bounds.width}x{bounds.height} exceeds {self.max_pixels} pixels"
            )
        try:
            buffer = np.zeros((bounds.height, bounds.width, 4), dtype=np.uint8)
        except (MemoryError, ValueError) as e:
            raise ShadowAllocationError(
                f"Could not allocate {bounds.width}x{bounds.height} off-screen buffer: {e}"
            ) from e
        logger.debug(f"Allocated {bounds.width}x{bounds.height} off-screen buffer")
        return buffer

    def capture(self, bounds: Bounds, render_content_into: RenderContentInto) -> np.ndarray:
        """Render the content once into a buffer of exactly ``bounds`` size.

        Zero-area bounds install the placeholder instead and do not invoke
        the renderer.

        :param bounds: Current content bounds
        :param render_content_into: Host rendering capability
        :return: The filled buffer (H, W, 4)
        :raises ShadowAllocationError: If the buffer cannot be allocated
        """
        if bounds.is_empty:
            return self.install_placeholder()

        buffer = self._buffer
        if self._is_placeholder or buffer is None or buffer.shape[:2] != (bounds.height, bounds.width):
            # Drop the old buffer first so a failed allocation leaves nothing stale
            self._buffer = None
            self._is_placeholder = False
            buffer = self._allocate(bounds)
            self._buffer = buffer
        else:
            buffer.fill(0)

        render_content_into(buffer)
        return buffer

    def release(self) -> None:
        """Free the buffer."""
        self._buffer = None
        self._is_placeholder = False
