# ShadowStag Filters - Blur
"""
Gaussian blur for shadow silhouettes.

The blur radius is the shadow's visual reach in pixels. It is converted to
a Gaussian standard deviation with ``sigma = 0.57735 * radius + 0.5`` and
the mask is padded by ``ceil(3 * sigma)`` on every side before blurring so
the soft falloff is not clipped at the silhouette's edge.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar
import math

import numpy as np
from PIL import Image as PILImage, ImageFilter

from .base import Filter, register_filter
from ..exceptions import ShadowAllocationError
from ..layer_effects.base import EffectResult

BLUR_SIGMA_SCALE = 0.57735
BLUR_SIGMA_BIAS = 0.5


def radius_to_sigma(radius: float) -> float:
    """Convert a blur radius to the Gaussian standard deviation."""
    return BLUR_SIGMA_SCALE * radius + BLUR_SIGMA_BIAS if radius > 0 else 0.0


@register_filter
@dataclass
class GaussianBlur(Filter):
    """Normal (non-directional) Gaussian blur of a uint8 (H, W) mask.

    radius: Blur radius in pixels, larger values give a softer, wider edge

    The Pillow blur operator depends on the radius and is rebuilt whenever
    the radius differs from the one it was created for.
    """

    _primary_param: ClassVar[str] = 'radius'

    radius: float = 2.0
    _operator: ImageFilter.GaussianBlur | None = field(default=None, init=False, repr=False, compare=False)
    _operator_radius: float | None = field(default=None, init=False, repr=False, compare=False)

    @property
    def sigma(self) -> float:
        return radius_to_sigma(self.radius)

    @property
    def margin(self) -> int:
        """Padding added around the mask to hold the falloff."""
        return int(math.ceil(3 * self.sigma))

    @property
    def operator(self) -> ImageFilter.GaussianBlur:
        """Pillow blur operator for the current radius."""
        if self._operator is None or self._operator_radius != self.radius:
            self._operator = ImageFilter.GaussianBlur(radius=self.sigma)
            self._operator_radius = self.radius
        return self._operator

    def with_radius(self, radius: float) -> 'GaussianBlur':
        """Return a new blur with its own operator for ``radius``."""
        return GaussianBlur(radius=radius)

    def apply(self, image: np.ndarray, max_pixels: int | None = None) -> EffectResult:
        """Blur a coverage mask.

        :param image: uint8 mask of shape (H, W)
        :param max_pixels: Largest padded mask allowed, None for no limit
        :return: EffectResult with the padded blurred mask, offsets are the
            negative margin
        :raises ShadowAllocationError: If the padded mask cannot be allocated
        """
        if image.ndim != 2:
            raise ValueError(f"Expected 2D mask, got {image.ndim}D")

        margin = self.margin
        height, width = image.shape
        padded_pixels = (height + 2 * margin) * (width + 2 * margin)
        if max_pixels is not None and padded_pixels > max_pixels:
            raise ShadowAllocationError(
                f"Blur buffer of {width + 2 * margin}x{height + 2 * margin} exceeds {max_pixels} pixels"
            )

        try:
            padded = np.pad(image.astype(np.uint8, copy=False), margin, mode='constant')
            blurred = PILImage.fromarray(padded).filter(self.operator)
            result = np.array(blurred, dtype=np.uint8)
        except MemoryError as e:
            raise ShadowAllocationError(f"Could not allocate blur buffer: {e}") from e

        return EffectResult(image=result, offset_x=-margin, offset_y=-margin)
