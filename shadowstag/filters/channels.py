# ShadowStag Filters - Channel Operations
"""
Alpha silhouette extraction.

The silhouette is the opacity footprint of a raster: one coverage value per
pixel, taken from the alpha channel. Color channels are discarded so the
shadow takes the content's shape but never its colors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import numpy as np

from .base import Filter, register_filter
from ..layer_effects.base import PixelFormat


@register_filter
@dataclass
class ExtractAlpha(Filter):
    """Extract the alpha channel of an RGB(A) raster as a uint8 (H, W) mask.

    RGB input has no alpha and yields full coverage. Float input (0.0-1.0)
    is scaled to 0-255.

    Example:
        mask = ExtractAlpha().apply(rgba)
        # mask.shape == rgba.shape[:2]
    """

    def apply(self, image: np.ndarray, format: Union[PixelFormat, str, None] = None) -> np.ndarray:
        fmt = PixelFormat.resolve(image, format)
        height, width = image.shape[:2]

        if not fmt.has_alpha:
            return np.full((height, width), 255, dtype=np.uint8)

        alpha = image[:, :, 3]
        if fmt.is_float:
            return np.clip(np.rint(alpha * 255.0), 0, 255).astype(np.uint8)
        return np.array(alpha, dtype=np.uint8, copy=True)
